"""Application context shared across CLI commands."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import typer

from gd_client.client import AuthenticatedGDClient, GDClient, login
from gd_client.config import Config
from gd_client.errors import GDError
from gd_client.output import Output

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    def run_anonymous(self, operation: Callable[[GDClient], Awaitable[T]]) -> T:
        """Run an operation with an anonymous client, reporting client errors and exiting."""

        async def main() -> T:
            async with GDClient.from_config(self.cfg) as client:
                return await operation(client)

        try:
            return asyncio.run(main())
        except GDError as e:
            self.out.print_error_and_exit(e.code, str(e))

    def run_authenticated(self, operation: Callable[[AuthenticatedGDClient], Awaitable[T]]) -> T:
        """Log in with configured (or prompted) credentials and run an operation."""
        username = self.cfg.username or typer.prompt("Enter username")
        password = self.cfg.password or typer.prompt("Enter account password", hide_input=True)

        async def main() -> T:
            client = await login(username, password, config=self.cfg)
            async with client:
                return await operation(client)

        try:
            return asyncio.run(main())
        except GDError as e:
            self.out.print_error_and_exit(e.code, str(e))


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
