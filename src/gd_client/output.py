"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 - this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from collections.abc import Sequence
from dataclasses import asdict
from typing import NoReturn

import typer

from gd_client.entities import Message, User, UserSearchResult
from gd_client.paginator import Paginator


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Users ---

    def print_user(self, user: User) -> None:
        """Print a user profile."""
        self._success(
            {"user": asdict(user)},
            f"{user.name} (account {user.account_id}, player {user.player_id})\n"
            f"  stars: {user.stars}  demons: {user.demons}  diamonds: {user.diamonds}\n"
            f"  creator points: {user.creator_points}  coins: {user.secret_coins}/{user.user_coins}\n"
            f"  global rank: {user.global_rank or '-'}",
        )

    def print_users(self, users: Sequence[UserSearchResult], *, title: str = "") -> None:
        """Print a list of users, one per line."""
        lines = [title] if title else []
        lines += [f"{u.rank or i + 1:>4}. {u.name} (account {u.account_id}) {u.stars} stars" for i, u in enumerate(users)]
        self._success({"users": [asdict(u) for u in users]}, "\n".join(lines) if users else "No users.")

    # --- Messages ---

    def print_messages(self, messages: Paginator[Message]) -> None:
        """Print one page of the inbox."""
        lines = [f"Page {messages.page_number + 1}" + (f" ({messages.total} messages)" if messages.total is not None else "")]
        for m in messages:
            marker = " " if m.is_read else "*"
            lines.append(f"{marker} #{m.message_id} from {m.sender_name}: {m.subject} ({m.age})")
        self._success(
            {"page": messages.page_number, "total": messages.total, "messages": [asdict(m) for m in messages]},
            "\n".join(lines),
        )

    def print_message_body(self, message_id: int, body: str) -> None:
        """Print a downloaded message body."""
        self._success({"message_id": message_id, "body": body}, body)

    def print_message_sent(self, recipient_account_id: int) -> None:
        """Print message sent confirmation."""
        self._success({"recipient": recipient_account_id}, "Message sent.")

    # --- Social ---

    def print_blocked(self, account_id: int) -> None:
        """Print user blocked confirmation."""
        self._success({"account_id": account_id}, f"User {account_id} blocked.")

    def print_unblocked(self, account_id: int) -> None:
        """Print user unblocked confirmation."""
        self._success({"account_id": account_id}, f"User {account_id} unblocked.")

    # --- Levels ---

    def print_rating_sent(self, level_id: int, rating: str) -> None:
        """Print rating confirmation."""
        self._success({"level_id": level_id, "rating": rating}, f"Rated level {level_id}: {rating}.")
