"""Friends and blocked users."""

import typer

from gd_client.app_context import use_context


def friends(ctx: typer.Context) -> None:
    """List friends of the account."""
    app = use_context(ctx)
    users = app.run_authenticated(lambda client: client.get_friends())
    app.out.print_users(users)


def blocked(ctx: typer.Context) -> None:
    """List users blocked by the account."""
    app = use_context(ctx)
    users = app.run_authenticated(lambda client: client.get_blocked_users())
    app.out.print_users(users)


def block(ctx: typer.Context, account_id: int) -> None:
    """Block a user by account id."""
    app = use_context(ctx)
    app.run_authenticated(lambda client: client.block_user(account_id))
    app.out.print_blocked(account_id)


def unblock(ctx: typer.Context, account_id: int) -> None:
    """Unblock a user by account id."""
    app = use_context(ctx)
    app.run_authenticated(lambda client: client.unblock_user(account_id))
    app.out.print_unblocked(account_id)
