"""Look up and search users."""

import typer

from gd_client.app_context import use_context


def user(ctx: typer.Context, account_id: int) -> None:
    """Show a user profile by account id."""
    app = use_context(ctx)
    profile = app.run_anonymous(lambda client: client.get_user_by_account_id(account_id))
    app.out.print_user(profile)


def search(ctx: typer.Context, query: str, page: int = typer.Option(default=0, min=0, help="Result page")) -> None:
    """Search users by name."""
    app = use_context(ctx)
    results = app.run_anonymous(lambda client: client.search_users(query, page))
    app.out.print_users(list(results), title=f"Results for '{query}' (page {page + 1})")
