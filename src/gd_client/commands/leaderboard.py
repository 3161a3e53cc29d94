"""Show a leaderboard."""

import typer

from gd_client.app_context import use_context
from gd_client.entities import LeaderboardType


def leaderboard(
    ctx: typer.Context,
    type_: LeaderboardType = typer.Option(LeaderboardType.TOP, "--type", help="Leaderboard type"),
    count: int = typer.Option(default=100, min=1, help="Maximum number of users"),
) -> None:
    """Show the top, friends, relative or creators leaderboard."""
    app = use_context(ctx)
    users = app.run_authenticated(lambda client: client.get_leaderboard(type_, count))
    app.out.print_users(users)
