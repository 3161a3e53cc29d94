"""Rate levels."""

import typer

from gd_client.app_context import use_context
from gd_client.entities import DemonDifficulty


def rate_stars(ctx: typer.Context, level_id: int, stars: int = typer.Argument(min=1, max=10, help="Stars (1-10)")) -> None:
    """Suggest a star rating for a level."""
    app = use_context(ctx)
    app.run_authenticated(lambda client: client.rate_stars(level_id, stars))
    app.out.print_rating_sent(level_id, f"{stars} stars")


def rate_demon(ctx: typer.Context, level_id: int, difficulty: str = typer.Argument(help="easy, medium, hard, insane or extreme")) -> None:
    """Suggest a demon difficulty for a level."""
    app = use_context(ctx)
    try:
        demon = DemonDifficulty[difficulty.upper()]
    except KeyError:
        app.out.print_error_and_exit("invalid_argument", f"Unknown demon difficulty: {difficulty}")
    app.run_authenticated(lambda client: client.rate_demon(level_id, demon))
    app.out.print_rating_sent(level_id, f"{demon.name.lower()} demon")
