"""CLI entry point for gd-client."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from gd_client.app_context import AppContext
from gd_client.commands.leaderboard import leaderboard
from gd_client.commands.messages import messages, read, send
from gd_client.commands.rate import rate_demon, rate_stars
from gd_client.commands.social import block, blocked, friends, unblock
from gd_client.commands.users import search, user
from gd_client.config import Config
from gd_client.log import setup_logging
from gd_client.output import Output

app = TyperPlus(package_name="gd-client")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Also log to stderr.")] = False,
) -> None:
    """Browse and act on a Geometry Dash account from the terminal."""
    cfg = Config.build(data_dir)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, verbose=verbose)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Users
app.command(aliases=["u"])(user)
app.command(aliases=["s"])(search)
app.command(aliases=["lb"])(leaderboard)

# Messages
app.command(aliases=["m"])(messages)
app.command()(read)
app.command()(send)

# Social
app.command()(friends)
app.command()(blocked)
app.command()(block)
app.command()(unblock)

# Levels
app.command("rate-stars")(rate_stars)
app.command("rate-demon")(rate_demon)
