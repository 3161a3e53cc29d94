"""Logging configuration for gd-client."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(log_path: Path, *, verbose: bool = False) -> None:
    """Configure package logger with a rotating file handler, plus stderr when verbose.

    Idempotent: skips if a handler is already attached. Request parameters are never logged,
    so credentials do not end up in the log file.
    """
    root = logging.getLogger("gd_client")
    if root.handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
        root.addHandler(console)

    root.setLevel(logging.DEBUG)
