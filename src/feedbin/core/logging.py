"""Logging setup for the `feedbin` package.

The library itself only emits records through module loggers; handlers are
the application's choice. `configure_logging` is what the CLI uses.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "feedbin"


def configure_logging(level: int | str = logging.WARNING, *, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger (idempotent)."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
    )
    return logger
