"""Logging setup for javagen.

Modules obtain loggers through :func:`get_logger`; the command line calls
:func:`setup_logging` once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "javagen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module inside the package."""
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Configure the package logger with a :class:`RichHandler`.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
