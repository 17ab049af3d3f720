"""Logging setup shared by every genbuilder module.

Modules obtain a logger with ``get_logger(__name__)``. The CLI calls
``setup_logging`` once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "genbuilder"

_configured = False


def setup_logging(level: int | str = logging.INFO, console: Console | None = None) -> None:
    """Configure the package logger with a RichHandler.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to a stderr console).
    """
    global _configured

    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
