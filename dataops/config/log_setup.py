"""
Logging Setup - Route application logs through a rich console handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]


def configure_logging(level: str | int = "INFO", console: Console | None = None) -> None:
    """
    Configure the ``dataops`` logger hierarchy.

    Args:
        level: Level name or number (e.g. "DEBUG", logging.INFO)
        console: Console to render on (defaults to stderr)
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger("dataops")
    root.setLevel(level)

    # Re-running the CLI callback must not stack handlers
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
