"""
Rich logging for markup layout.

Provides colorful console logging and tracebacks using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .logger import _level


def configure_rich_logging(level: str = "INFO", console: Optional[Console] = None) -> RichHandler:
    """
    Install a ``RichHandler`` on the root logger.

    Args:
        level: Log level
        console: Console to write to (defaults to stderr)

    Returns:
        The installed handler
    """
    numeric_level = _level(level)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=numeric_level <= logging.DEBUG,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    handler.setLevel(numeric_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)
    return handler
