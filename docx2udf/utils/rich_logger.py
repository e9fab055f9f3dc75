"""
Logging setup for the converter.

Console output goes through rich's ``RichHandler``; a plain
``logging.basicConfig`` format is used when rich output is turned off.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def create_rich_handler(console: Console = None) -> RichHandler:
    """Create a rich handler with the converter's formatting."""
    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return rich_handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level name
        use_rich: Whether to log through rich
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(level))
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(create_rich_handler())
    else:
        logging.basicConfig(
            level=_level(level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger(__name__).debug(f"Logging initialized at {level} level")
