"""
Logging setup for beatpath, built on loguru.

The package disables its own messages on import, so a library caller sees
nothing until the application calls setup_logging().
"""

import sys
from typing import Any

from loguru import logger


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Send beatpath's messages to stderr.

    Args:
        level: Minimum level to print (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Shortcut for level="DEBUG", which adds one line per round
    """
    logger.remove()
    logger.configure(extra={"name": "beatpath"})

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
    )
    logger.enable("beatpath")


def get_logger(name: str) -> Any:
    """Logger whose records carry `name` (ballots, condorcet, ...) as extra["name"]."""
    return logger.bind(name=name)
