"""Logging configuration for the videoplayer package."""

import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure logging for the package.

    Args:
        level: Logging level, as a number or a level name such as "DEBUG"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Force reconfiguration to avoid duplicates
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
