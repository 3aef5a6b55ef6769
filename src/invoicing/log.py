"""Loguru sink setup."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Send log records at ``level`` and above to stderr."""

    logger.remove()
    logger.add(sys.stderr, level=level)
