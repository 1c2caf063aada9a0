"""Logging configuration for the sync job.

Progress (collections dropped and created, chunks pushed, per-collection
totals) goes to stderr at INFO; page fetches and HTTP requests at DEBUG.
"""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Configure loguru with appropriate level."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} {level.icon} {message}")
