"""Logging configuration using Loguru.

Usage:
    from ttempdir.logging import logger
    logger.debug("Message")  # Only shows if TTEMPDIR_LOG_LEVEL=DEBUG

Environment Variables:
    TTEMPDIR_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)

Logs go to stderr so that report output on stdout stays machine-readable.
"""

import os
import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "<level>{level: <8}</level> | {name}:{line} - {message}"

logger.remove()

_handler_id = None


def configure_logging(level=None):
    """(Re)install the stderr sink at ``level`` or $TTEMPDIR_LOG_LEVEL."""
    global _handler_id

    if level is None:
        level = os.environ.get("TTEMPDIR_LOG_LEVEL", DEFAULT_LEVEL)
    level = level.upper()

    if _handler_id is not None:
        logger.remove(_handler_id)
    _handler_id = logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    return level


configure_logging()

__all__ = ["logger", "configure_logging"]
