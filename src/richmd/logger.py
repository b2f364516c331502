"""Logging configuration for richmd with CLI verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "richmd"

VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_WARNINGS = 1  # Skipped/failed nodes
VERBOSITY_INFO = 2  # Pipeline progress
VERBOSITY_DEBUG = 3  # Dispatch details

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_WARNINGS: logging.WARNING,
    VERBOSITY_INFO: logging.INFO,
    VERBOSITY_DEBUG: logging.DEBUG,
}


def get_logger() -> logging.Logger:
    """Get the root richmd logger; module loggers are its children."""
    return logging.getLogger(LOGGER_NAME)


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the richmd logger for the given verbosity.

    Can be called multiple times to reconfigure the logger. Verbosity above
    the highest level is treated as debug.

    Args:
        verbosity: 0=errors, 1=warnings, 2=info, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(min(verbosity, VERBOSITY_DEBUG), logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to a clean, propagating state (used between tests)."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
