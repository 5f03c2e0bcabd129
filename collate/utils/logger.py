"""
Logging setup for the Collate CLI.

STDOUT carries the generated document and nothing else, so every log
record goes to STDERR. Debug output is enabled with --verbose or by
setting DEBUG=true in the environment.
"""

import os
import sys

from loguru import logger as loguru_logger

_LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("DEBUG", "").lower() == "true"


def configure_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr at the level the run asks for.

    Args:
        verbose: Force DEBUG level regardless of the environment.
    """
    level = "DEBUG" if verbose or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, format=_LOG_FORMAT)


# Export loguru logger for direct use
logger = loguru_logger
