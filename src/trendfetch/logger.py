"""
Logging configuration for TrendFetch.

Only the package logger ``trendfetch`` owns a handler. Module loggers are
its children and propagate to it, so a level change made through
``setup_logger`` applies to the whole package at once.
"""
import logging
import sys
from typing import Optional

from .config import Config

PACKAGE_LOGGER = "trendfetch"


def setup_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call repeatedly: the previous package handler is replaced, never
    stacked.

    Args:
        level: Log level name (defaults to Config.LOG_LEVEL)
        format_string: Record format (defaults to Config.LOG_FORMAT)
        stream: Output stream (defaults to stdout)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    numeric_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    package_logger.setLevel(numeric_level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or Config.LOG_FORMAT))
    package_logger.handlers = [handler]

    # Keep records out of the root logger (Flask and waitress configure it)
    package_logger.propagate = False

    return package_logger


setup_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the package logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
