"""
Logging helpers for closed_spline.

Loggers live under the "closed_spline" namespace. The level is read from the
CLOSED_SPLINE_LOG_LEVEL environment variable when it is set; otherwise the
application's logging configuration decides. No handler is attached until
setup_logging() is called, so library users keep control of output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "closed_spline"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_log_level() -> int:
    """Get log level from environment variable."""
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def setup_logging(level: Optional[int] = None, format_str: Optional[str] = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Args:
        level: Log level (default: from env or WARNING)
        format_str: Log format string (default: DEFAULT_FORMAT)

    Returns:
        The configured package logger
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level if level is not None else get_log_level())
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Suffix appended to "closed_spline." (None returns the package logger)
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # NOTSET unless the env var is set
    if root.level == logging.NOTSET and LOG_LEVEL_ENV in os.environ:
        root.setLevel(get_log_level())
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return root
