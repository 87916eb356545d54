# MIT License (see LICENSE)
"""
Logging configuration for the sphere_sim package.

Modules log through children of the "sphere_sim" logger. Nothing is
configured at import time; applications call setup_logging() once.
"""
from __future__ import annotations
import logging
from typing import TextIO

from .util import env_log_level

LOGGER_NAME = "sphere_sim"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: str | int | None = None,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Args:
        level: Log level name or number. Defaults to the SPHERE_SIM_LOG_LEVEL
               environment variable, or WARNING if unset.
        stream: Destination stream (defaults to stderr).
        fmt: logging.Formatter format string.

    Returns:
        The configured "sphere_sim" logger.

    Note:
        The logger does not propagate to the root logger, and calling this
        again replaces the previous handler instead of adding another.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(env_log_level() if level is None else level)
    logger.propagate = False

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(handler)
    return logger
