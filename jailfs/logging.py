"""Logging setup for the jailfs package."""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "jailfs"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: int | str) -> int:
    """Translate a level name such as "debug" into its numeric value."""
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING


def setup_logging(
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a formatted stream handler to the package logger.

    Propagation is disabled so records are not emitted twice when the
    host application also configures the root logger. Calling it again
    replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric_level = resolve_level(level)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
