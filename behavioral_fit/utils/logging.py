"""Logging setup for behavioral-fit.

All modules log through children of the ``behavioral_fit`` logger
(``get_logger("scoring")`` -> ``behavioral_fit.scoring``). Scores and
recommendations are written to stdout by the CLI, so log records go to
stderr unless another stream is given.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "behavioral_fit"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _resolve_level(level: str | None) -> int:
    if level is None:
        from behavioral_fit.config.settings import get_settings

        level = get_settings().log_level
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        level: Log level name. Defaults to ``Settings.log_level``.
        stream: Where records are written. Defaults to stderr.
        format_string: Format string for log records.
        date_format: Format string for timestamps.

    Returns:
        The ``behavioral_fit`` logger.

    Calling this again only changes the level; the handler installed by
    the first call is kept. Use reset_logging() to start over.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.addHandler(handler)
        logger.propagate = False
        _handler = handler

    _handler.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the child logger ``behavioral_fit.<name>``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Undo configure_logging (used by tests)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
