"""Logging helpers shared across mddoc modules."""

from __future__ import annotations

import logging

from mddoc.config import MDDOC_LOG_LEVEL

PACKAGE_LOGGER = "mddoc"

_HANDLER_NAME = "mddoc-stream"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    The root logger is left alone. Calling this more than once only updates
    the level.

    Args:
        level: Logging level name or number. Defaults to ``MDDOC_LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if level is not None else MDDOC_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger
