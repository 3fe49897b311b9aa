"""Logging setup for the fastapi_hal logger namespace."""

import logging

from .config import get_settings

LOGGER_NAME = "fastapi_hal"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this again only updates the level; handlers are never stacked.
    The root logger is left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    resolved = level if level is not None else get_settings().log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(handler.get_name() == LOGGER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
