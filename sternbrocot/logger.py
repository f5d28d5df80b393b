"""Logging configuration for sternbrocot."""

import logging
import os
from logging.config import dictConfig

_FORMAT = "%(levelname)s %(asctime)s [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

LOGGER_NAME = "sternbrocot"


def _get_default_logging_level() -> str:
    """Get logging level from environment variable or default to WARNING"""
    return os.getenv("STERNBROCOT_LOGGING_LEVEL", "WARNING").upper()


DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": _FORMAT,
            "datefmt": _DATE_FORMAT,
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": _get_default_logging_level(),
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOGGER_NAME: {
            "handlers": ["default"],
            "level": _get_default_logging_level(),
            "propagate": False,
        },
    },
}


def _configure_root_logger() -> None:
    dictConfig(DEFAULT_LOGGING_CONFIG)


def init_logger(name: str) -> logging.Logger:
    """Initialize and return a logger with the given name

    Args:
        name: Name of the logger (typically __name__)
    """
    return logging.getLogger(name)


def set_logging_level(level) -> None:
    """Set the logging level for all sternbrocot loggers

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL) as string or int
    """
    if hasattr(level, 'upper'):
        level = level.upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def disable_logging() -> None:
    logging.getLogger(LOGGER_NAME).disabled = True


def enable_logging() -> None:
    logging.getLogger(LOGGER_NAME).disabled = False


_configure_root_logger()
