"""Logging helpers for the timerqueue package."""

from __future__ import annotations

import logging
import logging.config
from threading import RLock
from typing import Any

from timerqueue.config import LOG_FORMAT, LOG_LEVEL, LOGGER_NAME

_CONFIG_LOCK = RLock()
_CONFIGURED = False

_DEFAULT_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": LOG_FORMAT,
        }
    },
    "handlers": {
        "console": {
            "class": "rich.logging.RichHandler",
            "formatter": "standard",
            "show_path": False,
        }
    },
    "loggers": {
        LOGGER_NAME: {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        }
    },
}


def configure() -> None:
    """Install the package logging configuration exactly once.

    Only the ``timerqueue`` logger is touched; the root logger and any
    loggers the host application configured are left alone.
    """

    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED:
            return
        logging.config.dictConfig(_DEFAULT_CONFIG)
        _CONFIGURED = True


def set_level(level: int | str) -> None:
    """Change the level of the package logger, configuring it first if needed."""

    configure()
    logging.getLogger(LOGGER_NAME).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``timerqueue`` namespace.

    Names outside the namespace are nested under it, so every record reaches
    the package handler.
    """

    if not isinstance(name, str) or not name:
        raise ValueError("logger name must be a non-empty string")
    configure()
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure", "get_logger", "set_level"]
