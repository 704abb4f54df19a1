"""Logging bootstrap utilities."""

from __future__ import annotations

import logging
from logging.config import dictConfig

from .config import LogLevel, get_settings

PACKAGE_LOGGER = "ray_canvas"


def configure_logging(level: LogLevel | str | None = None) -> None:
    """Send ``ray_canvas`` records to stderr at ``level``.

    Other libraries stay at WARNING on the root logger so a debug run only
    shows canvas and export events.
    """

    if level is None:
        level = get_settings().log_level
    resolved_level = level.value if isinstance(level, LogLevel) else str(level).upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "handlers": ["stderr"],
                    "level": resolved_level,
                    "propagate": False,
                },
            },
            "root": {
                "handlers": ["stderr"],
                "level": LogLevel.WARNING.value,
            },
        }
    )

    logging.getLogger(__name__).debug("logging.configured", extra={"level": resolved_level})
