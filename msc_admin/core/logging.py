"""Logging setup shared by the web app and the command line scripts."""

from __future__ import annotations

import logging.config

from msc_admin.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "msc_admin": {"handlers": ["console"], "level": level, "propagate": False},
                # Vendor SDK chatter stays at warning level.
                "httpx": {"level": "WARNING"},
                "urllib3": {"level": "WARNING"},
            },
        }
    )


__all__ = ["configure_logging"]
