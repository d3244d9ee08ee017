"""Root logger configuration."""

from __future__ import annotations

import logging
import logging.config

from cashcard.core.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """Configure the root logger with a console handler.

    Runs once per process; later calls (tests building several apps) are
    no-ops so handlers are not stacked.
    """
    global _configured
    if _configured:
        return

    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": settings.logging.format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )
    _configured = True
