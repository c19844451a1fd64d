"""Logging configuration module."""

from __future__ import annotations

import logging

from chromacut.config.settings import get_settings

# Held at WARNING or above regardless of the configured level.
_NOISY_LOGGERS = ("httpx", "httpcore", "PIL")


def configure_logging(level: str | None = None) -> None:
    """Configure root logger according to project conventions.

    ``level`` overrides ``LOG_LEVEL`` from the settings.
    """

    name = (level or get_settings().log_level).upper()
    resolved = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(max(resolved, logging.WARNING))
