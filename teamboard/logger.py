"""Logging helpers for teamboard.

``LOG_LEVEL`` sets the root level. ``CACHE_LOG_LEVEL`` sets the shared cache
logger on its own, so fetch/invalidate tracing can be switched to DEBUG
without turning on debug output everywhere (or silenced to ERROR to hide
stale-data warnings).
"""

from __future__ import annotations

import logging
import os

CACHE_LOGGER = "teamboard.entity_cache"


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging() -> None:
    level = _level(os.environ.get("LOG_LEVEL"), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)

    cache_level = os.environ.get("CACHE_LOG_LEVEL")
    cache_logger = logging.getLogger(CACHE_LOGGER)
    if cache_level:
        cache_logger.setLevel(_level(cache_level, level))
    else:
        cache_logger.setLevel(logging.NOTSET)

    # Request lines from the HTTP client are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


__all__ = ["CACHE_LOGGER", "setup_logging"]
