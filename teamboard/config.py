"""Central configuration for teamboard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "http://localhost:3000"
_DEFAULT_TIMEOUT_S = 10.0
_DEFAULT_USERS_CACHE_TTL_MS = 5 * 60 * 1000


@dataclass
class Settings:
    """Configuration settings for teamboard.

    All settings are loaded from environment variables with sensible defaults.
    """

    BASE_URL: str
    HTTP_TIMEOUT_S: float
    USERS_CACHE_TTL_MS: int


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Note:
        Invalid numeric values fall back to the defaults.
    """
    base_url = (os.environ.get("TEAMBOARD_BASE_URL") or _DEFAULT_BASE_URL).strip()
    base_url = base_url.rstrip("/")
    try:
        timeout = float(
            os.environ.get("TEAMBOARD_HTTP_TIMEOUT_S", "") or _DEFAULT_TIMEOUT_S
        )
    except ValueError:
        timeout = _DEFAULT_TIMEOUT_S
    ttl_raw = (os.environ.get("USERS_CACHE_TTL_MS") or "").strip()
    try:
        ttl_ms = int(ttl_raw) if ttl_raw else _DEFAULT_USERS_CACHE_TTL_MS
    except ValueError:
        ttl_ms = _DEFAULT_USERS_CACHE_TTL_MS
    if ttl_ms <= 0:
        ttl_ms = _DEFAULT_USERS_CACHE_TTL_MS

    return Settings(
        BASE_URL=base_url,
        HTTP_TIMEOUT_S=timeout,
        USERS_CACHE_TTL_MS=ttl_ms,
    )


settings = _read_settings()


def validate_settings(current: Settings | None = None) -> None:
    """Log warnings for configuration that will not work."""
    current = current or settings
    if not current.BASE_URL.startswith(("http://", "https://")):
        logger.warning(
            "TEAMBOARD_BASE_URL is not an http(s) URL: %s", current.BASE_URL
        )
    if current.HTTP_TIMEOUT_S <= 0:
        logger.warning(
            "TEAMBOARD_HTTP_TIMEOUT_S is not positive: %s", current.HTTP_TIMEOUT_S
        )


validate_settings()

# Exported constants
BASE_URL: str = settings.BASE_URL
HTTP_TIMEOUT_S: float = settings.HTTP_TIMEOUT_S
USERS_CACHE_TTL_MS: int = settings.USERS_CACHE_TTL_MS
