"""Error types raised by the users API and the entity cache."""

from __future__ import annotations


class ApiError(RuntimeError):
    """Backend request failed.

    ``status`` is the HTTP status code, or None when the request never got a
    response (DNS, connect, timeout).
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class FetchFailure(ApiError):
    """Reading an entity collection failed (transport, status or body)."""
