"""Async client for the users endpoints of the backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ApiError, FetchFailure
from .models.users import AppUser

__all__ = ["UsersApi"]

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset({"full_name", "role_id", "team", "is_active"})
_MIN_PASSWORD_LENGTH = 6


def _error_message(resp: httpx.Response) -> str:
    """Pull the backend ``error`` field, falling back to a body snippet."""
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return resp.text[:500].replace("\n", " ")


class UsersApi:
    """Client for ``/api/users``.

    A client passed in is left open on ``aclose()``; one created here is
    closed. ``transport`` is handed to the client created here.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "UsersApi":
        return self

    async def __aexit__(self, *_exc: object) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _send(
        self,
        method: str,
        path: str,
        error_cls: type[ApiError] = ApiError,
        **kwargs: Any,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = await self._get_client().request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise error_cls(f"{method} {path} failed: {exc}") from exc
        if not resp.is_success:
            raise error_cls(
                f"Users API HTTP {resp.status_code}: {_error_message(resp)}",
                status=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise error_cls(
                f"Users API returned invalid JSON for {method} {path}",
                status=resp.status_code,
            ) from exc

    async def list_users(self) -> list[AppUser]:
        """Fetch all users, active and inactive, ordered by full name.

        Raises:
            FetchFailure: On transport errors, non-2xx responses or a body
                that is not a JSON list.
        """
        data = await self._send("GET", "/api/users", error_cls=FetchFailure)
        if not isinstance(data, list):
            raise FetchFailure(
                f"Users API returned {type(data).__name__}, expected list"
            )
        logger.debug("Fetched %d users", len(data))
        return data

    async def create_user(
        self,
        email: str,
        full_name: str,
        team: str,
        role_id: str | None = None,
        password: str | None = None,
    ) -> AppUser:
        if not email or not full_name or not team:
            raise ValueError("Missing required fields")
        payload: dict[str, Any] = {
            "email": email,
            "full_name": full_name,
            "team": team,
            "role_id": role_id,
        }
        if password:
            payload["password"] = password
        return await self._send("POST", "/api/users", json=payload)

    async def update_user(self, user_id: str, **fields: Any) -> AppUser:
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        return await self._send("PATCH", f"/api/users/{user_id}", json=fields)

    async def deactivate_user(self, user_id: str) -> None:
        """Soft delete: the backend flips ``is_active`` off."""
        await self._send("DELETE", f"/api/users/{user_id}")

    async def send_password_reset(self, user_id: str) -> str:
        """Ask the backend to email a password reset link; returns the address."""
        data = await self._send("POST", f"/api/users/{user_id}")
        return str(data.get("email", "")) if isinstance(data, dict) else ""

    async def set_password(self, user_id: str, password: str) -> str:
        """Set a specific password for the user; returns the account email.

        Raises:
            ValueError: If the password is shorter than 6 characters.
            ApiError: 403 for the protected owner account, 404 for an unknown
                user, 400 when the user has no linked auth account.
        """
        if not password or len(password) < _MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {_MIN_PASSWORD_LENGTH} characters"
            )
        data = await self._send(
            "PUT", f"/api/users/{user_id}/password", json={"password": password}
        )
        return str(data.get("email", "")) if isinstance(data, dict) else ""
