"""User directory: cached user list plus mutations that keep it honest."""

from __future__ import annotations

import logging
from typing import Any

from .api import UsersApi
from .entity_cache import DEFAULT_TTL_MS, SharedEntityCache
from .models.cache import EntityView
from .models.users import AppUser

logger = logging.getLogger(__name__)


class UserDirectory:
    def __init__(
        self,
        api: UsersApi,
        cache: SharedEntityCache | None = None,
        ttl_ms: int = DEFAULT_TTL_MS,
    ) -> None:
        self.api = api
        self.cache = cache or SharedEntityCache(
            api.list_users, ttl_ms=ttl_ms, name="users"
        )

    async def users(self) -> EntityView:
        return await self.cache.mount()

    async def assignees(self, query: str = "") -> list[tuple[str, str | None]]:
        """Return ``(full_name, team)`` pairs whose name contains ``query``."""
        view = await self.users()
        q = (query or "").strip().lower()
        return [
            (u.get("full_name", ""), u.get("team"))
            for u in view.value
            if q in (u.get("full_name") or "").lower()
        ]

    async def find_by_name(self, full_name: str) -> AppUser | None:
        view = await self.users()
        for user in view.value:
            if user.get("full_name") == full_name:
                return user
        return None

    async def active_users(self) -> list[AppUser]:
        view = await self.users()
        return [u for u in view.value if u.get("is_active")]

    async def create_user(
        self,
        email: str,
        full_name: str,
        team: str,
        role_id: str | None = None,
        password: str | None = None,
    ) -> AppUser:
        user = await self.api.create_user(
            email, full_name, team, role_id=role_id, password=password
        )
        self.cache.invalidate()
        logger.info("Created user %s", email)
        return user

    async def update_user(self, user_id: str, **fields: Any) -> AppUser:
        user = await self.api.update_user(user_id, **fields)
        self.cache.invalidate()
        return user

    async def deactivate_user(self, user_id: str) -> None:
        await self.api.deactivate_user(user_id)
        self.cache.invalidate()
        logger.info("Deactivated user %s", user_id)

    async def send_password_reset(self, user_id: str) -> str:
        return await self.api.send_password_reset(user_id)

    async def set_password(self, user_id: str, password: str) -> str:
        return await self.api.set_password(user_id, password)
