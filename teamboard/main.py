"""Entrypoint: list users, or assignees matching a search query.

Usage: ``teamboard [query]``
"""

from __future__ import annotations

import asyncio
import logging
import sys

from . import config, view
from .api import UsersApi
from .directory import UserDirectory
from .logger import setup_logging

logger = logging.getLogger(__name__)


def build_directory(api: UsersApi) -> UserDirectory:
    return UserDirectory(api, ttl_ms=config.USERS_CACHE_TTL_MS)


async def _show(query: str | None) -> str:
    async with UsersApi(config.BASE_URL, timeout=config.HTTP_TIMEOUT_S) as api:
        directory = build_directory(api)
        if query:
            return view.render_assignees(await directory.assignees(query))
        users = await directory.users()
        return view.render_users("Users", users.value)


def run(argv: list[str] | None = None) -> int:
    setup_logging()
    args = sys.argv[1:] if argv is None else argv
    query = " ".join(args).strip() or None
    logger.info("Loading users from %s", config.BASE_URL)
    print(asyncio.run(_show(query)))
    return 0


if __name__ == "__main__":
    sys.exit(run())
