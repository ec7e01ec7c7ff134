"""Shared test fixtures and fakes."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from teamboard.api import UsersApi

BASE_URL = "http://board.test"


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class ScriptedFetcher:
    """Async fetcher that plays back payloads or raises errors in order.

    The last outcome repeats once the script runs out. ``delay_ms`` moves the
    clock forward while the "request" is in flight.
    """

    def __init__(
        self, *outcomes: Any, clock: FakeClock | None = None, delay_ms: int = 0
    ) -> None:
        self.outcomes = list(outcomes)
        self.clock = clock
        self.delay_ms = delay_ms
        self.calls = 0

    async def __call__(self) -> Any:
        self.calls += 1
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if self.clock is not None:
            self.clock.now += self.delay_ms
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class GatedFetcher:
    """Async fetcher whose calls block until the test resolves them."""

    def __init__(self) -> None:
        self.pending: list[asyncio.Future] = []

    async def __call__(self) -> Any:
        fut = asyncio.get_running_loop().create_future()
        self.pending.append(fut)
        return await fut


def make_api(handler) -> UsersApi:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return UsersApi(BASE_URL, client=client)


USERS = [
    {
        "id": "1",
        "email": "ada@example.com",
        "full_name": "Ada Lovelace",
        "team": "synergy",
        "is_active": True,
    },
    {
        "id": "2",
        "email": "alan@example.com",
        "full_name": "Alan Turing",
        "team": "ignite",
        "is_active": False,
    },
    {
        "id": "3",
        "email": "grace@example.com",
        "full_name": "Grace Hopper",
        "team": None,
        "is_active": True,
    },
]
