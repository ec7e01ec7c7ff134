"""Short-lived shared cache for an infrequently changing entity collection.

The cache holds a single snapshot plus the time it was fetched. Screens that
show the collection call ``mount()`` when they appear; code that changes the
collection on the backend calls ``invalidate()`` afterwards so the next mount
goes back to the network.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable

from .errors import FetchFailure
from .models.cache import CacheEntry, EntityView
from .models.result import FetchResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 5 * 60 * 1000

Fetcher = Callable[[], Awaitable[list[Any]]]
Clock = Callable[[], int]


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


class SharedEntityCache:
    """One cached collection with a freshness window and manual invalidation.

    Concurrent refreshes are not coalesced: every refresh that finds the
    snapshot stale issues its own fetch, and whichever fetch resolves last
    overwrites the snapshot, even if ``invalidate()`` ran in between.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Clock = now_ms,
        name: str = "entities",
    ) -> None:
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive")
        self._fetcher = fetcher
        self._clock = clock
        self._entry = CacheEntry()
        self.ttl_ms = ttl_ms
        self.name = name

    @property
    def entry(self) -> CacheEntry:
        if self._entry.value is None:
            return self._entry
        return CacheEntry(
            value=list(self._entry.value), fetched_at_ms=self._entry.fetched_at_ms
        )

    def is_fresh(self, now: int | None = None) -> bool:
        entry = self._entry
        if entry.value is None or entry.fetched_at_ms is None:
            return False
        if now is None:
            now = self._clock()
        return (now - entry.fetched_at_ms) < self.ttl_ms

    def get(self) -> EntityView:
        """Return the view a consumer starts with.

        The value is the last known snapshot (empty when there is none) and
        ``loading`` is set only when there is no snapshot at all.
        """
        value = self._entry.value
        return EntityView(value=list(value or []), loading=value is None)

    async def refresh(self, view: EntityView | None = None) -> FetchResult:
        """Serve the snapshot while fresh, otherwise fetch once.

        Fetch errors are logged and reported in the result, never raised.
        The cached snapshot only changes on success.
        """
        if view is None:
            view = self.get()

        now = self._clock()
        if self.is_fresh(now):
            cached = list(self._entry.value or [])
            view.value = cached
            view.loading = False
            return FetchResult(value=list(cached))

        try:
            data = await self._fetcher()
            if not isinstance(data, list):
                raise FetchFailure(
                    f"{self.name} response is not a list: {type(data).__name__}"
                )
        except FetchFailure as exc:
            error = exc
        except Exception as exc:
            error = FetchFailure(f"{self.name} fetch failed: {exc}")
        else:
            items = list(data)
            self._entry = CacheEntry(value=items, fetched_at_ms=self._clock())
            view.value = list(items)
            view.loading = False
            logger.debug("Cached %d %s", len(items), self.name)
            return FetchResult(value=list(items), fetched=True)

        logger.warning("Failed to refresh %s: %s", self.name, error)
        view.loading = False
        return FetchResult(value=list(view.value), error=error, fetched=True)

    async def mount(self) -> EntityView:
        view = self.get()
        await self.refresh(view)
        return view

    def invalidate(self) -> None:
        """Drop the snapshot; the next refresh fetches. Does not fetch itself."""
        self._entry = CacheEntry()
        logger.debug("Invalidated %s cache", self.name)
