"""Cache-related dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Snapshot of the shared collection and when it was fetched.

    Both fields are None until the first successful fetch and again after
    invalidation.
    """

    value: list[Any] | None = None
    fetched_at_ms: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.value is None


@dataclass
class EntityView:
    """What a consuming screen renders: current items and a loading flag."""

    value: list[Any] = field(default_factory=list)
    loading: bool = False
