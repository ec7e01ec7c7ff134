"""Refresh outcome dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import FetchFailure


@dataclass
class FetchResult:
    value: list[Any] = field(default_factory=list)
    error: FetchFailure | None = None
    fetched: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None
