"""Admission control dataclasses."""

from __future__ import annotations

from typing import Protocol
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

# Ordered request timestamps (milliseconds) inside one key's trailing window
RateWindow = deque


@dataclass(frozen=True, slots=True)
class RateLimitResult:
    """Outcome of one admission check.

    Rejections carry the same fields as admissions so clients can back off
    deterministically.

    Attributes:
        allowed: Whether the request was admitted.
        limit: Configured maximum per window.
        remaining: Requests still available after this one.
        reset_ms: Milliseconds until the window frees a slot (rejection) or
            fully resets (admission).
    """

    allowed: bool
    limit: int
    remaining: int
    reset_ms: int


class WindowStore(Protocol):
    """Keyed storage for rate windows (one per client key)."""

    def get(self, key: str) -> RateWindow | None: ...

    def set(self, key: str, window: RateWindow) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...


__all__ = ["RateWindow", "RateLimitResult", "WindowStore"]
