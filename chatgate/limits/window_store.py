"""In-process store for sliding-window rate state."""

from __future__ import annotations

from collections.abc import Iterator

from ..state.limits import RateWindow
from ..config.limits import RATE_LIMIT_MAX_KEYS


class InMemoryWindowStore:
    """Dict-backed window store with a hard cap on tracked keys.

    Keys are kept in insertion order; when the cap is reached the
    oldest-inserted key is evicted to make room for a new one.
    """

    def __init__(self, *, max_keys: int = RATE_LIMIT_MAX_KEYS) -> None:
        self.max_keys = max(1, int(max_keys))
        self._windows: dict[str, RateWindow] = {}

    def get(self, key: str) -> RateWindow | None:
        return self._windows.get(key)

    def set(self, key: str, window: RateWindow) -> None:
        if key not in self._windows:
            while len(self._windows) >= self.max_keys:
                oldest = next(iter(self._windows))
                del self._windows[oldest]
        self._windows[key] = window

    def delete(self, key: str) -> None:
        self._windows.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._windows))

    def __len__(self) -> int:
        return len(self._windows)


__all__ = ["InMemoryWindowStore"]
