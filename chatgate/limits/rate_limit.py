"""Sliding-window admission control keyed by client.

This module provides the per-key limiter guarding the inbound edge. Each key
owns the timestamps of its admitted requests inside the trailing window:

Sliding Window Algorithm:
    When a request for a key arrives:
    1. Drop timestamps that fell out of the window (older than window_ms)
    2. If the remaining count is at the limit, reject and report the time
       until the oldest entry expires
    3. Otherwise record the new timestamp and admit

Keys whose whole window expired are removed lazily on read and by a
periodic ``sweep()``, so memory stays bounded no matter how many distinct
clients were ever seen.

Example:
    limiter = SlidingWindowRateLimiter(limit=10, window_ms=1000)

    result = limiter.check("203.0.113.7")
    if not result.allowed:
        retry_after_ms = result.reset_ms
"""

from __future__ import annotations

import math
import time
import logging
import collections
from collections.abc import Callable

from ..errors import RateLimitError
from ..state.limits import RateWindow, WindowStore, RateLimitResult
from .window_store import InMemoryWindowStore
from ..config.limits import RATE_LIMIT_WINDOW_MS, RATE_LIMIT_MAX_REQUESTS

logger = logging.getLogger(__name__)

# Type alias for injectable time functions (used in testing)
TimeFn = Callable[[], float]


def _prune(window: RateWindow, now_ms: float, window_ms: float) -> None:
    while window and now_ms - window[0] >= window_ms:
        window.popleft()


class SlidingWindowRateLimiter:
    """Track requests per key over a rolling window.

    The limiter can be disabled by setting limit=0 or window_ms=0, in which
    case every check is admitted.

    Attributes:
        limit: Maximum requests allowed per window per key.
        window_ms: Duration of the sliding window in milliseconds.
    """

    def __init__(
        self,
        *,
        limit: int = RATE_LIMIT_MAX_REQUESTS,
        window_ms: float = RATE_LIMIT_WINDOW_MS,
        store: WindowStore | None = None,
        now_fn: TimeFn | None = None,
    ) -> None:
        """Initialize the rate limiter.

        Args:
            limit: Maximum requests per window. Set to 0 to disable.
            window_ms: Window duration in milliseconds. Set to 0 to disable.
            store: Window storage. Defaults to an in-process store.
            now_fn: Optional time function (seconds) for testing. Defaults
                to time.monotonic.
        """
        self.limit = max(0, int(limit))
        self.window_ms = max(0.0, float(window_ms))
        self._store: WindowStore = store if store is not None else InMemoryWindowStore()
        self._now = now_fn or time.monotonic
        self._enabled = self.limit > 0 and self.window_ms > 0

    def _now_ms(self) -> float:
        return self._now() * 1000.0

    def check(self, key: str) -> RateLimitResult:
        """Admit or reject one request for ``key``.

        Rejections do not record a timestamp, so a client hammering a full
        window does not extend its own penalty.

        Args:
            key: Client key (usually the client IP).

        Returns:
            RateLimitResult describing the decision and retry metadata.
        """
        if not self._enabled:
            return RateLimitResult(allowed=True, limit=self.limit, remaining=self.limit, reset_ms=0)

        now = self._now_ms()
        window = self._store.get(key)
        if window is None:
            window = collections.deque()
        _prune(window, now, self.window_ms)

        if len(window) >= self.limit:
            reset_ms = math.ceil(max(0.0, self.window_ms - (now - window[0])))
            return RateLimitResult(allowed=False, limit=self.limit, remaining=0, reset_ms=reset_ms)

        window.append(now)
        self._store.set(key, window)
        return RateLimitResult(
            allowed=True,
            limit=self.limit,
            remaining=self.limit - len(window),
            reset_ms=math.ceil(self.window_ms),
        )

    def consume(self, key: str) -> RateLimitResult:
        """Record a request or raise RateLimitError if the window is saturated.

        Raises:
            RateLimitError: If the rate limit has been exceeded for ``key``.
        """
        result = self.check(key)
        if not result.allowed:
            raise RateLimitError(
                retry_in=result.reset_ms / 1000.0,
                limit=result.limit,
                window_seconds=self.window_ms / 1000.0,
                remaining=result.remaining,
            )
        return result

    def sweep(self) -> int:
        """Drop keys whose whole window has expired.

        Returns:
            Number of keys removed.
        """
        now = self._now_ms()
        removed = 0
        for key in self._store.keys():
            window = self._store.get(key)
            if window is None:
                continue
            _prune(window, now, self.window_ms)
            if not window:
                self._store.delete(key)
                removed += 1
        return removed

    def __len__(self) -> int:
        return len(self._store)


__all__ = ["RateLimitError", "SlidingWindowRateLimiter"]
