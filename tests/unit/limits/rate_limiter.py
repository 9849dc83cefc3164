"""Unit tests for the per-key sliding window rate limiter."""

from __future__ import annotations

import pytest

from chatgate.errors import RateLimitError
from chatgate.limits import InMemoryWindowStore, SlidingWindowRateLimiter


def _clocked(limit: int, window_ms: float, **kwargs):
    clock = [0.0]

    def now_fn() -> float:
        return clock[0]

    limiter = SlidingWindowRateLimiter(limit=limit, window_ms=window_ms, now_fn=now_fn, **kwargs)
    return limiter, clock


def test_limit_plus_one_is_rejected_then_window_resets() -> None:
    limiter, clock = _clocked(10, 1000)
    for i in range(10):
        result = limiter.check("1.2.3.4")
        assert result.allowed
        assert result.remaining == 10 - (i + 1)

    rejected = limiter.check("1.2.3.4")
    assert not rejected.allowed
    assert rejected.remaining == 0

    clock[0] = 1.0
    admitted = limiter.check("1.2.3.4")
    assert admitted.allowed
    assert admitted.remaining == 9


def test_reset_reports_time_until_oldest_expires() -> None:
    limiter, clock = _clocked(2, 1000)
    first = limiter.check("k")
    assert first.reset_ms == 1000
    clock[0] = 0.25
    limiter.check("k")
    clock[0] = 0.5
    rejected = limiter.check("k")
    assert not rejected.allowed
    assert rejected.reset_ms == 500


def test_partial_expiry_frees_one_slot() -> None:
    limiter, clock = _clocked(2, 1000)
    limiter.check("k")
    clock[0] = 0.25
    limiter.check("k")
    clock[0] = 1.0
    result = limiter.check("k")
    assert result.allowed
    assert result.remaining == 0


def test_rejection_does_not_extend_penalty() -> None:
    limiter, clock = _clocked(1, 1000)
    limiter.check("k")
    for step in (0.25, 0.5, 0.75):
        clock[0] = step
        assert not limiter.check("k").allowed
    clock[0] = 1.0
    assert limiter.check("k").allowed


def test_keys_are_independent() -> None:
    limiter, _ = _clocked(1, 1000)
    assert limiter.check("a").allowed
    assert limiter.check("b").allowed
    assert not limiter.check("a").allowed


def test_consume_raises_with_retry_metadata() -> None:
    limiter, clock = _clocked(1, 5000)
    limiter.consume("k")
    clock[0] = 1.0
    with pytest.raises(RateLimitError) as exc_info:
        limiter.consume("k")
    err = exc_info.value
    assert err.limit == 1
    assert err.remaining == 0
    assert err.window_seconds == 5.0
    assert err.retry_in == pytest.approx(4.0)


def test_sweep_removes_only_expired_keys() -> None:
    limiter, clock = _clocked(5, 1000)
    limiter.check("a")
    limiter.check("b")
    clock[0] = 0.5
    limiter.check("c")
    clock[0] = 1.25
    assert limiter.sweep() == 2
    assert len(limiter) == 1
    assert limiter.sweep() == 0


def test_key_cap_evicts_oldest_inserted() -> None:
    store = InMemoryWindowStore(max_keys=2)
    limiter, _ = _clocked(5, 1000, store=store)
    limiter.check("a")
    limiter.check("b")
    limiter.check("c")
    assert len(limiter) == 2
    assert store.get("a") is None
    assert store.get("c") is not None


def test_disabled_limiter_limit_zero() -> None:
    limiter = SlidingWindowRateLimiter(limit=0, window_ms=1000)
    for _ in range(100):
        assert limiter.consume("k").allowed


def test_disabled_limiter_window_zero() -> None:
    limiter = SlidingWindowRateLimiter(limit=10, window_ms=0)
    for _ in range(100):
        assert limiter.consume("k").allowed
