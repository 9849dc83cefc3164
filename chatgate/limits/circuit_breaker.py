"""Circuit breaker for calls to failing dependencies.

Each named dependency has its own state machine:

    closed     Calls pass through. Consecutive failures are counted and the
               circuit opens once they reach the threshold.
    open       Calls fail fast with CircuitOpenError without invoking the
               wrapped function until the reset timeout has elapsed since the
               last failure.
    half_open  After the timeout exactly one probe call goes through. Success
               closes the circuit; failure reopens it immediately without
               counting toward the threshold again.

The breaker never retries on its own; callers decide whether to retry.

Example:
    breaker = CircuitBreaker()

    try:
        response = await breaker.call("upstream", lambda: client.send(request))
    except CircuitOpenError as exc:
        return unavailable(retry_after=exc.retry_in)
"""

from __future__ import annotations

import time
import asyncio
import logging
from typing import TypeVar
from collections.abc import Callable, Awaitable

from ..errors import CircuitOpenError
from .circuit_store import InMemoryCircuitStore
from ..state.circuit import CircuitState, CircuitStore, CircuitStatus
from ..config.circuit import CIRCUIT_RESET_TIMEOUT_S, CIRCUIT_FAILURE_THRESHOLD

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Type alias for injectable time functions (used in testing)
TimeFn = Callable[[], float]


class CircuitBreaker:
    """Keyed circuit breaker over an injectable state store.

    State for a name is created on first use and lives for the process
    lifetime (or as long as the store keeps it). All state changes happen in
    synchronous steps between awaits, so concurrent callers on one event
    loop never interleave a read-modify-write.

    Attributes:
        failure_threshold: Default consecutive failures before opening.
        reset_timeout_s: Default cooldown before a probe is admitted.
    """

    def __init__(
        self,
        *,
        failure_threshold: int = CIRCUIT_FAILURE_THRESHOLD,
        reset_timeout_s: float = CIRCUIT_RESET_TIMEOUT_S,
        store: CircuitStore | None = None,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.failure_threshold = max(1, int(failure_threshold))
        self.reset_timeout_s = max(0.0, float(reset_timeout_s))
        self._store: CircuitStore = store if store is not None else InMemoryCircuitStore()
        self._now = now_fn or time.monotonic

    def _elapsed_since_failure(self, state: CircuitState, now: float) -> float:
        if state.last_failure_at is None:
            return float("inf")
        return now - state.last_failure_at

    def _admit(self, name: str, state: CircuitState, reset_timeout_s: float) -> bool:
        """Return True when this call is the half-open probe; raise if refused."""
        if state.state == "closed":
            return False

        now = self._now()
        elapsed = self._elapsed_since_failure(state, now)
        if state.probe_in_flight or elapsed < reset_timeout_s:
            retry_in = reset_timeout_s if state.probe_in_flight else reset_timeout_s - elapsed
            raise CircuitOpenError(name, retry_in=retry_in)

        state.state = "half_open"
        state.probe_in_flight = True
        self._store.save(name, state)
        logger.info("circuit %s: half_open probe after %.1fs", name, elapsed)
        return True

    def _record_success(self, name: str, state: CircuitState, probing: bool) -> None:
        if probing or state.failures:
            logger.info("circuit %s: closed", name)
        state.state = "closed"
        state.failures = 0
        state.last_success_at = self._now()
        state.probe_in_flight = False
        self._store.save(name, state)

    def _record_failure(self, name: str, state: CircuitState, failure_threshold: int) -> None:
        state.failures += 1
        state.last_failure_at = self._now()
        state.probe_in_flight = False
        if state.state == "half_open":
            state.state = "open"
            logger.warning("circuit %s: probe failed, reopened", name)
        elif state.state == "closed" and state.failures >= failure_threshold:
            state.state = "open"
            logger.error("circuit %s: opened after %s consecutive failures", name, state.failures)
        self._store.save(name, state)

    async def call(
        self,
        name: str,
        fn: Callable[[], Awaitable[T]],
        *,
        failure_threshold: int | None = None,
        reset_timeout_s: float | None = None,
    ) -> T:
        """Invoke ``fn`` under the breaker for ``name``.

        Args:
            name: Breaker key, one per dependency.
            fn: Zero-argument coroutine factory performing the call.
            failure_threshold: Per-call override of the opening threshold.
            reset_timeout_s: Per-call override of the cooldown.

        Returns:
            Whatever ``fn`` returns.

        Raises:
            CircuitOpenError: If the circuit is open (``fn`` is not invoked).
            Exception: Any exception from ``fn``, after it was recorded as a
                failure.
        """
        threshold = self.failure_threshold if failure_threshold is None else max(1, int(failure_threshold))
        timeout = self.reset_timeout_s if reset_timeout_s is None else max(0.0, float(reset_timeout_s))

        state = self._store.get_or_create(name)
        probing = self._admit(name, state, timeout)

        try:
            result = await fn()
        except asyncio.CancelledError:
            # cancelled probe: reopen without counting a failure
            if probing:
                state.state = "open"
                state.probe_in_flight = False
                self._store.save(name, state)
            raise
        except Exception:
            self._record_failure(name, state, threshold)
            raise

        self._record_success(name, state, probing)
        return result

    def status(self, name: str) -> CircuitStatus:
        """Snapshot for health checks; an expired open circuit reads half_open."""
        state = self._store.get(name)
        if state is None:
            return CircuitStatus(name=name, state="closed", failures=0)
        phase = state.state
        if phase == "open" and self._elapsed_since_failure(state, self._now()) >= self.reset_timeout_s:
            phase = "half_open"
        return CircuitStatus(name=name, state=phase, failures=state.failures)


__all__ = ["CircuitBreaker", "CircuitOpenError"]
