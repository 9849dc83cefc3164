"""Singleton instances for resource governance.

Singleton instances are assembled here rather than next to their class
definitions.

Instances:
    rate_limiter: Process-wide admission controller for the chat endpoint.
    circuit_breaker: Process-wide breaker registry (keyed by dependency name).
"""

from .circuit_breaker import CircuitBreaker
from .window_store import InMemoryWindowStore
from .circuit_store import InMemoryCircuitStore
from .rate_limit import SlidingWindowRateLimiter
from ..config.limits import RATE_LIMIT_MAX_KEYS, RATE_LIMIT_WINDOW_MS, RATE_LIMIT_MAX_REQUESTS
from ..config.circuit import CIRCUIT_RESET_TIMEOUT_S, CIRCUIT_FAILURE_THRESHOLD


# ============================================================================
# Admission Controller
# ============================================================================

rate_limiter = SlidingWindowRateLimiter(
    limit=RATE_LIMIT_MAX_REQUESTS,
    window_ms=RATE_LIMIT_WINDOW_MS,
    store=InMemoryWindowStore(max_keys=RATE_LIMIT_MAX_KEYS),
)


# ============================================================================
# Circuit Breaker
# ============================================================================

circuit_breaker = CircuitBreaker(
    failure_threshold=CIRCUIT_FAILURE_THRESHOLD,
    reset_timeout_s=CIRCUIT_RESET_TIMEOUT_S,
    store=InMemoryCircuitStore(),
)


__all__ = [
    "rate_limiter",
    "circuit_breaker",
]
