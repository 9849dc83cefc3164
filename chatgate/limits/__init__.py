"""Resource governance: inbound admission control and outbound circuit breaking."""

from .circuit_breaker import CircuitBreaker
from .window_store import InMemoryWindowStore
from .circuit_store import InMemoryCircuitStore
from .rate_limit import SlidingWindowRateLimiter
from .sweeper import stop_rate_limit_sweeper, ensure_rate_limit_sweeper

__all__ = [
    "CircuitBreaker",
    "InMemoryCircuitStore",
    "InMemoryWindowStore",
    "SlidingWindowRateLimiter",
    "ensure_rate_limit_sweeper",
    "stop_rate_limit_sweeper",
]
