"""Circuit breaker exception.

Raised instead of calling a dependency whose breaker is open, so callers
can tell "temporarily unavailable" apart from a genuine failure.
"""


class CircuitOpenError(Exception):
    """Raised when a call is refused because its circuit is open.

    The wrapped function is never invoked when this is raised.

    Attributes:
        name: Breaker key (one per upstream dependency).
        retry_in: Seconds until the breaker admits a probe call.
    """

    def __init__(self, name: str, *, retry_in: float = 0.0) -> None:
        super().__init__(f"circuit '{name}' is open")
        self.name = name
        self.retry_in = max(0.0, float(retry_in))


__all__ = ["CircuitOpenError"]
