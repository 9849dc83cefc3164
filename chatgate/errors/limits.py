"""Rate limiting exception with retry metadata.

This module provides the RateLimitError exception that carries information
about when a client can retry after being rejected by admission control.
"""


class RateLimitError(Exception):
    """Raised when the admission controller rejects a request.

    The HTTP layer turns this into a 429 response with standard
    ``X-RateLimit-*`` and ``Retry-After`` headers so clients can back off
    deterministically.

    Attributes:
        retry_in: Seconds until the oldest request in the window expires.
        limit: The maximum allowed requests per window.
        window_seconds: The duration of the rate limit window.
        remaining: Requests still available in the window (0 on rejection).
    """

    def __init__(
        self,
        *,
        retry_in: float,
        limit: int,
        window_seconds: float,
        remaining: int = 0,
        message: str | None = None,
    ) -> None:
        super().__init__(message or "rate limit exceeded")
        self.retry_in = max(0.0, float(retry_in))
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self.remaining = max(0, int(remaining))


__all__ = ["RateLimitError"]
