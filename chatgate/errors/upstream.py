"""Upstream generative service exceptions."""


class UpstreamError(Exception):
    """Raised when the generative service answers with a non-2xx status.

    Counts as a failure for the upstream circuit breaker.

    Attributes:
        status_code: HTTP status returned by the upstream.
        message: Short description (response body excerpt).
    """

    def __init__(self, status_code: int, message: str = "") -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"upstream returned {status_code}{detail}")
        self.status_code = int(status_code)
        self.message = message


__all__ = ["UpstreamError"]
