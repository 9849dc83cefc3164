"""Exception classification helpers for metrics and telemetry labels."""

from __future__ import annotations

import httpx

from .limits import RateLimitError
from .circuit import CircuitOpenError
from .upstream import UpstreamError
from .validation import ValidationError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, "validation"),
    (RateLimitError, "rate_limit"),
    (CircuitOpenError, "circuit_open"),
    (UpstreamError, "upstream"),
    (httpx.TimeoutException, "timeout"),
    (TimeoutError, "timeout"),
    (httpx.TransportError, "connection"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a metric-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
