"""Admission control for the chat endpoint.

The client key is the first ``X-Forwarded-For`` hop when a proxy set one,
otherwise the socket peer address.
"""

from __future__ import annotations

import logging

from fastapi import Request

from ..errors import RateLimitError
from ..telemetry import get_metrics
from ..state.limits import RateLimitResult
from ..limits.rate_limit import SlidingWindowRateLimiter
from ..config.http import FORWARDED_FOR_HEADER

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_key(request: Request) -> str:
    """Return the rate-limit key for a request."""
    forwarded = request.headers.get(FORWARDED_FOR_HEADER, "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def admit_request(request: Request, limiter: SlidingWindowRateLimiter) -> RateLimitResult:
    """Record one request for the client or raise when its window is full.

    Raises:
        RateLimitError: If the client exceeded its budget.
    """
    key = client_key(request)
    try:
        return limiter.consume(key)
    except RateLimitError as exc:
        get_metrics().rate_limit_rejections_total.add(1)
        logger.warning("admission: rejected key=%s retry_in=%.3fs", key, exc.retry_in)
        raise


__all__ = ["client_key", "admit_request", "UNKNOWN_CLIENT"]
