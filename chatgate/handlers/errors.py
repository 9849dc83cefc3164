"""Exception handlers mapping typed errors to HTTP responses.

All error bodies share one shape::

    {"error_code": "rate_limited", "message": "Human-readable description"}

Status mapping:
    - RateLimitError: 429 with ``X-RateLimit-*`` and ``Retry-After``
    - CircuitOpenError: 503 with ``Retry-After``
    - UpstreamError / httpx.HTTPError: 502
    - ValidationError: 400
"""

from __future__ import annotations

import math
import logging
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from ..telemetry import get_metrics
from ..errors import (
    UpstreamError,
    RateLimitError,
    ValidationError,
    CircuitOpenError,
    classify_error,
)

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    *,
    error_code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> ORJSONResponse:
    payload: dict[str, Any] = {"error_code": error_code, "message": message}
    return ORJSONResponse(payload, status_code=status_code, headers=headers)


def rate_limit_headers(exc: RateLimitError) -> dict[str, str]:
    """Standard rate-limit headers; reset is in ms, Retry-After in whole seconds."""
    return {
        "X-RateLimit-Limit": str(exc.limit),
        "X-RateLimit-Remaining": str(exc.remaining),
        "X-RateLimit-Reset": str(math.ceil(exc.retry_in * 1000)),
        "Retry-After": str(max(1, math.ceil(exc.retry_in))),
    }


async def handle_rate_limit(request: Request, exc: RateLimitError) -> ORJSONResponse:
    return _error_response(
        429,
        error_code="rate_limited",
        message="Too many requests",
        headers=rate_limit_headers(exc),
    )


async def handle_circuit_open(request: Request, exc: CircuitOpenError) -> ORJSONResponse:
    return _error_response(
        503,
        error_code="upstream_unavailable",
        message="Assistant is temporarily unavailable",
        headers={"Retry-After": str(max(1, math.ceil(exc.retry_in)))},
    )


async def handle_upstream(request: Request, exc: Exception) -> ORJSONResponse:
    category = classify_error(exc)
    get_metrics().errors_total.add(1, {"error_type": category})
    if isinstance(exc, UpstreamError):
        logger.warning("upstream: failed status=%s", exc.status_code)
    else:
        logger.warning("upstream: failed category=%s error=%s", category, type(exc).__name__)
    return _error_response(502, error_code="upstream_error", message="Assistant request failed")


async def handle_validation(request: Request, exc: ValidationError) -> ORJSONResponse:
    return _error_response(400, error_code=exc.error_code, message=exc.message)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the typed error handlers to an application."""
    app.add_exception_handler(RateLimitError, handle_rate_limit)
    app.add_exception_handler(CircuitOpenError, handle_circuit_open)
    app.add_exception_handler(UpstreamError, handle_upstream)
    app.add_exception_handler(httpx.HTTPError, handle_upstream)
    app.add_exception_handler(ValidationError, handle_validation)


__all__ = [
    "handle_circuit_open",
    "handle_rate_limit",
    "handle_upstream",
    "handle_validation",
    "rate_limit_headers",
    "register_error_handlers",
]
