"""Span context managers for chat request tracing."""

from __future__ import annotations

from typing import Any
from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import trace

from ..config.telemetry import SPAN_REQUEST, OTEL_SERVICE_NAME


def _tracer() -> trace.Tracer:
    return trace.get_tracer(OTEL_SERVICE_NAME)


@contextmanager
def request_span(
    *,
    request_id: str,
    user_id: str = "",
    conversation_id: str = "",
) -> Iterator[trace.Span]:
    """One span per chat request, tagged with the request identity."""
    attrs: dict[str, Any] = {"request.id": request_id}
    if user_id:
        attrs["user.id"] = user_id
    if conversation_id:
        attrs["conversation.id"] = conversation_id
    with _tracer().start_as_current_span(SPAN_REQUEST, attributes=attrs) as span:
        yield span


__all__ = ["request_span"]
