"""FastAPI application for the chat gateway.

Endpoints:
    - POST /api/ai/chat: one chat turn, answered as a server-sent event stream
      either locally (fast path) or by the generative service (delegated)
    - GET /healthz: liveness plus the upstream circuit breaker status

Lifecycle:
    1. On startup: configure logging and telemetry, start the rate-limit sweeper
    2. Per request: admission control, request parsing, routing, streaming
    3. On shutdown: stop the sweeper, drain pending saves, close clients and
       flush telemetry

Example:
    $ uvicorn chatgate.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import time
import uuid
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse, StreamingResponse

from .logging import log_context, set_log_context, configure_logging
from .handlers import parse_chat_request, admit_request, register_error_handlers
from .streaming import wait_for_pending_saves
from .limits import stop_rate_limit_sweeper, ensure_rate_limit_sweeper
from .limits.instances import rate_limiter, circuit_breaker
from .execution.instances import chat_service, backend_client, upstream_client
from .telemetry import get_metrics, request_span, init_telemetry, shutdown_telemetry
from .config.circuit import UPSTREAM_CIRCUIT_NAME
from .config.stream import SSE_HEADERS, SSE_MEDIA_TYPE
from .config.http import CHAT_ROUTE, HEALTH_ROUTE, USER_ID_HEADER, REQUEST_ID_HEADER

logger = logging.getLogger(__name__)

# Upper bound on waiting for background saves at shutdown
SHUTDOWN_SAVE_TIMEOUT_S = 5.0


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    init_telemetry()
    ensure_rate_limit_sweeper(rate_limiter)
    logger.info("chatgate: started")
    try:
        yield
    finally:
        await stop_rate_limit_sweeper()
        await wait_for_pending_saves(timeout=SHUTDOWN_SAVE_TIMEOUT_S)
        await upstream_client.aclose()
        await backend_client.aclose()
        shutdown_telemetry()
        logger.info("chatgate: stopped")


app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)
register_error_handlers(app)


async def _timed(
    frames: AsyncIterator[str],
    started: float,
    *,
    request_id: str,
    user_id: str,
    conversation_id: str | None,
) -> AsyncIterator[str]:
    # body is iterated after the handler returned; rebind the log fields
    set_log_context(request_id=request_id, user_id=user_id, conversation_id=conversation_id)
    try:
        async for frame in frames:
            yield frame
    finally:
        get_metrics().request_latency.record(time.perf_counter() - started)


@app.post(CHAT_ROUTE)
async def chat(request: Request) -> StreamingResponse:
    """Answer one chat turn as an SSE stream."""
    started = time.perf_counter()
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    with log_context(request_id=request_id):
        rate = admit_request(request, rate_limiter)
        chat_request = parse_chat_request(await request.body(), request.headers.get(USER_ID_HEADER))
        with log_context(
            user_id=chat_request.user_id,
            conversation_id=chat_request.conversation_id,
        ), request_span(
            request_id=request_id,
            user_id=chat_request.user_id,
            conversation_id=chat_request.conversation_id or "",
        ):
            frames = await chat_service.open(chat_request)

    headers = {
        **SSE_HEADERS,
        REQUEST_ID_HEADER: request_id,
        "X-RateLimit-Limit": str(rate.limit),
        "X-RateLimit-Remaining": str(rate.remaining),
        "X-RateLimit-Reset": str(rate.reset_ms),
    }
    body = _timed(
        frames,
        started,
        request_id=request_id,
        user_id=chat_request.user_id,
        conversation_id=chat_request.conversation_id,
    )
    return StreamingResponse(body, media_type=SSE_MEDIA_TYPE, headers=headers)


@app.get(HEALTH_ROUTE)
async def healthz():
    """Health check endpoint (no authentication required)."""
    status = circuit_breaker.status(UPSTREAM_CIRCUIT_NAME)
    return {
        "status": "ok",
        "upstream": {"state": status.state, "failures": status.failures},
    }
