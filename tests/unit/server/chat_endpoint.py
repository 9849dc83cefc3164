"""Endpoint tests for the chat gateway application (fast path only)."""

from __future__ import annotations

import orjson
from fastapi.testclient import TestClient

from chatgate.server import app


def _payloads(text: str) -> list:
    frames = [frame for frame in text.split("\n\n") if frame]
    return [frame[len("data: "):] for frame in frames]


def test_healthz_reports_breaker_state() -> None:
    response = TestClient(app).get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "upstream": {"state": "closed", "failures": 0}}


def test_fast_path_chat_streams_events() -> None:
    response = TestClient(app).post(
        "/api/ai/chat",
        content=orjson.dumps({"message": "задачи"}),
        headers={"X-User-Id": "u1", "X-Request-Id": "req-1", "X-Forwarded-For": "10.0.0.1"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["x-request-id"] == "req-1"
    assert response.headers["x-ratelimit-limit"] == "10"
    payloads = _payloads(response.text)
    assert payloads[-1] == "[DONE]"
    assert orjson.loads(payloads[1]) == {"type": "navigation", "target": "/tasks"}


def test_missing_identity_is_rejected() -> None:
    response = TestClient(app).post(
        "/api/ai/chat",
        content=b'{"message": "hi"}',
        headers={"X-Forwarded-For": "10.0.0.2"},
    )
    assert response.status_code == 400
    assert response.json()["error_code"] == "missing_user"
