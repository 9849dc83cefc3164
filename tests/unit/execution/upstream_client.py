"""Unit tests for the upstream streaming client."""

from __future__ import annotations

import asyncio

import httpx
import orjson
import pytest

from chatgate.errors import UpstreamError
from chatgate.execution.upstream import UpstreamClient


def test_open_stream_posts_streaming_request() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer tok"
        seen.append(orjson.loads(request.content))
        return httpx.Response(200, content=b"data: [DONE]\n\n")

    async def scenario() -> bytes:
        client = UpstreamClient(base_url="http://llm.test", token="tok", transport=httpx.MockTransport(handler))
        response = await client.open_stream([{"role": "user", "content": "hi"}])
        try:
            return b"".join([chunk async for chunk in response.aiter_bytes()])
        finally:
            await response.aclose()
            await client.aclose()

    assert asyncio.run(scenario()) == b"data: [DONE]\n\n"
    assert seen == [{"model": "clawdbot", "messages": [{"role": "user", "content": "hi"}], "stream": True}]


def test_non_success_status_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, content=b"overloaded")

    async def scenario() -> None:
        client = UpstreamClient(base_url="http://llm.test", transport=httpx.MockTransport(handler))
        try:
            await client.open_stream([])
        finally:
            await client.aclose()

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(scenario())
    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "overloaded"
