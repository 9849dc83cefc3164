"""Async client for the upstream generative service.

Requests are OpenAI-style chat completions with ``stream=true``. The response
is returned open so the caller can iterate its body; a non-2xx answer is read,
closed and raised as ``UpstreamError`` so it counts as a breaker failure.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import orjson

from ..errors import UpstreamError
from ..config.upstream import (
    UPSTREAM_URL,
    UPSTREAM_PATH,
    UPSTREAM_MODEL,
    UPSTREAM_TOKEN,
    UPSTREAM_READ_TIMEOUT_S,
    UPSTREAM_CONNECT_TIMEOUT_S,
)

logger = logging.getLogger(__name__)

_ERROR_BODY_CHARS = 200


class UpstreamClient:
    """Streams chat completions from the generative service."""

    def __init__(
        self,
        *,
        base_url: str = UPSTREAM_URL,
        path: str = UPSTREAM_PATH,
        token: str = UPSTREAM_TOKEN,
        model: str = UPSTREAM_MODEL,
        connect_timeout_s: float = UPSTREAM_CONNECT_TIMEOUT_S,
        read_timeout_s: float = UPSTREAM_READ_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.path = path
        self.model = model
        headers = {"Content-Type": "application/json", "Accept": "text/event-stream"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(read_timeout_s, connect=connect_timeout_s),
            transport=transport,
        )

    async def open_stream(self, messages: list[dict[str, Any]]) -> httpx.Response:
        """Start a streaming completion and return the open response.

        The caller owns the response and must ``aclose()`` it.

        Raises:
            UpstreamError: If the service answers with a non-2xx status.
            httpx.HTTPError: On transport failures and timeouts.
        """
        payload = {"model": self.model, "messages": messages, "stream": True}
        request = self._client.build_request("POST", self.path, content=orjson.dumps(payload))
        response = await self._client.send(request, stream=True)
        if response.is_success:
            return response

        try:
            body = await response.aread()
        finally:
            await response.aclose()
        detail = body.decode("utf-8", errors="replace")[:_ERROR_BODY_CHARS]
        logger.warning("upstream: status=%s body=%r", response.status_code, detail)
        raise UpstreamError(response.status_code, detail)

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["UpstreamClient"]
