"""Chat orchestration: fast path or delegated stream for one turn.

``ChatService.open`` does all the work that can fail with a typed error
(routing, backend lookups, opening the upstream stream under the circuit
breaker) before any frame is produced, so the HTTP layer can still answer
with a proper status code. The returned async iterator only yields frames.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import AsyncIterator

from ..errors import CircuitOpenError
from ..telemetry import get_metrics
from ..limits import CircuitBreaker
from ..routing import IntentRouter
from ..state.chat import ChatRequest, FastPathReply
from ..state.commands import Command
from ..state.executor import ActionExecutor
from ..state.directory import WorkspaceDirectory
from ..state.persistence import ConversationStore
from ..streaming.persistence import schedule_persist
from ..streaming.processor import DirectiveStreamProcessor, process_upstream_stream
from ..config.circuit import UPSTREAM_CIRCUIT_NAME
from ..config.stream import STREAM_MAX_RAW_CHARS
from ..config.chat import SYSTEM_PROMPT, SYSTEM_PROMPT_CONTEXT_TEMPLATE
from .fastpath import render_fast_path, build_fast_path_reply

logger = logging.getLogger(__name__)


def build_messages(request: ChatRequest) -> list[dict[str, Any]]:
    """System prompt with page/workspace context followed by the user turn."""
    context = SYSTEM_PROMPT_CONTEXT_TEMPLATE.format(
        page=request.context.current_page,
        workspace=request.context.workspace_name or request.context.workspace_id or "none",
    )
    return [
        {"role": "system", "content": f"{SYSTEM_PROMPT}\n\n{context}"},
        {"role": "user", "content": request.message},
    ]


class ChatService:
    """Serves one chat turn from the fast path or the generative service.

    Attributes:
        circuit_name: Breaker key guarding the upstream.
    """

    def __init__(
        self,
        *,
        router: IntentRouter,
        breaker: CircuitBreaker,
        upstream: Any,
        executor: ActionExecutor,
        directory: WorkspaceDirectory,
        store: ConversationStore | None = None,
        circuit_name: str = UPSTREAM_CIRCUIT_NAME,
        max_raw_chars: int = STREAM_MAX_RAW_CHARS,
    ) -> None:
        self._router = router
        self._breaker = breaker
        self._upstream = upstream
        self._executor = executor
        self._directory = directory
        self._store = store
        self._max_raw_chars = max_raw_chars
        self.circuit_name = circuit_name

    async def _fast_path(self, command: Command, request: ChatRequest) -> AsyncIterator[str]:
        reply = await build_fast_path_reply(
            command,
            request,
            executor=self._executor,
            directory=self._directory,
        )
        return self._fast_frames(reply, request)

    async def _fast_frames(self, reply: FastPathReply, request: ChatRequest) -> AsyncIterator[str]:
        try:
            for frame in render_fast_path(reply, request.conversation_id):
                yield frame
        finally:
            schedule_persist(
                self._store,
                user_id=request.user_id,
                conversation_id=request.conversation_id,
                text=reply.text,
            )

    async def _open_upstream(self, request: ChatRequest) -> Any:
        messages = build_messages(request)
        try:
            return await self._breaker.call(self.circuit_name, lambda: self._upstream.open_stream(messages))
        except CircuitOpenError as exc:
            get_metrics().circuit_open_total.add(1, {"name": exc.name})
            logger.warning("chat: upstream circuit open retry_in=%.1fs", exc.retry_in)
            raise

    async def _delegated_frames(self, response: Any, request: ChatRequest) -> AsyncIterator[str]:
        processor = DirectiveStreamProcessor(
            self._executor,
            user_id=request.user_id,
            workspace_id=request.context.workspace_id,
            max_raw_chars=self._max_raw_chars,
        )
        try:
            async for frame in process_upstream_stream(
                response.aiter_bytes(),
                processor,
                user_id=request.user_id,
                conversation_id=request.conversation_id,
                store=self._store,
            ):
                yield frame
        finally:
            await response.aclose()

    async def open(self, request: ChatRequest) -> AsyncIterator[str]:
        """Route the turn and return its frame iterator.

        Raises:
            CircuitOpenError: The upstream breaker is open (nothing was sent).
            UpstreamError: The upstream answered with a non-2xx status.
            httpx.HTTPError: The upstream could not be reached.
        """
        decision = self._router.decide(request.message, request.context)
        if decision is not None:
            logger.info("chat: fast path kind=%s handler=%s", decision.command.kind, decision.handler)
            get_metrics().requests_total.add(1, {"path": "fast"})
            return await self._fast_path(decision.command, request)

        logger.info("chat: delegating chars=%s", len(request.message))
        get_metrics().requests_total.add(1, {"path": "delegated"})
        response = await self._open_upstream(request)
        return self._delegated_frames(response, request)


__all__ = ["ChatService", "build_messages"]
