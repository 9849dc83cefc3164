"""Streaming directive processor.

Sits between the generative service and the client. Per received chunk it:

1. Buffers text and splits complete SSE frames, carrying the incomplete tail
   into the next chunk (transport chunks are not aligned to frames).
2. Forwards non-JSON payloads verbatim and non-text JSON events unchanged.
3. For text deltas, appends the raw delta to a bounded accumulator and
   forwards the delta with directive markup removed.
4. On the terminal sentinel (or end of body) forwards the sentinel first,
   then extracts every directive block from the accumulator, hands each
   action list to the executor and emits navigation / refresh events.

``DirectiveStreamProcessor`` is a plain state machine over text so it can be
driven directly in tests; ``process_upstream_stream`` adapts it to an async
byte stream and owns error reporting and persistence.
"""

from __future__ import annotations

import codecs
import logging
from typing import Any
from collections.abc import AsyncIterator

import orjson

from ..state.stream import StreamBuffer
from ..state.executor import ActionExecutor
from ..state.persistence import ConversationStore
from ..telemetry import capture_error, get_metrics
from .display_filter import DirectiveDisplayFilter
from .directives import extract_directive_blocks
from .persistence import schedule_persist
from .sse import encode_data, encode_done, encode_event, split_frames, data_payloads
from .events import error_event, report_events, conversation_event
from ..config.stream import (
    SSE_DONE_SENTINEL,
    SSE_FRAME_DELIMITER,
    STREAM_MAX_RAW_CHARS,
    STREAM_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)


def _text_delta(event: Any) -> str | None:
    if not isinstance(event, dict):
        return None
    choices = event.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    delta = choices[0].get("delta")
    if not isinstance(delta, dict):
        return None
    content = delta.get("content")
    return content if isinstance(content, str) else None


def _with_content(event: dict[str, Any], content: str) -> dict[str, Any]:
    """Copy of a chunk event whose first choice carries ``content``."""
    choice = dict(event["choices"][0])
    choice["delta"] = {**choice["delta"], "content": content}
    return {**event, "choices": [choice, *event["choices"][1:]]}


class DirectiveStreamProcessor:
    """Per-request state machine over the upstream SSE text.

    Attributes:
        buffer: Raw/visible/remainder text state.
        done: True once the terminal sentinel (or end of body) was handled.
    """

    def __init__(
        self,
        executor: ActionExecutor,
        *,
        user_id: str,
        workspace_id: str | None,
        max_raw_chars: int = STREAM_MAX_RAW_CHARS,
    ) -> None:
        self._executor = executor
        self._user_id = user_id
        self._workspace_id = workspace_id
        self._display = DirectiveDisplayFilter()
        self._directives_ran = False
        # envelope reused when flushing held-back text
        self._last_text_event: dict[str, Any] | None = None
        self.buffer = StreamBuffer(max_raw_chars=max_raw_chars)
        self.done = False

    @property
    def visible_text(self) -> str:
        return self.buffer.visible

    def _emit_visible(self, event: dict[str, Any], text: str, out: list[str]) -> None:
        if not text:
            return
        self.buffer.visible += text
        out.append(encode_event(_with_content(event, text)))

    def _handle_payload(self, payload: str, out: list[str]) -> None:
        try:
            event = orjson.loads(payload)
        except orjson.JSONDecodeError:
            out.append(encode_data(payload))
            return

        content = _text_delta(event)
        if content is None:
            out.append(encode_event(event) if isinstance(event, dict) else encode_data(payload))
            return

        self.buffer.append_raw(content)
        self._last_text_event = event
        self._emit_visible(event, self._display.push(content), out)

    def _finish(self, out: list[str]) -> None:
        held = self._display.flush()
        if held and self._last_text_event is not None:
            self._emit_visible(self._last_text_event, held, out)
        out.append(encode_done())
        self.done = True

    def feed(self, text: str) -> list[str]:
        """Consume decoded upstream text and return frames to forward.

        Once the sentinel is seen the remaining input is ignored and
        ``done`` is set.
        """
        if self.done or not text:
            return []

        frames, self.buffer.remainder = split_frames(self.buffer.remainder + text)
        out: list[str] = []
        for frame in frames:
            for payload in data_payloads(frame):
                if not payload:
                    continue
                if payload == SSE_DONE_SENTINEL:
                    self._finish(out)
                    return out
                self._handle_payload(payload, out)
        return out

    def close(self) -> list[str]:
        """Handle an upstream body that ended without a sentinel."""
        if self.done:
            return []
        out: list[str] = []
        remainder, self.buffer.remainder = self.buffer.remainder, ""
        if remainder.strip():
            # final frame without its blank-line terminator
            out.extend(self.feed(remainder + SSE_FRAME_DELIMITER))
        if not self.done:
            logger.info("stream: upstream closed without sentinel")
            self._finish(out)
        return out

    async def run_directives(self) -> list[str]:
        """Execute every directive block once and return the event frames.

        Blocks run in text order; each execution emits its own navigation
        and grouped refresh events.
        """
        if self._directives_ran:
            return []
        self._directives_ran = True

        out: list[str] = []
        for actions in extract_directive_blocks(self.buffer.raw):
            logger.info("directives: executing count=%s", len(actions))
            get_metrics().directive_actions_total.add(len(actions))
            report = await self._executor.execute(actions, self._user_id, self._workspace_id)
            logger.info(
                "directives: executed navigation=%s results=%s",
                report.navigation,
                len(report.results),
            )
            out.extend(encode_event(event) for event in report_events(report))
        return out


async def process_upstream_stream(
    chunks: AsyncIterator[bytes],
    processor: DirectiveStreamProcessor,
    *,
    user_id: str,
    conversation_id: str | None = None,
    store: ConversationStore | None = None,
) -> AsyncIterator[str]:
    """Drive a processor over an upstream byte stream.

    Yields the conversation id event (when known), forwarded frames, the
    sentinel and directive-derived events, in that order. A processing fault
    yields one generic error frame and ends the stream. The visible text is
    handed to persistence exactly once after the stream closes.
    """
    if conversation_id:
        yield encode_event(conversation_event(conversation_id))

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    try:
        async for chunk in chunks:
            for frame in processor.feed(decoder.decode(chunk)):
                yield frame
            if processor.done:
                break

        if not processor.done:
            for frame in processor.feed(decoder.decode(b"", final=True)) + processor.close():
                yield frame

        for frame in await processor.run_directives():
            yield frame
    except Exception as exc:  # noqa: BLE001
        logger.exception("stream: processing failed")
        capture_error(exc)
        get_metrics().errors_total.add(1, {"error_type": "stream"})
        yield encode_event(error_event(STREAM_ERROR_MESSAGE))
    finally:
        schedule_persist(
            store,
            user_id=user_id,
            conversation_id=conversation_id,
            text=processor.visible_text,
        )


__all__ = ["DirectiveStreamProcessor", "process_upstream_stream"]
