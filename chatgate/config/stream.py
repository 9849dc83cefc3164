"""Streaming directive processor configuration.

Directive blocks are embedded in generated text as
``<clawdos>{"actions": [...]}</clawdos>``. The raw accumulator keeps only the
trailing ``STREAM_MAX_RAW_CHARS`` characters so a block closing near the end
of a long generation is still found.
"""

from __future__ import annotations

import os


DIRECTIVE_TAG = os.getenv("DIRECTIVE_TAG", "clawdos")
DIRECTIVE_OPEN = f"<{DIRECTIVE_TAG}>"
DIRECTIVE_CLOSE = f"</{DIRECTIVE_TAG}>"

STREAM_MAX_RAW_CHARS = int(os.getenv("STREAM_MAX_RAW_CHARS", "50000"))

# SSE framing
SSE_FRAME_DELIMITER = "\n\n"
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = os.getenv("SSE_DONE_SENTINEL", "[DONE]")

# Client-visible message for mid-stream faults (details stay in server logs)
STREAM_ERROR_MESSAGE = "Stream processing failed"

# Action-result prefixes that trigger a grouped client refresh event
REFRESH_DOMAINS: tuple[str, ...] = ("task", "news", "delivery")

SSE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}
SSE_MEDIA_TYPE = "text/event-stream; charset=utf-8"


__all__ = [
    "DIRECTIVE_TAG",
    "DIRECTIVE_OPEN",
    "DIRECTIVE_CLOSE",
    "STREAM_MAX_RAW_CHARS",
    "SSE_FRAME_DELIMITER",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "STREAM_ERROR_MESSAGE",
    "REFRESH_DOMAINS",
    "SSE_HEADERS",
    "SSE_MEDIA_TYPE",
]
