"""Server-sent event framing helpers.

Frames are separated by a blank line and carry ``data:`` lines. Payloads are
JSON objects except for the terminal sentinel and opaque passthrough values.
"""

from __future__ import annotations

from typing import Any

import orjson

from ..config.stream import SSE_DATA_PREFIX, SSE_DONE_SENTINEL, SSE_FRAME_DELIMITER


def encode_data(payload: str) -> str:
    """Wrap an already-serialized payload in one SSE frame."""
    return f"{SSE_DATA_PREFIX} {payload}{SSE_FRAME_DELIMITER}"


def encode_event(event: dict[str, Any]) -> str:
    """Serialize a JSON event into one SSE frame."""
    return encode_data(orjson.dumps(event).decode("utf-8"))


def encode_done() -> str:
    return encode_data(SSE_DONE_SENTINEL)


def split_frames(buffer: str) -> tuple[list[str], str]:
    """Split buffered text into complete frames and the trailing remainder.

    The remainder may be an incomplete frame and must be carried into the
    next call. CRLF line endings are normalized first.

    Returns:
        Tuple of (complete_frames, remainder).
    """
    normalized = buffer.replace("\r\n", "\n")
    parts = normalized.split(SSE_FRAME_DELIMITER)
    return parts[:-1], parts[-1]


def data_payloads(frame: str) -> list[str]:
    """Return the stripped payload of every ``data:`` line in a frame."""
    payloads: list[str] = []
    for line in frame.split("\n"):
        if line.startswith(SSE_DATA_PREFIX):
            payloads.append(line[len(SSE_DATA_PREFIX):].strip())
    return payloads


__all__ = [
    "encode_data",
    "encode_event",
    "encode_done",
    "split_frames",
    "data_payloads",
]
