"""Per-request streaming buffer state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StreamBuffer:
    """Text state of one delegated stream, discarded when the stream ends.

    Attributes:
        raw: Raw generated text including directive markup, bounded by
            ``max_raw_chars`` (only the trailing cap-worth is kept).
        visible: Text forwarded to the client, markup removed.
        remainder: Incomplete SSE frame carried into the next chunk.
        max_raw_chars: Cap applied to ``raw``.
    """

    max_raw_chars: int
    raw: str = ""
    visible: str = ""
    remainder: str = ""

    def append_raw(self, text: str) -> None:
        """Append generated text, keeping only the trailing cap-worth."""
        combined = self.raw + text
        if len(combined) > self.max_raw_chars:
            combined = combined[-self.max_raw_chars :] if self.max_raw_chars > 0 else ""
        self.raw = combined


__all__ = ["StreamBuffer"]
