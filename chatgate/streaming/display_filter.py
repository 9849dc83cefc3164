"""Stateful filter that hides directive markup from streamed text.

Deltas arrive at arbitrary boundaries, so a marker may be split across two
deltas ("Done.<claw" + "dos>{...}</clawdos>"). The filter:

- drops everything from an opening marker to its closing marker, across any
  number of deltas;
- holds back a trailing fragment that could be the start of a marker until
  the next delta decides it;
- on flush, releases held-back text that never became a marker and discards
  an unterminated block.
"""

from __future__ import annotations

from ..config.stream import DIRECTIVE_OPEN, DIRECTIVE_CLOSE


def _partial_marker_len(text: str, marker: str) -> int:
    """Length of the longest proper marker prefix that ends ``text``."""
    for size in range(min(len(text), len(marker) - 1), 0, -1):
        if text.endswith(marker[:size]):
            return size
    return 0


class DirectiveDisplayFilter:
    """Incremental markup remover for one stream.

    Complexity: O(len(delta)) per push plus at most one marker length of
    carried-over text.
    """

    def __init__(self, *, open_marker: str = DIRECTIVE_OPEN, close_marker: str = DIRECTIVE_CLOSE) -> None:
        self._open = open_marker
        self._close = close_marker
        # Possible marker prefix carried into the next push
        self._pending: str = ""
        self._inside_block = False

    def push(self, delta: str) -> str:
        """Process a raw delta and return the text safe to show now."""
        if not delta:
            return ""

        text = self._pending + delta
        self._pending = ""
        visible: list[str] = []

        while text:
            if self._inside_block:
                idx = text.find(self._close)
                if idx == -1:
                    keep = _partial_marker_len(text, self._close)
                    self._pending = text[len(text) - keep:] if keep else ""
                    break
                text = text[idx + len(self._close):]
                self._inside_block = False
                continue

            idx = text.find(self._open)
            if idx == -1:
                keep = _partial_marker_len(text, self._open)
                visible.append(text[: len(text) - keep])
                self._pending = text[len(text) - keep:] if keep else ""
                break
            visible.append(text[:idx])
            text = text[idx + len(self._open):]
            self._inside_block = True

        return "".join(visible)

    def flush(self) -> str:
        """Release held-back text at end of stream."""
        pending = self._pending
        self._pending = ""
        if self._inside_block:
            return ""
        return pending


__all__ = ["DirectiveDisplayFilter"]
