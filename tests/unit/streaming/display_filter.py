"""Unit tests for the incremental directive display filter."""

from __future__ import annotations

from chatgate.streaming.display_filter import DirectiveDisplayFilter


def _run(deltas: list[str]) -> str:
    display = DirectiveDisplayFilter()
    out = "".join(display.push(delta) for delta in deltas)
    return out + display.flush()


def test_plain_text_passes_through() -> None:
    assert _run(["Hello, ", "world"]) == "Hello, world"


def test_whole_block_in_one_delta_is_removed() -> None:
    assert _run(['Done.<clawdos>{"actions":[]}</clawdos> Bye']) == "Done. Bye"


def test_marker_split_across_deltas_never_leaks() -> None:
    display = DirectiveDisplayFilter()
    assert display.push("Done.<claw") == "Done."
    assert display.push('dos>{"actions":') == ""
    assert display.push("[]}</claw") == ""
    assert display.push("dos>!") == "!"
    assert display.flush() == ""


def test_false_marker_prefix_is_released() -> None:
    display = DirectiveDisplayFilter()
    assert display.push("a <cl") == "a "
    assert display.push("ick") == "<click"


def test_flush_releases_trailing_prefix() -> None:
    display = DirectiveDisplayFilter()
    assert display.push("1 <") == "1 "
    assert display.flush() == "<"


def test_unterminated_block_is_discarded() -> None:
    assert _run(["Done.<clawdos>{", '"actions":[]']) == "Done."
