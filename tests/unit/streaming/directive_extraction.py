"""Unit tests for directive block parsing and extraction."""

from __future__ import annotations

from chatgate.streaming.directives import (
    parse_directive_block,
    extract_directive_blocks,
)

BLOCK = '<clawdos>{"actions":[{"k":"task.complete","taskId":"t1"}]}</clawdos>'


def test_extracts_actions_from_block() -> None:
    assert extract_directive_blocks(f"Done.{BLOCK}") == [[{"k": "task.complete", "taskId": "t1"}]]


def test_extraction_is_idempotent() -> None:
    text = f"a{BLOCK}b{BLOCK}"
    assert extract_directive_blocks(text) == extract_directive_blocks(text)
    assert len(extract_directive_blocks(text)) == 2


def test_code_fenced_body_is_accepted() -> None:
    body = '```json\n{"actions":[{"k":"navigate","to":"/news"}]}\n```'
    assert parse_directive_block(body) == [{"k": "navigate", "to": "/news"}]


def test_malformed_blocks_are_skipped() -> None:
    text = (
        "<clawdos>{not json}</clawdos>"
        '<clawdos>{"actions":[]}</clawdos>'
        '<clawdos>{"other":1}</clawdos>'
        '<clawdos>[1, 2]</clawdos>'
        + BLOCK
    )
    assert extract_directive_blocks(text) == [[{"k": "task.complete", "taskId": "t1"}]]


def test_non_object_actions_are_dropped() -> None:
    assert parse_directive_block('{"actions":[1, "x", {"k":"task.delete"}]}') == [{"k": "task.delete"}]
    assert parse_directive_block('{"actions":[1, "x"]}') is None


def test_unterminated_block_yields_nothing() -> None:
    assert extract_directive_blocks('Done.<clawdos>{"actions":[{"k":"x"}]}') == []
