"""Unit tests for chat request parsing and validation."""

from __future__ import annotations

import orjson
import pytest

from chatgate.errors import ValidationError
from chatgate.handlers import parse_chat_request
from chatgate.state.commands import CommandContext


def _code(body: bytes, user_id: str | None = "u1") -> str:
    with pytest.raises(ValidationError) as exc_info:
        parse_chat_request(body, user_id)
    return exc_info.value.error_code


def test_full_request_is_parsed() -> None:
    body = orjson.dumps(
        {
            "message": "  задачи  ",
            "conversationId": "c1",
            "context": {"workspaceId": "ws-1", "workspaceName": "Home", "currentPage": "/news"},
        }
    )
    request = parse_chat_request(body, " u1 ")
    assert request.message == "задачи"
    assert request.user_id == "u1"
    assert request.conversation_id == "c1"
    assert request.context == CommandContext(workspace_id="ws-1", workspace_name="Home", current_page="/news")


def test_context_defaults() -> None:
    request = parse_chat_request(b'{"message": "hi"}', "u1")
    assert request.conversation_id is None
    assert request.context.current_page == "/"
    assert request.context.workspace_id is None


def test_missing_identity() -> None:
    assert _code(b'{"message": "hi"}', None) == "missing_user"
    assert _code(b'{"message": "hi"}', "   ") == "missing_user"


def test_malformed_bodies() -> None:
    assert _code(b"{not json") == "invalid_json"
    assert _code(b'["hi"]') == "invalid_json"
    assert _code(b"{}") == "missing_message"
    assert _code(b'{"message": "   "}') == "missing_message"
    assert _code(b'{"message": 5}') == "missing_message"


def test_field_types() -> None:
    assert _code(b'{"message": "hi", "conversationId": 7}') == "invalid_field"
    assert _code(b'{"message": "hi", "context": "tasks"}') == "invalid_field"
    assert _code(b'{"message": "hi", "context": {"workspaceId": 1}}') == "invalid_field"


def test_message_length_limit() -> None:
    assert _code(orjson.dumps({"message": "x" * 8001})) == "message_too_long"
    assert parse_chat_request(orjson.dumps({"message": "x" * 8000}), "u1").message == "x" * 8000
