"""Chat request parsing and validation."""

from __future__ import annotations

from typing import Any

import orjson

from ..errors import ValidationError
from ..state.chat import ChatRequest
from ..state.commands import CommandContext
from ..config.http import CHAT_MAX_MESSAGE_CHARS


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("invalid_field", f"'{key}' must be a string")
    return value.strip() or None


def _parse_context(raw: Any) -> CommandContext:
    if raw is None:
        return CommandContext()
    if not isinstance(raw, dict):
        raise ValidationError("invalid_field", "'context' must be an object")
    return CommandContext(
        workspace_id=_optional_str(raw, "workspaceId"),
        workspace_name=_optional_str(raw, "workspaceName"),
        current_page=_optional_str(raw, "currentPage") or "/",
    )


def parse_chat_request(body: bytes, user_id: str | None) -> ChatRequest:
    """Build a ChatRequest from the raw body and the identity header.

    Args:
        body: JSON body ``{message, conversationId?, context?}``.
        user_id: Value of the identity header, if present.

    Raises:
        ValidationError: On missing identity, malformed JSON or bad fields.
    """
    user = (user_id or "").strip()
    if not user:
        raise ValidationError("missing_user", "user identity header is required")

    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise ValidationError("invalid_json", "request body must be valid JSON") from exc
    if not isinstance(data, dict):
        raise ValidationError("invalid_json", "request body must be a JSON object")

    message = data.get("message")
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("missing_message", "'message' is required")
    message = message.strip()
    if len(message) > CHAT_MAX_MESSAGE_CHARS:
        raise ValidationError(
            "message_too_long",
            f"'message' exceeds {CHAT_MAX_MESSAGE_CHARS} characters",
        )

    return ChatRequest(
        message=message,
        user_id=user,
        conversation_id=_optional_str(data, "conversationId"),
        context=_parse_context(data.get("context")),
    )


__all__ = ["parse_chat_request"]
