"""Conversation persistence contract."""

from __future__ import annotations

from typing import Protocol


class ConversationStore(Protocol):
    """Stores the final assistant text of a conversation turn.

    Best-effort: callers log and swallow failures.
    """

    async def save_assistant_message(self, user_id: str, conversation_id: str, text: str) -> None: ...


__all__ = ["ConversationStore"]
