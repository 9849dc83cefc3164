"""Chat request and fast-path reply dataclasses."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from .commands import CommandContext


@dataclass(frozen=True, slots=True)
class ChatRequest:
    """One validated chat turn.

    Attributes:
        message: Trimmed user text.
        user_id: Identity supplied by the authenticating proxy.
        conversation_id: Conversation the turn belongs to, if known.
        context: Client-side workspace/page context.
    """

    message: str
    user_id: str
    conversation_id: str | None = None
    context: CommandContext = field(default_factory=CommandContext)


@dataclass(slots=True)
class FastPathReply:
    """Locally built answer: one assistant text plus typed client events."""

    kind: str
    text: str
    events: list[dict[str, Any]] = field(default_factory=list)


__all__ = ["ChatRequest", "FastPathReply"]
