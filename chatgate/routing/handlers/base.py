"""Common interface for fast-path command handlers."""

from __future__ import annotations

from typing import Protocol

from ...state.commands import Match, CommandContext


class CommandHandler(Protocol):
    """Stateless strategy that claims an input or declines.

    Handlers are pure functions of ``(text, context)``: no I/O and no hidden
    state, so routing the same input twice gives the same result.
    """

    name: str

    def match(self, text: str, context: CommandContext) -> Match | None: ...


__all__ = ["CommandHandler"]
