"""Workspace switch: "открой личные задачи", "show team tasks"."""

from __future__ import annotations

from ..intent import score_intent
from ...state.commands import Match, WorkspaceType, CommandContext, WorkspaceSwitchCommand
from ...config.routing import WORKSPACE_MAX_ACTION_SCORE, WORKSPACE_SWITCH_CONFIDENCE
from ...config.patterns import (
    TASK_WORD_PATTERN,
    SHARED_WORKSPACE_PATTERN,
    PERSONAL_WORKSPACE_PATTERN,
)


def _detect_workspace_type(lowered: str) -> WorkspaceType | None:
    if not TASK_WORD_PATTERN.search(lowered):
        return None
    if PERSONAL_WORKSPACE_PATTERN.search(lowered):
        return "personal"
    if SHARED_WORKSPACE_PATTERN.search(lowered):
        return "shared"
    return None


class WorkspaceSwitchHandler:
    """Matches a task word plus a personal/shared marker.

    Stands down when action intent dominates so "add a shared task X" is not
    read as a switch.
    """

    name = "workspace.switch"

    def match(self, text: str, context: CommandContext) -> Match | None:
        target_type = _detect_workspace_type(text.lower().strip())
        if target_type is None:
            return None
        if score_intent(text).action > WORKSPACE_MAX_ACTION_SCORE:
            return None
        return Match(
            command=WorkspaceSwitchCommand(target_type=target_type),
            confidence=WORKSPACE_SWITCH_CONFIDENCE,
        )


__all__ = ["WorkspaceSwitchHandler"]
