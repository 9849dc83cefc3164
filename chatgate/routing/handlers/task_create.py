"""Explicit task creation: "создай задачу X", "add a new task: X"."""

from __future__ import annotations

from ...config.routing import TASK_CREATE_CONFIDENCE
from ...state.commands import Match, CommandContext, TaskCreateCommand
from ...config.patterns import TITLE_QUOTES_PATTERN, TASK_CREATE_PATTERNS


def _extract_title(text: str) -> str | None:
    for pattern in TASK_CREATE_PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        title = TITLE_QUOTES_PATTERN.sub("", match.group("title").strip()).strip()
        if title:
            return title
    return None


class TaskCreateHandler:
    """Matches explicit create/add commands that name a task title."""

    name = "task.create"

    def match(self, text: str, context: CommandContext) -> Match | None:
        title = _extract_title(text.strip())
        if title is None:
            return None
        return Match(command=TaskCreateCommand(title=title), confidence=TASK_CREATE_CONFIDENCE)


__all__ = ["TaskCreateHandler"]
