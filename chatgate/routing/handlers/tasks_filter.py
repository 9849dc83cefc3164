"""Task list filter: "покажи выполненные", "active tasks", "все задачи"."""

from __future__ import annotations

from ..intent import score_intent
from ...state.commands import Match, TasksFilter, CommandContext, TasksFilterCommand
from ...config.routing import FILTER_MAX_ACTION_SCORE, TASKS_FILTER_CONFIDENCE
from ...config.patterns import (
    TASK_WORD_PATTERN,
    FILTER_ALL_PATTERN,
    FILTER_ACTIVE_PATTERN,
    FILTER_COMPLETED_PATTERN,
)


def _detect_filter(lowered: str) -> TasksFilter | None:
    if FILTER_COMPLETED_PATTERN.search(lowered):
        return "completed"
    if FILTER_ACTIVE_PATTERN.search(lowered):
        return "active"
    if FILTER_ALL_PATTERN.search(lowered) and TASK_WORD_PATTERN.search(lowered):
        return "all"
    return None


class TasksFilterHandler:
    """Matches a filter word unless action intent dominates.

    "пометь задачу как выполненную" with a strong action verb is a mutation
    and goes to the generative path.
    """

    name = "tasks.filter"

    def match(self, text: str, context: CommandContext) -> Match | None:
        task_filter = _detect_filter(text.lower().strip())
        if task_filter is None:
            return None
        if score_intent(text).action > FILTER_MAX_ACTION_SCORE:
            return None
        return Match(command=TasksFilterCommand(filter=task_filter), confidence=TASKS_FILTER_CONFIDENCE)


__all__ = ["TasksFilterHandler"]
