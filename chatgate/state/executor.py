"""Action executor contract and its report dataclass."""

from __future__ import annotations

from typing import Any, Protocol
from dataclasses import field, dataclass

# One outcome per action: {"action": "<kind>", ...} or {"action": ..., "error": ...}
ActionResult = dict[str, Any]


@dataclass(slots=True)
class ExecutionReport:
    """What the executor did for one action list.

    Attributes:
        results: One outcome per action, in input order.
        navigation: Route the client should open, if any action asked for one.
    """

    results: list[ActionResult] = field(default_factory=list)
    navigation: str | None = None


class ActionExecutor(Protocol):
    """Performs the side effects described by directive actions.

    Implementations must not raise for individual action failures; those are
    reported as outcome entries with an ``error`` field.
    """

    async def execute(
        self,
        actions: list[dict[str, Any]],
        user_id: str,
        workspace_id: str | None,
    ) -> ExecutionReport: ...


__all__ = ["ActionResult", "ExecutionReport", "ActionExecutor"]
