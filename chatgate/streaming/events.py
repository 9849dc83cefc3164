"""Client event payloads shared by the fast and delegated paths."""

from __future__ import annotations

from typing import Any

from ..config.stream import REFRESH_DOMAINS
from ..state.executor import ActionResult, ExecutionReport


def conversation_event(conversation_id: str) -> dict[str, Any]:
    return {"type": "conversationId", "id": conversation_id}


def navigation_event(target: str) -> dict[str, Any]:
    return {"type": "navigation", "target": target}


def error_event(message: str) -> dict[str, Any]:
    return {"type": "error", "message": message}


def refresh_events(results: list[ActionResult]) -> list[dict[str, Any]]:
    """Group outcomes by domain prefix into one refresh event per domain.

    ``task.*`` outcomes become a single ``task.refresh`` event, likewise for
    ``news.*`` and ``delivery.*``. Domains without outcomes emit nothing.
    """
    events: list[dict[str, Any]] = []
    for domain in REFRESH_DOMAINS:
        prefix = f"{domain}."
        grouped = [
            result for result in results
            if isinstance(result.get("action"), str) and result["action"].startswith(prefix)
        ]
        if grouped:
            events.append({"type": f"{domain}.refresh", "actions": grouped})
    return events


def report_events(report: ExecutionReport) -> list[dict[str, Any]]:
    """Navigation (if any) followed by grouped refresh events."""
    events: list[dict[str, Any]] = []
    if report.navigation:
        events.append(navigation_event(report.navigation))
    events.extend(refresh_events(report.results))
    return events


__all__ = [
    "conversation_event",
    "navigation_event",
    "error_event",
    "refresh_events",
    "report_events",
]
