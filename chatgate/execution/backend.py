"""Async client for the application backend.

One client covers the three collaborator contracts the gateway consumes:
action execution, conversation persistence, and workspace / news-tab lookups.

Navigation actions are resolved locally against the section allow-list; every
other action is posted to the backend. Per-action failures are reported as
outcome entries with an ``error`` field and never raised, so one bad action
does not block the rest of its block.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import orjson

from ..config.sections import ALLOWED_PATHS
from ..state.directory import NewsTab, Workspace
from ..state.executor import ActionResult, ExecutionReport
from ..config.backend import (
    BACKEND_URL,
    BACKEND_TOKEN,
    BACKEND_TIMEOUT_S,
    BACKEND_ACTIONS_PATH,
    BACKEND_MESSAGES_PATH,
    BACKEND_NEWS_TABS_PATH,
    BACKEND_WORKSPACES_PATH,
)

logger = logging.getLogger(__name__)

NAVIGATE_ACTION = "navigate"


def _action_kind(action: dict[str, Any]) -> str | None:
    kind = action.get("k")
    return kind if isinstance(kind, str) and kind else None


class BackendClient:
    """Action executor, conversation store and workspace directory over HTTP.

    With an empty ``base_url`` the client stays usable: actions are reported
    as failed, saves are skipped and lookups return nothing.
    """

    def __init__(
        self,
        *,
        base_url: str = BACKEND_URL,
        token: str = BACKEND_TOKEN,
        timeout_s: float = BACKEND_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.configured = bool(base_url)
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout_s),
            transport=transport,
        )

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._client.post(path, content=orjson.dumps(payload))
        response.raise_for_status()
        return orjson.loads(response.content) if response.content else None

    async def _get(self, path: str, params: dict[str, str]) -> Any:
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return orjson.loads(response.content)

    def _navigate(self, action: dict[str, Any]) -> tuple[ActionResult, str | None]:
        target = action.get("to")
        if isinstance(target, str) and target in ALLOWED_PATHS:
            return {"action": NAVIGATE_ACTION, "to": target}, target
        logger.info("executor: navigation rejected target=%r", target)
        return {"action": NAVIGATE_ACTION, "error": "target_not_allowed"}, None

    async def _run_action(
        self,
        kind: str,
        action: dict[str, Any],
        user_id: str,
        workspace_id: str | None,
    ) -> ActionResult:
        if not self.configured:
            return {"action": kind, "error": "backend_unavailable"}
        payload = {"userId": user_id, "workspaceId": workspace_id, "action": action}
        try:
            data = await self._post(BACKEND_ACTIONS_PATH, payload)
        except httpx.HTTPStatusError as exc:
            logger.warning("executor: action=%s status=%s", kind, exc.response.status_code)
            return {"action": kind, "error": f"status_{exc.response.status_code}"}
        except (httpx.HTTPError, orjson.JSONDecodeError) as exc:
            logger.warning("executor: action=%s failed error=%s", kind, type(exc).__name__)
            return {"action": kind, "error": "request_failed"}

        result: ActionResult = {"action": kind}
        if isinstance(data, dict):
            result.update({key: value for key, value in data.items() if key != "action"})
        return result

    async def execute(
        self,
        actions: list[dict[str, Any]],
        user_id: str,
        workspace_id: str | None,
    ) -> ExecutionReport:
        """Run actions in order and collect one outcome per action.

        The last allowed ``navigate`` target wins.
        """
        report = ExecutionReport()
        for action in actions:
            kind = _action_kind(action)
            if kind is None:
                report.results.append({"action": "unknown", "error": "missing_kind"})
                continue
            if kind == NAVIGATE_ACTION:
                result, target = self._navigate(action)
                report.results.append(result)
                if target:
                    report.navigation = target
                continue
            report.results.append(await self._run_action(kind, action, user_id, workspace_id))
        return report

    async def save_assistant_message(self, user_id: str, conversation_id: str, text: str) -> None:
        if not self.configured:
            return
        path = BACKEND_MESSAGES_PATH.format(conversation_id=conversation_id)
        await self._post(path, {"userId": user_id, "role": "assistant", "content": text})

    async def list_workspaces(self, user_id: str) -> list[Workspace]:
        if not self.configured:
            return []
        data = await self._get(BACKEND_WORKSPACES_PATH.format(user_id=user_id), {})
        workspaces: list[Workspace] = []
        for item in data if isinstance(data, list) else []:
            if not isinstance(item, dict):
                continue
            ws_type = item.get("type")
            if ws_type not in ("personal", "shared"):
                continue
            workspaces.append(Workspace(id=str(item.get("id", "")), name=str(item.get("name", "")), type=ws_type))
        return workspaces

    async def list_news_tabs(self, user_id: str, workspace_id: str) -> list[NewsTab]:
        if not self.configured:
            return []
        path = BACKEND_NEWS_TABS_PATH.format(workspace_id=workspace_id)
        data = await self._get(path, {"userId": user_id})
        return [
            NewsTab(id=str(item.get("id", "")), name=str(item.get("name", "")))
            for item in (data if isinstance(data, list) else [])
            if isinstance(item, dict)
        ]

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["BackendClient", "NAVIGATE_ACTION"]
