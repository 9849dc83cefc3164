"""Unit tests for fast-path reply builders and framing."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import orjson

from chatgate.state.chat import ChatRequest, FastPathReply
from chatgate.state.executor import ExecutionReport
from chatgate.state.directory import NewsTab, Workspace
from chatgate.execution.backend import BackendClient
from chatgate.execution.fastpath import render_fast_path, resolve_news_tab, build_fast_path_reply
from chatgate.state.commands import (
    CommandContext,
    NavigationCommand,
    NewsSearchCommand,
    TaskCreateCommand,
    TasksFilterCommand,
    NewsTabSwitchCommand,
    NewsSourcesOpenCommand,
    WorkspaceSwitchCommand,
)


class _Executor:
    def __init__(self, results: list[dict[str, Any]]) -> None:
        self.results = results
        self.calls: list[tuple[list[dict[str, Any]], str, str | None]] = []

    async def execute(self, actions: list[dict[str, Any]], user_id: str, workspace_id: str | None) -> ExecutionReport:
        self.calls.append((actions, user_id, workspace_id))
        return ExecutionReport(results=list(self.results))


class _Directory:
    def __init__(self, workspaces: list[Workspace] | None = None, tabs: list[NewsTab] | None = None, fail: bool = False) -> None:
        self.workspaces = workspaces or []
        self.tabs = tabs or []
        self.fail = fail

    async def list_workspaces(self, user_id: str) -> list[Workspace]:
        if self.fail:
            raise httpx.ConnectError("backend down")
        return self.workspaces

    async def list_news_tabs(self, user_id: str, workspace_id: str) -> list[NewsTab]:
        return self.tabs


def _request(workspace_id: str | None = "ws-1") -> ChatRequest:
    return ChatRequest(message="-", user_id="u1", context=CommandContext(workspace_id=workspace_id))


def _build(command: Any, request: ChatRequest | None = None, executor: Any = None, directory: Any = None) -> FastPathReply:
    return asyncio.run(
        build_fast_path_reply(
            command,
            request or _request(),
            executor=executor or _Executor([]),
            directory=directory or _Directory(),
        )
    )


def test_navigation_reply() -> None:
    reply = _build(NavigationCommand(target="/tasks", label="Tasks"))
    assert reply.text == "Открыл раздел: Tasks."
    assert reply.events == [{"type": "navigation", "target": "/tasks"}]


def test_task_create_executes_and_refreshes() -> None:
    executor = _Executor([{"action": "task.create", "task": {"id": "t9", "title": "купить молоко"}}])
    reply = _build(TaskCreateCommand(title="купить молоко"), executor=executor)
    assert executor.calls == [([{"k": "task.create", "title": "купить молоко"}], "u1", "ws-1")]
    assert reply.text == "Создал задачу: купить молоко."
    assert reply.events == [
        {"type": "task.refresh", "actions": [{"action": "task.create", "task": {"id": "t9", "title": "купить молоко"}}]}
    ]


def test_task_create_failure_reply() -> None:
    executor = _Executor([{"action": "task.create", "error": "backend_unavailable"}])
    reply = _build(TaskCreateCommand(title="x"), executor=executor)
    assert reply.text == "Не смог создать задачу."
    assert reply.events == []


def test_task_create_without_workspace() -> None:
    executor = _Executor([])
    reply = _build(TaskCreateCommand(title="x"), request=_request(None), executor=executor)
    assert reply.text == "Не выбран workspace."
    assert executor.calls == []


def test_workspace_switch_found_and_missing() -> None:
    directory = _Directory(workspaces=[Workspace(id="w2", name="Team", type="shared")])
    reply = _build(WorkspaceSwitchCommand(target_type="shared"), directory=directory)
    assert reply.text == "Переключил на общие задачи (Team)."
    assert reply.events == [
        {"type": "workspace.switch", "workspaceId": "w2"},
        {"type": "navigation", "target": "/tasks"},
    ]

    missing = _build(WorkspaceSwitchCommand(target_type="personal"), directory=directory)
    assert missing.text == "Не нашёл личный workspace."
    assert missing.events == []


def test_workspace_lookup_failure_reads_as_missing() -> None:
    reply = _build(WorkspaceSwitchCommand(target_type="shared"), directory=_Directory(fail=True))
    assert reply.text == "Не нашёл общий workspace."


def test_tasks_filter_reply() -> None:
    reply = _build(TasksFilterCommand(filter="completed"))
    assert reply.text == "Показываю выполненные задачи."
    assert reply.events == [{"type": "tasks.filter", "value": "completed"}]


def test_news_replies() -> None:
    sources = _build(NewsSourcesOpenCommand())
    assert sources.events == [{"type": "news.sources.open"}, {"type": "navigation", "target": "/news"}]

    search = _build(NewsSearchCommand(query="биткоин"))
    assert search.text == 'Ищу новости: "биткоин".'
    assert search.events == [{"type": "navigation", "target": "/news"}, {"type": "news.search", "query": "биткоин"}]


def test_news_tab_switch_resolves_alias() -> None:
    directory = _Directory(tabs=[NewsTab(id="n1", name="Crypto"), NewsTab(id="n2", name="AI")])
    reply = _build(NewsTabSwitchCommand(tab_name="крипто"), directory=directory)
    assert reply.text == "Переключаю на вкладку: Crypto."
    assert reply.events[-1] == {"type": "news.tab.switch", "tabId": "n1", "tabName": "Crypto"}


def test_resolve_news_tab_order() -> None:
    tabs = [NewsTab(id="n1", name="Crypto"), NewsTab(id="n2", name="Tech News")]
    assert resolve_news_tab("crypto", tabs) == ("n1", "Crypto")
    assert resolve_news_tab("tech", tabs) == ("n2", "Tech News")
    assert resolve_news_tab("все", tabs) == (None, "Home")
    assert resolve_news_tab("Home", tabs) == (None, "Home")
    assert resolve_news_tab("sports", tabs) == (None, "sports")


def test_render_fast_path_framing() -> None:
    reply = FastPathReply(kind="tasks.filter", text="Показываю все задачи.", events=[{"type": "tasks.filter", "value": "all"}])
    frames = render_fast_path(reply, "conv-1")
    assert frames[-1] == "data: [DONE]\n\n"
    payloads = [orjson.loads(frame[len("data: "):]) for frame in frames[:-1]]
    assert payloads[0] == {"type": "conversationId", "id": "conv-1"}
    assert payloads[1] == {
        "id": "clawdos-tasks-filter",
        "object": "chat.completion.chunk",
        "choices": [{"index": 0, "delta": {"role": "assistant", "content": "Показываю все задачи."}}],
    }
    assert payloads[2] == {"type": "tasks.filter", "value": "all"}


def test_render_without_conversation_id() -> None:
    frames = render_fast_path(FastPathReply(kind="navigation", text="x"))
    assert len(frames) == 2


def _html_backend() -> BackendClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    return BackendClient(base_url="http://backend.test", transport=httpx.MockTransport(handler))


def test_undecodable_workspace_lookup_reads_as_missing() -> None:
    reply = _build(WorkspaceSwitchCommand(target_type="personal"), directory=_html_backend())
    assert reply.text == "Не нашёл личный workspace."
    assert reply.events == []


def test_undecodable_news_tab_lookup_falls_back_to_name() -> None:
    reply = _build(NewsTabSwitchCommand(tab_name="крипто"), directory=_html_backend())
    assert reply.text == "Переключаю на вкладку: крипто."
    assert reply.events[-1] == {"type": "news.tab.switch", "tabId": None, "tabName": "крипто"}
