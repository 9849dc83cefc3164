"""Unit tests for the backend HTTP client (executor, store, directory)."""

from __future__ import annotations

import asyncio

import httpx
import orjson

from chatgate.state.directory import NewsTab, Workspace
from chatgate.execution.backend import BackendClient


def _client(handler) -> BackendClient:
    return BackendClient(base_url="http://backend.test", token="secret", transport=httpx.MockTransport(handler))


def test_navigate_is_resolved_locally() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("navigate must not reach the backend")

    report = asyncio.run(_client(handler).execute([{"k": "navigate", "to": "/news"}], "u1", None))
    assert report.navigation == "/news"
    assert report.results == [{"action": "navigate", "to": "/news"}]


def test_navigate_outside_allow_list_is_rejected() -> None:
    report = asyncio.run(
        BackendClient(base_url="").execute([{"k": "navigate", "to": "/admin"}], "u1", None)
    )
    assert report.navigation is None
    assert report.results == [{"action": "navigate", "error": "target_not_allowed"}]


def test_actions_are_posted_with_auth() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/internal/ai/actions"
        assert request.headers["Authorization"] == "Bearer secret"
        seen.append(orjson.loads(request.content))
        return httpx.Response(200, json={"taskId": "t1"})

    report = asyncio.run(_client(handler).execute([{"k": "task.complete", "taskId": "t1"}], "u1", "ws-1"))
    assert seen == [{"userId": "u1", "workspaceId": "ws-1", "action": {"k": "task.complete", "taskId": "t1"}}]
    assert report.results == [{"action": "task.complete", "taskId": "t1"}]


def test_one_failure_does_not_block_the_rest() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        action = orjson.loads(request.content)["action"]
        if action["k"] == "task.delete":
            return httpx.Response(500)
        return httpx.Response(200, json={})

    actions = [{"k": "task.delete", "taskId": "a"}, {"taskId": "b"}, {"k": "task.reopen", "taskId": "c"}]
    report = asyncio.run(_client(handler).execute(actions, "u1", "ws-1"))
    assert report.results == [
        {"action": "task.delete", "error": "status_500"},
        {"action": "unknown", "error": "missing_kind"},
        {"action": "task.reopen"},
    ]


def test_transport_error_is_reported_per_action() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused")

    report = asyncio.run(_client(handler).execute([{"k": "task.create", "title": "x"}], "u1", "ws-1"))
    assert report.results == [{"action": "task.create", "error": "request_failed"}]


def test_unconfigured_backend_reports_unavailable() -> None:
    client = BackendClient(base_url="")
    report = asyncio.run(client.execute([{"k": "task.create", "title": "x"}], "u1", "ws-1"))
    assert report.results == [{"action": "task.create", "error": "backend_unavailable"}]
    assert asyncio.run(client.list_workspaces("u1")) == []


def test_save_assistant_message_posts_content() -> None:
    seen: list[tuple[str, dict]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, orjson.loads(request.content)))
        return httpx.Response(201)

    asyncio.run(_client(handler).save_assistant_message("u1", "c1", "Готово."))
    assert seen == [
        ("/internal/ai/conversations/c1/messages", {"userId": "u1", "role": "assistant", "content": "Готово."})
    ]


def test_directory_lookups_parse_items() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/internal/users/u1/workspaces":
            return httpx.Response(
                200,
                json=[
                    {"id": "w1", "name": "Me", "type": "personal"},
                    {"id": "w3", "name": "Odd", "type": "archived"},
                ],
            )
        assert request.url.path == "/internal/workspaces/w1/news-tabs"
        assert request.url.params["userId"] == "u1"
        return httpx.Response(200, json=[{"id": "n1", "name": "AI"}])

    client = _client(handler)
    assert asyncio.run(client.list_workspaces("u1")) == [Workspace(id="w1", name="Me", type="personal")]
    assert asyncio.run(client.list_news_tabs("u1", "w1")) == [NewsTab(id="n1", name="AI")]
