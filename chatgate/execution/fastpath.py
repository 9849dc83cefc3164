"""Synthetic replies for commands recognised by the intent router.

Fast-path replies use the same framing as the delegated path: one
OpenAI-style ``chat.completion.chunk`` text frame, typed event frames and the
terminal sentinel, so clients cannot tell the two apart except by latency.

Builders are coroutines returning a ``FastPathReply``; commands that touch
backend state (task creation, workspace and news-tab lookups) go through the
injected executor and directory.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

import httpx
import orjson

from ..state.chat import ChatRequest, FastPathReply
from ..state.executor import ActionExecutor
from ..state.directory import NewsTab, WorkspaceDirectory
from ..streaming.sse import encode_done, encode_event
from ..streaming.events import refresh_events, navigation_event, conversation_event
from ..config.patterns import NEWS_HOME_TAB_PATTERN
from ..config.sections import NEWS_PATH, TASKS_PATH
from ..state.commands import (
    Command,
    NavigationCommand,
    NewsSearchCommand,
    TaskCreateCommand,
    TasksFilterCommand,
    NewsTabSwitchCommand,
    NewsSourcesOpenCommand,
    WorkspaceSwitchCommand,
)
from ..config.chat import (
    NEWS_TAB_REPLY,
    NAVIGATION_REPLY,
    NEWS_TAB_ALIASES,
    NEWS_SEARCH_REPLY,
    NO_WORKSPACE_REPLY,
    NEWS_SOURCES_REPLY,
    TASKS_FILTER_REPLY,
    TASK_CREATED_REPLY,
    NEWS_HOME_TAB_NAME,
    TASKS_FILTER_LABELS,
    FAST_PATH_FRAME_OBJECT,
    WORKSPACE_SWITCH_LABELS,
    TASK_CREATE_FAILED_REPLY,
    WORKSPACE_SWITCHED_REPLY,
    FAST_PATH_FRAME_ID_PREFIX,
    WORKSPACE_NOT_FOUND_REPLY,
    WORKSPACE_NOT_FOUND_LABELS,
)

logger = logging.getLogger(__name__)

Builder = Callable[[Any, ChatRequest, ActionExecutor, WorkspaceDirectory], Awaitable[FastPathReply]]


def _match_alias(query: str, tabs: list[NewsTab]) -> NewsTab | None:
    for tab in tabs:
        aliases = NEWS_TAB_ALIASES.get(tab.name.lower(), ())
        if any(alias in query or query in alias for alias in aliases):
            return tab
    return None


async def _navigation(
    command: NavigationCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    return FastPathReply(
        kind=command.kind,
        text=NAVIGATION_REPLY.format(label=command.label),
        events=[navigation_event(command.target)],
    )


async def _task_create(
    command: TaskCreateCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    workspace_id = request.context.workspace_id
    if not workspace_id:
        return FastPathReply(kind=command.kind, text=NO_WORKSPACE_REPLY)

    action = {"k": "task.create", "title": command.title}
    report = await executor.execute([action], request.user_id, workspace_id)
    outcome = report.results[0] if report.results else {"error": "no_result"}
    if "error" in outcome:
        logger.warning("fast_path: task.create failed error=%s", outcome["error"])
        return FastPathReply(kind=command.kind, text=TASK_CREATE_FAILED_REPLY)

    task = outcome.get("task")
    title = task.get("title", command.title) if isinstance(task, dict) else command.title
    return FastPathReply(
        kind=command.kind,
        text=TASK_CREATED_REPLY.format(title=title),
        events=refresh_events(report.results),
    )


async def _workspace_switch(
    command: WorkspaceSwitchCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    try:
        workspaces = await directory.list_workspaces(request.user_id)
    except (httpx.HTTPError, orjson.JSONDecodeError) as exc:
        logger.warning("fast_path: workspace lookup failed error=%s", type(exc).__name__)
        workspaces = []

    target = next((ws for ws in workspaces if ws.type == command.target_type), None)
    if target is None:
        label = WORKSPACE_NOT_FOUND_LABELS[command.target_type]
        return FastPathReply(kind=command.kind, text=WORKSPACE_NOT_FOUND_REPLY.format(label=label))

    label = WORKSPACE_SWITCH_LABELS[command.target_type]
    return FastPathReply(
        kind=command.kind,
        text=WORKSPACE_SWITCHED_REPLY.format(label=label, name=target.name),
        events=[
            {"type": "workspace.switch", "workspaceId": target.id},
            navigation_event(TASKS_PATH),
        ],
    )


async def _tasks_filter(
    command: TasksFilterCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    label = TASKS_FILTER_LABELS.get(command.filter, command.filter)
    return FastPathReply(
        kind=command.kind,
        text=TASKS_FILTER_REPLY.format(label=label),
        events=[{"type": "tasks.filter", "value": command.filter}],
    )


async def _news_sources_open(
    command: NewsSourcesOpenCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    return FastPathReply(
        kind=command.kind,
        text=NEWS_SOURCES_REPLY,
        events=[{"type": "news.sources.open"}, navigation_event(NEWS_PATH)],
    )


async def _news_search(
    command: NewsSearchCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    return FastPathReply(
        kind=command.kind,
        text=NEWS_SEARCH_REPLY.format(query=command.query),
        events=[navigation_event(NEWS_PATH), {"type": "news.search", "query": command.query}],
    )


async def _news_tab_switch(
    command: NewsTabSwitchCommand,
    request: ChatRequest,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    tabs: list[NewsTab] = []
    workspace_id = request.context.workspace_id
    if workspace_id:
        try:
            tabs = await directory.list_news_tabs(request.user_id, workspace_id)
        except (httpx.HTTPError, orjson.JSONDecodeError) as exc:
            logger.warning("fast_path: news tab lookup failed error=%s", type(exc).__name__)

    tab_id, tab_name = resolve_news_tab(command.tab_name, tabs)
    return FastPathReply(
        kind=command.kind,
        text=NEWS_TAB_REPLY.format(name=tab_name),
        events=[
            navigation_event(NEWS_PATH),
            {"type": "news.tab.switch", "tabId": tab_id, "tabName": tab_name},
        ],
    )


_BUILDERS: dict[type, Builder] = {
    NavigationCommand: _navigation,
    TaskCreateCommand: _task_create,
    WorkspaceSwitchCommand: _workspace_switch,
    TasksFilterCommand: _tasks_filter,
    NewsSourcesOpenCommand: _news_sources_open,
    NewsSearchCommand: _news_search,
    NewsTabSwitchCommand: _news_tab_switch,
}


def resolve_news_tab(name: str, tabs: list[NewsTab]) -> tuple[str | None, str]:
    """Resolve a spoken tab name against the workspace's tabs.

    Tries an exact (case-insensitive) name, then containment either way, then
    the cross-language alias table. Home-like names ("все", "all", "home")
    always select the Home tab, which has no id. Unresolved names are echoed
    back with a null id.

    Returns:
        Tuple of (tab_id, tab_name).
    """
    query = name.lower().strip()
    match = next((tab for tab in tabs if tab.name.lower() == query), None)
    if match is None:
        match = next(
            (tab for tab in tabs if query in tab.name.lower() or tab.name.lower() in query),
            None,
        )
    if match is None:
        match = _match_alias(query, tabs)

    if NEWS_HOME_TAB_PATTERN.match(query):
        return None, NEWS_HOME_TAB_NAME
    if match is not None:
        return match.id, match.name
    return None, name


async def build_fast_path_reply(
    command: Command,
    request: ChatRequest,
    *,
    executor: ActionExecutor,
    directory: WorkspaceDirectory,
) -> FastPathReply:
    """Run the builder registered for ``command``'s type."""
    builder = _BUILDERS[type(command)]
    return await builder(command, request, executor, directory)


def text_frame(kind: str, content: str) -> str:
    """Encode assistant text as one chat-completion chunk frame."""
    event = {
        "id": f"{FAST_PATH_FRAME_ID_PREFIX}{kind.replace('.', '-')}",
        "object": FAST_PATH_FRAME_OBJECT,
        "choices": [{"index": 0, "delta": {"role": "assistant", "content": content}}],
    }
    return encode_event(event)


def render_fast_path(reply: FastPathReply, conversation_id: str | None = None) -> list[str]:
    """Frame a reply: conversation id (when known), text, events, sentinel."""
    frames: list[str] = []
    if conversation_id:
        frames.append(encode_event(conversation_event(conversation_id)))
    frames.append(text_frame(reply.kind, reply.text))
    frames.extend(encode_event(event) for event in reply.events)
    frames.append(encode_done())
    return frames


__all__ = [
    "build_fast_path_reply",
    "render_fast_path",
    "resolve_news_tab",
    "text_frame",
]
