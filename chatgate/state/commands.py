"""Fast-path command dataclasses.

A command is an immutable description of what the user asked for; it carries
no side effects. Each concrete command exposes a ``kind`` discriminator that
matches the wire name used in client events (``task.create``,
``news.tab.switch``...).

The router produces ``Match`` objects from handlers and keeps the winner as a
``RouteDecision``; only the command itself leaves the routing layer.
"""

from __future__ import annotations

from typing import ClassVar, Literal, Union
from dataclasses import dataclass

TasksFilter = Literal["active", "completed", "all"]
WorkspaceType = Literal["personal", "shared"]


@dataclass(frozen=True, slots=True)
class NavigationCommand:
    kind: ClassVar[str] = "navigation"

    target: str
    label: str


@dataclass(frozen=True, slots=True)
class TaskCreateCommand:
    kind: ClassVar[str] = "task.create"

    title: str


@dataclass(frozen=True, slots=True)
class WorkspaceSwitchCommand:
    kind: ClassVar[str] = "workspace.switch"

    target_type: WorkspaceType


@dataclass(frozen=True, slots=True)
class TasksFilterCommand:
    kind: ClassVar[str] = "tasks.filter"

    filter: TasksFilter


@dataclass(frozen=True, slots=True)
class NewsSourcesOpenCommand:
    kind: ClassVar[str] = "news.sources.open"


@dataclass(frozen=True, slots=True)
class NewsSearchCommand:
    kind: ClassVar[str] = "news.search"

    query: str


@dataclass(frozen=True, slots=True)
class NewsTabSwitchCommand:
    kind: ClassVar[str] = "news.tab.switch"

    tab_name: str


Command = Union[
    NavigationCommand,
    TaskCreateCommand,
    WorkspaceSwitchCommand,
    TasksFilterCommand,
    NewsSourcesOpenCommand,
    NewsSearchCommand,
    NewsTabSwitchCommand,
]


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Client-side state sent with each chat message.

    Attributes:
        workspace_id: Active workspace, if one is selected.
        workspace_name: Display name of the active workspace.
        current_page: Client route the message was sent from.
    """

    workspace_id: str | None = None
    workspace_name: str | None = None
    current_page: str = "/"


@dataclass(frozen=True, slots=True)
class Match:
    """A handler's claim on the input, confidence on a 0-100 scale."""

    command: Command
    confidence: int


@dataclass(frozen=True, slots=True)
class RouteDecision:
    """Winning match plus the name of the handler that produced it."""

    command: Command
    confidence: int
    handler: str


@dataclass(frozen=True, slots=True)
class IntentScore:
    """Relative intent shares in percent; always sums to 100."""

    navigation: int
    action: int
    query: int


__all__ = [
    "TasksFilter",
    "WorkspaceType",
    "NavigationCommand",
    "TaskCreateCommand",
    "WorkspaceSwitchCommand",
    "TasksFilterCommand",
    "NewsSourcesOpenCommand",
    "NewsSearchCommand",
    "NewsTabSwitchCommand",
    "Command",
    "CommandContext",
    "Match",
    "RouteDecision",
    "IntentScore",
]
