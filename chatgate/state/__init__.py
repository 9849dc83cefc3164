"""Centralized state dataclasses and collaborator contracts.

This module re-exports all state definitions from their respective modules,
providing a single import point for state types.
"""

from .sections import Section
from .chat import ChatRequest, FastPathReply
from .stream import StreamBuffer
from .persistence import ConversationStore
from .limits import RateWindow, WindowStore, RateLimitResult
from .directory import NewsTab, Workspace, WorkspaceDirectory
from .circuit import CircuitPhase, CircuitState, CircuitStore, CircuitStatus
from .executor import ActionResult, ActionExecutor, ExecutionReport
from .commands import (
    Match,
    Command,
    IntentScore,
    TasksFilter,
    RouteDecision,
    WorkspaceType,
    CommandContext,
    NavigationCommand,
    NewsSearchCommand,
    TaskCreateCommand,
    TasksFilterCommand,
    NewsTabSwitchCommand,
    NewsSourcesOpenCommand,
    WorkspaceSwitchCommand,
)

__all__ = [
    "ActionExecutor",
    "ChatRequest",
    "ActionResult",
    "CircuitPhase",
    "CircuitState",
    "CircuitStatus",
    "CircuitStore",
    "Command",
    "CommandContext",
    "ConversationStore",
    "ExecutionReport",
    "FastPathReply",
    "IntentScore",
    "Match",
    "NavigationCommand",
    "NewsSearchCommand",
    "NewsSourcesOpenCommand",
    "NewsTab",
    "NewsTabSwitchCommand",
    "RateLimitResult",
    "RateWindow",
    "RouteDecision",
    "Section",
    "StreamBuffer",
    "TaskCreateCommand",
    "TasksFilter",
    "TasksFilterCommand",
    "Workspace",
    "WindowStore",
    "WorkspaceDirectory",
    "WorkspaceSwitchCommand",
    "WorkspaceType",
]
