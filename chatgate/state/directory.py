"""Workspace and news-tab lookup contract used by fast-path replies."""

from __future__ import annotations

from typing import Protocol
from dataclasses import dataclass

from .commands import WorkspaceType


@dataclass(frozen=True, slots=True)
class Workspace:
    id: str
    name: str
    type: WorkspaceType


@dataclass(frozen=True, slots=True)
class NewsTab:
    id: str
    name: str


class WorkspaceDirectory(Protocol):
    """Read-only lookups against the application backend."""

    async def list_workspaces(self, user_id: str) -> list[Workspace]: ...

    async def list_news_tabs(self, user_id: str, workspace_id: str) -> list[NewsTab]: ...


__all__ = ["Workspace", "NewsTab", "WorkspaceDirectory"]
