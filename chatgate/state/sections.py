"""Static application section catalogue entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Section:
    """One navigable section of the application.

    Attributes:
        id: Stable identifier (``"tasks"``, ``"settings.telegram"``).
        title: Human-readable label shown in replies and the sidebar.
        path: Client route, always starting with ``/``.
        aliases: Lower-case alternative names in every supported locale.
        sidebar: Whether UI consumers list the section in the sidebar.
    """

    id: str
    title: str
    path: str
    aliases: tuple[str, ...] = ()
    sidebar: bool = False


__all__ = ["Section"]
