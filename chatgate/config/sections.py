"""Application section catalogue used for navigation resolution.

Loaded once at import and never mutated. Order matters: fuzzy matching keeps
the first-scanned section on equal edit distance.
"""

from __future__ import annotations

from ..state.sections import Section

SECTIONS: tuple[Section, ...] = (
    Section(
        id="today",
        title="Dashboard",
        path="/today",
        aliases=("today", "дашборд", "дешборд", "dashboard", "сегодня", "главная", "home"),
        sidebar=True,
    ),
    Section(
        id="news",
        title="News",
        path="/news",
        aliases=("news", "новости", "новост", "лента"),
        sidebar=True,
    ),
    Section(
        id="tasks",
        title="Tasks",
        path="/tasks",
        aliases=("tasks", "task", "таски", "таск", "задачи", "задача", "todo", "todos", "дела"),
        sidebar=True,
    ),
    Section(
        id="settings",
        title="Settings",
        path="/settings",
        aliases=("settings", "setting", "настройки", "настройка", "параметры", "сеттинги"),
    ),
    Section(
        id="settings.telegram",
        title="Telegram settings",
        path="/settings/telegram",
        aliases=("telegram", "телеграм", "tg", "тг", "настройки телеграма", "telegram settings"),
    ),
    Section(
        id="settings.password",
        title="Password settings",
        path="/settings/password",
        aliases=("password", "пароль", "пароли", "смена пароля", "настройки пароля"),
    ),
)

# Paths the fast path is allowed to navigate to
ALLOWED_PATHS: frozenset[str] = frozenset(section.path for section in SECTIONS)

TASKS_PATH = "/tasks"
NEWS_PATH = "/news"


__all__ = [
    "SECTIONS",
    "ALLOWED_PATHS",
    "TASKS_PATH",
    "NEWS_PATH",
]
