"""Chat behavior settings: canned fast-path replies and lookup tables.

Replies are Russian, matching the product locale.
"""

from __future__ import annotations

# ============================================================================
# FAST-PATH TEXT FRAMES
# ============================================================================

# OpenAI-style chunk envelope used for locally built text frames
FAST_PATH_FRAME_ID_PREFIX = "clawdos-"
FAST_PATH_FRAME_OBJECT = "chat.completion.chunk"

NAVIGATION_REPLY = "Открыл раздел: {label}."
TASK_CREATED_REPLY = "Создал задачу: {title}."
TASK_CREATE_FAILED_REPLY = "Не смог создать задачу."
NO_WORKSPACE_REPLY = "Не выбран workspace."
TASKS_FILTER_REPLY = "Показываю {label} задачи."
WORKSPACE_SWITCHED_REPLY = "Переключил на {label} задачи ({name})."
WORKSPACE_NOT_FOUND_REPLY = "Не нашёл {label} workspace."
NEWS_SOURCES_REPLY = "Открываю панель источников новостей."
NEWS_SEARCH_REPLY = 'Ищу новости: "{query}".'
NEWS_TAB_REPLY = "Переключаю на вкладку: {name}."

TASKS_FILTER_LABELS: dict[str, str] = {
    "active": "активные",
    "completed": "выполненные",
    "all": "все",
}
WORKSPACE_SWITCH_LABELS: dict[str, str] = {
    "personal": "личные",
    "shared": "общие",
}
WORKSPACE_NOT_FOUND_LABELS: dict[str, str] = {
    "personal": "личный",
    "shared": "общий",
}

# ============================================================================
# NEWS TABS
# ============================================================================

NEWS_HOME_TAB_NAME = "Home"

# Cross-language aliases keyed by lower-cased tab name
NEWS_TAB_ALIASES: dict[str, tuple[str, ...]] = {
    "ai": ("ии", "аи", "искусственн", "нейросет", "machine", "ml"),
    "crypto": ("крипт", "биткоин", "bitcoin", "btc", "блокчейн", "blockchain"),
    "economics": ("экономик", "экономич", "финанс", "бизнес", "economy", "finance", "business"),
    "russian": ("русск", "россий", "россия", "рф", "russia", "новости россии"),
    "tech": ("техно", "технолог", "technology", "software", "програм"),
}

# ============================================================================
# DELEGATED PATH
# ============================================================================

SYSTEM_PROMPT = (
    "You are the assistant of a personal productivity app with tasks, news and "
    "settings sections. Answer briefly in the user's language. When the user asks "
    "you to change something, append one directive block of the form "
    '<clawdos>{"actions":[...]}</clawdos> after your reply. Supported actions use the '
    '"k" field: navigate{to}, task.create{title}, task.complete{taskId}, '
    "task.reopen{taskId}, task.delete{taskId}, task.priority{taskId,priority}, "
    "news.source.add{url}, news.source.remove{sourceId}, news.tab.create{name}."
)
SYSTEM_PROMPT_CONTEXT_TEMPLATE = "Current page: {page}. Current workspace: {workspace}."


__all__ = [
    "FAST_PATH_FRAME_ID_PREFIX",
    "FAST_PATH_FRAME_OBJECT",
    "NAVIGATION_REPLY",
    "TASK_CREATED_REPLY",
    "TASK_CREATE_FAILED_REPLY",
    "NO_WORKSPACE_REPLY",
    "TASKS_FILTER_REPLY",
    "WORKSPACE_SWITCHED_REPLY",
    "WORKSPACE_NOT_FOUND_REPLY",
    "NEWS_SOURCES_REPLY",
    "NEWS_SEARCH_REPLY",
    "NEWS_TAB_REPLY",
    "TASKS_FILTER_LABELS",
    "WORKSPACE_SWITCH_LABELS",
    "WORKSPACE_NOT_FOUND_LABELS",
    "NEWS_HOME_TAB_NAME",
    "NEWS_TAB_ALIASES",
    "SYSTEM_PROMPT",
    "SYSTEM_PROMPT_CONTEXT_TEMPLATE",
]
