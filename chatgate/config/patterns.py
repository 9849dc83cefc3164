"""Regex patterns and vocabularies for fast-path command recognition.

Classification patterns run against lower-cased, trimmed input. Patterns that
capture user text (task titles, search queries, tab names) are case-insensitive
and run on the trimmed original so the capture keeps its casing. Russian and
English forms are matched side by side.
"""

from __future__ import annotations

import re

# ============================================================================
# INTENT VOCABULARIES
# ============================================================================

NAV_VERBS: frozenset[str] = frozenset(
    {"открой", "перейди", "зайди", "открыть", "open", "go", "navigate", "goto"}
)
ACTION_VERBS: frozenset[str] = frozenset(
    {
        "создай", "добавь", "удали", "выполни", "заверши",
        "create", "add", "delete", "remove", "complete", "finish",
    }
)
QUERY_WORDS: frozenset[str] = frozenset(
    {
        "покажи", "найди", "где", "какие", "сколько",
        "show", "find", "search", "filter", "list", "what", "how", "which",
    }
)

# Base score and per-word bonus for each intent (navigation, action, query)
INTENT_BASE_SCORES: tuple[int, int, int] = (20, 10, 30)
NAV_WORD_BONUS = 60
ACTION_WORD_BONUS = 80
QUERY_WORD_BONUS = 50
SINGLE_WORD_NAV_BONUS = 30
QUESTION_MARK_QUERY_BONUS = 40

# Share reported when the input has no words at all
EMPTY_INTENT_SHARES: tuple[int, int, int] = (33, 33, 34)

# ============================================================================
# ALIAS RESOLUTION
# ============================================================================

# Leading verbs that turn a phrase into an action; never a section lookup
ALIAS_ACTION_PREFIX_PATTERN = re.compile(
    r"^(создай|добавь|удали|выполни|заверши|create|add|delete|remove|complete|finish)\s+"
)
# Leading navigation verbs stripped before lookup ("открой задачи")
ALIAS_OPEN_PREFIX_PATTERN = re.compile(
    r"^(открой|перейди|зайди|открыть|open|go to|goto|navigate)\s+"
)
ALIAS_PUNCTUATION_PATTERN = re.compile(r"[—–\-_:;,!.?()\[\]{}]")
WHITESPACE_PATTERN = re.compile(r"\s+")

# ============================================================================
# TASK CREATION
# ============================================================================

TASK_CREATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "создай задачу: купить молоко", "добавь новую задачу купить хлеб"
    re.compile(
        r"^(создай|добавь)\s+(нов[уюый][юе]?\s+)?(задач[уиае]?|таск[аиу]?)(\s*[:\-—]\s*|\s+)(?P<title>.+)$",
        re.IGNORECASE,
    ),
    # "create task buy milk", "add a new task: call mom"
    re.compile(r"^(create|add)\s+(a\s+)?(new\s+)?task(\s*[:\-—]\s*|\s+)(?P<title>.+)$", re.IGNORECASE),
)
TITLE_QUOTES_PATTERN = re.compile(r"^[\"'«»“”]+|[\"'«»“”]+$")

# ============================================================================
# WORKSPACE SWITCH
# ============================================================================

TASK_WORD_PATTERN = re.compile(r"задач|таск|tasks?")
PERSONAL_WORKSPACE_PATTERN = re.compile(r"личн|персональн|мои\s|my\s|personal")
SHARED_WORKSPACE_PATTERN = re.compile(r"общ|шаред|командн|shared|team")

# ============================================================================
# TASK FILTER
# ============================================================================

FILTER_COMPLETED_PATTERN = re.compile(r"выполнен|сделан|completed")
FILTER_ACTIVE_PATTERN = re.compile(r"активн|текущ|active")
FILTER_ALL_PATTERN = re.compile(r"(^|\s)(все|all)(\s|$)")

# ============================================================================
# NEWS
# ============================================================================

NEWS_WORD_PATTERN = re.compile(r"новост|news")
# "открой источники новостей", "news sources"
NEWS_SOURCES_PATTERN = re.compile(r"источник|sources?")
# "найди новости про биткоин", "search news about ai"
NEWS_SEARCH_PATTERN = re.compile(
    r"^(найди|поищи|ищи|search|find)\s+(новост[иь]?|news)\s+((про|об|о|about|on|for)\s+)?(?P<query>.+)$",
    re.IGNORECASE,
)
# "вкладка крипто", "открой вкладку ai", "switch to tech tab", "новости крипто"
NEWS_TAB_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^((открой|переключи\s+на|перейди\s+на|switch\s+to|open)\s+)?(вкладк[уа]|tab)\s+(?P<name>.+)$",
        re.IGNORECASE,
    ),
    re.compile(r"^((switch\s+to|open)\s+)?(?P<name>.+?)\s+tab$", re.IGNORECASE),
    re.compile(r"^((открой|покажи|show|open)\s+)?(новост[иь]|news)\s+(?P<name>.+)$", re.IGNORECASE),
)
# "покажи все новости", "show all news"
NEWS_ALL_PATTERN = re.compile(r"^((открой|покажи|show|open)\s+)?(все\s+новости|all\s+news)$")
NEWS_HOME_TAB_PATTERN = re.compile(r"^(все|all|home|домой|главн\w*|all news|все новости)$")


__all__ = [
    "NAV_VERBS",
    "ACTION_VERBS",
    "QUERY_WORDS",
    "INTENT_BASE_SCORES",
    "NAV_WORD_BONUS",
    "ACTION_WORD_BONUS",
    "QUERY_WORD_BONUS",
    "SINGLE_WORD_NAV_BONUS",
    "QUESTION_MARK_QUERY_BONUS",
    "EMPTY_INTENT_SHARES",
    "ALIAS_ACTION_PREFIX_PATTERN",
    "ALIAS_OPEN_PREFIX_PATTERN",
    "ALIAS_PUNCTUATION_PATTERN",
    "WHITESPACE_PATTERN",
    "TASK_CREATE_PATTERNS",
    "TITLE_QUOTES_PATTERN",
    "TASK_WORD_PATTERN",
    "PERSONAL_WORKSPACE_PATTERN",
    "SHARED_WORKSPACE_PATTERN",
    "FILTER_COMPLETED_PATTERN",
    "FILTER_ACTIVE_PATTERN",
    "FILTER_ALL_PATTERN",
    "NEWS_WORD_PATTERN",
    "NEWS_SOURCES_PATTERN",
    "NEWS_SEARCH_PATTERN",
    "NEWS_TAB_PATTERNS",
    "NEWS_ALL_PATTERN",
    "NEWS_HOME_TAB_PATTERN",
]
