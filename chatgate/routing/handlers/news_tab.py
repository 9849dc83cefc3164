"""News tab switch: "вкладка крипто", "switch to tech tab", "покажи все новости"."""

from __future__ import annotations

from ..intent import score_intent
from ..aliases import resolve_section_path
from ...state.commands import Match, CommandContext, NewsTabSwitchCommand
from ...config.routing import NEWS_TAB_SWITCH_CONFIDENCE, NAVIGATION_MAX_ACTION_SCORE
from ...config.patterns import (
    NEWS_ALL_PATTERN,
    NEWS_TAB_PATTERNS,
    NEWS_WORD_PATTERN,
    NEWS_SOURCES_PATTERN,
)

_QUERY_PREPOSITIONS = ("про ", "о ", "об ", "about ", "on ", "for ")


def _extract_tab_name(text: str) -> str | None:
    lowered = text.lower()
    if NEWS_ALL_PATTERN.match(lowered):
        return "все новости"

    explicit_tab, suffix_tab, news_prefixed = NEWS_TAB_PATTERNS
    match = explicit_tab.match(text)
    if match:
        return match.group("name").strip()

    match = suffix_tab.match(text)
    if match:
        name = match.group("name").strip()
        if NEWS_WORD_PATTERN.fullmatch(name.lower()):
            return "все"
        # "open tasks tab" is navigation, not a news tab
        if resolve_section_path(name) is None:
            return name

    match = news_prefixed.match(text)
    if match:
        name = match.group("name").strip()
        if NEWS_SOURCES_PATTERN.search(name.lower()):
            return None
        if name.lower().startswith(_QUERY_PREPOSITIONS):
            return None
        return name
    return None


class NewsTabSwitchHandler:
    """Matches a request to open a named news tab (or the home tab)."""

    name = "news.tab.switch"

    def match(self, text: str, context: CommandContext) -> Match | None:
        tab_name = _extract_tab_name(text.strip())
        if not tab_name:
            return None
        if score_intent(text).action > NAVIGATION_MAX_ACTION_SCORE:
            return None
        return Match(command=NewsTabSwitchCommand(tab_name=tab_name), confidence=NEWS_TAB_SWITCH_CONFIDENCE)


__all__ = ["NewsTabSwitchHandler"]
