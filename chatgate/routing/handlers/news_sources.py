"""News sources panel: "источники новостей", "open news sources"."""

from __future__ import annotations

from ..intent import score_intent
from ...state.commands import Match, CommandContext, NewsSourcesOpenCommand
from ...config.patterns import NEWS_WORD_PATTERN, NEWS_SOURCES_PATTERN
from ...config.routing import NAVIGATION_MAX_ACTION_SCORE, NEWS_SOURCES_OPEN_CONFIDENCE


class NewsSourcesOpenHandler:
    """Matches a news word next to a sources word.

    "добавь источник новостей" carries an action verb and is left to the
    generative path.
    """

    name = "news.sources.open"

    def match(self, text: str, context: CommandContext) -> Match | None:
        lowered = text.lower().strip()
        if not (NEWS_WORD_PATTERN.search(lowered) and NEWS_SOURCES_PATTERN.search(lowered)):
            return None
        if score_intent(text).action > NAVIGATION_MAX_ACTION_SCORE:
            return None
        return Match(command=NewsSourcesOpenCommand(), confidence=NEWS_SOURCES_OPEN_CONFIDENCE)


__all__ = ["NewsSourcesOpenHandler"]
