"""News search: "найди новости про биткоин", "search news about ai"."""

from __future__ import annotations

from ...config.patterns import NEWS_SEARCH_PATTERN
from ...config.routing import NEWS_SEARCH_CONFIDENCE
from ...state.commands import Match, CommandContext, NewsSearchCommand


class NewsSearchHandler:
    name = "news.search"

    def match(self, text: str, context: CommandContext) -> Match | None:
        match = NEWS_SEARCH_PATTERN.match(text.strip())
        if match is None:
            return None
        query = match.group("query").strip().strip("\"'«»")
        if not query:
            return None
        return Match(command=NewsSearchCommand(query=query), confidence=NEWS_SEARCH_CONFIDENCE)


__all__ = ["NewsSearchHandler"]
