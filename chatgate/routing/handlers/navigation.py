"""Generic section navigation: "задачи", "открой настройки", "/news"."""

from __future__ import annotations

from ..intent import score_intent
from ...config.sections import ALLOWED_PATHS
from ..aliases import section_label, resolve_section_path
from ...state.commands import Match, CommandContext, NavigationCommand
from ...config.routing import (
    NAVIGATION_STRONG_SCORE,
    NAVIGATION_MAX_ACTION_SCORE,
    NAVIGATION_WEAK_CONFIDENCE,
    NAVIGATION_STRONG_CONFIDENCE,
)


class NavigationHandler:
    """Resolves the input to a whitelisted section path.

    Confidence is higher when the scorer sees navigation intent ("открой
    задачи") than for a bare mention inside a longer phrase.
    """

    name = "navigation"

    def match(self, text: str, context: CommandContext) -> Match | None:
        target = resolve_section_path(text)
        if target is None or target not in ALLOWED_PATHS:
            return None

        intent = score_intent(text)
        if intent.action > NAVIGATION_MAX_ACTION_SCORE:
            return None

        confidence = NAVIGATION_WEAK_CONFIDENCE
        if intent.navigation > NAVIGATION_STRONG_SCORE:
            confidence = NAVIGATION_STRONG_CONFIDENCE
        return Match(
            command=NavigationCommand(target=target, label=section_label(target)),
            confidence=confidence,
        )


__all__ = ["NavigationHandler"]
