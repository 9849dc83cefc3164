"""Intent router: free text to a fast-path command, or a decline.

The router never raises for unrecognised input; declining simply means the
message goes to the generative service.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .handlers import CommandHandler
from ..state.commands import Command, RouteDecision, CommandContext
from ..config.routing import ROUTER_MAX_WORDS, ROUTER_CONFIDENCE_THRESHOLD

logger = logging.getLogger(__name__)


class IntentRouter:
    """Ordered registry of command handlers.

    Every handler sees every input. The highest confidence at or above the
    threshold wins; on equal confidence the earlier-registered handler wins,
    so handlers must be registered most-specific first.

    Attributes:
        handlers: Registered handlers in tie-break order.
        max_words: Inputs with more words are treated as conversation.
        threshold: Minimum confidence (0-100) for a match to be selected.
    """

    def __init__(
        self,
        handlers: Sequence[CommandHandler],
        *,
        max_words: int = ROUTER_MAX_WORDS,
        threshold: int = ROUTER_CONFIDENCE_THRESHOLD,
    ) -> None:
        self.handlers: tuple[CommandHandler, ...] = tuple(handlers)
        self.max_words = max_words
        self.threshold = threshold

    def decide(self, text: str, context: CommandContext) -> RouteDecision | None:
        """Pick the winning handler for the input.

        Args:
            text: Raw user message.
            context: Client state sent with the message.

        Returns:
            The winning decision, or None when the message should be delegated.
        """
        stripped = (text or "").strip()
        if not stripped:
            return None

        word_count = len(stripped.split())
        if word_count > self.max_words:
            logger.debug("router: decline reason=too_long words=%s", word_count)
            return None

        best: RouteDecision | None = None
        for handler in self.handlers:
            match = handler.match(stripped, context)
            if match is None or match.confidence < self.threshold:
                continue
            if best is None or match.confidence > best.confidence:
                best = RouteDecision(command=match.command, confidence=match.confidence, handler=handler.name)

        if best is None:
            logger.debug("router: decline reason=no_match words=%s", word_count)
        else:
            logger.debug("router: match handler=%s confidence=%s", best.handler, best.confidence)
        return best

    def route(self, text: str, context: CommandContext) -> Command | None:
        """Return the command for the input, or None to delegate."""
        decision = self.decide(text, context)
        return decision.command if decision is not None else None


__all__ = ["IntentRouter"]
