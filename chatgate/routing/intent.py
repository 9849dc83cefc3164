"""Heuristic intent scorer.

Produces the relative share of navigation, action and query intent in a short
input. Handlers consult it to stand down when another intent dominates, e.g.
a filter word next to a strong action verb is a task mutation, not a filter.
"""

from __future__ import annotations

from ..state.commands import IntentScore
from ..config.patterns import (
    NAV_VERBS,
    QUERY_WORDS,
    ACTION_VERBS,
    NAV_WORD_BONUS,
    QUERY_WORD_BONUS,
    ACTION_WORD_BONUS,
    INTENT_BASE_SCORES,
    EMPTY_INTENT_SHARES,
    SINGLE_WORD_NAV_BONUS,
    QUESTION_MARK_QUERY_BONUS,
)


def _to_percentages(weights: tuple[int, int, int]) -> tuple[int, int, int]:
    """Largest-remainder rounding so the shares always sum to 100."""
    total = sum(weights)
    exact = [weight * 100 / total for weight in weights]
    floors = [int(value) for value in exact]
    shortfall = 100 - sum(floors)
    # earlier positions win equal remainders, keeping the result deterministic
    order = sorted(range(len(exact)), key=lambda idx: (-(exact[idx] - floors[idx]), idx))
    for idx in order[:shortfall]:
        floors[idx] += 1
    return floors[0], floors[1], floors[2]


def score_intent(text: str) -> IntentScore:
    """Score how navigational, action-like and query-like the input is.

    Args:
        text: Raw user input.

    Returns:
        IntentScore with integer percentages summing to 100.
    """
    lowered = (text or "").lower().strip()
    if not lowered:
        return IntentScore(*EMPTY_INTENT_SHARES)

    words = lowered.split()
    nav, act, qry = INTENT_BASE_SCORES

    for word in words:
        if word in NAV_VERBS:
            nav += NAV_WORD_BONUS
        if word in ACTION_VERBS:
            act += ACTION_WORD_BONUS
        if word in QUERY_WORDS:
            qry += QUERY_WORD_BONUS

    # bare nouns ("задачи") read as navigation
    if len(words) == 1 and words[0] not in ACTION_VERBS and words[0] not in QUERY_WORDS:
        nav += SINGLE_WORD_NAV_BONUS

    if lowered.endswith("?"):
        qry += QUESTION_MARK_QUERY_BONUS

    navigation, action, query = _to_percentages((nav, act, qry))
    return IntentScore(navigation=navigation, action=action, query=query)


__all__ = ["score_intent"]
