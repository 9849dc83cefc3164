"""Alias resolution: free text to a known application section.

Resolution is deterministic and side-effect free. Stages run in order and the
first hit wins:

1. Input starting with an action verb ("создай", "add", ...) is a mutation
   request, never navigation, so it resolves to nothing.
2. Normalization lower-cases, strips a leading "open/go to" verb and turns
   punctuation into spaces.
3. Input starting with ``/`` must equal a section path exactly.
4. Exact match against a section's title, id or any alias.
5. Whole-word match of an alias (4+ characters) anywhere in the text.
6. For inputs up to 20 characters, the globally closest title or alias by
   edit distance, accepted only within 20% of the alias length (at least 1).
"""

from __future__ import annotations

import re
import math
from functools import lru_cache

from rapidfuzz.distance import Levenshtein

from ..state.sections import Section
from ..config.sections import SECTIONS
from ..config.patterns import (
    WHITESPACE_PATTERN,
    ALIAS_OPEN_PREFIX_PATTERN,
    ALIAS_PUNCTUATION_PATTERN,
    ALIAS_ACTION_PREFIX_PATTERN,
)
from ..config.routing import (
    FUZZY_DISTANCE_RATIO,
    FUZZY_MAX_INPUT_CHARS,
    WORD_MATCH_MIN_ALIAS_CHARS,
)


def _normalize(text: str) -> str:
    lowered = text.lower().strip()
    lowered = ALIAS_OPEN_PREFIX_PATTERN.sub("", lowered, count=1)
    lowered = ALIAS_PUNCTUATION_PATTERN.sub(" ", lowered)
    return WHITESPACE_PATTERN.sub(" ", lowered).strip()


@lru_cache(maxsize=None)
def _normalized_aliases(section: Section) -> tuple[str, ...]:
    return tuple(_normalize(alias) for alias in section.aliases)


@lru_cache(maxsize=None)
def _word_pattern(alias: str) -> re.Pattern[str]:
    return re.compile(rf"(^|\s){re.escape(alias)}($|\s)")


def _exact_match(text: str) -> str | None:
    for section in SECTIONS:
        if text in (_normalize(section.title), _normalize(section.id)):
            return section.path
        if text in _normalized_aliases(section):
            return section.path
    return None


def _word_match(text: str) -> str | None:
    for section in SECTIONS:
        for alias in _normalized_aliases(section):
            if len(alias) >= WORD_MATCH_MIN_ALIAS_CHARS and _word_pattern(alias).search(text):
                return section.path
    return None


def _fuzzy_match(text: str) -> str | None:
    best_path: str | None = None
    best_distance = math.inf
    for section in SECTIONS:
        candidates = (_normalize(section.title), *_normalized_aliases(section))
        for candidate in candidates:
            if not candidate:
                continue
            threshold = max(1, math.floor(len(candidate) * FUZZY_DISTANCE_RATIO))
            distance = Levenshtein.distance(text, candidate, score_cutoff=threshold)
            # strict comparison keeps the first-scanned section on ties
            if distance <= threshold and distance < best_distance:
                best_path = section.path
                best_distance = distance
    return best_path


def resolve_section_path(text: str) -> str | None:
    """Resolve user input to a section path, or None when nothing fits.

    Args:
        text: Raw user input.

    Returns:
        The matched section's path (e.g. ``"/tasks"``) or None.
    """
    trimmed = (text or "").strip()
    if ALIAS_ACTION_PREFIX_PATTERN.match(trimmed.lower()):
        return None

    normalized = _normalize(trimmed)
    if not normalized:
        return None

    if normalized.startswith("/"):
        for section in SECTIONS:
            if section.path == normalized:
                return section.path
        return None

    path = _exact_match(normalized) or _word_match(normalized)
    if path is not None:
        return path

    if len(normalized) <= FUZZY_MAX_INPUT_CHARS:
        return _fuzzy_match(normalized)
    return None


def section_label(path: str) -> str:
    """Return the section title for a path, or the path itself if unknown."""
    for section in SECTIONS:
        if section.path == path:
            return section.title
    return path


def sidebar_sections() -> tuple[Section, ...]:
    """Sections flagged for the sidebar, in catalogue order."""
    return tuple(section for section in SECTIONS if section.sidebar)


__all__ = [
    "resolve_section_path",
    "section_label",
    "sidebar_sections",
]
