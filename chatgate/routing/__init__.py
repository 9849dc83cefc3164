"""Fast-path routing: alias resolution, intent scoring and command handlers."""

from .router import IntentRouter
from .intent import score_intent
from .aliases import section_label, sidebar_sections, resolve_section_path

__all__ = [
    "IntentRouter",
    "resolve_section_path",
    "score_intent",
    "section_label",
    "sidebar_sections",
]
