"""Fast-path intent routing thresholds.

The router never short-circuits long, conversational input; those always go
to the generative service. Handler confidences are on a 0-100 scale and the
router discards anything under the floor.
"""

import os


ROUTER_MAX_WORDS = int(os.getenv("ROUTER_MAX_WORDS", "6"))
ROUTER_CONFIDENCE_THRESHOLD = int(os.getenv("ROUTER_CONFIDENCE_THRESHOLD", "70"))

# Intent-score ceilings (action %) above which a handler stands down
FILTER_MAX_ACTION_SCORE = 40
NAVIGATION_MAX_ACTION_SCORE = 50
WORKSPACE_MAX_ACTION_SCORE = 50

# Navigation confidence when the scorer does / does not favor navigation
NAVIGATION_STRONG_CONFIDENCE = 85
NAVIGATION_WEAK_CONFIDENCE = 70
NAVIGATION_STRONG_SCORE = 50

# Fixed handler confidences
TASK_CREATE_CONFIDENCE = 95
WORKSPACE_SWITCH_CONFIDENCE = 90
NEWS_TAB_SWITCH_CONFIDENCE = 90
NEWS_SOURCES_OPEN_CONFIDENCE = 90
NEWS_SEARCH_CONFIDENCE = 90
TASKS_FILTER_CONFIDENCE = 80

# Fuzzy alias matching
FUZZY_MAX_INPUT_CHARS = 20
FUZZY_DISTANCE_RATIO = 0.2
WORD_MATCH_MIN_ALIAS_CHARS = 4


__all__ = [
    "ROUTER_MAX_WORDS",
    "ROUTER_CONFIDENCE_THRESHOLD",
    "FILTER_MAX_ACTION_SCORE",
    "NAVIGATION_MAX_ACTION_SCORE",
    "WORKSPACE_MAX_ACTION_SCORE",
    "NAVIGATION_STRONG_CONFIDENCE",
    "NAVIGATION_WEAK_CONFIDENCE",
    "NAVIGATION_STRONG_SCORE",
    "TASK_CREATE_CONFIDENCE",
    "WORKSPACE_SWITCH_CONFIDENCE",
    "NEWS_TAB_SWITCH_CONFIDENCE",
    "NEWS_SOURCES_OPEN_CONFIDENCE",
    "NEWS_SEARCH_CONFIDENCE",
    "TASKS_FILTER_CONFIDENCE",
    "FUZZY_MAX_INPUT_CHARS",
    "FUZZY_DISTANCE_RATIO",
    "WORD_MATCH_MIN_ALIAS_CHARS",
]
