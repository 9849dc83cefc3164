"""Directive block extraction.

Generated text may embed machine-actionable blocks such as:

    Done.<clawdos>{"actions": [{"k": "task.complete", "taskId": "t1"}]}</clawdos>

The body may also be wrapped in a markdown code fence. Extraction is a pure
function of the accumulated text, so scanning the same text twice yields the
same action lists.

Edge Case Handling:
    - Strips markdown code fences (```json ... ```)
    - Skips blocks whose body is not valid JSON
    - Skips blocks without a non-empty ``actions`` list
    - Drops non-object entries inside ``actions``
"""

from __future__ import annotations

import re
import logging
from typing import Any

import orjson

from ..config.stream import DIRECTIVE_OPEN, DIRECTIVE_CLOSE

logger = logging.getLogger(__name__)

DIRECTIVE_BLOCK_PATTERN = re.compile(rf"{re.escape(DIRECTIVE_OPEN)}([\s\S]*?){re.escape(DIRECTIVE_CLOSE)}")


def _strip_code_fences(text: str) -> str:
    """Strip markdown code fences from a directive body.

    Handles cases like:
    - '```json\n{"actions": []}\n```' -> '{"actions": []}'
    - '```\n{...}\n```' -> '{...}'
    - '{...}```' -> '{...}'
    """
    text = text.strip()
    # leading fence with optional language tag
    text = re.sub(r"^```[a-zA-Z]*\s*\n*", "", text)
    # trailing fence
    text = re.sub(r"\s*\n*```\s*$", "", text)
    return text.strip()


def parse_directive_block(body: str) -> list[dict[str, Any]] | None:
    """Parse one block body into its action list.

    Args:
        body: Text between the opening and closing markers.

    Returns:
        The non-empty list of action objects, or None when the block is
        malformed or carries no actions.
    """
    normalized = _strip_code_fences(body)
    if not normalized:
        return None
    try:
        payload = orjson.loads(normalized)
    except orjson.JSONDecodeError:
        logger.debug("directive block skipped: invalid JSON chars=%s", len(normalized))
        return None

    actions = payload.get("actions") if isinstance(payload, dict) else None
    if not isinstance(actions, list):
        return None
    actions = [action for action in actions if isinstance(action, dict)]
    return actions or None


def extract_directive_blocks(text: str) -> list[list[dict[str, Any]]]:
    """Return the action list of every well-formed block, in text order."""
    blocks: list[list[dict[str, Any]]] = []
    for match in DIRECTIVE_BLOCK_PATTERN.finditer(text):
        actions = parse_directive_block(match.group(1))
        if actions:
            blocks.append(actions)
    return blocks


__all__ = [
    "DIRECTIVE_BLOCK_PATTERN",
    "parse_directive_block",
    "extract_directive_blocks",
]
