"""Background persistence of the final assistant text.

Saves run as tracked tasks after the stream closes so a slow or failing
store never delays or breaks the client response. The server drains pending
saves on shutdown.
"""

from __future__ import annotations

import asyncio
import logging

from ..state.persistence import ConversationStore

logger = logging.getLogger(__name__)

# Strong references so in-flight saves are not garbage collected
_pending_saves: set[asyncio.Task[None]] = set()


async def _save(store: ConversationStore, user_id: str, conversation_id: str, text: str) -> None:
    try:
        await store.save_assistant_message(user_id, conversation_id, text)
    except Exception:  # noqa: BLE001
        logger.warning(
            "persist: failed conversation_id=%s chars=%s",
            conversation_id,
            len(text),
            exc_info=True,
        )
    else:
        logger.debug("persist: saved conversation_id=%s chars=%s", conversation_id, len(text))


def schedule_persist(
    store: ConversationStore | None,
    *,
    user_id: str,
    conversation_id: str | None,
    text: str,
) -> asyncio.Task[None] | None:
    """Schedule a best-effort save of the visible assistant text.

    Nothing is scheduled without a store, without a conversation id, or when
    the text is empty after trimming.

    Returns:
        The scheduled task, or None when nothing was scheduled.
    """
    content = text.strip()
    if store is None or not conversation_id or not content:
        return None
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.warning("persist: no running loop conversation_id=%s", conversation_id)
        return None
    task = loop.create_task(_save(store, user_id, conversation_id, content))
    _pending_saves.add(task)
    task.add_done_callback(_pending_saves.discard)
    return task


async def wait_for_pending_saves(timeout: float | None = None) -> None:
    """Wait for in-flight saves (used on shutdown)."""
    if not _pending_saves:
        return
    pending = list(_pending_saves)
    logger.info("persist: draining pending=%s", len(pending))
    _, still_running = await asyncio.wait(pending, timeout=timeout)
    if still_running:
        logger.warning("persist: %s saves still running after %.1fs", len(still_running), timeout or 0.0)


__all__ = ["schedule_persist", "wait_for_pending_saves"]
