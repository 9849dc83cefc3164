"""Periodic sweep of expired rate-limit windows.

Runs as a background task started from the server lifespan and cancelled on
shutdown.
"""

from __future__ import annotations

import asyncio
import logging

from .rate_limit import SlidingWindowRateLimiter
from ..config.limits import RATE_LIMIT_SWEEP_INTERVAL_S

logger = logging.getLogger(__name__)


# ============================================================================
# Daemon State
# ============================================================================

# Global task reference so the daemon can be stopped on shutdown
_sweeper_task: asyncio.Task | None = None


# ============================================================================
# Internal Daemon Loop
# ============================================================================

async def _sweeper_loop(limiter: SlidingWindowRateLimiter, interval_s: float) -> None:
    logger.info("rate limit sweeper started interval=%ss", interval_s)
    while True:
        await asyncio.sleep(interval_s)
        removed = limiter.sweep()
        if removed:
            logger.debug("rate limit sweeper: removed=%s tracked=%s", removed, len(limiter))


# ============================================================================
# Public API
# ============================================================================

def ensure_rate_limit_sweeper(
    limiter: SlidingWindowRateLimiter,
    *,
    interval_s: float = RATE_LIMIT_SWEEP_INTERVAL_S,
) -> None:
    """Start the sweep daemon unless it is running or disabled.

    Safe to call multiple times - will not start duplicate daemons.
    """
    global _sweeper_task  # noqa: PLW0603
    if _sweeper_task and not _sweeper_task.done():
        return
    if interval_s <= 0:
        logger.info("rate limit sweeper disabled")
        return
    _sweeper_task = asyncio.create_task(_sweeper_loop(limiter, interval_s))


async def stop_rate_limit_sweeper() -> None:
    """Cancel the sweep daemon and wait for it to exit. Idempotent."""
    global _sweeper_task  # noqa: PLW0603
    task = _sweeper_task
    _sweeper_task = None
    if task is None or task.done():
        return
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass


__all__ = ["ensure_rate_limit_sweeper", "stop_rate_limit_sweeper"]
