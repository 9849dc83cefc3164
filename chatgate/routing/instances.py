"""Singleton instances for the routing layer.

Singleton instances are assembled here rather than next to their class
definitions.

Instances:
    intent_router: Process-wide IntentRouter with the default handler order.
"""

from .router import IntentRouter
from .handlers import default_handlers


# ============================================================================
# Intent Router
# ============================================================================

intent_router = IntentRouter(default_handlers())


__all__ = ["intent_router"]
