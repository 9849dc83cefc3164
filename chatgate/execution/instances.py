"""Singleton instances for outbound clients and chat orchestration.

Instances:
    upstream_client: Streaming client for the generative service.
    backend_client: Action executor, conversation store and directory.
    chat_service: Process-wide ChatService wired to the shared breaker.
"""

from .chat import ChatService
from .backend import BackendClient
from .upstream import UpstreamClient
from ..limits.instances import circuit_breaker
from ..routing.instances import intent_router


# ============================================================================
# Outbound Clients
# ============================================================================

upstream_client = UpstreamClient()
backend_client = BackendClient()


# ============================================================================
# Chat Service
# ============================================================================

chat_service = ChatService(
    router=intent_router,
    breaker=circuit_breaker,
    upstream=upstream_client,
    executor=backend_client,
    directory=backend_client,
    store=backend_client,
)


__all__ = [
    "upstream_client",
    "backend_client",
    "chat_service",
]
