"""HTTP surface settings: routes, identity headers and request limits."""

import os


CHAT_ROUTE = "/api/ai/chat"
HEALTH_ROUTE = "/healthz"

# Identity is supplied by the authenticating proxy in front of the gateway
USER_ID_HEADER = os.getenv("USER_ID_HEADER", "X-User-Id")
REQUEST_ID_HEADER = "X-Request-Id"
FORWARDED_FOR_HEADER = "X-Forwarded-For"

CHAT_MAX_MESSAGE_CHARS = int(os.getenv("CHAT_MAX_MESSAGE_CHARS", "8000"))


__all__ = [
    "CHAT_ROUTE",
    "HEALTH_ROUTE",
    "USER_ID_HEADER",
    "REQUEST_ID_HEADER",
    "FORWARDED_FOR_HEADER",
    "CHAT_MAX_MESSAGE_CHARS",
]
