"""Application backend settings (action execution, persistence, lookups).

The backend owns tasks, news and conversations. When ``BACKEND_URL`` is empty
the gateway still serves traffic; every action is reported as failed and
persistence is skipped.
"""

import os


BACKEND_URL = (os.getenv("BACKEND_URL", "") or "").rstrip("/")
BACKEND_TOKEN = os.getenv("BACKEND_TOKEN", "")
BACKEND_TIMEOUT_S = float(os.getenv("BACKEND_TIMEOUT_S", "10"))

BACKEND_ACTIONS_PATH = "/internal/ai/actions"
BACKEND_MESSAGES_PATH = "/internal/ai/conversations/{conversation_id}/messages"
BACKEND_WORKSPACES_PATH = "/internal/users/{user_id}/workspaces"
BACKEND_NEWS_TABS_PATH = "/internal/workspaces/{workspace_id}/news-tabs"


__all__ = [
    "BACKEND_URL",
    "BACKEND_TOKEN",
    "BACKEND_TIMEOUT_S",
    "BACKEND_ACTIONS_PATH",
    "BACKEND_MESSAGES_PATH",
    "BACKEND_WORKSPACES_PATH",
    "BACKEND_NEWS_TABS_PATH",
]
