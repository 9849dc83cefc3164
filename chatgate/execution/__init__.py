"""Execution layer: outbound clients, fast-path replies and chat orchestration."""

from .chat import ChatService, build_messages
from .backend import BackendClient
from .upstream import UpstreamClient
from .fastpath import text_frame, render_fast_path, resolve_news_tab, build_fast_path_reply

__all__ = [
    "BackendClient",
    "ChatService",
    "UpstreamClient",
    "build_fast_path_reply",
    "build_messages",
    "render_fast_path",
    "resolve_news_tab",
    "text_frame",
]
