"""Logging context helpers for consistent structured fields."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")
_USER_ID: ContextVar[str] = ContextVar("user_id", default="-")
_CONVERSATION_ID: ContextVar[str] = ContextVar("conversation_id", default="-")


def set_log_context(
    *,
    request_id: str | None = None,
    user_id: str | None = None,
    conversation_id: str | None = None,
) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if request_id is not None:
        tokens.append((_REQUEST_ID, _REQUEST_ID.set(request_id)))
    if user_id is not None:
        tokens.append((_USER_ID, _USER_ID.set(user_id)))
    if conversation_id is not None:
        tokens.append((_CONVERSATION_ID, _CONVERSATION_ID.set(conversation_id)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(
    *,
    request_id: str | None = None,
    user_id: str | None = None,
    conversation_id: str | None = None,
) -> Iterator[None]:
    """Context manager for applying log fields within a block."""
    tokens = set_log_context(
        request_id=request_id,
        user_id=user_id,
        conversation_id=conversation_id,
    )
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_log_context() -> dict[str, str]:
    """Return the bound context fields (``"-"`` when unset)."""
    return {
        "request_id": _REQUEST_ID.get(),
        "user_id": _USER_ID.get(),
        "conversation_id": _CONVERSATION_ID.get(),
    }


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.request_id = _REQUEST_ID.get()
        record.user_id = _USER_ID.get()
        record.conversation_id = _CONVERSATION_ID.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


__all__ = [
    "current_log_context",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
