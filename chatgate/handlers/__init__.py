"""HTTP-facing glue: admission, request parsing and error mapping."""

from .parser import parse_chat_request
from .errors import rate_limit_headers, register_error_handlers
from .admission import client_key, admit_request

__all__ = [
    "admit_request",
    "client_key",
    "parse_chat_request",
    "rate_limit_headers",
    "register_error_handlers",
]
