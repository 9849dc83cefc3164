"""Aggregator of configuration modules.

This module re-exports the most used config values from smaller modules:
- limits: sliding-window admission control
- circuit: circuit breaker defaults
- routing: fast-path thresholds and handler confidences
- sections: the navigable section catalogue
- stream: directive markers and SSE framing
- upstream / backend: outbound service endpoints

Regex vocabularies live in ``patterns``, canned replies in ``chat`` and
telemetry settings in ``telemetry``; import those modules directly.
"""

from .limits import (
    RATE_LIMIT_MAX_KEYS,
    RATE_LIMIT_WINDOW_MS,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_SWEEP_INTERVAL_S,
)
from .circuit import (
    UPSTREAM_CIRCUIT_NAME,
    CIRCUIT_RESET_TIMEOUT_S,
    CIRCUIT_FAILURE_THRESHOLD,
)
from .routing import ROUTER_MAX_WORDS, ROUTER_CONFIDENCE_THRESHOLD
from .sections import SECTIONS, ALLOWED_PATHS
from .stream import (
    DIRECTIVE_TAG,
    DIRECTIVE_OPEN,
    DIRECTIVE_CLOSE,
    SSE_DONE_SENTINEL,
    STREAM_MAX_RAW_CHARS,
)
from .upstream import UPSTREAM_URL, UPSTREAM_PATH, UPSTREAM_MODEL
from .backend import BACKEND_URL, BACKEND_TIMEOUT_S

__all__ = [
    # limits
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_WINDOW_MS",
    "RATE_LIMIT_SWEEP_INTERVAL_S",
    "RATE_LIMIT_MAX_KEYS",
    # circuit
    "CIRCUIT_FAILURE_THRESHOLD",
    "CIRCUIT_RESET_TIMEOUT_S",
    "UPSTREAM_CIRCUIT_NAME",
    # routing
    "ROUTER_MAX_WORDS",
    "ROUTER_CONFIDENCE_THRESHOLD",
    "SECTIONS",
    "ALLOWED_PATHS",
    # stream
    "DIRECTIVE_TAG",
    "DIRECTIVE_OPEN",
    "DIRECTIVE_CLOSE",
    "SSE_DONE_SENTINEL",
    "STREAM_MAX_RAW_CHARS",
    # outbound
    "UPSTREAM_URL",
    "UPSTREAM_PATH",
    "UPSTREAM_MODEL",
    "BACKEND_URL",
    "BACKEND_TIMEOUT_S",
]
