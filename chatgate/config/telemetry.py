"""Telemetry configuration: env vars, metric specs, span names, Sentry constants."""

import os

# ---------------------------------------------------------------------------
# Sentry
# ---------------------------------------------------------------------------
SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))

# ---------------------------------------------------------------------------
# OTLP export
# ---------------------------------------------------------------------------
OTLP_API_TOKEN: str = os.getenv("OTLP_API_TOKEN", "")
OTLP_TRACES_ENDPOINT: str = os.getenv("OTLP_TRACES_ENDPOINT", "http://127.0.0.1:4318/v1/traces")
OTLP_METRICS_ENDPOINT: str = os.getenv("OTLP_METRICS_ENDPOINT", "http://127.0.0.1:4318/v1/metrics")
OTLP_ENVIRONMENT: str = os.getenv("OTLP_ENVIRONMENT", "production")

# ---------------------------------------------------------------------------
# OTel tuning
# ---------------------------------------------------------------------------
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "chatgate")
OTEL_METRICS_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_METRICS_EXPORT_INTERVAL_MS", "15000"))

# ---------------------------------------------------------------------------
# Metric spec tuples: (name, unit, description)
# ---------------------------------------------------------------------------

# Histograms
METRIC_REQUEST_LATENCY = ("chatgate.request_latency", "s", "End-to-end chat request latency")

# Counters
METRIC_REQUESTS_TOTAL = ("chatgate.requests_total", "{request}", "Chat requests by path (fast/upstream)")
METRIC_RATE_LIMIT_REJECTIONS_TOTAL = (
    "chatgate.rate_limit_rejections_total",
    "{request}",
    "Requests rejected by the rate limiter",
)
METRIC_CIRCUIT_OPEN_TOTAL = ("chatgate.circuit_open_total", "{call}", "Calls refused by an open breaker")
METRIC_DIRECTIVE_ACTIONS_TOTAL = (
    "chatgate.directive_actions_total",
    "{action}",
    "Actions extracted from directive blocks",
)
METRIC_ERRORS_TOTAL = ("chatgate.errors_total", "{error}", "Unhandled errors")

# ---------------------------------------------------------------------------
# Span names
# ---------------------------------------------------------------------------
SPAN_REQUEST = "chatgate.request"

# ---------------------------------------------------------------------------
# Sentry constants
# ---------------------------------------------------------------------------
SENTRY_RATE_LIMIT_S: float = 10.0
SENTRY_TAG_REQUEST_ID = "request_id"
SENTRY_TAG_USER_ID = "user_id"
SENTRY_TAG_CONVERSATION_ID = "conversation_id"


__all__ = [
    # Sentry env
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    # OTLP env
    "OTLP_API_TOKEN",
    "OTLP_TRACES_ENDPOINT",
    "OTLP_METRICS_ENDPOINT",
    "OTLP_ENVIRONMENT",
    # OTel tuning
    "OTEL_SERVICE_NAME",
    "OTEL_METRICS_EXPORT_INTERVAL_MS",
    # Histograms
    "METRIC_REQUEST_LATENCY",
    # Counters
    "METRIC_REQUESTS_TOTAL",
    "METRIC_RATE_LIMIT_REJECTIONS_TOTAL",
    "METRIC_CIRCUIT_OPEN_TOTAL",
    "METRIC_DIRECTIVE_ACTIONS_TOTAL",
    "METRIC_ERRORS_TOTAL",
    # Span names
    "SPAN_REQUEST",
    # Sentry constants
    "SENTRY_RATE_LIMIT_S",
    "SENTRY_TAG_REQUEST_ID",
    "SENTRY_TAG_USER_ID",
    "SENTRY_TAG_CONVERSATION_ID",
]
