"""MetricInstruments registry with typed accessors for all OTel instruments."""

from __future__ import annotations

import logging

from opentelemetry import metrics

from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    METRIC_ERRORS_TOTAL,
    METRIC_REQUESTS_TOTAL,
    METRIC_REQUEST_LATENCY,
    METRIC_CIRCUIT_OPEN_TOTAL,
    METRIC_DIRECTIVE_ACTIONS_TOTAL,
    METRIC_RATE_LIMIT_REJECTIONS_TOTAL,
)

logger = logging.getLogger(__name__)


def _histogram(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Histogram:
    name, unit, desc = spec
    return meter.create_histogram(name, unit=unit, description=desc)


def _counter(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Counter:
    name, unit, desc = spec
    return meter.create_counter(name, unit=unit, description=desc)


class MetricInstruments:
    """Holds all OTel metric instruments created from config specs."""

    __slots__ = (
        "request_latency",
        "requests_total",
        "rate_limit_rejections_total",
        "circuit_open_total",
        "directive_actions_total",
        "errors_total",
    )

    def __init__(self, meter: metrics.Meter) -> None:
        # Histograms
        self.request_latency = _histogram(meter, METRIC_REQUEST_LATENCY)
        # Counters
        self.requests_total = _counter(meter, METRIC_REQUESTS_TOTAL)
        self.rate_limit_rejections_total = _counter(meter, METRIC_RATE_LIMIT_REJECTIONS_TOTAL)
        self.circuit_open_total = _counter(meter, METRIC_CIRCUIT_OPEN_TOTAL)
        self.directive_actions_total = _counter(meter, METRIC_DIRECTIVE_ACTIONS_TOTAL)
        self.errors_total = _counter(meter, METRIC_ERRORS_TOTAL)


_metrics: MetricInstruments | None = None


def get_metrics() -> MetricInstruments:
    """Return the global MetricInstruments (no-op meter if OTel not initialized)."""
    global _metrics  # noqa: PLW0603
    if _metrics is None:
        meter = metrics.get_meter(OTEL_SERVICE_NAME)
        _metrics = MetricInstruments(meter)
    return _metrics


def initialize_metrics() -> None:
    """Recreate MetricInstruments from the (now configured) global meter."""
    global _metrics  # noqa: PLW0603
    meter = metrics.get_meter(OTEL_SERVICE_NAME)
    _metrics = MetricInstruments(meter)
    logger.info("Telemetry metrics initialized")


__all__ = ["MetricInstruments", "get_metrics", "initialize_metrics"]
