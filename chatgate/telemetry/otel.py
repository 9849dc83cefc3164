"""TracerProvider + MeterProvider setup over OTLP/HTTP."""

from __future__ import annotations

import logging

from opentelemetry import trace, metrics
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter

from ..config.telemetry import (
    OTLP_API_TOKEN,
    OTLP_ENVIRONMENT,
    OTEL_SERVICE_NAME,
    OTLP_TRACES_ENDPOINT,
    OTLP_METRICS_ENDPOINT,
    OTEL_METRICS_EXPORT_INTERVAL_MS,
)

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None
_meter_provider: MeterProvider | None = None


def build_resource() -> Resource:
    return Resource.create(
        {
            "service.name": OTEL_SERVICE_NAME,
            "deployment.environment": OTLP_ENVIRONMENT,
        }
    )


def init_otel() -> None:
    """Register global tracer and meter providers exporting to OTLP. Idempotent."""
    global _tracer_provider, _meter_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        return

    resource = build_resource()
    headers = {"Authorization": f"Bearer {OTLP_API_TOKEN}"}

    tp = TracerProvider(resource=resource)
    tp.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=OTLP_TRACES_ENDPOINT, headers=headers)))
    trace.set_tracer_provider(tp)
    _tracer_provider = tp

    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=OTLP_METRICS_ENDPOINT, headers=headers),
        export_interval_millis=OTEL_METRICS_EXPORT_INTERVAL_MS,
    )
    mp = MeterProvider(resource=resource, metric_readers=[reader])
    metrics.set_meter_provider(mp)
    _meter_provider = mp

    logger.info("otel: initialized traces=%s metrics=%s", OTLP_TRACES_ENDPOINT, OTLP_METRICS_ENDPOINT)


def shutdown_otel() -> None:
    """Flush and shut down both providers. Idempotent."""
    global _tracer_provider, _meter_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
    if _meter_provider is not None:
        _meter_provider.shutdown()
        _meter_provider = None


__all__ = ["build_resource", "init_otel", "shutdown_otel"]
