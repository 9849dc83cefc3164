"""Unit tests for OpenTelemetry provider setup."""

from __future__ import annotations

from chatgate.telemetry.otel import shutdown_otel, build_resource


def test_resource_names_the_service() -> None:
    attributes = build_resource().attributes
    assert attributes["service.name"] == "chatgate"
    assert attributes["deployment.environment"] == "production"


def test_shutdown_without_init_is_a_noop() -> None:
    shutdown_otel()
    shutdown_otel()
