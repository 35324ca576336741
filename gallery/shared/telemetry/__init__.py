"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from gallery.shared.telemetry.logging import setup_logging
from gallery.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from gallery.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
