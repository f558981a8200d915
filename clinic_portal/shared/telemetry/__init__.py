"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from clinic_portal.shared.telemetry.logging import (
    RequestIdFilter,
    request_id_var,
    setup_logging,
)
from clinic_portal.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from clinic_portal.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "request_id_var",
    "RequestIdFilter",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
