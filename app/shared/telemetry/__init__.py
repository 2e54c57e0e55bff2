"""Shared telemetry: logging setup and OpenTelemetry tracing.

The tracing module (app.shared.telemetry.telemetry) imports OpenTelemetry
and is only imported when settings.telemetry_enabled is set.
"""

from app.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
