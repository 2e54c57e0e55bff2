"""Shared utilities: logging setup, telemetry.

No business logic.
"""

from app.shared.telemetry import setup_logging

__all__ = ["setup_logging"]
