"""
Vigil Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for handler and notification metrics
"""

from vigil.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    OTELConfig,
)

__all__ = [
    "OTELExporter",
    "OTELConfig",
]
