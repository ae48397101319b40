from __future__ import annotations
"""Null telemetry sink.

Drops every event. The default when no sink is wired in.
"""
from jsonstore.core.interfaces import TelemetrySink
from jsonstore.core.types import TelemetryEvent


class NullSink(TelemetrySink):
    def record(self, event: TelemetryEvent) -> None:
        return None
