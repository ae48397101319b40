from __future__ import annotations
"""Simple telemetry sink that prints events.

Handy when running the demo script: every stage of a lookup shows up on
stdout as one `LEVEL stage payload` line. In a host process, prefer
`LoggingSink`.
"""
import sys
from pprint import pformat
from typing import TextIO

from jsonstore.core.interfaces import TelemetrySink
from jsonstore.core.types import TelemetryEvent


class PrintSink(TelemetrySink):
    """Telemetry sink that prints one line per event (timestamp omitted)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def record(self, event: TelemetryEvent) -> None:
        level = event.get("level", "info").upper()
        stage = event.get("stage", "")
        payload = pformat(event.get("payload", {}), compact=True, width=100)
        print(f"{level:<5} {stage:<15} {payload}", file=self.stream or sys.stdout)
