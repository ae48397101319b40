from __future__ import annotations
"""Telemetry sink that forwards events to the `logging` module."""
import logging

from jsonstore.core.interfaces import TelemetrySink
from jsonstore.core.types import TelemetryEvent

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingSink(TelemetrySink):
    """Emits one log record per event; the payload rides along in `extra`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("jsonstore.telemetry")

    def record(self, event: TelemetryEvent) -> None:
        level = _LEVELS.get(event.get("level", "info"), logging.INFO)
        payload = event.get("payload", {})
        self.logger.log(
            level,
            "%s %s",
            event.get("stage", ""),
            payload,
            extra={"stage": event.get("stage", ""), "payload": payload},
        )
