"""Shared fixtures for data store tests."""

import json
from pathlib import Path
from typing import List

import pytest

from jsonstore.core.types import Document, TelemetryEvent


SCENARIO = {
    "users": [
        {"id": "Alice", "role": "admin"},
        {"id": "bob", "role": "user"},
    ]
}


class RecordingSink:
    """Telemetry sink that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: List[TelemetryEvent] = []

    def record(self, event: TelemetryEvent) -> None:
        self.events.append(event)

    def stages(self) -> List[str]:
        return [e["stage"] for e in self.events]


@pytest.fixture
def write_json(tmp_path):
    """Write a Python object (or raw text) to a file under tmp_path."""

    def _write(content, name: str = "users.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_path(write_json) -> Path:
    return write_json(SCENARIO)


@pytest.fixture
def make_document():
    def _make(*records) -> Document:
        return Document(path=Path("users.json"), records=tuple(records))

    return _make


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
