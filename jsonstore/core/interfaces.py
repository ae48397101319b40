from __future__ import annotations
"""Interface definitions for the data store's swappable primitives.

These `Protocol`s define boundaries so implementations can be swapped without
changing the lookup logic (e.g., plain vs. caching loaders, stdout vs.
logging telemetry).
"""
from pathlib import Path
from typing import Iterable, List, Protocol

from .types import DataStoreConfig, Document, QueryResult, TelemetryEvent


class DocumentLoader(Protocol):
    """Reads and parses a source document. Raises `LoadError` subclasses."""
    def load(self, path: str | Path) -> Document: ...


class DataSource(Protocol):
    """Host-facing driver: configure once, then answer lookups."""

    def configure(self, config: DataStoreConfig) -> None: ...

    def test_connection(self) -> bool: ...

    def retrieve_values(self, attribute_names: Iterable[str], filter_value: str) -> QueryResult: ...

    def get_available_fields(self) -> List[str]: ...


class TelemetrySink(Protocol):
    """Records structured events for observability."""
    def record(self, event: TelemetryEvent) -> None: ...
