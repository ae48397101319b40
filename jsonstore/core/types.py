from __future__ import annotations
"""Shared type definitions used across the data store.

Configuration, queries and telemetry are plain `TypedDict` structures so
adapters stay loosely coupled and easy to test. Attribute values and the two
result markers are small immutable objects so callers can inspect outcomes
with `isinstance` / identity checks instead of comparing strings.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Tuple, TypedDict, Union


@dataclass(frozen=True)
class Scalar:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListValue:
    items: Tuple[str, ...]

    def __str__(self) -> str:
        return "[" + ", ".join(self.items) + "]"


Value = Union[Scalar, ListValue]


class _Marker:
    """Base for the per-attribute outcome singletons."""

    _instances: Dict[type, "_Marker"] = {}

    def __new__(cls) -> "_Marker":
        if cls not in _Marker._instances:
            _Marker._instances[cls] = super().__new__(cls)
        return _Marker._instances[cls]

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return type(self).__name__.lstrip("_")


class _RecordNotFound(_Marker):
    """No record matched the query."""


class _AttributeMissing(_Marker):
    """A record matched but does not carry the attribute."""


RecordNotFound = _RecordNotFound()
AttributeMissing = _AttributeMissing()

Record = Mapping[str, Any]
Outcome = Union[Scalar, ListValue, _RecordNotFound, _AttributeMissing]
QueryResult = Dict[str, Outcome]


@dataclass(frozen=True)
class Document:
    """A parsed source document.

    `records` is the top-level `users` collection in document order. Object
    elements are exposed as read-only mappings; anything else is kept as-is
    and ignored by the matcher.
    """

    path: Path
    records: Tuple[Any, ...] = field(default_factory=tuple)


class Query(TypedDict):
    identifying_attribute: str
    case_sensitive: bool
    filter_value: str
    requested_attributes: List[str]


LoadErrorPolicy = Literal["raise", "miss"]


class DataStoreConfig(TypedDict, total=False):
    source_path: str
    base_dir: str
    id_attribute: str
    case_sensitive: bool
    on_load_error: LoadErrorPolicy
    cache: bool


class TelemetryEvent(TypedDict, total=False):
    timestamp: str
    stage: Literal[
        "configured",
        "connection_test",
        "load",
        "match",
        "respond",
        "fields",
    ]
    level: Literal["debug", "info", "warn", "error"]
    payload: Dict[str, Any]
