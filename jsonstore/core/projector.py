from __future__ import annotations
"""Attribute projector and schema discovery."""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .types import (
    AttributeMissing,
    Document,
    ListValue,
    QueryResult,
    Record,
    RecordNotFound,
    Scalar,
    Value,
)

logger = logging.getLogger(__name__)


def to_value(raw: Any) -> Optional[Value]:
    """Wrap a raw JSON value, or return None if it is not representable.

    Strings become `Scalar`; arrays whose items are all strings become
    `ListValue`. Numbers, booleans, null, objects and mixed arrays are not
    attribute values.
    """
    if isinstance(raw, str):
        return Scalar(raw)
    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return ListValue(tuple(raw))
    return None


def project(record: Optional[Record], requested_attributes: Iterable[str]) -> QueryResult:
    """Map each requested attribute name to its value or an outcome marker.

    With no record every name maps to `RecordNotFound`. With a record, names
    it does not carry (or carries with an unrepresentable value) map to
    `AttributeMissing`. Duplicate names collapse into one entry.
    """
    result: QueryResult = {}
    for name in requested_attributes:
        if name in result:
            continue
        if record is None:
            result[name] = RecordNotFound
            continue
        if name not in record:
            result[name] = AttributeMissing
            continue
        value = to_value(record[name])
        if value is None:
            logger.debug("attribute %r has unsupported type %s", name, type(record[name]).__name__)
            result[name] = AttributeMissing
        else:
            logger.debug("adding %s -> %s", name, value)
            result[name] = value
    return result


def list_attribute_names(document: Document) -> List[str]:
    """Return the sorted attribute names of the first record.

    This samples one record only; other records may carry different keys.
    An empty collection yields an empty list.
    """
    if not document.records:
        return []
    first = document.records[0]
    if not isinstance(first, Mapping):
        return []
    return sorted(set(first.keys()))
