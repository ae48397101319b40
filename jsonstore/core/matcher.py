from __future__ import annotations
"""Record matcher.

Linear scan over a document's `users` collection. Only string values of the
identifying attribute take part in comparison; anything else is skipped.
"""
from collections.abc import Mapping
from typing import Optional

from .types import Document, Record


def _normalize(value: str, case_sensitive: bool) -> str:
    return value if case_sensitive else value.casefold()


def find_first(
    document: Document,
    identifying_attribute: str,
    case_sensitive: bool,
    filter_value: str,
) -> Optional[Record]:
    """Return the first record whose identifying attribute equals `filter_value`.

    Case-insensitive comparison uses `str.casefold()` rather than `lower()` so
    the result does not depend on locale or special-cased letters. Returns
    None when the collection is empty or nothing matches.
    """
    wanted = _normalize(filter_value, case_sensitive)
    for record in document.records:
        if not isinstance(record, Mapping):
            continue
        candidate = record.get(identifying_attribute)
        if not isinstance(candidate, str):
            continue
        if _normalize(candidate, case_sensitive) == wanted:
            return record
    return None
