from __future__ import annotations
"""Exceptions raised by the data store.

Loader failures carry the offending path and a short `kind` tag so adapters
can log and report them uniformly. Lookup misses are not exceptions; see the
`RecordNotFound` / `AttributeMissing` markers in `types`.
"""
from pathlib import Path


class JSONStoreError(Exception):
    """Base class for all data store errors."""


class LoadError(JSONStoreError):
    kind = "load"

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message


class SourceNotFoundError(LoadError):
    """The source file is missing, not a regular file, or unreadable."""

    kind = "not_found"


class ParseError(LoadError):
    """The source file is not valid JSON."""

    kind = "parse"


class SchemaError(LoadError):
    """The JSON root is not an object or lacks a `users` array."""

    kind = "schema"


class ConfigError(JSONStoreError):
    pass


class NotConfiguredError(JSONStoreError):
    pass
