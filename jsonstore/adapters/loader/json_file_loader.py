from __future__ import annotations
"""JSON file loaders.

`JSONFileLoader` re-reads and re-parses the source on every call; each call
uses its own `json.load`, so nothing is shared between concurrent callers.
`CachingJSONFileLoader` keeps the last parse per path and reloads whenever
the file's modification time or size changes.
"""
import json
import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Tuple

from jsonstore.core.errors import ParseError, SchemaError, SourceNotFoundError
from jsonstore.core.interfaces import DocumentLoader
from jsonstore.core.types import Document

logger = logging.getLogger(__name__)

COLLECTION_KEY = "users"


def can_access_source(path: str | Path) -> bool:
    """Return True if `path` is an existing, readable regular file.

    Does not open or parse the file.
    """
    try:
        p = Path(path)
        return p.is_file() and os.access(p, os.R_OK)
    except (OSError, ValueError):
        return False


def _freeze(element: Any) -> Any:
    if not isinstance(element, dict):
        return element
    return MappingProxyType(
        {k: tuple(v) if isinstance(v, list) else v for k, v in element.items()}
    )


def _to_document(path: Path, root: Any) -> Document:
    if not isinstance(root, dict):
        raise SchemaError(path, f"root must be an object, got {type(root).__name__}")
    if COLLECTION_KEY not in root:
        raise SchemaError(path, f"missing top-level {COLLECTION_KEY!r} array")
    users = root[COLLECTION_KEY]
    if not isinstance(users, list):
        raise SchemaError(path, f"{COLLECTION_KEY!r} must be an array, got {type(users).__name__}")
    return Document(path=path, records=tuple(_freeze(u) for u in users))


class JSONFileLoader(DocumentLoader):
    """Uncached loader: one read and one parse per call."""

    def load(self, path: str | Path) -> Document:
        """Read `path` and return its `Document`.

        Raises `SourceNotFoundError`, `ParseError` or `SchemaError`.
        Malformed text, undecodable bytes, integers past the interpreter's
        digit limit and nesting too deep to parse all raise `ParseError`.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                try:
                    root = json.load(f)
                except (ValueError, RecursionError) as ex:
                    logger.debug("Error parsing file - %s", ex)
                    raise ParseError(path, str(ex)) from ex
        except OSError as ex:
            logger.debug("Error reading file - %s", ex)
            raise SourceNotFoundError(path, ex.strerror or str(ex)) from ex
        return _to_document(path, root)


class CachingJSONFileLoader(DocumentLoader):
    """Loader that reuses the last parse while the file is unchanged.

    Entries are keyed on `(st_mtime_ns, st_size)`. All cache access and the
    reload itself happen under one lock.
    """

    def __init__(self, inner: DocumentLoader | None = None) -> None:
        self._inner = inner or JSONFileLoader()
        self._lock = threading.Lock()
        self._entries: Dict[Path, Tuple[Tuple[int, int], Document]] = {}

    def load(self, path: str | Path) -> Document:
        path = Path(path)
        with self._lock:
            try:
                st = path.stat()
            except OSError as ex:
                self._entries.pop(path, None)
                raise SourceNotFoundError(path, ex.strerror or str(ex)) from ex
            stamp = (st.st_mtime_ns, st.st_size)
            cached = self._entries.get(path)
            if cached and cached[0] == stamp:
                return cached[1]
            self._entries.pop(path, None)
            document = self._inner.load(path)
            self._entries[path] = (stamp, document)
            return document

    def invalidate(self, path: str | Path | None = None) -> None:
        """Drop one cached entry, or all of them."""
        with self._lock:
            if path is None:
                self._entries.clear()
            else:
                self._entries.pop(Path(path), None)
