from __future__ import annotations
"""JSON-backed data store.

Host-facing driver over a local JSON file holding a `users` array. The host
configures it once (file, identifying attribute, case policy) and then asks
for attribute values per filter value. Every lookup reloads the file unless
the mtime cache is switched on.
"""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List

from jsonstore.adapters.config.yaml_config import build_config
from jsonstore.adapters.loader.json_file_loader import (
    CachingJSONFileLoader,
    JSONFileLoader,
    can_access_source,
)
from jsonstore.adapters.telemetry.null_sink import NullSink
from jsonstore.core.errors import LoadError, NotConfiguredError
from jsonstore.core.interfaces import DataSource, DocumentLoader, TelemetrySink
from jsonstore.core.matcher import find_first
from jsonstore.core.projector import list_attribute_names, project
from jsonstore.core.types import (
    DataStoreConfig,
    Document,
    Query,
    QueryResult,
    TelemetryEvent,
)

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def resolve_source_path(config: DataStoreConfig) -> Path:
    """Join a relative `source_path` onto `base_dir`, if one is set."""
    path = Path(config["source_path"])
    base_dir = config.get("base_dir")
    if base_dir and not path.is_absolute():
        path = Path(base_dir) / path
    return path


class JSONDataStore(DataSource):
    """Read-only record lookup backed by a JSON file.

    Notes
    - `loader` overrides the loader picked from the `cache` setting.
    - Load failures either propagate (`on_load_error: raise`) or turn the
      lookup into a miss (`on_load_error: miss`); both are logged and recorded.
    """

    def __init__(
        self,
        loader: DocumentLoader | None = None,
        telemetry: TelemetrySink | None = None,
    ) -> None:
        self._loader_override = loader
        self.loader: DocumentLoader | None = loader
        self.telemetry = telemetry or NullSink()
        self._config: DataStoreConfig | None = None
        self._source_path: Path | None = None

    def configure(self, config: DataStoreConfig) -> None:
        """Validate and store settings; picks the loader if none was given."""
        logger.debug("---[ Configuring JSON Data Store ]------")
        self._config = build_config(dict(config))
        self._source_path = resolve_source_path(self._config)
        if self._loader_override is None:
            self.loader = CachingJSONFileLoader() if self._config["cache"] else JSONFileLoader()
        self._emit(
            "configured",
            "info",
            {
                "source_path": str(self._source_path),
                "id_attribute": self._config["id_attribute"],
                "case_sensitive": self._config["case_sensitive"],
                "on_load_error": self._config["on_load_error"],
                "cache": self._config["cache"],
            },
        )
        logger.debug("---[ Configuration complete ]------")

    @property
    def source_path(self) -> Path:
        self._require_config()
        return self._source_path  # type: ignore[return-value]

    def test_connection(self) -> bool:
        """Check the configured file is a readable regular file (no parsing)."""
        path = self.source_path
        logger.debug("Checking file: %s", path)
        ok = can_access_source(path)
        self._emit("connection_test", "info" if ok else "warn", {"path": str(path), "ok": ok})
        return ok

    def retrieve_values(self, attribute_names: Iterable[str], filter_value: str) -> QueryResult:
        """Return the requested attributes of the record matching `filter_value`.

        Every requested name is present in the result: a `Value`, or
        `AttributeMissing` / `RecordNotFound`.
        """
        config = self._require_config()
        names = list(attribute_names)
        document = self._load()
        if document is None:
            result = project(None, names)
        else:
            query = Query(
                identifying_attribute=config["id_attribute"],
                case_sensitive=config["case_sensitive"],
                filter_value=filter_value,
                requested_attributes=names,
            )
            result = self._execute(document, query)
        self._emit("respond", "info", {"attributes": _describe(result)})
        return result

    def get_available_fields(self) -> List[str]:
        """Attribute names of the first record, sorted. Empty if none."""
        self._require_config()
        document = self._load()
        if document is None:
            return []
        fields = list_attribute_names(document)
        self._emit("fields", "info", {"count": len(fields)})
        return fields

    # --- Helpers ---

    def _require_config(self) -> DataStoreConfig:
        if self._config is None:
            raise NotConfiguredError("JSONDataStore.configure() must be called first")
        return self._config

    def _load(self) -> Document | None:
        """Load the document, applying the load-failure policy.

        Returns None when the failure is downgraded to a miss.
        """
        config = self._require_config()
        try:
            document = self.loader.load(self.source_path)  # type: ignore[union-attr]
        except LoadError as ex:
            payload = {"path": str(ex.path), "kind": ex.kind, "error": ex.message}
            if config["on_load_error"] == "raise":
                logger.error("Failed to load %s (%s): %s", ex.path, ex.kind, ex.message)
                self._emit("load", "error", payload)
                raise
            logger.warning(
                "Failed to load %s (%s): %s; treating lookup as a miss",
                ex.path,
                ex.kind,
                ex.message,
            )
            self._emit("load", "warn", payload)
            return None
        self._emit("load", "debug", {"path": str(document.path), "records": len(document.records)})
        return document

    def _execute(self, document: Document, query: Query) -> QueryResult:
        attr = query["identifying_attribute"]
        value = query["filter_value"]
        logger.debug("looking for %s == %s", attr, value)
        record = find_first(document, attr, query["case_sensitive"], value)
        if record is None:
            logger.debug("did NOT find record for %s", value)
        else:
            logger.debug("found record for %s", value)
        self._emit("match", "info", {"id_attribute": attr, "found": record is not None})
        return project(record, query["requested_attributes"])

    def _emit(self, stage: str, level: str, payload: Dict[str, Any]) -> None:
        self.telemetry.record(
            TelemetryEvent(timestamp=_now_iso(), stage=stage, level=level, payload=payload)  # type: ignore[typeddict-item]
        )


def _describe(result: QueryResult) -> Dict[str, str]:
    return {name: repr(value) for name, value in result.items()}
