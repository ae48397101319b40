#!/usr/bin/env python
from __future__ import annotations

"""Tiny demo that wires the data store and runs a single lookup.

Usage:
  python scripts/run_demo.py [FILTER_VALUE] [ATTRIBUTE ...]

Environment (also read from `.env` if present):
  - `JSONSTORE_CONFIG` (optional; defaults to `config/datastore.yaml`)
  - `JSONSTORE_HOME` (optional; overrides `base_dir` from the config)
  - `JSONSTORE_LOG_LEVEL` (optional; defaults to `INFO`)
"""

import os
import sys

from dotenv import load_dotenv

from jsonstore.adapters.config.yaml_config import load_config
from jsonstore.adapters.datasource.json_data_source import JSONDataStore
from jsonstore.adapters.telemetry.print_sink import PrintSink
from jsonstore.core.errors import JSONStoreError
from jsonstore.observability.logger import get_logger


def main(argv: list[str]) -> int:
    """Configure the store, check the source, list fields and run one lookup."""
    load_dotenv()
    log = get_logger("jsonstore", os.getenv("JSONSTORE_LOG_LEVEL"))

    filter_value = argv[0] if argv else "ALICE"
    attributes = argv[1:] or ["role", "groups", "dept"]

    ds = JSONDataStore(telemetry=PrintSink())
    try:
        ds.configure(load_config(os.getenv("JSONSTORE_CONFIG", "config/datastore.yaml")))
        if not ds.test_connection():
            log.error("cannot access %s", ds.source_path)
            return 1
        print({"available_fields": ds.get_available_fields()})
        result = ds.retrieve_values(attributes, filter_value)
    except JSONStoreError as ex:
        log.error("%s", ex)
        return 1

    print({"filter": filter_value, "result": {k: repr(v) for k, v in result.items()}})
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
