from __future__ import annotations
"""Data store configuration backed by YAML.

Reads the `datastore` section of `config/datastore.yaml` and fills in
defaults. Keeping the settings in config lets operators point the store at a
different file or identifying attribute without code changes.
"""
import os
from pathlib import Path
from typing import Any, Dict
import yaml

from jsonstore.core.errors import ConfigError
from jsonstore.core.types import DataStoreConfig

HOME_ENV_VAR = "JSONSTORE_HOME"

DEFAULTS: DataStoreConfig = {
    "base_dir": "",
    "case_sensitive": False,
    "on_load_error": "raise",
    "cache": False,
}


def load_config(path: str | Path) -> DataStoreConfig:
    """Load and validate a `DataStoreConfig` from a YAML file.

    `JSONSTORE_HOME`, when set, overrides `base_dir`.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except OSError as ex:
        raise ConfigError(f"cannot read config {path}: {ex}") from ex
    except yaml.YAMLError as ex:
        raise ConfigError(f"invalid YAML in {path}: {ex}") from ex
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    section = data.get("datastore", {}) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'datastore' must be a mapping")
    config = build_config(section)
    home = os.getenv(HOME_ENV_VAR)
    if home:
        config["base_dir"] = home
    return config


def _as_bool(key: str, raw: Any) -> bool:
    """Accept real booleans or "true"/"false" strings, as hosts often pass text."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
        return raw.strip().lower() == "true"
    raise ConfigError(f"{key} must be true or false, got {raw!r}")


def build_config(section: Dict[str, Any]) -> DataStoreConfig:
    """Apply defaults and validate a raw settings mapping."""
    if not isinstance(section, dict):
        raise ConfigError(f"settings must be a mapping, got {type(section).__name__}")
    config: DataStoreConfig = {**DEFAULTS, **section}  # type: ignore[misc]
    for key in ("source_path", "id_attribute"):
        if not config.get(key):
            raise ConfigError(f"missing required setting {key!r}")
    if config["on_load_error"] not in ("raise", "miss"):
        raise ConfigError(
            f"on_load_error must be 'raise' or 'miss', got {config['on_load_error']!r}"
        )
    config["case_sensitive"] = _as_bool("case_sensitive", config["case_sensitive"])
    config["cache"] = _as_bool("cache", config["cache"])
    return config
