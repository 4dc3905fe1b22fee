"""
Process configuration.

The MongoDB connection string comes from a JSON file at
`${CONFIG_PATH:-./}config.json`. Everything else is read from environment
variables with defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

DEFAULT_CONFIG_DIR = "./"
CONFIG_FILE_NAME = "config.json"


# Config failures are fatal at startup and separable from other runtime errors.
class ConfigError(RuntimeError):
    pass


class AppConfig(BaseModel):
    uri: str


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def config_path() -> Path:
    # CONFIG_PATH is a prefix, not a directory join: "/etc/albums/" + "config.json".
    prefix = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_DIR)
    return Path(prefix + CONFIG_FILE_NAME)


def load_config(path: Path | None = None) -> AppConfig:
    """
    Read and decode the config file. Raises ConfigError on any failure.
    """
    path = path if path is not None else config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not open config file: {e}") from e

    try:
        return AppConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Could not decode config file: {e}") from e


def database_name() -> str:
    return _env_str("ALBUMS_DATABASE", "media")


def collection_name() -> str:
    return _env_str("ALBUMS_COLLECTION", "albums")


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", 8080)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()
