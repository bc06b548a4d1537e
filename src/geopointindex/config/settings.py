# src/geopointindex/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/geopointindex/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOPOINTINDEX_CONFIG_PATH`
- environment variables (e.g., `GEOPOINTINDEX_LOG_LEVEL`)

The index itself has no tuning knobs (earth radius and dimensionality are fixed);
settings only cover how an application wires up logging around it.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from geopointindex.core.env import load_dotenv_if_present, resolve_project_path


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geopointindex.config`."""
    text = resources.files("geopointindex.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    # Logger namespace that `configure_logging()` sets to `log_level`.
    name: str = "geopointindex"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level '{v}'.")
        return level


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)
    log_level = os.getenv("GEOPOINTINDEX_LOG_LEVEL")
    if log_level:
        data["app"] = {**(data.get("app") or {}), "log_level": log_level}
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOPOINTINDEX_CONFIG_PATH")
    raw = _read_yaml_file(resolve_project_path(config_path)) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
