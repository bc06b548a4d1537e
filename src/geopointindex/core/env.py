"""
`.env` and path helpers for the settings loader.

Only `GEOPOINTINDEX_*` variables are read from the environment:
- `GEOPOINTINDEX_ENV_FILE`: explicit `.env` path (its directory also becomes the project root)
- `GEOPOINTINDEX_PROJECT_ROOT`: explicit root for resolving a relative `GEOPOINTINDEX_CONFIG_PATH`

Values from a `.env` file never replace variables already set in the process.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


def _explicit_env_file() -> Path | None:
    value = os.getenv("GEOPOINTINDEX_ENV_FILE")
    return Path(value).expanduser().resolve() if value else None


@lru_cache
def get_project_root() -> Path:
    """Return the nearest directory at or above the CWD holding a root marker (cached)."""
    override = os.getenv("GEOPOINTINDEX_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    env_file = _explicit_env_file()
    if env_file is not None:
        return env_file.parent

    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cwd


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the `.env` file once, if one exists; return its path."""
    env_path = _explicit_env_file() or get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
