"""Runtime configuration resolved from the environment.

The CLI loads a local ``.env`` (python-dotenv, ``override=False``) before
calling :func:`load_config`, so values may come from either place.

- ``UNICASH_PREFS_PATH``: user preferences JSON (default ``preferences.json``)
- ``UNICASH_DATA_PATH``: data file; overrides the path stored in the prefs
- ``UNICASH_LOG_LEVEL``: logging level name or number
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PREFS_PATH = Path("preferences.json")


@dataclass(frozen=True, slots=True)
class Config:
    prefs_path: Path = DEFAULT_PREFS_PATH
    data_path: Path | None = None
    log_level: str | None = None


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw and raw.strip():
        return Path(raw.strip()).expanduser()
    return None


def load_config() -> Config:
    level = os.getenv("UNICASH_LOG_LEVEL")
    return Config(
        prefs_path=_env_path("UNICASH_PREFS_PATH") or DEFAULT_PREFS_PATH,
        data_path=_env_path("UNICASH_DATA_PATH"),
        log_level=level.strip() if level and level.strip() else None,
    )


__all__ = ["DEFAULT_PREFS_PATH", "Config", "load_config"]
