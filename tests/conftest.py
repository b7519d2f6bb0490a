"""Pytest configuration.

Puts ``packages/`` on ``sys.path`` so ``unicash`` imports without an
install, and isolates every test from the developer's preferences and data
files: each ``UNICASH_*`` variable is pointed at (or cleared for) the test's
own temporary directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNICASH_PREFS_PATH", os.fspath(tmp_path / "preferences.json"))
    monkeypatch.setenv("UNICASH_DATA_PATH", os.fspath(tmp_path / "data" / "unicash.json"))
    monkeypatch.delenv("UNICASH_LOG_LEVEL", raising=False)
    # Keep a stray .env in the repo root from leaking into CLI tests.
    monkeypatch.chdir(tmp_path)
