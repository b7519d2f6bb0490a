"""User preferences: data file location and terminal/window geometry.

Typed with pydantic so the JSON written by :mod:`unicash.storage` is
validated on the way back in.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATA_PATH = Path("data") / "unicash.json"


class GuiSettings(BaseModel):
    """Window geometry. Coordinates are ``None`` until a position is saved."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    window_width: float = 740.0
    window_height: float = 600.0
    window_x: int | None = None
    window_y: int | None = None


class UserPrefs(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    unicash_file_path: Path = DEFAULT_DATA_PATH

    def copy_prefs(self) -> UserPrefs:
        return self.model_copy(deep=True)


__all__ = ["DEFAULT_DATA_PATH", "GuiSettings", "UserPrefs"]
