"""Persistent player data: high scores, progress, settings and key bindings."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Callable

HIGHSCORE_SLOTS = 3


def _int_list(value: Any) -> list[int]:
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise TypeError(f"expected a list of integers, got {value!r}")
    return [int(item) for item in value]


def _strict_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise TypeError(f"expected a boolean, got {value!r}")


@dataclass
class SaveGame:
    """Everything the game keeps between sessions."""

    highscores: list[int] = field(default_factory=lambda: [0] * HIGHSCORE_SLOTS)
    highscore_data_one: int = 0
    highscore_data_two: int = 0
    max_level: int = 0
    score_this_game: int = 0
    master_volume: float = 0.0
    music_volume: float = 0.0
    atmosphere_volume: float = 0.0
    sfx_volume: float = 0.0
    pause_key: str = ""
    pause_mouse: str = ""
    select_key: str = ""
    move_key: str = ""
    pause_controller: str = ""
    select_controller: str = ""
    move_controller: str = ""
    song_indices: list[int] = field(default_factory=list)
    song_cycles: list[int] = field(default_factory=list)
    gamma: float = 0.0
    hard_mode_on: bool = False
    auto_cursor_on: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary of every field."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SaveGame":
        """Build a save from a mapping; missing keys take defaults, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"save data must be a mapping, got {type(data).__name__}")
        values = {
            f.name: _CONVERTERS[f.name](data[f.name])
            for f in fields(cls)
            if f.name in data
        }
        return cls(**values)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "SaveGame":
        """Read a save written by :meth:`save`."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the save as JSON to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2)


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "highscores": _int_list,
    "highscore_data_one": int,
    "highscore_data_two": int,
    "max_level": int,
    "score_this_game": int,
    "master_volume": float,
    "music_volume": float,
    "atmosphere_volume": float,
    "sfx_volume": float,
    "pause_key": str,
    "pause_mouse": str,
    "select_key": str,
    "move_key": str,
    "pause_controller": str,
    "select_controller": str,
    "move_controller": str,
    "song_indices": _int_list,
    "song_cycles": _int_list,
    "gamma": float,
    "hard_mode_on": _strict_bool,
    "auto_cursor_on": _strict_bool,
}