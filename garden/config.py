from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any

CONFIG_ENV_VAR = "GARDEN_CONFIG"


@dataclass(frozen=True)
class GameConfig:
    """Session settings. Rules (growth, weather, plants) are not configurable."""

    grid_rows: int = 6
    grid_cols: int = 8
    starting_gold: int = 50
    day_duration: float = 8.0  # seconds per day when auto-advancing
    auto_advance: bool = False
    seed: int | None = None  # fixes the weather stream when set
    locked_cells: tuple[tuple[int, int], ...] = ()

    @staticmethod
    def from_json_file(path: str | Path) -> "GameConfig":
        """Load config from a JSON file on disk."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return GameConfig.from_dict(raw)

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> "GameConfig":
        """Build config from a decoded JSON dict."""
        if not isinstance(raw, dict):
            raise ValueError("config must be a mapping")
        grid_raw = _section(raw, "grid")
        economy_raw = _section(raw, "economy")
        time_raw = _section(raw, "time")

        defaults = GameConfig()
        seed_raw = raw.get("seed")
        return GameConfig(
            grid_rows=int(grid_raw.get("rows", defaults.grid_rows)),
            grid_cols=int(grid_raw.get("cols", defaults.grid_cols)),
            starting_gold=int(economy_raw.get("starting_gold", defaults.starting_gold)),
            day_duration=float(time_raw.get("day_duration", defaults.day_duration)),
            auto_advance=bool(time_raw.get("auto_advance", defaults.auto_advance)),
            seed=None if seed_raw is None else int(seed_raw),
            locked_cells=_parse_cells(grid_raw.get("locked")),
        )


def default_config_path() -> Path | None:
    """Return the config path named by GARDEN_CONFIG, if any."""
    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override) if override else None


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping")
    return value


def _parse_cells(raw: Any) -> tuple[tuple[int, int], ...]:
    """Parse a list of [row, col] pairs."""
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise ValueError("grid.locked must be a list of [row, col] pairs")
    cells: list[tuple[int, int]] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"grid.locked entries must be [row, col] pairs (got {item!r})")
        cells.append((int(item[0]), int(item[1])))
    return tuple(cells)
