from __future__ import annotations

import sys

import matplotlib.pyplot as plt
from matplotlib import colormaps
import numpy as np

from garden import plots
from garden.catalog import PLANT_ORDER, PlantType, definition_of
from garden.config import GameConfig
from garden.seasons import SEASONS, Season
from garden.state import create_game_state
from garden.weather import WEATHER_TYPES, Weather

MAX_DAYS = 60


def days_to_ready(plant_type: PlantType, season: Season, weather: Weather, max_days: int = MAX_DAYS) -> int | None:
    """
    Count the days a freshly planted, daily watered plant needs to ripen.

    Runs the real daily growth step on a one-cell garden with the season and
    weather held fixed. Returns None if the plant is not ready by max_days.
    """
    state = create_game_state(GameConfig(grid_rows=1, grid_cols=1), rng=np.random.default_rng(0))
    state.season = season
    state.weather = weather
    state.gold = definition_of(plant_type).cost
    plots.plant(state, 0, 0, plant_type)

    cell = state.grid[0][0]
    for day in range(1, max_days + 1):
        plots.water(state, 0, 0)
        plots.advance_day(state)
        if plots.is_ready(cell):
            return day
    return None


def outlook_table(weather: Weather, max_days: int = MAX_DAYS) -> np.ndarray:
    """Return a (plants x seasons) array of days to ready, NaN where never."""
    table = np.full((len(PLANT_ORDER), len(SEASONS)), np.nan)
    for i, plant_type in enumerate(PLANT_ORDER):
        for j, season in enumerate(SEASONS):
            days = days_to_ready(plant_type, season, weather, max_days)
            if days is not None:
                table[i, j] = days
    return table


def _best_seasons(table: np.ndarray) -> dict[PlantType, Season]:
    """Return the fastest season per plant; ties go to the earliest season."""
    best: dict[PlantType, Season] = {}
    for i, plant_type in enumerate(PLANT_ORDER):
        row = table[i]
        if np.all(np.isnan(row)):
            continue
        best[plant_type] = SEASONS[int(np.nanargmin(row))]
    return best


def _parse_args(argv: list[str]) -> tuple[str, Weather]:
    """Parse CLI args into (output_path, weather)."""
    weather: Weather = "sunny"
    args: list[str] = []
    idx = 1
    while idx < len(argv):
        arg = argv[idx]
        if arg == "--weather":
            if idx + 1 >= len(argv):
                raise ValueError("missing value for --weather")
            weather = _normalize_weather(argv[idx + 1])
            idx += 2
            continue
        if arg.startswith("--weather="):
            weather = _normalize_weather(arg.split("=", 1)[1])
            idx += 1
            continue
        args.append(arg)
        idx += 1
    return (args[0] if args else ""), weather


def _normalize_weather(raw: str) -> Weather:
    key = raw.strip().lower()
    for weather in WEATHER_TYPES:
        if key == weather:
            return weather
    raise ValueError(f"Unknown weather: {raw}")


def _plot(table: np.ndarray, weather: Weather, output_path: str) -> None:
    fig, ax = plt.subplots(figsize=(7, 5))
    masked = np.ma.masked_invalid(table)
    image = ax.imshow(masked, cmap=colormaps.get_cmap("viridis_r"), aspect="auto")
    ax.set_xticks(range(len(SEASONS)), [season.capitalize() for season in SEASONS])
    ax.set_yticks(range(len(PLANT_ORDER)), [definition_of(p).name for p in PLANT_ORDER])
    for i in range(table.shape[0]):
        for j in range(table.shape[1]):
            label = "-" if np.isnan(table[i, j]) else f"{int(table[i, j])}"
            ax.text(j, i, label, ha="center", va="center", color="white")
    fig.colorbar(image, ax=ax, label="Days to ready")
    ax.set_title(f"Days to harvest with daily watering ({weather})")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def main() -> int:
    """Print (and optionally plot) the growth outlook for every plant."""
    try:
        output_path, weather = _parse_args(sys.argv)
    except ValueError as exc:
        print(f"Error: {exc}")
        print("Usage: python -m garden.outlook [output.png] [--weather sunny|rainy|cloudy|drought]")
        return 2

    table = outlook_table(weather)
    best = _best_seasons(table)
    print(f"days to ready under {weather} weather (daily watering):")
    print("  " + "".ljust(10) + "".join(season.ljust(8) for season in SEASONS))
    for i, plant_type in enumerate(PLANT_ORDER):
        cells = "".join(("-" if np.isnan(v) else str(int(v))).ljust(8) for v in table[i])
        print(f"  {plant_type.ljust(10)}{cells}best={best.get(plant_type, '-')}")

    if output_path:
        _plot(table, weather, output_path)
        print(f"saved {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
