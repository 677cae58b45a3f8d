from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, Union

import numpy as np

from garden.catalog import PlantType
from garden.config import GameConfig
from garden.plots import GardenCell, create_grid
from garden.seasons import Season, season_for_day
from garden.weather import RandomSource, Weather, roll_weather

Tool = Literal["hand", "water", "seed", "harvest"]
ModeName = Literal["normal", "visual", "command", "shop"]
RowMotion = Literal["top", "bottom", "pending"]

WELCOME_MESSAGE = "Welcome to your garden! Press [S] to open the seed menu and start planting!"


@dataclass(frozen=True)
class NormalMode:
    name: ClassVar[ModeName] = "normal"


@dataclass(frozen=True)
class VisualMode:
    name: ClassVar[ModeName] = "visual"
    anchor: tuple[int, int]


@dataclass(frozen=True)
class CommandMode:
    name: ClassVar[ModeName] = "command"
    buffer: str = ""


@dataclass(frozen=True)
class ShopMode:
    name: ClassVar[ModeName] = "shop"
    cursor: int = 0


InputMode = Union[NormalMode, VisualMode, CommandMode, ShopMode]


@dataclass
class MotionReader:
    """Idle/pending lookahead for the two-key ``gg`` motion."""

    pending: str = ""

    def feed(self, key: str | None) -> RowMotion | None:
        """
        Feed one key and report the row motion it completes.

        ``key`` is "g", "G" or None for any other key. A lone "g" arms the
        reader and reports "pending"; a second "g" fires "top". Anything
        else disarms it.
        """
        if key == "G":
            self.pending = ""
            return "bottom"
        if key == "g":
            if self.pending == "g":
                self.pending = ""
                return "top"
            self.pending = "g"
            return "pending"
        self.pending = ""
        return None

    def reset(self) -> None:
        self.pending = ""


@dataclass
class GameState:
    grid: list[list[GardenCell]]
    grid_rows: int
    grid_cols: int
    rng: RandomSource
    season: Season
    weather: Weather
    cursor_row: int = 0
    cursor_col: int = 0
    day: int = 1
    gold: int = 50
    selected_tool: Tool = "hand"
    selected_seed: PlantType = "carrot"
    mode: InputMode = field(default_factory=NormalMode)
    motion: MotionReader = field(default_factory=MotionReader)
    paused: bool = False
    status_message: str = ""
    # Milliseconds left before the status message clears; 0 keeps it.
    status_message_timer: float = 0.0
    total_harvested: int = 0
    total_earned: int = 0
    # Seconds accumulated toward the next automatic day.
    day_timer: float = 0.0
    day_duration: float = 8.0
    auto_advance: bool = False

    @property
    def input_mode(self) -> ModeName:
        return self.mode.name

    @property
    def visual_anchor(self) -> tuple[int, int] | None:
        return self.mode.anchor if isinstance(self.mode, VisualMode) else None

    @property
    def command_buffer(self) -> str:
        return self.mode.buffer if isinstance(self.mode, CommandMode) else ""

    @property
    def shop_open(self) -> bool:
        return isinstance(self.mode, ShopMode)

    @property
    def shop_cursor(self) -> int:
        return self.mode.cursor if isinstance(self.mode, ShopMode) else 0

    @property
    def pending_motion_prefix(self) -> str:
        return self.motion.pending


def create_game_state(config: GameConfig | None = None, rng: RandomSource | None = None) -> GameState:
    """Build a fresh session: day 1, empty grid, starting gold."""
    config = config or GameConfig()
    if rng is None:
        rng = np.random.default_rng(config.seed)
    season = season_for_day(1)
    return GameState(
        grid=create_grid(config.grid_rows, config.grid_cols, frozenset(config.locked_cells)),
        grid_rows=config.grid_rows,
        grid_cols=config.grid_cols,
        rng=rng,
        season=season,
        weather=roll_weather(season, rng),
        gold=config.starting_gold,
        status_message=WELCOME_MESSAGE,
        day_duration=config.day_duration,
        auto_advance=config.auto_advance,
    )
