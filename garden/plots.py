from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from garden.catalog import PlantType, definition_of
from garden.growth import growth_rate, target_stage
from garden.weather import water_drain

if TYPE_CHECKING:
    from garden.state import GameState

SoilState = Literal["dry", "normal", "wet"]

ActionError = Literal[
    "invalid_cell",
    "plot_locked",
    "occupied",
    "insufficient_gold",
    "nothing_to_water",
    "plant_dead",
    "nothing_to_harvest",
    "not_ready",
    "nothing_to_delete",
]

PLANTED_WATER_LEVEL = 0.5
WATERING_AMOUNT = 0.4


@dataclass
class PlantInstance:
    type: PlantType
    stage_index: int = 0
    # Accumulates toward 1.0; stages are buckets of progress * stage_count.
    growth_progress: float = 0.0
    water_level: float = PLANTED_WATER_LEVEL
    is_dead: bool = False
    planted_day: int = 1


@dataclass
class GardenCell:
    plant: PlantInstance | None = None
    soil_state: SoilState = "normal"
    # Reserved for progression; cells start unlocked unless configured.
    unlocked: bool = True


@dataclass(frozen=True)
class HarvestResult:
    error: ActionError | None = None
    cleared: bool = False
    plant_type: PlantType | None = None
    value: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def create_grid(rows: int, cols: int, locked: frozenset[tuple[int, int]] = frozenset()) -> list[list[GardenCell]]:
    """Build a rows x cols grid of empty cells."""
    return [[GardenCell(unlocked=(r, c) not in locked) for c in range(cols)] for r in range(rows)]


def cell_at(state: GameState, row: int, col: int) -> GardenCell | None:
    """Return the cell at (row, col), or None when out of bounds."""
    if 0 <= row < state.grid_rows and 0 <= col < state.grid_cols:
        return state.grid[row][col]
    return None


def is_ready(cell: GardenCell) -> bool:
    """Return True when the cell holds a living plant at its final stage."""
    if cell.plant is None or cell.plant.is_dead:
        return False
    return cell.plant.stage_index >= definition_of(cell.plant.type).final_stage


def soil_for_water(water_level: float) -> SoilState:
    if water_level > 0.6:
        return "wet"
    if water_level > 0.2:
        return "normal"
    return "dry"


def plant(state: GameState, row: int, col: int, plant_type: PlantType) -> ActionError | None:
    """Plant a seed, paying its cost. Returns a failure reason or None."""
    cell = cell_at(state, row, col)
    if cell is None:
        return "invalid_cell"
    if not cell.unlocked:
        return "plot_locked"
    if cell.plant is not None:
        return "occupied"

    definition = definition_of(plant_type)
    if state.gold < definition.cost:
        return "insufficient_gold"

    state.gold -= definition.cost
    cell.plant = PlantInstance(type=plant_type, planted_day=state.day)
    cell.soil_state = "normal"
    return None


def water(state: GameState, row: int, col: int) -> ActionError | None:
    """Water a living plant. Returns a failure reason or None."""
    cell = cell_at(state, row, col)
    if cell is None:
        return "invalid_cell"
    if cell.plant is None:
        return "nothing_to_water"
    if cell.plant.is_dead:
        return "plant_dead"

    cell.plant.water_level = min(1.0, cell.plant.water_level + WATERING_AMOUNT)
    cell.soil_state = "wet"
    return None


def harvest(state: GameState, row: int, col: int) -> HarvestResult:
    """
    Harvest a ready plant, or clear a dead one.

    Ready plants pay out their sell value and bump the session counters.
    Dead plants are removed with no payout and the result is flagged as
    cleared.
    """
    cell = cell_at(state, row, col)
    if cell is None:
        return HarvestResult(error="invalid_cell")
    if cell.plant is None:
        return HarvestResult(error="nothing_to_harvest")

    current = cell.plant
    definition = definition_of(current.type)

    if current.is_dead:
        _clear(cell)
        return HarvestResult(cleared=True, plant_type=current.type)

    if current.stage_index < definition.final_stage:
        return HarvestResult(error="not_ready", plant_type=current.type)

    value = definition.sell_value
    state.gold += value
    state.total_harvested += 1
    state.total_earned += value
    _clear(cell)
    return HarvestResult(plant_type=current.type, value=value)


def remove(state: GameState, row: int, col: int) -> ActionError | None:
    """Pull up whatever grows in the cell without paying anything."""
    cell = cell_at(state, row, col)
    if cell is None:
        return "invalid_cell"
    if cell.plant is None:
        return "nothing_to_delete"
    _clear(cell)
    return None


def _clear(cell: GardenCell) -> None:
    cell.plant = None
    cell.soil_state = "dry"


def advance_day(state: GameState) -> None:
    """
    Apply one day of weather, watering decay and growth to every cell.

    The weather and season on the state are taken as given; rolling the
    next day's weather is the caller's job.
    """
    weather = state.weather
    season = state.season
    drain = water_drain(weather)

    for row in state.grid:
        for cell in row:
            current = cell.plant
            if current is None or current.is_dead:
                # Untended soil dries out.
                if cell.soil_state == "wet":
                    cell.soil_state = "normal"
                elif cell.soil_state == "normal" and weather == "drought":
                    cell.soil_state = "dry"
                continue

            current.water_level = max(0.0, min(1.0, current.water_level - drain))
            cell.soil_state = soil_for_water(current.water_level)

            if current.water_level <= 0:
                current.is_dead = True
                cell.soil_state = "dry"
                continue

            definition = definition_of(current.type)
            if current.stage_index >= definition.final_stage:
                continue

            current.growth_progress += growth_rate(definition, season, weather, current.water_level)
            stage = target_stage(current.growth_progress, len(definition.stages))
            if stage > current.stage_index:
                current.stage_index = stage
