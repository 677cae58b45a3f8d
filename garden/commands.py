from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator

from garden import plots
from garden.catalog import PlantType, definition_of
from garden.display import error_message
from garden.plots import GardenCell, is_ready
from garden.seasons import season_for_day
from garden.state import GameState, NormalMode
from garden.weather import roll_weather

DEFAULT_MESSAGE_MS = 3000
NO_SELECTION = "No active visual selection."


@dataclass(frozen=True)
class VisualSelection:
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cell_count(self) -> int:
        return self.width * self.height


def set_status_message(state: GameState, message: str, duration_ms: float = DEFAULT_MESSAGE_MS) -> None:
    state.status_message = message
    state.status_message_timer = duration_ms


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper - 1, value))


def move_cursor(state: GameState, dr: int, dc: int) -> None:
    """Move the cursor by a delta, clamped to the grid."""
    state.cursor_row = _clamp(state.cursor_row + dr, state.grid_rows)
    state.cursor_col = _clamp(state.cursor_col + dc, state.grid_cols)


def move_cursor_to_row(state: GameState, row: int) -> None:
    state.cursor_row = _clamp(row, state.grid_rows)


def move_cursor_to_col(state: GameState, col: int) -> None:
    state.cursor_col = _clamp(col, state.grid_cols)


# ---------------------------------------------------------------------------
# Single-cell commands
# ---------------------------------------------------------------------------


def do_plant(state: GameState, plant_type: PlantType) -> None:
    definition = definition_of(plant_type)
    error = plots.plant(state, state.cursor_row, state.cursor_col, plant_type)
    if error:
        set_status_message(state, error_message(error, definition))
    else:
        set_status_message(state, f"Planted {definition.name} for {definition.cost}g. Water it to help it grow!")


def do_water(state: GameState) -> None:
    error = plots.water(state, state.cursor_row, state.cursor_col)
    set_status_message(state, error_message(error) if error else "Watered the plant!")


def do_harvest(state: GameState) -> None:
    result = plots.harvest(state, state.cursor_row, state.cursor_col)
    if result.error:
        set_status_message(state, error_message(result.error))
    elif result.cleared:
        set_status_message(state, "Cleared dead plant.")
    else:
        name = definition_of(result.plant_type).name
        set_status_message(state, f"Harvested {name} for {result.value}g!")


def do_delete(state: GameState) -> None:
    """Pull up an unripe plant for nothing; dead or ready plants are harvested instead."""
    cell = plots.cell_at(state, state.cursor_row, state.cursor_col)
    if cell is None or cell.plant is None:
        set_status_message(state, error_message("nothing_to_delete"))
        return

    state.selected_tool = "harvest"
    if cell.plant.is_dead or is_ready(cell):
        do_harvest(state)
        return

    name = definition_of(cell.plant.type).name
    plots.remove(state, state.cursor_row, state.cursor_col)
    set_status_message(state, f"Removed {name} before harvest.")


def do_interact(state: GameState) -> None:
    """Do the obvious thing for the cell under the cursor."""
    cell = plots.cell_at(state, state.cursor_row, state.cursor_col)
    if cell is None:
        return

    if cell.plant is None:
        state.selected_tool = "seed"
        do_plant(state, state.selected_seed)
    elif cell.plant.is_dead or is_ready(cell):
        state.selected_tool = "harvest"
        do_harvest(state)
    else:
        state.selected_tool = "water"
        do_water(state)


# ---------------------------------------------------------------------------
# Visual selection and bulk commands
# ---------------------------------------------------------------------------


def visual_selection(state: GameState) -> VisualSelection | None:
    """Return the rectangle spanned by the visual anchor and the cursor."""
    anchor = state.visual_anchor
    if anchor is None:
        return None
    anchor_row, anchor_col = anchor
    return VisualSelection(
        min_row=min(anchor_row, state.cursor_row),
        max_row=max(anchor_row, state.cursor_row),
        min_col=min(anchor_col, state.cursor_col),
        max_col=max(anchor_col, state.cursor_col),
    )


def clear_visual_selection(state: GameState) -> None:
    state.mode = NormalMode()


def _selection_cells(state: GameState, selection: VisualSelection) -> Iterator[tuple[GardenCell, int, int]]:
    for row in range(selection.min_row, selection.max_row + 1):
        for col in range(selection.min_col, selection.max_col + 1):
            cell = plots.cell_at(state, row, col)
            if cell is not None:
                yield cell, row, col


def _take_selection(state: GameState) -> VisualSelection | None:
    """Capture the selection rectangle and leave visual mode."""
    selection = visual_selection(state)
    clear_visual_selection(state)
    if selection is None:
        set_status_message(state, NO_SELECTION)
    return selection


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def do_bulk_plant(state: GameState, plant_type: PlantType) -> None:
    """Plant one seed type into every empty unlocked cell until gold runs out."""
    selection = _take_selection(state)
    if selection is None:
        return

    state.selected_tool = "seed"
    definition = definition_of(plant_type)
    empty = [(row, col) for cell, row, col in _selection_cells(state, selection) if cell.plant is None]
    locked = sum(1 for row, col in empty if not state.grid[row][col].unlocked)
    targets = [(row, col) for row, col in empty if state.grid[row][col].unlocked]

    if not targets:
        set_status_message(
            state,
            "All empty plots in selection are locked." if empty else "No empty plots in selection.",
        )
        return

    planted = 0
    hit_gold_limit = False
    for row, col in targets:
        if state.gold < definition.cost:
            hit_gold_limit = True
            break
        if plots.plant(state, row, col, plant_type) is None:
            planted += 1

    if planted == 0 and hit_gold_limit:
        set_status_message(state, f"Not enough gold to plant {definition.name} seeds.")
        return

    details = []
    if hit_gold_limit:
        details.append("not enough gold")
    if locked:
        details.append(f"{locked} locked")
    suffix = f" ({', '.join(details)})" if details else ""
    noun = "seed" if planted == 1 else "seeds"
    set_status_message(state, f"Planted {planted}/{len(targets)} {definition.name} {noun}{suffix}.")


def do_bulk_water(state: GameState) -> None:
    """Water every growing plant in the selection."""
    selection = _take_selection(state)
    if selection is None:
        return
    state.selected_tool = "water"
    targets = 0
    watered = 0
    for cell, row, col in _selection_cells(state, selection):
        if cell.plant is None or cell.plant.is_dead or is_ready(cell):
            continue
        targets += 1
        if plots.water(state, row, col) is None:
            watered += 1

    if targets == 0:
        set_status_message(state, "No growing plants to water in selection.")
    else:
        set_status_message(state, f"Watered {_plural(watered, 'plant')}.")


def do_bulk_harvest(state: GameState) -> None:
    """Harvest ready plants and clear dead ones across the selection."""
    selection = _take_selection(state)
    if selection is None:
        return
    state.selected_tool = "harvest"
    tally: Counter[str] = Counter()
    for cell, row, col in _selection_cells(state, selection):
        if cell.plant is None or not (cell.plant.is_dead or is_ready(cell)):
            continue
        _tally_harvest(plots.harvest(state, row, col), tally)

    if not tally["harvested"] and not tally["cleared"]:
        set_status_message(state, "No ready or dead plants in selection.")
        return

    parts = []
    if tally["harvested"]:
        parts.append(f"Harvested {tally['harvested']} (+{tally['gold']}g)")
    if tally["cleared"]:
        parts.append(f"cleared {tally['cleared']} dead")
    set_status_message(state, f"{', '.join(parts)}.")


def do_bulk_delete(state: GameState) -> None:
    """Empty every occupied cell in the selection without payout."""
    selection = _take_selection(state)
    if selection is None:
        return
    state.selected_tool = "harvest"
    cleared = 0
    for _, row, col in _selection_cells(state, selection):
        if plots.remove(state, row, col) is None:
            cleared += 1

    if cleared == 0:
        set_status_message(state, "Nothing to clear in selection.")
    else:
        set_status_message(state, f"Cleared {_plural(cleared, 'plot')}.")


def do_bulk_interact(state: GameState) -> None:
    """
    Apply the single-cell interact rule to each cell of the selection.

    Dead plants are cleared, ready plants harvested, growing plants watered
    and empty plots planted with the selected seed. Empty plots that are
    locked or unaffordable are skipped and counted.
    """
    selection = _take_selection(state)
    if selection is None:
        return
    seed = definition_of(state.selected_seed)
    tally: Counter[str] = Counter()

    for cell, row, col in _selection_cells(state, selection):
        if cell.plant is None:
            if not cell.unlocked:
                tally["locked"] += 1
            elif state.gold < seed.cost:
                tally["no_gold"] += 1
            elif plots.plant(state, row, col, state.selected_seed) is None:
                tally["planted"] += 1
        elif cell.plant.is_dead or is_ready(cell):
            _tally_harvest(plots.harvest(state, row, col), tally)
        elif plots.water(state, row, col) is None:
            tally["watered"] += 1

    if tally["harvested"] or tally["cleared"]:
        state.selected_tool = "harvest"
    elif tally["watered"]:
        state.selected_tool = "water"
    elif tally["planted"]:
        state.selected_tool = "seed"

    parts = []
    if tally["planted"]:
        parts.append(f"planted {tally['planted']}")
    if tally["watered"]:
        parts.append(f"watered {tally['watered']}")
    if tally["harvested"]:
        parts.append(f"harvested {tally['harvested']} (+{tally['gold']}g)")
    if tally["cleared"]:
        parts.append(f"cleared {tally['cleared']} dead")
    if tally["no_gold"]:
        parts.append(f"skipped {tally['no_gold']} empty (no gold)")
    if tally["locked"]:
        parts.append(f"skipped {tally['locked']} locked")

    if not parts:
        set_status_message(state, "No applicable actions in selection.")
        return
    message = ", ".join(parts)
    set_status_message(state, f"{message[0].upper()}{message[1:]}.")


def _tally_harvest(result: plots.HarvestResult, tally: Counter[str]) -> None:
    if result.error:
        return
    if result.cleared:
        tally["cleared"] += 1
    else:
        tally["harvested"] += 1
        tally["gold"] += result.value


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def advance_to_next_day(state: GameState) -> None:
    """Grow the garden one day, then roll the calendar and weather forward."""
    plots.advance_day(state)
    state.day += 1
    state.season = season_for_day(state.day)
    state.weather = roll_weather(state.season, state.rng)
    state.day_timer = 0.0
    set_status_message(state, f"Day {state.day} begins. Weather: {state.weather}.", 2000)


def tick(state: GameState, delta_ms: float) -> None:
    """Advance real-time timers by ``delta_ms`` milliseconds."""
    if state.status_message_timer > 0:
        state.status_message_timer -= delta_ms
        if state.status_message_timer <= 0:
            state.status_message = ""
            state.status_message_timer = 0.0

    if state.auto_advance and not state.paused and state.input_mode not in ("shop", "command"):
        state.day_timer += delta_ms / 1000
        if state.day_timer >= state.day_duration:
            advance_to_next_day(state)
