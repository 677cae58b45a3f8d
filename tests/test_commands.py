import numpy as np
import pytest

from garden import commands, plots
from garden.commands import (
    advance_to_next_day,
    do_bulk_delete,
    do_bulk_harvest,
    do_bulk_interact,
    do_bulk_plant,
    do_bulk_water,
    do_delete,
    do_interact,
    move_cursor,
    set_status_message,
    tick,
    visual_selection,
)
from garden.config import GameConfig
from garden.plots import PlantInstance
from garden.state import CommandMode, ShopMode, VisualMode, create_game_state


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _state(**config):
    state = create_game_state(GameConfig(**config), rng=FixedRandom(0.5))
    state.weather = "sunny"
    return state


def _select(state, anchor, cursor):
    state.mode = VisualMode(anchor=anchor)
    state.cursor_row, state.cursor_col = cursor


def test_move_cursor_clamps_to_grid():
    """Cursor deltas never leave the grid."""
    state = _state()
    move_cursor(state, -100, 100)
    assert (state.cursor_row, state.cursor_col) == (0, 7)
    move_cursor(state, 100, -100)
    assert (state.cursor_row, state.cursor_col) == (5, 0)


def test_visual_selection_normalizes_corners():
    """The rectangle is ordered regardless of anchor/cursor placement."""
    state = _state()
    assert visual_selection(state) is None
    _select(state, anchor=(4, 6), cursor=(1, 2))
    sel = visual_selection(state)
    assert (sel.min_row, sel.max_row, sel.min_col, sel.max_col) == (1, 4, 2, 6)
    assert sel.width == 5
    assert sel.height == 4
    assert sel.cell_count == 20


def test_do_interact_dispatches_by_cell():
    """Interact plants, waters, harvests or clears depending on the cell."""
    state = _state()
    do_interact(state)
    assert state.selected_tool == "seed"
    assert state.grid[0][0].plant.type == "carrot"
    assert state.status_message.startswith("Planted Carrot for 5g")

    do_interact(state)
    assert state.selected_tool == "water"
    assert state.status_message == "Watered the plant!"

    state.grid[0][0].plant.stage_index = 3
    do_interact(state)
    assert state.selected_tool == "harvest"
    assert state.status_message == "Harvested Carrot for 15g!"
    assert state.gold == 60

    state.grid[0][0].plant = PlantInstance("carrot", is_dead=True, water_level=0.0)
    do_interact(state)
    assert state.status_message == "Cleared dead plant."
    assert state.grid[0][0].plant is None


def test_do_plant_reports_failures():
    """Failure reasons surface as status text."""
    state = _state()
    state.gold = 2
    commands.do_plant(state, "carrot")
    assert state.status_message == "Not enough gold! Need 5g."
    commands.do_water(state)
    assert state.status_message == "Nothing to water here."
    commands.do_harvest(state)
    assert state.status_message == "Nothing to harvest here."


def test_do_delete():
    """Delete pulls unripe plants for free but harvests ready ones."""
    state = _state()
    do_delete(state)
    assert state.status_message == "Nothing to delete here."

    plots.plant(state, 0, 0, "carrot")
    do_delete(state)
    assert state.grid[0][0].plant is None
    assert state.gold == 45
    assert state.status_message == "Removed Carrot before harvest."

    state.grid[0][0].plant = PlantInstance("carrot", stage_index=3)
    do_delete(state)
    assert state.gold == 60
    assert state.total_harvested == 1


def test_bulk_plant_stops_when_gold_runs_out():
    """Bulk planting plants floor(gold / cost) seeds and never overdraws."""
    state = _state()
    state.gold = 12
    _select(state, anchor=(0, 0), cursor=(0, 3))
    do_bulk_plant(state, "carrot")
    planted = [cell.plant for cell in state.grid[0][:4] if cell.plant is not None]
    assert len(planted) == 2
    assert state.gold == 2
    assert state.input_mode == "normal"
    assert state.status_message == "Planted 2/4 Carrot seeds (not enough gold)."


def test_bulk_plant_reports_locked_and_broke():
    """Locked plots are skipped and a broke player plants nothing."""
    state = _state(locked_cells=((0, 1),))
    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_plant(state, "mushroom")
    assert state.status_message == "Planted 2/2 Mushroom seeds (1 locked)."
    assert state.grid[0][1].plant is None

    state.gold = 0
    _select(state, anchor=(1, 0), cursor=(1, 2))
    do_bulk_plant(state, "carrot")
    assert state.status_message == "Not enough gold to plant Carrot seeds."
    assert state.visual_anchor is None


def test_bulk_plant_without_selection():
    """Bulk commands outside visual mode only report the missing selection."""
    state = _state()
    do_bulk_plant(state, "carrot")
    assert state.status_message == "No active visual selection."
    assert state.gold == 50


def test_bulk_interact_mixed_selection():
    """Bulk interact clears, harvests, waters and plants across a row."""
    state = _state()
    state.grid[0][0].plant = PlantInstance("carrot", is_dead=True, water_level=0.0)
    state.grid[0][1].plant = PlantInstance("carrot", stage_index=3)
    state.grid[0][2].plant = PlantInstance("carrot", stage_index=1)
    _select(state, anchor=(0, 0), cursor=(0, 3))

    do_bulk_interact(state)
    assert state.status_message == "Planted 1, watered 1, harvested 1 (+15g), cleared 1 dead."
    assert state.gold == 60
    assert state.selected_tool == "harvest"
    assert state.grid[0][0].plant is None
    assert state.grid[0][1].plant is None
    assert state.grid[0][2].plant.water_level == pytest.approx(0.9)
    assert state.grid[0][3].plant.type == "carrot"
    assert state.input_mode == "normal"


def test_bulk_interact_skips_unaffordable_and_locked():
    """Empty plots that cannot be planted are counted as skipped."""
    state = _state(locked_cells=((0, 0),))
    state.gold = 0
    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_interact(state)
    assert state.status_message == "Skipped 2 empty (no gold), skipped 1 locked."
    assert state.selected_tool == "hand"


def test_bulk_interact_picks_water_tool():
    """With only growing plants the tool switches to water."""
    state = _state()
    state.grid[2][2].plant = PlantInstance("rose")
    state.grid[3][2].plant = PlantInstance("rose")
    _select(state, anchor=(2, 2), cursor=(3, 2))
    do_bulk_interact(state)
    assert state.status_message == "Watered 2."
    assert state.selected_tool == "water"


def test_bulk_water_harvest_delete():
    """The single-purpose bulk commands aggregate their own counts."""
    state = _state()
    state.grid[0][0].plant = PlantInstance("tomato", stage_index=1)
    state.grid[0][1].plant = PlantInstance("tomato", stage_index=3)
    state.grid[0][2].plant = PlantInstance("tomato", is_dead=True, water_level=0.0)

    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_water(state)
    assert state.status_message == "Watered 1 plant."

    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_harvest(state)
    assert state.status_message == "Harvested 1 (+25g), cleared 1 dead."
    assert state.gold == 75

    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_delete(state)
    assert state.status_message == "Cleared 1 plot."
    assert all(cell.plant is None for cell in state.grid[0])

    _select(state, anchor=(0, 0), cursor=(0, 2))
    do_bulk_harvest(state)
    assert state.status_message == "No ready or dead plants in selection."


def test_advance_to_next_day():
    """Next day grows plants, rolls the calendar and rerolls weather."""
    state = _state()
    state.day_timer = 3.0
    plots.plant(state, 0, 0, "carrot")
    advance_to_next_day(state)
    assert state.day == 2
    assert state.season == "spring"
    assert state.weather == "rainy"
    assert state.day_timer == 0.0
    assert state.grid[0][0].plant.growth_progress > 0
    assert state.status_message == "Day 2 begins. Weather: rainy."
    assert state.status_message_timer == 2000

    state.day = 7
    advance_to_next_day(state)
    assert state.day == 8
    assert state.season == "summer"


def test_tick_clears_status_message():
    """Status messages expire after their countdown."""
    state = _state()
    set_status_message(state, "hello", 1000)
    tick(state, 500)
    assert state.status_message == "hello"
    tick(state, 600)
    assert state.status_message == ""
    assert state.status_message_timer == 0


def test_tick_auto_advances_day():
    """Auto-advance fires once the day timer reaches the day duration."""
    state = _state(auto_advance=True, day_duration=8.0)
    tick(state, 7000)
    assert state.day == 1
    tick(state, 1000)
    assert state.day == 2
    assert state.day_timer == 0.0


@pytest.mark.parametrize("blocker", ["paused", "shop", "command", "off"])
def test_tick_holds_day_timer(blocker):
    """Pause, the shop, command mode and auto-advance off freeze the day timer."""
    state = _state(auto_advance=True)
    if blocker == "paused":
        state.paused = True
    elif blocker == "shop":
        state.mode = ShopMode()
    elif blocker == "command":
        state.mode = CommandMode(buffer="q")
    else:
        state.auto_advance = False
    tick(state, 60_000)
    assert state.day == 1
    assert state.day_timer == 0.0


def test_tick_runs_in_visual_mode():
    """Visual mode does not stop the day timer."""
    state = _state(auto_advance=True)
    state.mode = VisualMode(anchor=(0, 0))
    tick(state, 2500)
    assert state.day_timer == pytest.approx(2.5)


def test_fresh_state_uses_seeded_generator():
    """Without an injected source the config seed fixes the weather stream."""
    first = create_game_state(GameConfig(seed=42))
    second = create_game_state(GameConfig(seed=42))
    assert isinstance(first.rng, np.random.Generator)
    for _ in range(10):
        advance_to_next_day(first)
        advance_to_next_day(second)
        assert first.weather == second.weather
