import numpy as np
import pytest

from garden import plots
from garden.config import GameConfig
from garden.render import (
    CELL_H,
    CELL_W,
    GAUGE_W,
    STATUS_HEIGHT,
    Palette,
    draw_grid,
    draw_hud,
    draw_status,
    key_help,
    nearest_basic_color,
)
from garden.state import create_game_state


@pytest.mark.parametrize(
    "hex_color,expected",
    [
        ("#000000", 0),
        ("#EF5350", 1),
        ("#66BB6A", 2),
        ("#FFD600", 3),
        ("#42A5F5", 6),
        ("#FFFFFF", 7),
    ],
)
def test_nearest_basic_color(hex_color, expected):
    """Hex colors snap to the closest of the eight terminal colors."""
    assert nearest_basic_color(hex_color) == expected


class FakeWindow:
    """Records text written through addstr into a character grid."""

    def __init__(self, height=40, width=120):
        self.height = height
        self.width = width
        self.rows = [[" "] * width for _ in range(height)]

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        for offset, ch in enumerate(text):
            self.rows[y][x + offset] = ch

    def row(self, y):
        return "".join(self.rows[y])


def _garden_with_carrot(water_level):
    state = create_game_state(GameConfig(), rng=np.random.default_rng(0))
    assert plots.plant(state, 2, 3, "carrot") is None
    state.grid[2][3].plant.water_level = water_level
    return state


@pytest.mark.parametrize("level,gauge", [(0.05, "----"), (0.5, "==--"), (0.75, "===-"), (1.0, "====")])
def test_each_plot_shows_a_water_gauge(level, gauge):
    """Planted cells show a water bar even when the cursor is elsewhere."""
    state = _garden_with_carrot(level)
    win = FakeWindow()
    draw_grid(win, state, Palette(), 0, 0)
    gauge_row = 2 * CELL_H + CELL_H - 1
    x = 3 * CELL_W + 1
    assert win.row(gauge_row)[x : x + GAUGE_W] == gauge
    # Empty plots leave the gauge row blank.
    assert win.row(CELL_H - 1)[1:CELL_W] == " " * (CELL_W - 1)


def test_status_bar_lists_key_bindings():
    """The status bar carries a help line with the main bindings."""
    state = _garden_with_carrot(0.5)
    win = FakeWindow()
    draw_status(win, state, Palette(), 0, win.width)
    help_row = win.row(STATUS_HEIGHT - 1)
    for hint in ("[Space] Interact", "[E] Plant", "[X] Delete", "[V] Visual", "[S] Shop", "[N] Next Day", "[:q] Quit"):
        assert hint in help_row
    assert "Auto:OFF" in help_row

    state.auto_advance = True
    assert "Auto:ON" in key_help(state)


def test_hud_shows_tool_icon():
    """The HUD shows the selected tool's icon next to its name."""
    state = _garden_with_carrot(0.5)
    state.selected_tool = "water"
    win = FakeWindow()
    draw_hud(win, state, Palette(), win.width)
    assert "Tool: [~] Water" in win.row(2)
