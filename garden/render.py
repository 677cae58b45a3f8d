from __future__ import annotations

import curses
from dataclasses import dataclass

from garden.catalog import definition_of
from garden.commands import visual_selection
from garden.display import (
    DEAD_PLANT_SPRITE,
    EMPTY_CELL_SPRITE,
    season_color,
    season_label,
    soil_char,
    tool_icon,
    tool_name,
    water_level_color,
    water_level_label,
    weather_art,
    weather_color,
    weather_label,
)
from garden.plots import is_ready
from garden.seasons import DAYS_PER_SEASON, day_in_season, year_for_day
from garden.shop import shop_items
from garden.state import GameState

CELL_W = 6
CELL_H = 5
HUD_HEIGHT = 3
STATUS_HEIGHT = 4
GAUGE_W = CELL_W - 2
SHOP_WIDTH = 44

# Order matches curses.COLOR_BLACK..COLOR_WHITE.
_BASIC_COLORS = (
    (0x00, 0x00, 0x00),
    (0xCC, 0x33, 0x33),
    (0x44, 0xAA, 0x44),
    (0xDD, 0xAA, 0x22),
    (0x33, 0x66, 0xCC),
    (0xAA, 0x44, 0xAA),
    (0x33, 0xAA, 0xBB),
    (0xDD, 0xDD, 0xDD),
)


def nearest_basic_color(hex_color: str) -> int:
    """Map a #RRGGBB color onto the closest of the eight curses colors."""
    value = hex_color.lstrip("#")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    distances = [(r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2 for cr, cg, cb in _BASIC_COLORS]
    return distances.index(min(distances))


@dataclass
class Palette:
    enabled: bool = False

    @staticmethod
    def setup() -> "Palette":
        if not curses.has_colors():
            return Palette(enabled=False)
        curses.start_color()
        curses.use_default_colors()
        for index in range(len(_BASIC_COLORS)):
            curses.init_pair(index + 1, index, -1)
        return Palette(enabled=True)

    def attr(self, hex_color: str) -> int:
        if not self.enabled:
            return 0
        return curses.color_pair(nearest_basic_color(hex_color) + 1)


def _put(win, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write text clipped to the window; the bottom-right cell is never touched."""
    height, width = win.getmaxyx()
    if y < 0 or y >= height or x < 0 or x >= width:
        return
    limit = width - x - (1 if y == height - 1 else 0)
    if limit <= 0:
        return
    win.addstr(y, x, text[:limit], attr)


def draw(win, state: GameState, palette: Palette) -> None:
    """Draw one full frame from the game state."""
    win.erase()
    height, width = win.getmaxyx()
    draw_hud(win, state, palette, width)

    grid_w = state.grid_cols * CELL_W + 1
    grid_h = state.grid_rows * CELL_H + 1
    area_top = HUD_HEIGHT
    area_h = height - HUD_HEIGHT - STATUS_HEIGHT
    if grid_w > width or grid_h > area_h:
        _put(win, area_top + 1, 1, "Terminal too small to render the garden grid.", palette.attr("#EF5350"))
        _put(win, area_top + 2, 1, f"Need at least {grid_w}x{HUD_HEIGHT + STATUS_HEIGHT + grid_h}.")
    else:
        left = max(0, (width - grid_w) // 2)
        top = area_top + max(0, (area_h - grid_h) // 2)
        draw_grid(win, state, palette, top, left)

    draw_status(win, state, palette, height - STATUS_HEIGHT, width)
    if state.shop_open:
        draw_shop(win, state, palette, height // 2, width // 2)
    win.noutrefresh()
    curses.doupdate()


def draw_hud(win, state: GameState, palette: Palette, width: int) -> None:
    _put(win, 0, 1, " GARDEN ", palette.attr("#E94560") | curses.A_BOLD)
    _put(win, 0, 10, weather_art(state.weather), palette.attr(weather_color(state.weather)))

    day_text = f"Day {state.day}  Y{year_for_day(state.day)}  "
    season_text = f"{season_label(state.season)} ({day_in_season(state.day)}/{DAYS_PER_SEASON})"
    _put(win, 1, 1, day_text)
    _put(win, 1, 1 + len(day_text), season_text, palette.attr(season_color(state.season)))

    if state.auto_advance and not state.shop_open:
        bar_w = 12
        filled = round(min(1.0, state.day_timer / state.day_duration) * bar_w)
        _put(win, 1, width - bar_w - 3, "[" + "#" * filled + "." * (bar_w - filled) + "]")

    gold_text = f"Gold: {state.gold}g   "
    weather_text = f"Weather: {weather_label(state.weather)}   "
    tool_text = f"Tool: {tool_icon(state.selected_tool)} {tool_name(state.selected_tool)}"
    if state.selected_tool == "seed":
        tool_text += f" ({definition_of(state.selected_seed).name})"
    _put(win, 2, 1, gold_text, palette.attr("#FFD600"))
    _put(win, 2, 1 + len(gold_text), weather_text, palette.attr(weather_color(state.weather)))
    _put(win, 2, 1 + len(gold_text) + len(weather_text), tool_text, palette.attr("#80DEEA"))

    stats = f"H:{state.total_harvested} E:{state.total_earned}g"
    if state.paused:
        stats = "PAUSED  " + stats
    _put(win, 2, width - len(stats) - 2, stats)


def draw_grid(win, state: GameState, palette: Palette, top: int, left: int) -> None:
    selection = visual_selection(state)
    border = "+" + "-" * (CELL_W - 1)
    for r in range(state.grid_rows):
        y = top + r * CELL_H
        _put(win, y, left, border * state.grid_cols + "+")
        for c in range(state.grid_cols):
            cell = state.grid[r][c]
            x = left + c * CELL_W
            attr = 0
            if cell.plant is None:
                fill = soil_char(cell.soil_state)
                sprite = (EMPTY_CELL_SPRITE[0], EMPTY_CELL_SPRITE[1], f" {fill * 3} ")
                if not cell.unlocked:
                    sprite = ("     ", " ### ", "     ")
            elif cell.plant.is_dead:
                sprite = DEAD_PLANT_SPRITE
                attr = palette.attr("#888888")
            else:
                definition = definition_of(cell.plant.type)
                stage = definition.stages[cell.plant.stage_index]
                sprite = stage.sprite
                attr = palette.attr(stage.color)
                if is_ready(cell):
                    attr |= curses.A_BOLD
            if r == state.cursor_row and c == state.cursor_col:
                attr |= curses.A_REVERSE
            elif selection and selection.min_row <= r <= selection.max_row and selection.min_col <= c <= selection.max_col:
                attr |= curses.A_UNDERLINE
            for offset, line in enumerate(sprite):
                _put(win, y + 1 + offset, x, "|")
                _put(win, y + 1 + offset, x + 1, line, attr)
            _put(win, y + 1 + len(sprite), x, "|")
            if cell.plant is not None:
                draw_water_gauge(win, palette, y + 1 + len(sprite), x + 1, cell.plant.water_level)
        for offset in range(CELL_H - 1):
            _put(win, y + 1 + offset, left + state.grid_cols * CELL_W, "|")
    _put(win, top + state.grid_rows * CELL_H, left, border * state.grid_cols + "+")


def draw_water_gauge(win, palette: Palette, y: int, x: int, level: float) -> None:
    """Draw a ``====--`` bar filled in proportion to a plant's water level."""
    filled = round(level * GAUGE_W)
    _put(win, y, x, "=" * filled, palette.attr("#42A5F5"))
    _put(win, y, x + filled, "-" * (GAUGE_W - filled), palette.attr("#333333"))


def key_help(state: GameState) -> str:
    auto = "ON" if state.auto_advance else "OFF"
    return (
        "[Space] Interact  [E] Plant  [X] Delete  [V] Visual  "
        f"[S] Shop  [N] Next Day  [T] Auto:{auto}  [:q] Quit"
    )


def draw_status(win, state: GameState, palette: Palette, top: int, width: int) -> None:
    _put(win, top, 0, "-" * width, palette.attr("#0F3460"))
    if state.input_mode == "command":
        _put(win, top + 1, 2, ":" + state.command_buffer)
    elif state.status_message:
        _put(win, top + 1, 2, state.status_message)

    mode = state.input_mode.upper()
    selection = visual_selection(state)
    if selection is not None:
        mode += f" {selection.width}x{selection.height}"
    cell = state.grid[state.cursor_row][state.cursor_col]
    info = f"-- {mode} --  ({state.cursor_row},{state.cursor_col})"
    if cell.plant is not None and not cell.plant.is_dead:
        level = cell.plant.water_level
        _put(win, top + 2, 40, f"Water: {water_level_label(level)}", palette.attr(water_level_color(level)))
    _put(win, top + 2, 2, info, palette.attr("#80DEEA"))
    _put(win, top + 3, 2, key_help(state), palette.attr("#666666"))


def draw_shop(win, state: GameState, palette: Palette, center_y: int, center_x: int) -> None:
    items = shop_items()
    height = len(items) * 2 + 5
    y0 = center_y - height // 2
    x0 = center_x - SHOP_WIDTH // 2
    frame = palette.attr("#E94560")
    _put(win, y0, x0, "+" + "=" * (SHOP_WIDTH - 2) + "+", frame)
    for y in range(y0 + 1, y0 + height - 1):
        _put(win, y, x0, "|" + " " * (SHOP_WIDTH - 2) + "|", frame)
    _put(win, y0 + height - 1, x0, "+" + "=" * (SHOP_WIDTH - 2) + "+", frame)
    _put(win, y0, x0 + (SHOP_WIDTH - 11) // 2, " SEED SHOP ", palette.attr("#FFD600") | curses.A_BOLD)
    _put(win, y0 + 1, x0 + 2, f"Your gold: {state.gold}g", palette.attr("#FFD600"))

    for index, item in enumerate(items):
        y = y0 + 3 + index * 2
        selected = index == state.shop_cursor
        attr = curses.A_REVERSE if selected else 0
        cost_attr = palette.attr("#FFD600" if state.gold >= item.cost else "#EF5350")
        _put(win, y, x0 + 2, ("> " if selected else "  ") + item.name.ljust(20), attr)
        _put(win, y, x0 + 26, f"{item.cost}g", cost_attr)
        _put(win, y + 1, x0 + 4, item.description[: SHOP_WIDTH - 6], palette.attr("#AAAAAA"))
    _put(win, y0 + height - 2, x0 + 2, "[J/K] Browse  [Enter] Select  [Esc] Close", palette.attr("#666666"))
