from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from garden.commands import (
    advance_to_next_day,
    clear_visual_selection,
    do_bulk_delete,
    do_bulk_interact,
    do_bulk_plant,
    do_delete,
    do_interact,
    do_plant,
    move_cursor,
    move_cursor_to_col,
    move_cursor_to_row,
    set_status_message,
)
from garden.shop import select_seed_from_menu, shop_items
from garden.state import CommandMode, GameState, NormalMode, ShopMode, VisualMode

QUIT_COMMANDS = ("q", "q!", "quit")
CONFIRM_KEYS = ("space", "enter", "return")

_DIRECTIONS = {
    "up": (-1, 0),
    "k": (-1, 0),
    "down": (1, 0),
    "j": (1, 0),
    "left": (0, -1),
    "h": (0, -1),
    "right": (0, 1),
    "l": (0, 1),
}


@dataclass(frozen=True)
class KeyEvent:
    name: str
    ctrl: bool = False
    shift: bool = False
    meta: bool = False
    option: bool = False
    sequence: str = ""


def handle_keypress(state: GameState, key: KeyEvent, on_quit: Callable[[], None]) -> None:
    """Dispatch one key event according to the current input mode."""
    if _is_interrupt(key):
        if isinstance(state.mode, NormalMode):
            on_quit()
            return
        return_to_normal_mode(state)
        set_status_message(state, "Returned to normal mode.", 1500)
        return

    if isinstance(state.mode, ShopMode):
        state.motion.reset()
        _handle_shop(state, state.mode, key)
    elif isinstance(state.mode, CommandMode):
        state.motion.reset()
        _handle_command(state, state.mode, key, on_quit)
    elif isinstance(state.mode, VisualMode):
        _handle_visual(state, key)
    else:
        _handle_normal(state, key)


def return_to_normal_mode(state: GameState) -> None:
    """Drop any shop, selection, command buffer or pending motion."""
    state.mode = NormalMode()
    state.motion.reset()


def open_shop(state: GameState) -> None:
    state.mode = ShopMode(cursor=0)
    state.motion.reset()
    set_status_message(state, "Seed menu opened. Use J/K to browse, Enter to select.", 5000)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


def _handle_movement(state: GameState, key: KeyEvent) -> bool:
    """Apply the motions shared by normal and visual mode."""
    motion = state.motion.feed(_row_motion_key(key))
    if motion == "top":
        move_cursor_to_row(state, 0)
        return True
    if motion == "bottom":
        move_cursor_to_row(state, state.grid_rows - 1)
        return True
    if motion == "pending":
        return True

    if _is_row_start(key):
        move_cursor_to_col(state, 0)
        return True
    if _is_row_end(key):
        move_cursor_to_col(state, state.grid_cols - 1)
        return True
    if key.name in _DIRECTIONS:
        move_cursor(state, *_DIRECTIONS[key.name])
        return True
    if key.name == "w":
        move_cursor_word_forward(state)
        return True
    if key.name == "b":
        move_cursor_word_backward(state)
        return True
    return False


def _handle_normal(state: GameState, key: KeyEvent) -> None:
    if _handle_movement(state, key):
        return

    if key.name == "v":
        state.mode = VisualMode(anchor=(state.cursor_row, state.cursor_col))
        set_status_message(state, "Visual mode: select a block, then press [Space] for smart action.", 2500)
    elif key.sequence == ":" or key.name == ":":
        state.mode = CommandMode(buffer="")
    elif key.name in CONFIRM_KEYS:
        do_interact(state)
    elif key.name == "e":
        state.selected_tool = "seed"
        do_plant(state, state.selected_seed)
    elif key.name == "x":
        do_delete(state)
    elif key.name == "n":
        advance_to_next_day(state)
    elif key.name == "s":
        open_shop(state)
    elif key.name == "t":
        state.auto_advance = not state.auto_advance
        set_status_message(state, "Auto-advance ON" if state.auto_advance else "Auto-advance OFF", 2000)
    elif key.name == "p":
        state.paused = not state.paused
        set_status_message(state, "Game paused" if state.paused else "Game resumed", 2000)


def _handle_visual(state: GameState, key: KeyEvent) -> None:
    if _handle_movement(state, key):
        return

    if key.name in ("escape", "v"):
        clear_visual_selection(state)
        set_status_message(state, "Visual selection canceled.", 1500)
    elif key.name in CONFIRM_KEYS:
        do_bulk_interact(state)
    elif key.name == "e":
        do_bulk_plant(state, state.selected_seed)
    elif key.name == "x":
        do_bulk_delete(state)
    elif key.name == "s":
        open_shop(state)


def _handle_shop(state: GameState, mode: ShopMode, key: KeyEvent) -> None:
    last = len(shop_items()) - 1
    if key.name in ("up", "k"):
        state.mode = ShopMode(cursor=max(0, mode.cursor - 1))
    elif key.name in ("down", "j"):
        state.mode = ShopMode(cursor=min(last, mode.cursor + 1))
    elif key.name in CONFIRM_KEYS:
        selection = select_seed_from_menu(mode.cursor)
        if selection.seed is not None:
            state.selected_seed = selection.seed
            state.selected_tool = "seed"
            state.mode = NormalMode()
        set_status_message(state, selection.message)
    elif key.name in ("q", "s", "escape"):
        state.mode = NormalMode()
        set_status_message(state, "Seed menu closed.", 1500)


def _handle_command(state: GameState, mode: CommandMode, key: KeyEvent, on_quit: Callable[[], None]) -> None:
    if key.name == "escape":
        state.mode = NormalMode()
    elif key.name in ("backspace", "delete"):
        state.mode = CommandMode(buffer=mode.buffer[:-1]) if mode.buffer else NormalMode()
    elif key.name in ("return", "enter"):
        execute_command(state, mode.buffer, on_quit)
    elif _is_printable(key):
        state.mode = CommandMode(buffer=mode.buffer + key.sequence)


def execute_command(state: GameState, buffer: str, on_quit: Callable[[], None]) -> None:
    """Run a command-line entry and drop back to normal mode."""
    command = buffer.strip()
    state.mode = NormalMode()
    if command in QUIT_COMMANDS:
        on_quit()
        return
    if not command:
        return
    set_status_message(state, f"Not a recognized command: :{command}", 2500)


# ---------------------------------------------------------------------------
# Word motions
# ---------------------------------------------------------------------------


def _has_plant(state: GameState, col: int) -> bool:
    return state.grid[state.cursor_row][col].plant is not None


def move_cursor_word_forward(state: GameState) -> None:
    """Jump past the current run of plants to the next plant in the row."""
    last_col = state.grid_cols - 1
    if state.cursor_col >= last_col:
        return

    col = state.cursor_col
    while col <= last_col and _has_plant(state, col):
        col += 1
    while col <= last_col and not _has_plant(state, col):
        col += 1
    move_cursor_to_col(state, min(col, last_col))


def move_cursor_word_backward(state: GameState) -> None:
    """Jump back to the start of the previous run of plants in the row."""
    col = state.cursor_col - 1
    while col >= 0 and not _has_plant(state, col):
        col -= 1
    if col < 0:
        move_cursor_to_col(state, 0)
        return
    while col > 0 and _has_plant(state, col - 1):
        col -= 1
    move_cursor_to_col(state, col)


# ---------------------------------------------------------------------------
# Key classification
# ---------------------------------------------------------------------------


def _row_motion_key(key: KeyEvent) -> str | None:
    if key.sequence == "G" or (key.shift and key.name == "g"):
        return "G"
    if key.sequence == "g" or (key.name == "g" and not key.shift):
        return "g"
    return None


def _is_row_start(key: KeyEvent) -> bool:
    return key.name == "home" or (key.name == "0" and not key.shift)


def _is_row_end(key: KeyEvent) -> bool:
    return key.name in ("end", "$") or key.sequence == "$" or (key.shift and key.name == "4")


def _is_interrupt(key: KeyEvent) -> bool:
    return (key.ctrl and key.name == "c") or key.sequence == "\x03"


def _is_printable(key: KeyEvent) -> bool:
    return (
        not key.ctrl
        and not key.meta
        and not key.option
        and len(key.sequence) == 1
        and key.sequence >= " "
        and key.sequence != "\x7f"
    )
