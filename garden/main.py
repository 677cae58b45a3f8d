from __future__ import annotations

import argparse
import curses
import sys
import time
from dataclasses import replace
from pathlib import Path

from garden.commands import tick
from garden.config import GameConfig, default_config_path
from garden.controls import KeyEvent, handle_keypress
from garden.render import Palette, draw
from garden.state import GameState, create_game_state
from garden.validation import validate_game_config

FRAME_MS = 100
# A lone escape is otherwise held for a full second waiting for a sequence.
ESCAPE_DELAY_MS = 25

_SPECIAL_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
}

_CONTROL_CHARS = {
    "\x1b": "escape",
    "\n": "return",
    "\r": "return",
    " ": "space",
    "\x7f": "backspace",
    "\b": "backspace",
    "\t": "tab",
}


def load_config(path: str | Path | None = None) -> GameConfig:
    """Load and validate a config file; defaults apply when no path is given."""
    path = path or default_config_path()
    cfg = GameConfig() if path is None else GameConfig.from_json_file(path)
    validate_game_config(cfg)
    return cfg


def translate_key(code: int | str) -> KeyEvent | None:
    """Turn a curses ``get_wch`` result into a key event."""
    if isinstance(code, int):
        name = _SPECIAL_KEYS.get(code)
        return KeyEvent(name=name) if name else None
    if code in _CONTROL_CHARS:
        return KeyEvent(name=_CONTROL_CHARS[code], sequence=code)
    if len(code) == 1 and ord(code) < 32:
        letter = chr(ord(code) + 96)
        return KeyEvent(name=letter, ctrl=True, sequence=code)
    return KeyEvent(name=code.lower(), shift=code.isupper(), sequence=code)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="garden", description="Tend a terminal garden through the seasons.")
    parser.add_argument("config", nargs="?", help="optional JSON config file")
    parser.add_argument("--seed", type=int, help="seed for the weather stream")
    parser.add_argument("--auto", action="store_true", help="start with auto-advancing days")
    return parser.parse_args(argv)


def run_session(stdscr, state: GameState) -> None:
    """Drive input, timers and drawing until the player quits."""
    curses.curs_set(0)
    curses.raw()
    curses.set_escdelay(ESCAPE_DELAY_MS)
    stdscr.keypad(True)
    stdscr.timeout(FRAME_MS)
    palette = Palette.setup()

    running = True

    def quit_game() -> None:
        nonlocal running
        running = False

    last = time.monotonic()
    draw(stdscr, state, palette)
    while running:
        try:
            code = stdscr.get_wch()
        except curses.error:
            code = None  # timeout with no key pressed
        if code == curses.KEY_RESIZE:
            code = None
        if code is not None:
            key = translate_key(code)
            if key is not None:
                handle_keypress(state, key, quit_game)

        now = time.monotonic()
        tick(state, (now - last) * 1000)
        last = now
        if running:
            draw(stdscr, state, palette)


def main(argv: list[str] | None = None) -> int:
    """Run the garden in the current terminal."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.seed is not None:
        cfg = replace(cfg, seed=args.seed)
    if args.auto:
        cfg = replace(cfg, auto_advance=True)

    state = create_game_state(cfg)
    curses.wrapper(run_session, state)

    print(f"Day {state.day}: harvested {state.total_harvested} plants, earned {state.total_earned}g.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
