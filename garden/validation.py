from __future__ import annotations

from garden.config import GameConfig


class ValidationError(ValueError):
    """Raised when input data is logically invalid."""


def validate_game_config(cfg: GameConfig) -> None:
    """Validate configuration invariants before a session starts."""
    _ensure_positive(cfg.grid_rows, "grid.rows")
    _ensure_positive(cfg.grid_cols, "grid.cols")
    if cfg.starting_gold < 0:
        raise ValidationError(f"economy.starting_gold must be >= 0 (got {cfg.starting_gold})")
    _ensure_positive(cfg.day_duration, "time.day_duration")
    _validate_locked_cells(cfg)


def _ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValidationError(f"{name} must be > 0 (got {value})")


def _validate_locked_cells(cfg: GameConfig) -> None:
    for row, col in cfg.locked_cells:
        if not (0 <= row < cfg.grid_rows and 0 <= col < cfg.grid_cols):
            raise ValidationError(
                f"grid.locked cell ({row}, {col}) is outside the {cfg.grid_rows}x{cfg.grid_cols} grid"
            )
