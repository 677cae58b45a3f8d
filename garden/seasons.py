from __future__ import annotations

from typing import Literal

Season = Literal["spring", "summer", "fall", "winter"]

SEASONS: tuple[Season, ...] = ("spring", "summer", "fall", "winter")
DAYS_PER_SEASON = 7
DAYS_PER_YEAR = DAYS_PER_SEASON * len(SEASONS)


def _check_day(day: int) -> None:
    if day < 1:
        raise ValueError(f"day must be >= 1 (got {day})")


def season_for_day(day: int) -> Season:
    """Return the season for a 1-based absolute day counter."""
    # Seasons are 7 days long and wrap every 28 days:
    #  1..7   = spring
    #  8..14  = summer
    # 15..21  = fall
    # 22..28  = winter
    _check_day(day)
    return SEASONS[((day - 1) // DAYS_PER_SEASON) % len(SEASONS)]


def day_in_season(day: int) -> int:
    """Return the 1-based day within the current season."""
    _check_day(day)
    return ((day - 1) % DAYS_PER_SEASON) + 1


def year_for_day(day: int) -> int:
    """Return the 1-based year for an absolute day counter."""
    _check_day(day)
    return (day - 1) // DAYS_PER_YEAR + 1
