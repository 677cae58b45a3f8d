from __future__ import annotations

import math

from garden.catalog import PlantDefinition
from garden.seasons import Season
from garden.weather import Weather, growth_multiplier

PREFERRED_SEASON_FACTOR = 1.4
WINTER_FACTOR = 0.5
WET_THRESHOLD = 0.6
THIRSTY_THRESHOLD = 0.3


def season_factor(definition: PlantDefinition, season: Season) -> float:
    """Return the growth factor a season applies to a plant type."""
    if season in definition.preferred_seasons:
        return PREFERRED_SEASON_FACTOR
    if season == "winter":
        return WINTER_FACTOR
    return 1.0


def water_factor(water_level: float) -> float:
    """Well-watered plants grow faster, thirsty ones slower."""
    if water_level > WET_THRESHOLD:
        return 1.2
    if water_level < THIRSTY_THRESHOLD:
        return 0.6
    return 1.0


def growth_rate(
    definition: PlantDefinition,
    season: Season,
    weather: Weather,
    water_level: float,
) -> float:
    """Return the growth progress a living plant gains in one day."""
    return (
        (1.0 / definition.growth_days)
        * growth_multiplier(weather)
        * season_factor(definition, season)
        * water_factor(water_level)
    )


def target_stage(growth_progress: float, stage_count: int) -> int:
    """Map accumulated progress onto a stage bucket, capped at the final stage."""
    return min(stage_count - 1, int(math.floor(growth_progress * stage_count)))
