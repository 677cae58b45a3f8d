from __future__ import annotations

from typing import Literal, Protocol

from garden.seasons import Season

Weather = Literal["sunny", "rainy", "cloudy", "drought"]

WEATHER_TYPES: tuple[Weather, ...] = ("sunny", "rainy", "cloudy", "drought")

# Per-season weights in WEATHER_TYPES order.
WEATHER_WEIGHTS: dict[Season, tuple[int, int, int, int]] = {
    "spring": (35, 35, 25, 5),
    "summer": (45, 15, 15, 25),
    "fall": (25, 30, 35, 10),
    "winter": (15, 20, 55, 10),
}

_GROWTH_MULTIPLIER: dict[Weather, float] = {
    "sunny": 1.0,
    "rainy": 1.3,
    "cloudy": 0.7,
    "drought": 0.5,
}

# Water lost per day; negative values add water.
_WATER_DRAIN: dict[Weather, float] = {
    "sunny": 0.2,
    "rainy": -0.3,
    "cloudy": 0.1,
    "drought": 0.4,
}


class RandomSource(Protocol):
    def random(self) -> float: ...


def roll_weather(season: Season, rng: RandomSource) -> Weather:
    """
    Pick the weather for a day in the given season.

    Walks the cumulative weight table: the draw is uniform in [0, total) and
    each weight is subtracted in order until the draw is used up.
    """
    weights = WEATHER_WEIGHTS[season]
    roll = float(rng.random()) * sum(weights)
    for weather, weight in zip(WEATHER_TYPES, weights):
        roll -= weight
        if roll <= 0:
            return weather
    return "sunny"


def growth_multiplier(weather: Weather) -> float:
    """Return the growth-rate multiplier for the weather."""
    return _GROWTH_MULTIPLIER[weather]


def water_drain(weather: Weather) -> float:
    """Return the water drained from each plant over one day."""
    return _WATER_DRAIN[weather]
