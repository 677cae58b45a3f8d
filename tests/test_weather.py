from collections import Counter

import numpy as np
import pytest

from garden.weather import growth_multiplier, roll_weather, water_drain


class FixedRandom:
    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.mark.parametrize(
    "season, draw, expected",
    [
        ("spring", 0.1, "sunny"),
        ("spring", 0.5, "rainy"),
        ("spring", 0.8, "cloudy"),
        ("spring", 0.97, "drought"),
        ("summer", 0.4, "sunny"),
        ("summer", 0.5, "rainy"),
        ("summer", 0.9, "drought"),
        ("winter", 0.5, "cloudy"),
    ],
)
def test_roll_weather_walks_cumulative_weights(season, draw, expected):
    """The draw should land in the bucket of the cumulative weight table."""
    assert roll_weather(season, FixedRandom(draw)) == expected


def test_roll_weather_falls_back_to_sunny():
    """A draw past the total weight should fall back to sunny."""
    assert roll_weather("fall", FixedRandom(1.5)) == "sunny"


def test_roll_weather_with_numpy_generator():
    """Winter should mostly be cloudy over many seeded rolls."""
    rng = np.random.default_rng(7)
    counts = Counter(roll_weather("winter", rng) for _ in range(5000))
    assert set(counts) == {"sunny", "rainy", "cloudy", "drought"}
    assert counts.most_common(1)[0][0] == "cloudy"


def test_weather_modifiers():
    """Growth multipliers and water drain should match the weather table."""
    assert growth_multiplier("sunny") == 1.0
    assert growth_multiplier("rainy") == 1.3
    assert growth_multiplier("cloudy") == 0.7
    assert growth_multiplier("drought") == 0.5
    assert water_drain("sunny") == 0.2
    assert water_drain("rainy") == -0.3
    assert water_drain("cloudy") == 0.1
    assert water_drain("drought") == 0.4
