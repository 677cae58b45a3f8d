from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from garden.seasons import Season

PlantType = Literal["carrot", "sunflower", "tomato", "rose", "mushroom", "pumpkin"]
WaterNeed = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class GrowthStage:
    name: str
    # Three rows of art, each at most five characters wide.
    sprite: tuple[str, str, str]
    color: str


@dataclass(frozen=True)
class PlantDefinition:
    type: PlantType
    name: str
    cost: int
    sell_value: int
    growth_days: int
    water_need: WaterNeed
    preferred_seasons: tuple[Season, ...]
    stages: tuple[GrowthStage, ...]

    @property
    def final_stage(self) -> int:
        """Return the index of the harvest-ready stage."""
        return len(self.stages) - 1


@dataclass(frozen=True)
class ShopItem:
    type: PlantType
    name: str
    cost: int
    description: str


_SEED = GrowthStage("seed", ("     ", "  .  ", " ___ "), "#8B6914")

PLANT_DEFINITIONS: dict[PlantType, PlantDefinition] = {
    "carrot": PlantDefinition(
        type="carrot",
        name="Carrot",
        cost=5,
        sell_value=15,
        growth_days=3,
        water_need="medium",
        preferred_seasons=("spring", "fall"),
        stages=(
            _SEED,
            GrowthStage("sprout", ("  |  ", " \\|/ ", " ___ "), "#66BB6A"),
            GrowthStage("growing", (" \\|/ ", " \\|/ ", " [|] "), "#43A047"),
            GrowthStage("ready", (" \\~/ ", " \\|/ ", " {V} "), "#FF8C00"),
        ),
    ),
    "sunflower": PlantDefinition(
        type="sunflower",
        name="Sunflower",
        cost=10,
        sell_value=30,
        growth_days=5,
        water_need="low",
        preferred_seasons=("summer",),
        stages=(
            _SEED,
            GrowthStage("sprout", ("     ", "  |  ", " /|\\ "), "#66BB6A"),
            GrowthStage("budding", ("  o  ", "  |  ", " /|\\ "), "#9CCC65"),
            GrowthStage("blooming", (" \\@/ ", "  |  ", " /|\\ "), "#FFD600"),
        ),
    ),
    "tomato": PlantDefinition(
        type="tomato",
        name="Tomato",
        cost=8,
        sell_value=25,
        growth_days=4,
        water_need="high",
        preferred_seasons=("summer", "spring"),
        stages=(
            _SEED,
            GrowthStage("sprout", ("  ,  ", "  |  ", " /|\\ "), "#66BB6A"),
            GrowthStage("flowering", (" *,* ", "  |  ", " /|\\ "), "#FFEE58"),
            GrowthStage("fruiting", (" oOo ", "  |  ", " /|\\ "), "#EF5350"),
        ),
    ),
    "rose": PlantDefinition(
        type="rose",
        name="Rose",
        cost=15,
        sell_value=50,
        growth_days=6,
        water_need="medium",
        preferred_seasons=("spring", "summer"),
        stages=(
            _SEED,
            GrowthStage("sprout", ("     ", " }|{ ", " /|\\ "), "#66BB6A"),
            GrowthStage("budding", ("  @  ", " }|{ ", " /|\\ "), "#E91E63"),
            GrowthStage("blooming", (" (@) ", " }|{ ", " /|\\ "), "#FF1744"),
        ),
    ),
    "mushroom": PlantDefinition(
        type="mushroom",
        name="Mushroom",
        cost=3,
        sell_value=10,
        growth_days=2,
        water_need="high",
        preferred_seasons=("fall", "spring"),
        stages=(
            GrowthStage("spore", ("     ", "  .  ", " ~~~ "), "#795548"),
            GrowthStage("growing", ("     ", "  o  ", " ||| "), "#A1887F"),
            GrowthStage("ready", (" _^_ ", " / \\ ", " ||| "), "#BCAAA4"),
        ),
    ),
    "pumpkin": PlantDefinition(
        type="pumpkin",
        name="Pumpkin",
        cost=20,
        sell_value=80,
        growth_days=8,
        water_need="medium",
        preferred_seasons=("fall",),
        stages=(
            _SEED,
            GrowthStage("sprout", ("  ,  ", "  |  ", " /~\\ "), "#66BB6A"),
            GrowthStage("vine", (" ~,~ ", " ~|~ ", " /~\\ "), "#43A047"),
            GrowthStage("growing", (" ~,~ ", " ~|~ ", " (o) "), "#FF9800"),
            GrowthStage("ready", (" \\~/ ", " ~|~ ", " {O} "), "#FF6D00"),
        ),
    ),
}

PLANT_ORDER: tuple[PlantType, ...] = tuple(PLANT_DEFINITIONS)

SHOP_ITEMS: tuple[ShopItem, ...] = (
    ShopItem("carrot", "Carrot Seeds", 5, "Quick grower. Best in spring/fall."),
    ShopItem("sunflower", "Sunflower Seeds", 10, "Low water needs. Loves summer."),
    ShopItem("tomato", "Tomato Seeds", 8, "Needs lots of water. Spring/summer."),
    ShopItem("rose", "Rose Seeds", 15, "Valuable! Best in spring/summer."),
    ShopItem("mushroom", "Mushroom Spores", 3, "Cheapest & fastest. Needs water."),
    ShopItem("pumpkin", "Pumpkin Seeds", 20, "Slow but very valuable. Fall crop."),
)


def definition_of(plant_type: PlantType) -> PlantDefinition:
    """Return the static definition for a plant type."""
    return PLANT_DEFINITIONS[plant_type]
