from __future__ import annotations

from garden.catalog import PlantDefinition
from garden.plots import ActionError, SoilState
from garden.seasons import Season
from garden.state import Tool
from garden.weather import Weather

_ERROR_MESSAGES: dict[ActionError, str] = {
    "invalid_cell": "Invalid cell.",
    "plot_locked": "This plot is locked.",
    "occupied": "Something is already planted here.",
    "insufficient_gold": "Not enough gold!",
    "nothing_to_water": "Nothing to water here.",
    "plant_dead": "This plant is dead. Harvest to clear.",
    "nothing_to_harvest": "Nothing to harvest here.",
    "not_ready": "Not ready to harvest yet.",
    "nothing_to_delete": "Nothing to delete here.",
}

_SOIL_COLORS: dict[SoilState, str] = {"dry": "#8D6E63", "normal": "#6D4C41", "wet": "#4E342E"}
_SOIL_CHARS: dict[SoilState, str] = {"dry": ".", "normal": ":", "wet": "~"}

_SEASON_COLORS: dict[Season, str] = {
    "spring": "#66BB6A",
    "summer": "#FFD600",
    "fall": "#FF8C00",
    "winter": "#90CAF9",
}

_WEATHER_COLORS: dict[Weather, str] = {
    "sunny": "#FFD600",
    "rainy": "#42A5F5",
    "cloudy": "#90A4AE",
    "drought": "#FF7043",
}

_WEATHER_ART: dict[Weather, str] = {
    "sunny": "\\|/ -*  *-  \\|/",
    "rainy": "  .::.  .::. ' ",
    "cloudy": " ._==_.  ._==_.",
    "drought": "  )  (  HOT!  ",
}

_TOOL_NAMES: dict[Tool, str] = {"hand": "Inspect", "water": "Water", "seed": "Plant", "harvest": "Harvest"}
_TOOL_ICONS: dict[Tool, str] = {"hand": "[?]", "water": "[~]", "seed": "[o]", "harvest": "[#]"}

EMPTY_CELL_SPRITE = ("     ", "  .  ", " ... ")
DEAD_PLANT_SPRITE = ("  x  ", " /x\\ ", " xxx ")


def error_message(error: ActionError, definition: PlantDefinition | None = None) -> str:
    """Render a garden failure reason as status-bar text."""
    if error == "insufficient_gold" and definition is not None:
        return f"Not enough gold! Need {definition.cost}g."
    return _ERROR_MESSAGES[error]


def soil_color(soil: SoilState) -> str:
    return _SOIL_COLORS[soil]


def soil_char(soil: SoilState) -> str:
    return _SOIL_CHARS[soil]


def water_level_label(level: float) -> str:
    if level > 0.7:
        return "Soaked"
    if level > 0.4:
        return "Moist"
    if level > 0.1:
        return "Dry"
    return "Parched!"


def water_level_color(level: float) -> str:
    if level > 0.7:
        return "#42A5F5"
    if level > 0.4:
        return "#66BB6A"
    if level > 0.1:
        return "#FFA726"
    return "#EF5350"


def season_label(season: Season) -> str:
    return season.capitalize()


def season_color(season: Season) -> str:
    return _SEASON_COLORS[season]


def weather_label(weather: Weather) -> str:
    return weather.capitalize()


def weather_color(weather: Weather) -> str:
    return _WEATHER_COLORS[weather]


def weather_art(weather: Weather) -> str:
    return _WEATHER_ART[weather]


def tool_name(tool: Tool) -> str:
    return _TOOL_NAMES[tool]


def tool_icon(tool: Tool) -> str:
    return _TOOL_ICONS[tool]
