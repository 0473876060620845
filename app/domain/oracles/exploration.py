"""2d6 exploration tables: weather and encounters."""

from __future__ import annotations

from app.domain.oracles.tables import clamp, ranged, require_choice, require_range
from app.models.results.exploration import EncounterResult, WeatherResult
from app.modules.dice.roller import RollSource

SEASON_MODIFIERS = {"Spring": 0, "Summer": 1, "Autumn": 0, "Winter": -2}
CLIMATE_MODIFIERS = {"Arctic": -3, "Temperate": 0, "Tropical": 1, "Desert": 2}

WEATHER_TABLE = [
    (2, 2, "extreme"),
    (3, 4, "harsh"),
    (5, 5, "poor"),
    (6, 8, "normal"),
    (9, 9, "fair"),
    (10, 11, "good"),
    (12, 12, "perfect"),
]

WILDERNESS_ENCOUNTERS = [
    (2, 2, "major_threat"),
    (3, 4, "minor_threat"),
    (5, 5, "obstacle"),
    (6, 8, "nothing"),
    (9, 9, "clue"),
    (10, 11, "discovery"),
    (12, 12, "special"),
]
DUNGEON_ENCOUNTERS = [
    (2, 2, "major_threat"),
    (3, 5, "minor_threat"),
    (6, 6, "trap"),
    (7, 7, "nothing"),
    (8, 8, "puzzle"),
    (9, 10, "treasure"),
    (11, 11, "clue"),
    (12, 12, "special"),
]
DISTANCES = [
    (2, 3, "surprise"),
    (4, 5, "close"),
    (6, 8, "medium"),
    (9, 10, "far"),
    (11, 12, "spotted"),
]
DISPOSITIONS = [
    (2, 2, "hostile"),
    (3, 4, "unfriendly"),
    (5, 5, "wary"),
    (6, 8, "neutral"),
    (9, 9, "curious"),
    (10, 11, "friendly"),
    (12, 12, "helpful"),
]
THREATS = {"major_threat", "minor_threat"}


def roll_weather(source: RollSource, season: str = "Spring", climate: str = "Temperate") -> WeatherResult:
    """2d6 + season + climate, clamped to 2..12."""
    require_choice("season", season, list(SEASON_MODIFIERS))
    require_choice("climate", climate, list(CLIMATE_MODIFIERS))
    modifier = SEASON_MODIFIERS[season] + CLIMATE_MODIFIERS[climate]
    rolls = source.roll_dice(2, 6)
    weather = ranged(WEATHER_TABLE, clamp(sum(rolls) + modifier, 2, 12))
    return WeatherResult(season=season, climate=climate, rolls=rolls, modifier=modifier, weather=weather)


def _check_encounter(
    source: RollSource,
    location_type: str,
    table: list[tuple[int, int, str]],
    danger_level: int,
) -> EncounterResult:
    require_range("danger_level", danger_level, 0, 10)
    rolls = source.roll_dice(2, 6)
    outcome = ranged(table, clamp(sum(rolls) - danger_level, 2, 12))

    distance_rolls: list[int] = []
    disposition_rolls: list[int] = []
    distance = disposition = None
    if outcome != "nothing":
        distance_rolls = source.roll_dice(2, 6)
        distance = ranged(DISTANCES, sum(distance_rolls))
    if outcome in THREATS:
        disposition_rolls = source.roll_dice(2, 6)
        disposition = ranged(DISPOSITIONS, sum(disposition_rolls))

    return EncounterResult(
        location_type=location_type,
        danger_level=danger_level,
        rolls=rolls,
        outcome=outcome,
        distance_rolls=distance_rolls,
        distance=distance,
        disposition_rolls=disposition_rolls,
        disposition=disposition,
    )


def check_wilderness_encounter(source: RollSource, danger_level: int = 0) -> EncounterResult:
    return _check_encounter(source, "Wilderness", WILDERNESS_ENCOUNTERS, danger_level)


def check_dungeon_encounter(source: RollSource, danger_level: int = 0) -> EncounterResult:
    return _check_encounter(source, "Dungeon", DUNGEON_ENCOUNTERS, danger_level)
