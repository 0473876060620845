"""Wilderness travel generators.

Travel is stateless: each call takes the current environment row, type
row and lost flag, and the returned result carries the new state.
"""

from __future__ import annotations

from app.domain.oracles.tables import clamp, face, require_range
from app.models.results.base import RollCategory
from app.models.results.wilderness import (
    MonsterLevelResult,
    WildernessAreaResult,
    WildernessDetailResult,
    WildernessEncounterResult,
    WildernessWeatherResult,
)
from app.modules.dice.roller import RollSource, Skew

ENVIRONMENTS = [
    "Arctic", "Tundra", "Mountains", "Hills", "Grassland",
    "Forest", "Swamp", "Jungle", "Desert", "Coast",
]
TERRAIN_TYPES = [
    "Desolate", "Windswept", "Rugged", "Rolling", "Open",
    "Dense", "Misty", "Overgrown", "Scorched", "Lush",
]

# lost travellers read only the first six rows (d6)
ENCOUNTERS = [
    "Destination/Lost", "River/Road", "Monster", "Hazard", "Feature",
    "Traveler", "Weather change", "Ruins", "Shelter", "Resource",
]
LOST = "Destination/Lost"
FOUND = "River/Road"

WEATHER = [
    "Blizzard", "Freezing wind", "Sleet", "Heavy rain", "Overcast",
    "Fair", "Clear", "Warm", "Hot", "Scorching heat",
]
# environment row -> skew of the weather d6
ENVIRONMENT_WEATHER_SKEW = [
    Skew.DISADVANTAGE, Skew.DISADVANTAGE, Skew.DISADVANTAGE, Skew.NONE, Skew.NONE,
    Skew.NONE, Skew.NONE, Skew.ADVANTAGE, Skew.ADVANTAGE, Skew.NONE,
]
# type row -> weather row modifier
TYPE_WEATHER_MODIFIERS = [-2, -1, 0, 1, 2, 2, 1, 3, 4, 3]

NATURAL_HAZARDS = [
    "Rockslide", "Quicksand", "Flash flood", "Thin ice", "Wildfire",
    "Sinkhole", "Poisonous plants", "Avalanche", "Sandstorm", "Thick fog",
]
FEATURES = [
    "Standing stones", "Abandoned camp", "Waterfall", "Ancient tree", "Cave mouth",
    "Ruined tower", "Hot spring", "Battlefield", "Shrine", "Strange monolith",
]

# environment row -> (level modifier, skew) for the level d6
ENVIRONMENT_LEVELS = [
    (4, Skew.ADVANTAGE), (3, Skew.NONE), (3, Skew.ADVANTAGE), (1, Skew.NONE), (0, Skew.NONE),
    (1, Skew.NONE), (2, Skew.NONE), (2, Skew.ADVANTAGE), (3, Skew.NONE), (0, Skew.NONE),
]


def _area(
    environment_row: int,
    type_row: int,
    is_lost: bool,
    rolls: list[int] | None = None,
    is_transition: bool = False,
) -> WildernessAreaResult:
    return WildernessAreaResult(
        category=RollCategory.FATE if is_transition else RollCategory.STANDARD,
        rolls=rolls or [],
        environment_row=environment_row,
        type_row=type_row,
        environment=face(ENVIRONMENTS, environment_row),
        type_name=face(TERRAIN_TYPES, type_row),
        is_lost=is_lost,
        is_transition=is_transition,
    )


def initialize_random(source: RollSource) -> WildernessAreaResult:
    """d10 environment; the terrain type is the environment shifted by 1dF."""
    environment_row = source.roll_die(10)
    shift = source.roll_fate_die()
    return _area(environment_row, clamp(environment_row + shift, 1, 10), False, [environment_row, shift])


def initialize_at(
    source: RollSource,
    environment_row: int = 5,
    type_row: int = 5,
    is_lost: bool = False,
) -> WildernessAreaResult:
    require_range("environment_row", environment_row, 1, 10)
    require_range("type_row", type_row, 1, 10)
    return _area(environment_row, type_row, is_lost)


def transition(
    source: RollSource,
    environment_row: int = 5,
    type_row: int = 5,
    is_lost: bool = False,
) -> WildernessAreaResult:
    """Move to the next hex: environment + 2dF, then type + 1dF, both clamped to 1..10."""
    require_range("environment_row", environment_row, 1, 10)
    require_range("type_row", type_row, 1, 10)
    environment_shift = source.roll_fate_dice(2)
    type_shift = source.roll_fate_die()
    new_environment = clamp(environment_row + sum(environment_shift), 1, 10)
    new_type = clamp(type_row + type_shift, 1, 10)
    return _area(new_environment, new_type, is_lost, environment_shift + [type_shift], is_transition=True)


def roll_encounter(
    source: RollSource,
    is_lost: bool = False,
    dangerous_terrain: bool = False,
    map_or_guide: bool = False,
) -> WildernessEncounterResult:
    """d10 (d6 when lost). Dangerous terrain skews down, a map or guide skews up."""
    sides = 6 if is_lost else 10
    skew = Skew.NONE
    if dangerous_terrain and not map_or_guide:
        skew = Skew.DISADVANTAGE
    elif map_or_guide and not dangerous_terrain:
        skew = Skew.ADVANTAGE
    roll, all_rolls = source.roll_skewed(sides, skew)
    encounter = face(ENCOUNTERS, roll)

    now_lost = is_lost
    if encounter == LOST:
        now_lost = True
    elif encounter == FOUND:
        now_lost = False
    return WildernessEncounterResult(
        roll=roll,
        all_rolls=all_rolls,
        skew=skew,
        die_size=sides,
        encounter=encounter,
        was_lost=is_lost,
        is_lost=now_lost,
    )


def roll_weather(source: RollSource, environment_row: int = 5, type_row: int = 5) -> WildernessWeatherResult:
    require_range("environment_row", environment_row, 1, 10)
    require_range("type_row", type_row, 1, 10)
    skew = face(ENVIRONMENT_WEATHER_SKEW, environment_row)
    modifier = face(TYPE_WEATHER_MODIFIERS, type_row)
    roll, all_rolls = source.roll_skewed(6, skew)
    weather_row = clamp(roll + modifier, 1, 10)
    return WildernessWeatherResult(
        environment_row=environment_row,
        type_row=type_row,
        roll=roll,
        all_rolls=all_rolls,
        skew=skew,
        modifier=modifier,
        weather_row=weather_row,
        weather=face(WEATHER, weather_row),
    )


def roll_natural_hazard(source: RollSource) -> WildernessDetailResult:
    roll = source.roll_die(10)
    return WildernessDetailResult(detail_type="Natural Hazard", roll=roll, result=face(NATURAL_HAZARDS, roll))


def roll_feature(source: RollSource) -> WildernessDetailResult:
    roll = source.roll_die(10)
    return WildernessDetailResult(detail_type="Feature", roll=roll, result=face(FEATURES, roll))


def roll_monster_level(source: RollSource, environment_row: int = 5) -> MonsterLevelResult:
    require_range("environment_row", environment_row, 1, 10)
    modifier, skew = face(ENVIRONMENT_LEVELS, environment_row)
    roll, all_rolls = source.roll_skewed(6, skew)
    return MonsterLevelResult(environment_row=environment_row, roll=roll, all_rolls=all_rolls, modifier=modifier)
