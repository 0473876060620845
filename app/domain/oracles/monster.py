"""Monster encounter generators."""

from __future__ import annotations

from app.domain.composition import is_doubles
from app.domain.oracles.tables import clamp, face, require_range
from app.models.results.monster import FullMonsterEncounterResult, MonsterEncounterResult, MonsterTracksResult
from app.modules.dice.roller import RollSource, Skew

# d10 row -> (easy, medium, hard, boss)
MONSTER_ROWS = [
    ("Giant Rats", "Wolves", "Dire Wolf", "Wolf Mother"),
    ("Goblins", "Hobgoblins", "Bugbear", "Goblin King"),
    ("Skeletons", "Zombies", "Wight", "Lich"),
    ("Kobolds", "Lizardfolk", "Young Drake", "Dragon"),
    ("Stirges", "Giant Spiders", "Ettercap", "Spider Queen"),
    ("Twig Blights", "Vine Blights", "Needle Blights", "Gulthias Tree"),
    ("Bandits", "Thugs", "Bandit Captain", "Bandit Lord"),
    ("Sprites", "Dryads", "Green Hag", "Archfey"),
    ("Orcs", "Orc Warriors", "Ogre", "Orc Warlord"),
    ("Cultists", "Cult Fanatics", "Demon", "Demon Prince"),
]
BANDIT_ROW = 7
BLIGHT_ROW = 6
FOREST_ENVIRONMENT = 6

# d10 difficulty die: 1-4 easy, 5-8 medium, 9-0 hard
DIFFICULTIES = ["easy"] * 4 + ["medium"] * 4 + ["hard"] * 2
_DIFFICULTY_COLUMN = {"easy": 0, "medium": 1, "hard": 2, "boss": 3}

TRACKS = [
    "Scuffed earth", "Broken branches", "Drag marks", "Clawed bark", "Bloody trail",
    "Shed scales", "Huge footprints", "Burned ground", "Bones and remains", "Fresh lair",
]

# environment row -> (row modifier, skew) for the full encounter formula
ENVIRONMENT_FORMULAS = {
    1: (0, Skew.DISADVANTAGE),
    2: (0, Skew.NONE),
    3: (1, Skew.NONE),
    4: (1, Skew.ADVANTAGE),
    5: (2, Skew.NONE),
    6: (0, Skew.ADVANTAGE),
    7: (2, Skew.ADVANTAGE),
    8: (3, Skew.NONE),
    9: (3, Skew.ADVANTAGE),
    10: (4, Skew.ADVANTAGE),
}


def roll_encounter(source: RollSource) -> MonsterEncounterResult:
    """2d10: row and difficulty; doubles bring the row's boss."""
    row_roll, difficulty_roll = source.roll_dice(2, 10)
    difficulty = "boss" if row_roll == difficulty_roll else face(DIFFICULTIES, difficulty_roll)
    monster = face(MONSTER_ROWS, row_roll)[_DIFFICULTY_COLUMN[difficulty]]
    return MonsterEncounterResult(
        row_roll=row_roll, difficulty_roll=difficulty_roll, difficulty=difficulty, monster=monster
    )


def roll_tracks(source: RollSource) -> MonsterTracksResult:
    """1d6-1 modifier, then a d10 row at disadvantage."""
    modifier_roll = source.roll_die(6)
    chosen = source.roll_with_disadvantage(10)
    row = clamp(chosen.chosen + modifier_roll - 1, 1, 10)
    return MonsterTracksResult(
        modifier_roll=modifier_roll, row_rolls=chosen.faces, row=row, tracks=face(TRACKS, row)
    )


def generate_full_encounter(source: RollSource, environment_row: int = 1) -> FullMonsterEncounterResult:
    """Roll an encounter from the environment's formula.

    Doubles on the skewed row dice mean bandits; a forest rolling the
    blight row meets blights.
    """
    require_range("environment_row", environment_row, 1, 10)
    modifier, skew = ENVIRONMENT_FORMULAS[environment_row]
    chosen, row_faces = source.roll_skewed(10, skew)
    row = clamp(chosen + modifier, 1, 10)
    is_bandits = is_doubles(row_faces)
    if is_bandits:
        row = BANDIT_ROW
    is_blights = environment_row == FOREST_ENVIRONMENT and row == BLIGHT_ROW

    difficulty_roll = source.roll_die(10)
    difficulty = face(DIFFICULTIES, difficulty_roll)
    count_roll, count_faces = source.roll_skewed(6, skew)
    count = max(1, count_roll - 1)

    monster = face(MONSTER_ROWS, row)[_DIFFICULTY_COLUMN[difficulty]]
    row_name = "Bandits" if is_bandits else "Blights" if is_blights else f"Row {row}"
    formula = f"1d10{modifier:+d}{skew.symbol}"
    return FullMonsterEncounterResult(
        environment_row=environment_row,
        formula=formula,
        rolls=row_faces + [difficulty_roll] + count_faces,
        row=row,
        row_name=row_name,
        difficulty=difficulty,
        monster=monster,
        count=count,
        is_bandits=is_bandits,
        is_blights=is_blights,
    )
