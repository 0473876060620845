"""Location grid, names, icons and quests."""

from __future__ import annotations

from app.domain.oracles.tables import COLORS, EVENTS, IDEAS, OBJECTS, PERSONS, face, require_choice
from app.models.results.world import AbstractIconResult, LocationResult, NameResult, QuestResult
from app.modules.dice.roller import RollSource, Skew

# rows 1..5 of the location grid, columns 1..5
DISTANCE_RINGS = [
    ["Far", "Far", "Far", "Far", "Far"],
    ["Far", "Close", "Close", "Close", "Far"],
    ["Far", "Close", "Center", "Close", "Far"],
    ["Far", "Close", "Close", "Close", "Far"],
    ["Far", "Far", "Far", "Far", "Far"],
]

NAME_STYLES = {"neutral": Skew.NONE, "masculine": Skew.DISADVANTAGE, "feminine": Skew.ADVANTAGE}
NAME_METHODS = ["simple", "column1", "pattern"]

# low faces read harsher, high faces softer
NAME_SYLLABLES = [
    [
        "Bor", "Drak", "Grim", "Karg", "Thor", "Brun", "Hald", "Rurik", "Vald", "Gar",
        "Ed", "Al", "Cor", "Mer", "Ser", "El", "Lia", "Ari", "Syl", "Ela",
    ],
    [
        "ga", "do", "ru", "ka", "mo", "ba", "to", "re", "da", "ne",
        "la", "ri", "ma", "ve", "li", "na", "se", "wy", "ly", "ia",
    ],
    [
        "rak", "gor", "dun", "mar", "vik", "ric", "ald", "ton", "win", "ard",
        "en", "is", "el", "ra", "wen", "na", "elle", "ie", "ara", "ith",
    ],
]

QUEST_OBJECTIVES = [
    "Recover", "Protect", "Destroy", "Escort", "Find",
    "Deliver", "Investigate", "Rescue", "Defeat", "Negotiate with",
]
QUEST_DESCRIPTIONS = [
    "the ancient", "the cursed", "the stolen", "the *Color*", "the forgotten",
    "the sacred", "the hidden", "the broken", "the royal", "the *Idea*",
]
QUEST_FOCUSES = [
    "relic", "heir", "map", "*Object*", "beast",
    "*Person*", "letter", "crown", "shrine", "*Event*",
]
QUEST_PREPOSITIONS = [
    "in", "beneath", "beyond", "near", "within",
    "across", "above", "behind", "at", "around",
]
QUEST_LOCATIONS = [
    "the old keep", "the marsh", "the capital", "the mountain pass", "the ruins",
    "the deep woods", "the harbor", "the catacombs", "the frontier", "the tower",
]

SUB_TABLES = {"Color": COLORS, "Idea": IDEAS, "Object": OBJECTS, "Person": PERSONS, "Event": EVENTS}


def _compass(row: int, column: int) -> str:
    vertical = "North" if row < 3 else "South" if row > 3 else ""
    horizontal = "West" if column < 3 else "East" if column > 3 else ""
    return "-".join(part for part in (vertical, horizontal) if part) or "Center"


def roll_location(source: RollSource) -> LocationResult:
    """d100 on the 5x5 grid; direction and distance are read from the center cell."""
    roll = source.roll_die(100)
    value = roll - 1
    row = value // 20 + 1
    column = (value % 20) // 4 + 1
    return LocationResult(
        roll=roll,
        row=row,
        column=column,
        direction=_compass(row, column),
        distance=DISTANCE_RINGS[row - 1][column - 1],
    )


def abstract_icon(source: RollSource) -> AbstractIconResult:
    return AbstractIconResult(row_roll=source.roll_die(10), column_roll=source.roll_die(6))


def generate_name(source: RollSource, style: str = "neutral", method: str = "simple") -> NameResult:
    """Three d20 syllables. Masculine names skew low (@-), feminine high (@+).

    Methods: ``simple`` takes one syllable per column, ``column1`` takes all
    three from the first column, ``pattern`` drops the middle syllable when
    its roll is odd.
    """
    require_choice("style", style, list(NAME_STYLES))
    require_choice("method", method, NAME_METHODS)
    skew = NAME_STYLES[style]

    rolls: list[int] = []
    kept: list[int] = []
    for _ in range(3):
        chosen, faces = source.roll_skewed(20, skew)
        kept.append(chosen)
        rolls.extend(faces)

    if method == "column1":
        parts = [face(NAME_SYLLABLES[0], r) for r in kept]
    else:
        parts = [face(NAME_SYLLABLES[i], r) for i, r in enumerate(kept)]
        if method == "pattern" and kept[1] % 2:
            parts.pop(1)
    name = "".join(parts).lower().capitalize()
    return NameResult(style=style, method=method, rolls=rolls, syllable_rolls=kept, name=name)


def _quest_entry(source: RollSource, table: list[str], rolls: list[int]) -> str:
    roll = source.roll_die(10)
    rolls.append(roll)
    entry = face(table, roll)
    if "*" not in entry:
        return entry
    # *Table* entries roll once more on the named table
    prefix, sub_table, suffix = entry.split("*")
    sub_roll = source.roll_die(10)
    rolls.append(sub_roll)
    return f"{prefix}{face(SUB_TABLES[sub_table], sub_roll).lower()}{suffix}"


def generate_quest(source: RollSource) -> QuestResult:
    rolls: list[int] = []
    return QuestResult(
        objective=_quest_entry(source, QUEST_OBJECTIVES, rolls),
        description=_quest_entry(source, QUEST_DESCRIPTIONS, rolls),
        focus=_quest_entry(source, QUEST_FOCUSES, rolls),
        preposition=_quest_entry(source, QUEST_PREPOSITIONS, rolls),
        location=_quest_entry(source, QUEST_LOCATIONS, rolls),
        rolls=rolls,
    )
