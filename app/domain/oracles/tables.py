"""Shared word tables and lookup helpers for the generators.

d10 tables list faces 1..10 in order, so face 10 is the last row.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def require_choice(name: str, value: str, choices: Sequence[str]) -> str:
    """Validate an enumerable parameter, listing the accepted values on failure."""
    if value not in choices:
        raise ValueError(f"Unknown {name} {value!r} (expected one of: {', '.join(choices)})")
    return value


def require_range(name: str, value: int, low: int, high: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer in {low}..{high}, got {value!r}")
    return value


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def face(table: Sequence[T], roll: int) -> T:
    """Entry for a 1-based die face."""
    return table[roll - 1]


def banded(table: Sequence[T], roll: int, band: int = 10) -> T:
    """Entry for a roll read in bands (d100 in tens by default)."""
    return table[min((roll - 1) // band, len(table) - 1)]


def ranged(table: Sequence[tuple[int, int, T]], value: int) -> T:
    """Entry whose inclusive ``(low, high)`` range holds ``value``."""
    for low, high, entry in table:
        if low <= value <= high:
            return entry
    raise ValueError(f"No table entry for {value}")


# --- Random event ---

RANDOM_EVENT_FOCUS = [
    "Advance Time", "Close Thread", "Converge Thread", "Diverge Thread", "Immersion",
    "Keyed Event", "New Character", "NPC Action", "Plot Armor", "Remote Event",
]
MODIFIERS = [
    "Change", "Continue", "Decrease", "Extra", "Increase",
    "Mundane", "Mysterious", "Start", "Stop", "Strange",
]
IDEAS = [
    "Attention", "Communication", "Danger", "Element", "Food",
    "Home", "Resource", "Rumor", "Secret", "Vow",
]
EVENTS = [
    "Ambush", "Anomaly", "Blessing", "Caravan", "Curse",
    "Discovery", "Escape", "Journey", "Prophecy", "Ritual",
]
PERSONS = [
    "Criminal", "Entertainer", "Expert", "Mage", "Mercenary",
    "Noble", "Priest", "Ranger", "Soldier", "Transporter",
]
OBJECTS = [
    "Arrow", "Candle", "Cauldron", "Chain", "Claw",
    "Hook", "Hourglass", "Quill", "Rose", "Skull",
]

WORD_TABLES: dict[str, list[str]] = {
    "modifier": MODIFIERS,
    "idea": IDEAS,
    "event": EVENTS,
    "person": PERSONS,
    "object": OBJECTS,
}

# d10 -> idea category: 1-3 Idea, 4-6 Event, 7-8 Person, 9-0 Object
IDEA_CATEGORIES = ["Idea"] * 3 + ["Event"] * 3 + ["Person"] * 2 + ["Object"] * 2
CATEGORY_TABLES = {"Idea": IDEAS, "Event": EVENTS, "Person": PERSONS, "Object": OBJECTS}

# --- Details ---

COLORS = [
    "Blood Red", "Ember Orange", "Amber Gold", "Moss Green", "Deep Teal",
    "Storm Blue", "Royal Violet", "Bone White", "Ash Gray", "Pitch Black",
]
PROPERTIES = [
    "Age", "Durability", "Familiarity", "Power", "Quality",
    "Rarity", "Size", "Style", "Value", "Weight",
]
DETAILS = [
    "Negative Emotion", "Disfavors PC", "Disfavors Thread", "Disfavors NPC", "History",
    "Property", "Favors NPC", "Favors Thread", "Favors PC", "Positive Emotion",
]
HISTORY = [
    "Backstory", "Past Thread", "Past Thread", "Past Scene", "Past Scene",
    "Current Thread", "Current Thread", "Current Scene", "Current Scene", "Future Thread",
]

# --- Settlement names (shared with NPC motive locations) ---

SETTLEMENT_PREFIXES = [
    "Ash", "Bright", "Cold", "Deep", "Elder",
    "Frost", "Gold", "High", "Iron", "Raven",
]
SETTLEMENT_SUFFIXES = [
    "bridge", "brook", "dale", "fell", "ford",
    "haven", "hold", "moor", "stead", "wick",
]
