"""Sensory and emotional immersion generators."""

from __future__ import annotations

from app.domain.oracles.tables import face
from app.models.results.immersion import EmotionalAtmosphereResult, FullImmersionResult, SensoryDetailResult
from app.modules.dice.roller import RollSource, Skew, parse_skew

# d10: 1-3 See, 4-6 Hear, 7-8 Smell, 9-0 Feel
SENSES = ["See"] * 3 + ["Hear"] * 3 + ["Smell"] * 2 + ["Feel"] * 2
SENSE_DETAILS = {
    "See": ["flickering", "shadowy", "glinting", "bloodied", "ancient", "moving", "broken", "bright", "tiny", "vast"],
    "Hear": ["whispering", "creaking", "distant", "rhythmic", "shrill", "muffled", "echoing", "rushing", "ringing", "silent"],
    "Smell": ["acrid", "sweet", "rotten", "smoky", "floral", "metallic", "musty", "salty", "spiced", "fresh"],
    "Feel": ["cold", "damp", "rough", "sticky", "warm", "trembling", "soft", "sharp", "heavy", "brittle"],
}
# d10 where; low faces are close by, so advantage keeps the lower face
WHERE = [
    "right beside you", "at your feet", "overhead", "behind you", "ahead",
    "nearby", "off to the side", "in the distance", "far away", "everywhere",
]
# (negative, positive) per d10 row
EMOTIONS = [
    ("Despair", "Hope"), ("Fear", "Courage"), ("Anger", "Calm"), ("Grief", "Joy"), ("Shame", "Pride"),
    ("Disgust", "Wonder"), ("Loneliness", "Belonging"), ("Dread", "Relief"), ("Envy", "Gratitude"), ("Doubt", "Trust"),
]
CAUSES = [
    "a memory resurfaces", "something is missing", "someone is watching", "a promise was broken", "danger is near",
    "the past repeats", "a secret is revealed", "help arrives", "time is running out", "nothing is as it seems",
]


def sensory_detail(source: RollSource, skew: Skew | str = Skew.NONE) -> SensoryDetailResult:
    skew = parse_skew(skew)
    sense_roll = source.roll_die(10)
    sense = face(SENSES, sense_roll)
    detail_roll = source.roll_die(10)
    if skew is Skew.NONE:
        where_roll = source.roll_die(10)
        where_rolls = [where_roll]
    else:
        rolled = source.roll_with_advantage(10) if skew is Skew.DISADVANTAGE else source.roll_with_disadvantage(10)
        where_roll, where_rolls = rolled.chosen, rolled.faces
    return SensoryDetailResult(
        sense_roll=sense_roll,
        sense=sense,
        detail_roll=detail_roll,
        detail=face(SENSE_DETAILS[sense], detail_roll),
        where_roll=where_roll,
        where_rolls=where_rolls,
        skew=skew,
        where=face(WHERE, where_roll),
    )


def emotional_atmosphere(source: RollSource, skew: Skew | str = Skew.NONE) -> EmotionalAtmosphereResult:
    """Skewed emotion row; a 1dF of + reads the positive side."""
    skew = parse_skew(skew)
    emotion_roll, emotion_rolls = source.roll_skewed(10, skew)
    fate_die = source.roll_fate_die()
    cause_roll = source.roll_die(10)
    negative, positive = face(EMOTIONS, emotion_roll)
    return EmotionalAtmosphereResult(
        emotion_roll=emotion_roll,
        emotion_rolls=emotion_rolls,
        skew=skew,
        fate_die=fate_die,
        emotion=positive if fate_die > 0 else negative,
        cause_roll=cause_roll,
        cause=face(CAUSES, cause_roll),
    )


def full_immersion(
    source: RollSource,
    sensory_skew: Skew | str = Skew.NONE,
    emotion_skew: Skew | str = Skew.NONE,
) -> FullImmersionResult:
    return FullImmersionResult(
        sensory=sensory_detail(source, sensory_skew),
        atmosphere=emotional_atmosphere(source, emotion_skew),
    )
