"""Challenge, difficulty and percentage generators."""

from __future__ import annotations

from app.domain.oracles.tables import face
from app.models.results.challenge import (
    ChallengeSkillResult,
    DcResult,
    FullChallengeResult,
    PercentageChanceResult,
    QuickDcResult,
)
from app.modules.dice.roller import RollSource, Skew, parse_skew

# d10 face -> DC; a higher face is an easier check
DC_TABLE = [17, 16, 15, 14, 13, 12, 11, 10, 9, 8]

BALANCED_DCS = [8, 10, 12, 14, 16, 18]
BALANCED_WEIGHTS = [1, 2, 4, 4, 2, 1]

PHYSICAL_SKILLS = [
    "Athletics", "Acrobatics", "Climbing", "Endurance", "Lifting",
    "Riding", "Sleight of Hand", "Stealth", "Swimming", "Throwing",
]
MENTAL_SKILLS = [
    "Arcana", "Deception", "History", "Insight", "Investigation",
    "Medicine", "Nature", "Perception", "Persuasion", "Survival",
]

PERCENTAGE_RANGES = [
    (1, 5), (6, 15), (16, 30), (31, 45), (46, 55),
    (56, 70), (71, 85), (86, 95), (96, 99), (100, 100),
]


def roll_dc(source: RollSource, skew: Skew | str = Skew.NONE) -> DcResult:
    """d10 on the DC table; advantage keeps the higher face (the easier DC)."""
    skew = parse_skew(skew)
    roll, all_rolls = source.roll_skewed(10, skew)
    return DcResult(roll=roll, all_rolls=all_rolls, skew=skew, dc=face(DC_TABLE, roll))


def roll_quick_dc(source: RollSource) -> QuickDcResult:
    return QuickDcResult(rolls=source.roll_dice(2, 6))


def roll_balanced_dc(source: RollSource) -> DcResult:
    """A weighted pick that favours middling DCs."""
    index = source.pick_weighted(BALANCED_WEIGHTS)
    return DcResult(method="Balanced", roll=index + 1, dc=BALANCED_DCS[index])


def roll_physical_challenge(source: RollSource) -> ChallengeSkillResult:
    roll = source.roll_die(10)
    return ChallengeSkillResult(challenge_type="Physical", roll=roll, skill=face(PHYSICAL_SKILLS, roll))


def roll_mental_challenge(source: RollSource) -> ChallengeSkillResult:
    roll = source.roll_die(10)
    return ChallengeSkillResult(challenge_type="Mental", roll=roll, skill=face(MENTAL_SKILLS, roll))


def roll_any_challenge(source: RollSource) -> ChallengeSkillResult:
    """A d2 picks physical (1) or mental (2)."""
    type_roll = source.roll_die(2)
    skill = roll_physical_challenge(source) if type_roll == 1 else roll_mental_challenge(source)
    return ChallengeSkillResult(
        challenge_type=skill.challenge_type, type_roll=type_roll, roll=skill.roll, skill=skill.skill
    )


def roll_full_challenge(source: RollSource, dc_skew: Skew | str = Skew.NONE) -> FullChallengeResult:
    return FullChallengeResult(
        physical=roll_physical_challenge(source),
        physical_dc=roll_dc(source, dc_skew),
        mental=roll_mental_challenge(source),
        mental_dc=roll_dc(source, dc_skew),
    )


def roll_percentage_chance(source: RollSource) -> PercentageChanceResult:
    roll = source.roll_die(10)
    low, high = face(PERCENTAGE_RANGES, roll)
    return PercentageChanceResult(roll=roll, low=low, high=high)
