"""Ironsworn-style action, progress and oracle rolls."""

from __future__ import annotations

from app.domain.oracles.tables import require_choice, require_range
from app.models.results.ironsworn import (
    IronswornActionResult,
    IronswornCursedOracleResult,
    IronswornMomentumBurnResult,
    IronswornOracleResult,
    IronswornProgressResult,
    IronswornYesNoResult,
)
from app.modules.dice.roller import RollSource

# odds -> a d100 roll above this is a yes
ODDS_THRESHOLDS = {
    "Almost Certain": 10,
    "Likely": 25,
    "50/50": 50,
    "Unlikely": 75,
    "Small Chance": 90,
}
ORACLE_DICE = [6, 10, 20, 100]


def action_roll(source: RollSource, stat: int = 2, adds: int = 0) -> IronswornActionResult:
    require_range("stat", stat, 0, 5)
    require_range("adds", adds, 0, 10)
    action_die = source.roll_die(6)
    return IronswornActionResult(action_die=action_die, stat=stat, adds=adds, challenge_dice=source.roll_dice(2, 10))


def progress_roll(source: RollSource, progress_score: int = 0) -> IronswornProgressResult:
    require_range("progress_score", progress_score, 0, 10)
    return IronswornProgressResult(progress_score=progress_score, challenge_dice=source.roll_dice(2, 10))


def oracle_roll(source: RollSource, die_type: int = 100) -> IronswornOracleResult:
    if die_type not in ORACLE_DICE:
        raise ValueError(f"Unknown die_type {die_type!r} (expected one of: {', '.join(map(str, ORACLE_DICE))})")
    return IronswornOracleResult(die_type=die_type, roll=source.roll_die(die_type))


def yes_no(source: RollSource, odds: str = "50/50") -> IronswornYesNoResult:
    require_choice("odds", odds, list(ODDS_THRESHOLDS))
    return IronswornYesNoResult(odds=odds, threshold=ODDS_THRESHOLDS[odds], roll=source.roll_die(100))


def cursed_oracle(source: RollSource) -> IronswornCursedOracleResult:
    roll = source.roll_die(100)
    return IronswornCursedOracleResult(roll=roll, cursed_die=source.roll_die(10))


def momentum_burn(source: RollSource, stat: int = 2, adds: int = 0, momentum: int = 2) -> IronswornMomentumBurnResult:
    """Action roll that reports whether burning ``momentum`` improves the outcome."""
    require_range("stat", stat, 0, 5)
    require_range("adds", adds, 0, 10)
    require_range("momentum", momentum, -6, 10)
    action_die = source.roll_die(6)
    return IronswornMomentumBurnResult(
        action_die=action_die,
        stat=stat,
        adds=adds,
        momentum=momentum,
        challenge_dice=source.roll_dice(2, 10),
    )
