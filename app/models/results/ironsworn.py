"""Ironsworn-style action, progress and oracle results."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Literal

from app.models.results.base import RollResult, is_doubles


class IronswornOutcome(str, Enum):
    STRONG_HIT = "strong_hit"
    WEAK_HIT = "weak_hit"
    MISS = "miss"

    @property
    def display(self) -> str:
        return self.value.replace("_", " ").title()


def score_against(score: int, challenge_dice: list[int]) -> IronswornOutcome:
    beaten = sum(1 for die in challenge_dice if score > die)
    if beaten == 2:
        return IronswornOutcome.STRONG_HIT
    if beaten == 1:
        return IronswornOutcome.WEAK_HIT
    return IronswornOutcome.MISS


def _with_match(text: str, challenge_dice: list[int]) -> str:
    return f"{text} (match)" if is_doubles(challenge_dice) else text


class IronswornActionResult(RollResult):
    """d6 + stat + adds (capped at 10) against 2d10."""

    kind: Literal["ironsworn_action"] = "ironsworn_action"
    label: str = "Action Roll"
    action_die: int
    stat: int = 0
    adds: int = 0
    challenge_dice: tuple[int, ...]

    dice_fields: ClassVar[tuple[str, ...]] = ("action_die", "challenge_dice")

    @property
    def action_score(self) -> int:
        return min(self.action_die + self.stat + self.adds, 10)

    @property
    def outcome(self) -> IronswornOutcome:
        return score_against(self.action_score, self.challenge_dice)

    @property
    def is_match(self) -> bool:
        return is_doubles(self.challenge_dice)

    def derive_dice(self) -> list[int]:
        return [self.action_die] + list(self.challenge_dice)

    def derive_total(self) -> int:
        return self.action_score

    def derive_interpretation(self) -> str:
        text = f"{self.outcome.display} ({self.action_score} vs {self.challenge_dice[0]}, {self.challenge_dice[1]})"
        return _with_match(text, self.challenge_dice)


class IronswornProgressResult(RollResult):
    kind: Literal["ironsworn_progress"] = "ironsworn_progress"
    label: str = "Progress Roll"
    progress_score: int
    challenge_dice: tuple[int, ...]

    dice_fields: ClassVar[tuple[str, ...]] = ("challenge_dice",)
    total_field: ClassVar[str | None] = "progress_score"

    @property
    def outcome(self) -> IronswornOutcome:
        return score_against(self.progress_score, self.challenge_dice)

    def derive_dice(self) -> list[int]:
        return list(self.challenge_dice)

    def derive_total(self) -> int:
        return self.progress_score

    def derive_interpretation(self) -> str:
        text = f"{self.outcome.display} ({self.progress_score} vs {self.challenge_dice[0]}, {self.challenge_dice[1]})"
        return _with_match(text, self.challenge_dice)


class IronswornOracleResult(RollResult):
    kind: Literal["ironsworn_oracle"] = "ironsworn_oracle"
    die_type: int = 100
    roll: int

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return str(self.roll)

    def derive_label(self) -> str:
        return f"Oracle (d{self.die_type})"


class IronswornYesNoResult(RollResult):
    """d100 against the odds threshold; matching digits are extreme."""

    kind: Literal["ironsworn_yes_no"] = "ironsworn_yes_no"
    odds: str = "50/50"
    threshold: int
    roll: int

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    @property
    def is_yes(self) -> bool:
        return self.roll > self.threshold

    @property
    def is_extreme(self) -> bool:
        return self.roll % 11 == 0 or self.roll == 100

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        text = "Yes" if self.is_yes else "No"
        return f"Extreme {text.lower()}" if self.is_extreme else text

    def derive_label(self) -> str:
        return f"Ask the Oracle ({self.odds})"


class IronswornCursedOracleResult(RollResult):
    """d100 oracle plus a d10 cursed die; a 10 on the cursed die turns the answer."""

    kind: Literal["ironsworn_cursed_oracle"] = "ironsworn_cursed_oracle"
    label: str = "Cursed Oracle"
    roll: int
    cursed_die: int

    dice_fields: ClassVar[tuple[str, ...]] = ("roll", "cursed_die")

    @property
    def is_cursed(self) -> bool:
        return self.cursed_die == 10

    def derive_dice(self) -> list[int]:
        return [self.roll, self.cursed_die]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return f"{self.roll} (cursed)" if self.is_cursed else str(self.roll)


class IronswornMomentumBurnResult(RollResult):
    """An action roll where momentum may replace the action score."""

    kind: Literal["ironsworn_momentum_burn"] = "ironsworn_momentum_burn"
    label: str = "Momentum Burn"
    action_die: int
    stat: int = 0
    adds: int = 0
    momentum: int
    challenge_dice: tuple[int, ...]

    dice_fields: ClassVar[tuple[str, ...]] = ("action_die", "challenge_dice")

    @property
    def action_score(self) -> int:
        return min(self.action_die + self.stat + self.adds, 10)

    @property
    def original_outcome(self) -> IronswornOutcome:
        return score_against(self.action_score, self.challenge_dice)

    @property
    def burned_outcome(self) -> IronswornOutcome:
        return score_against(self.momentum, self.challenge_dice)

    @property
    def should_burn(self) -> bool:
        order = list(IronswornOutcome)
        return order.index(self.burned_outcome) < order.index(self.original_outcome)

    def derive_dice(self) -> list[int]:
        return [self.action_die] + list(self.challenge_dice)

    def derive_total(self) -> int:
        return self.momentum if self.should_burn else self.action_score

    def derive_interpretation(self) -> str:
        if self.should_burn:
            text = f"Burn momentum: {self.original_outcome.display} → {self.burned_outcome.display}"
        else:
            text = f"{self.original_outcome.display} (burning does not help)"
        return _with_match(text, self.challenge_dice)
