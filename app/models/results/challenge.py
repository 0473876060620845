"""Challenge, difficulty and percentage results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice
from app.modules.dice.roller import Skew


class DcResult(RollResult):
    """A difficulty class; the total is the DC itself."""

    kind: Literal["dc"] = "dc"
    method: str = "Skewed"
    roll: int
    all_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    dc: int

    total_field: ClassVar[str | None] = "dc"
    faces_field: ClassVar[str | None] = "all_rolls"

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.dc

    def derive_interpretation(self) -> str:
        return f"DC {self.dc}"

    def derive_label(self) -> str:
        return f"DC ({self.method})"


class QuickDcResult(RollResult):
    kind: Literal["quick_dc"] = "quick_dc"
    label: str = "Quick DC"
    rolls: tuple[int, ...]

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    @property
    def dc(self) -> int:
        return sum(self.rolls) + 6

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.dc

    def derive_interpretation(self) -> str:
        return f"DC {self.dc}"


class ChallengeSkillResult(RollResult):
    """A physical or mental skill; ``type_roll`` is the d2 of an any-challenge roll."""

    kind: Literal["challenge_skill"] = "challenge_skill"
    challenge_type: str
    type_roll: int | None = None
    roll: int
    skill: str

    total_field: ClassVar[str | None] = "roll"

    def derive_dice(self) -> list[int]:
        return ([self.type_roll] if self.type_roll is not None else []) + [self.roll]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return self.skill

    def derive_label(self) -> str:
        return f"{self.challenge_type} Challenge"


class FullChallengeResult(RollResult):
    """One physical and one mental skill, each with a DC; the total sums the DCs."""

    kind: Literal["full_challenge"] = "full_challenge"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Challenge"
    physical: ChallengeSkillResult
    physical_dc: DcResult
    mental: ChallengeSkillResult
    mental_dc: DcResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.physical, self.physical_dc, self.mental, self.mental_dc)

    def derive_total(self) -> int:
        return self.physical_dc.dc + self.mental_dc.dc

    def derive_interpretation(self) -> str:
        return (
            f"{self.physical.skill} (DC {self.physical_dc.dc}) OR "
            f"{self.mental.skill} (DC {self.mental_dc.dc})"
        )


class PercentageChanceResult(RollResult):
    kind: Literal["percentage_chance"] = "percentage_chance"
    label: str = "Percentage Chance"
    roll: int
    low: int
    high: int

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    @property
    def percent(self) -> int:
        return (self.low + self.high) // 2

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return f"{self.percent}%"
