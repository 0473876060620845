"""Sensory and emotional immersion results."""

from __future__ import annotations

from typing import Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, joined_interpretation
from app.modules.dice.roller import Skew


class SensoryDetailResult(RollResult):
    kind: Literal["sensory_detail"] = "sensory_detail"
    label: str = "Sensory Detail"
    sense_roll: int
    sense: str
    detail_roll: int
    detail: str
    where_roll: int
    where_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    where: str

    def derive_dice(self) -> list[int]:
        return [self.sense_roll, self.detail_roll] + (list(self.where_rolls) or [self.where_roll])

    def derive_total(self) -> int:
        return self.sense_roll + self.detail_roll + self.where_roll

    def derive_interpretation(self) -> str:
        return f"You {self.sense.lower()} something {self.detail} {self.where}"


class EmotionalAtmosphereResult(RollResult):
    """A skewed emotion row; a 1dF picks its positive or negative side."""

    kind: Literal["emotional_atmosphere"] = "emotional_atmosphere"
    label: str = "Emotional Atmosphere"
    emotion_roll: int
    emotion_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    fate_die: int
    emotion: str
    cause_roll: int
    cause: str

    @property
    def is_positive(self) -> bool:
        return self.fate_die > 0

    def derive_dice(self) -> list[int]:
        return (list(self.emotion_rolls) or [self.emotion_roll]) + [self.fate_die, self.cause_roll]

    def derive_total(self) -> int:
        return self.emotion_roll + self.cause_roll

    def derive_interpretation(self) -> str:
        return f"It causes {self.emotion.lower()} because {self.cause}"


class FullImmersionResult(RollResult):
    kind: Literal["full_immersion"] = "full_immersion"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Full Immersion"
    sensory: SensoryDetailResult
    atmosphere: EmotionalAtmosphereResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.sensory, self.atmosphere)

    def derive_interpretation(self) -> str:
        return joined_interpretation(self.sensory, self.atmosphere, separator=". ")
