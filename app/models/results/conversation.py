"""Conversation and dialog results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollResult, is_doubles
from app.modules.dice.roller import Skew


class InformationResult(RollResult):
    kind: Literal["information"] = "information"
    label: str = "Information"
    type_roll: int
    topic_roll: int
    info_type: str
    topic: str

    dice_fields: ClassVar[tuple[str, ...]] = ("type_roll", "topic_roll")

    def derive_dice(self) -> list[int]:
        return [self.type_roll, self.topic_roll]

    def derive_interpretation(self) -> str:
        return f"{self.info_type} about {self.topic}"


class CompanionResponseResult(RollResult):
    kind: Literal["companion_response"] = "companion_response"
    label: str = "Companion Response"
    roll: int
    all_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    response: str

    total_field: ClassVar[str | None] = "roll"
    faces_field: ClassVar[str | None] = "all_rolls"

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return self.response


class DialogTopicResult(RollResult):
    kind: Literal["dialog_topic"] = "dialog_topic"
    label: str = "Dialog Topic"
    roll: int
    topic: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.topic


class DialogResult(RollResult):
    """One step of the 5x5 dialog grid walk.

    Doubles on the direction and tone dice end the conversation and the
    position does not move.
    """

    kind: Literal["dialog"] = "dialog"
    label: str = "Dialog"
    start_row: int
    start_column: int
    direction_roll: int
    tone_roll: int
    subject_roll: int
    direction: str
    tone: str
    subject: str
    row: int
    column: int
    fragment: str

    dice_fields: ClassVar[tuple[str, ...]] = ("direction_roll", "tone_roll", "subject_roll")

    @property
    def is_ended(self) -> bool:
        return is_doubles([self.direction_roll, self.tone_roll])

    @property
    def is_past(self) -> bool:
        return self.row < 2

    def derive_dice(self) -> list[int]:
        return [self.direction_roll, self.tone_roll, self.subject_roll]

    def derive_interpretation(self) -> str:
        if self.is_ended:
            return "Conversation ends"
        tense = "past" if self.is_past else "present"
        return f"{self.tone} {self.fragment} ({tense}) about {self.subject}"
