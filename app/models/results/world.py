"""Location grid, names, icons and quests."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollResult


class LocationResult(RollResult):
    """A d100 point on the 5x5 location grid, read from the center cell."""

    kind: Literal["location"] = "location"
    label: str = "Location"
    roll: int
    row: int
    column: int
    direction: str
    distance: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        if self.distance == "Center":
            return "Center"
        return f"{self.distance} {self.direction} ({self.row}, {self.column})"


class AbstractIconResult(RollResult):
    kind: Literal["abstract_icon"] = "abstract_icon"
    label: str = "Abstract Icon"
    row_roll: int
    column_roll: int

    dice_fields: ClassVar[tuple[str, ...]] = ("row_roll", "column_roll")

    def derive_dice(self) -> list[int]:
        return [self.row_roll, self.column_roll]

    def derive_interpretation(self) -> str:
        return f"({self.row_roll}, {self.column_roll})"


class NameResult(RollResult):
    """Three d20 syllables; ``rolls`` holds every face rolled."""

    kind: Literal["name"] = "name"
    style: str = "neutral"
    method: str = "simple"
    rolls: tuple[int, ...]
    syllable_rolls: tuple[int, ...]
    name: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return sum(self.syllable_rolls)

    def derive_interpretation(self) -> str:
        return self.name

    def derive_label(self) -> str:
        return f"Name ({self.style})"


class QuestResult(RollResult):
    kind: Literal["quest"] = "quest"
    label: str = "Quest"
    rolls: tuple[int, ...]
    objective: str
    description: str
    focus: str
    preposition: str
    location: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        return f"{self.objective} {self.description} {self.focus} {self.preposition} {self.location}"
