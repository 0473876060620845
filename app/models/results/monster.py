"""Monster encounter results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollResult, is_doubles


class MonsterEncounterResult(RollResult):
    """2d10: a row die and a difficulty die; doubles bring the boss."""

    kind: Literal["monster_encounter"] = "monster_encounter"
    label: str = "Monster Encounter"
    row_roll: int
    difficulty_roll: int
    difficulty: str
    monster: str

    dice_fields: ClassVar[tuple[str, ...]] = ("row_roll", "difficulty_roll")

    @property
    def is_boss(self) -> bool:
        return is_doubles([self.row_roll, self.difficulty_roll])

    def derive_dice(self) -> list[int]:
        return [self.row_roll, self.difficulty_roll]

    def derive_interpretation(self) -> str:
        return f"{self.monster} ({self.difficulty})"


class MonsterTracksResult(RollResult):
    kind: Literal["monster_tracks"] = "monster_tracks"
    label: str = "Monster Tracks"
    modifier_roll: int
    row_rolls: tuple[int, ...]
    row: int
    tracks: str

    dice_fields: ClassVar[tuple[str, ...]] = ("modifier_roll", "row_rolls")

    @property
    def modifier(self) -> int:
        return self.modifier_roll - 1

    def derive_dice(self) -> list[int]:
        return [self.modifier_roll] + list(self.row_rolls)

    def derive_total(self) -> int:
        return self.modifier + self.row

    def derive_interpretation(self) -> str:
        return f"{self.tracks} (+{self.modifier})"


class FullMonsterEncounterResult(RollResult):
    """An environment-driven encounter with a creature count."""

    kind: Literal["full_monster_encounter"] = "full_monster_encounter"
    label: str = "Monster Encounter"
    environment_row: int
    formula: str
    rolls: tuple[int, ...]
    row: int
    row_name: str
    difficulty: str
    monster: str
    count: int
    is_bandits: bool = False
    is_blights: bool = False

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "row"

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.row

    def derive_interpretation(self) -> str:
        return f"{self.count}x {self.monster} ({self.difficulty}, {self.row_name})"
