"""Wilderness travel results.

Travel state (environment row, type row, lost flag) lives in the results
themselves; callers pass it back into the next roll.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollResult
from app.modules.dice.roller import Skew


class WildernessAreaResult(RollResult):
    kind: Literal["wilderness_area"] = "wilderness_area"
    rolls: tuple[int, ...] = ()
    environment_row: int
    type_row: int
    environment: str
    type_name: str
    is_lost: bool = False
    is_transition: bool = False

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "environment_row"

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.environment_row

    def derive_interpretation(self) -> str:
        text = f"{self.type_name} {self.environment}"
        return f"{text} (lost)" if self.is_lost else text

    def derive_label(self) -> str:
        return "Wilderness Transition" if self.is_transition else "Wilderness Area"


class WildernessEncounterResult(RollResult):
    kind: Literal["wilderness_encounter"] = "wilderness_encounter"
    label: str = "Wilderness Encounter"
    roll: int
    all_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    die_size: int = 10
    encounter: str
    was_lost: bool = False
    is_lost: bool = False

    total_field: ClassVar[str | None] = "roll"
    faces_field: ClassVar[str | None] = "all_rolls"

    @property
    def became_lost(self) -> bool:
        return self.is_lost and not self.was_lost

    @property
    def found_way(self) -> bool:
        return self.was_lost and not self.is_lost

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        if self.became_lost:
            return f"{self.encounter} (you are lost)"
        if self.found_way:
            return f"{self.encounter} (you found your way)"
        return self.encounter


class WildernessWeatherResult(RollResult):
    kind: Literal["wilderness_weather"] = "wilderness_weather"
    label: str = "Wilderness Weather"
    environment_row: int
    type_row: int
    roll: int
    all_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    modifier: int = 0
    weather_row: int
    weather: str

    total_field: ClassVar[str | None] = "weather_row"
    faces_field: ClassVar[str | None] = "all_rolls"

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.weather_row

    def derive_interpretation(self) -> str:
        return self.weather


class WildernessDetailResult(RollResult):
    kind: Literal["wilderness_detail"] = "wilderness_detail"
    detail_type: str
    roll: int
    result: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.result

    def derive_label(self) -> str:
        return f"Wilderness {self.detail_type}"


class MonsterLevelResult(RollResult):
    kind: Literal["monster_level"] = "monster_level"
    label: str = "Monster Level"
    environment_row: int
    roll: int
    all_rolls: tuple[int, ...] = ()
    modifier: int = 0

    faces_field: ClassVar[str | None] = "all_rolls"

    @property
    def level(self) -> int:
        return max(1, self.roll + self.modifier)

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.level

    def derive_interpretation(self) -> str:
        return f"Level {self.level}"
