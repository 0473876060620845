"""Dungeon crawl results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, is_doubles, joined_interpretation
from app.modules.dice.roller import Skew


class DungeonNameResult(RollResult):
    kind: Literal["dungeon_name"] = "dungeon_name"
    label: str = "Dungeon Name"
    rolls: tuple[int, ...]
    name: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        return self.name


class DungeonDetailResult(RollResult):
    """Passage, condition, encounter type, feature or hazard roll.

    Generators label these with their die (``Passage (d6@-)``); the label
    is not kept on restore and comes back as ``Dungeon <detail type>``.
    """

    kind: Literal["dungeon_detail"] = "dungeon_detail"
    detail_type: str
    roll: int
    all_rolls: tuple[int, ...] = ()
    skew: Skew = Skew.NONE
    result: str

    derived_on_decode: ClassVar[tuple[str, ...]] = ("label",)

    total_field: ClassVar[str | None] = "roll"
    faces_field: ClassVar[str | None] = "all_rolls"

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return self.result

    def derive_label(self) -> str:
        return f"Dungeon {self.detail_type}"


class DungeonAreaResult(RollResult):
    """Next area; doubles on the two dice flag a phase change."""

    kind: Literal["dungeon_area"] = "dungeon_area"
    is_entering: bool = True
    rolls: tuple[int, ...]
    roll: int
    skew: Skew = Skew.NONE
    area: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "roll"

    @property
    def is_doubles(self) -> bool:
        return is_doubles(self.rolls)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return f"{self.area} (phase change)" if self.is_doubles else self.area

    def derive_label(self) -> str:
        return "Dungeon Area (entering)" if self.is_entering else "Dungeon Area (exploring)"


class FullDungeonAreaResult(RollResult):
    kind: Literal["full_dungeon_area"] = "full_dungeon_area"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Dungeon Area"
    area: DungeonAreaResult
    condition: DungeonDetailResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.area, self.condition)

    def derive_total(self) -> int:
        return self.area.raw_total + self.condition.raw_total

    def derive_interpretation(self) -> str:
        return joined_interpretation(self.area, self.condition, separator=", ")


class DungeonMonsterResult(RollResult):
    kind: Literal["dungeon_monster"] = "dungeon_monster"
    label: str = "Dungeon Monster"
    rolls: tuple[int, ...]
    description: str
    ability: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        return f"{self.description} creature with {self.ability}"


class DungeonTrapResult(RollResult):
    kind: Literal["dungeon_trap"] = "dungeon_trap"
    label: str = "Dungeon Trap"
    rolls: tuple[int, ...]
    action: str
    subject: str

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        return f"{self.action} trap with {self.subject}"


class DungeonEncounterResult(RollResult):
    """An encounter type with the monster, trap, feature or hazard it calls for."""

    kind: Literal["dungeon_encounter"] = "dungeon_encounter"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Dungeon Encounter"
    encounter_type: DungeonDetailResult
    monster: DungeonMonsterResult | None = None
    trap: DungeonTrapResult | None = None
    feature: DungeonDetailResult | None = None

    def derive_dice(self) -> list[int]:
        return combined_dice(self.encounter_type, self.monster, self.trap, self.feature)

    def derive_interpretation(self) -> str:
        detail = joined_interpretation(self.monster, self.trap, self.feature)
        return f"{self.encounter_type.result}: {detail}" if detail else self.encounter_type.result


class TwoPassAreaResult(RollResult):
    """Two-pass dungeon area.

    Areas roll with advantage until the first doubles, then with
    disadvantage; doubles in that second pass end the dungeon.
    """

    kind: Literal["two_pass_area"] = "two_pass_area"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Two-Pass Area"
    had_first_doubles: bool = False
    area: DungeonAreaResult
    condition: DungeonDetailResult

    @property
    def has_first_doubles(self) -> bool:
        return self.had_first_doubles or self.area.is_doubles

    @property
    def is_complete(self) -> bool:
        return self.had_first_doubles and self.area.is_doubles

    def derive_dice(self) -> list[int]:
        return combined_dice(self.area, self.condition)

    def derive_interpretation(self) -> str:
        if self.is_complete:
            return f"{self.area.area}, {self.condition.result} (dungeon complete)"
        if self.area.is_doubles:
            return f"{self.area.area}, {self.condition.result} (second pass begins)"
        return f"{self.area.area}, {self.condition.result}"


class TrapProcedureResult(RollResult):
    """A trap's DC with what passing and failing the check mean."""

    kind: Literal["trap_procedure"] = "trap_procedure"
    label: str = "Trap Procedure"
    is_searching: bool = False
    rolls: tuple[int, ...]
    roll: int
    skew: Skew = Skew.NONE
    dc: int

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "dc"

    @property
    def on_pass(self) -> str:
        return "AVOID" if self.is_searching else "LOCATE"

    @property
    def on_fail(self) -> str:
        return "LOCATE" if self.is_searching else "TRIGGER"

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.dc

    def derive_interpretation(self) -> str:
        return f"DC {self.dc}: pass → {self.on_pass}, fail → {self.on_fail}"
