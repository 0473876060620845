"""NPC behaviour and profile results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, joined_interpretation
from app.models.results.details import DetailResult, DualPropertyResult
from app.models.results.oracle import TableEntryResult
from app.models.results.world import NameResult
from app.modules.dice.roller import Skew


class NpcActionResult(RollResult):
    """One roll on an NPC table column (Action, Combat, Personality, Need, Motive, Focus)."""

    kind: Literal["npc_action"] = "npc_action"
    column: str
    roll: int
    all_rolls: tuple[int, ...] = ()
    die_size: int = 10
    skew: Skew = Skew.NONE
    result: str

    total_field: ClassVar[str | None] = "roll"
    faces_field: ClassVar[str | None] = "all_rolls"

    def derive_dice(self) -> list[int]:
        return list(self.all_rolls) or [self.roll]

    def derive_total(self) -> int:
        return self.roll

    def derive_interpretation(self) -> str:
        return self.result

    def derive_label(self) -> str:
        return f"NPC {self.column}"


class MotiveFollowUpResult(RollResult):
    """A motive expanded through History, or through a Focus and its subject.

    ``location`` holds any registered result (a settlement name for the
    Location focus).
    """

    kind: Literal["motive_follow_up"] = "motive_follow_up"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "NPC Motive"
    motive: NpcActionResult
    history: DetailResult | None = None
    focus: NpcActionResult | None = None
    expansion: TableEntryResult | None = None
    location: RollResult | None = None

    def derive_dice(self) -> list[int]:
        return combined_dice(self.motive, self.history, self.focus, self.expansion, self.location)

    def derive_interpretation(self) -> str:
        follow_up = joined_interpretation(self.history, self.focus, self.expansion, self.location, separator=": ")
        if follow_up:
            return f"{self.motive.result} → {follow_up}"
        return self.motive.result


class DualPersonalityResult(RollResult):
    kind: Literal["dual_personality"] = "dual_personality"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Dual Personality"
    primary: NpcActionResult
    secondary: NpcActionResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.primary, self.secondary)

    def derive_interpretation(self) -> str:
        return f"{self.primary.result} but {self.secondary.result}"


class SimpleNpcProfileResult(RollResult):
    kind: Literal["simple_npc_profile"] = "simple_npc_profile"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "NPC Profile"
    personality: NpcActionResult
    need: NpcActionResult
    motive: NpcActionResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.personality, self.need, self.motive)

    def derive_interpretation(self) -> str:
        return f"{self.personality.result}, needs {self.need.result}, motive: {self.motive.result}"


class NpcProfileResult(RollResult):
    """Full NPC profile.

    The motive expansion is not stored; a restored profile recomputes its
    label and interpretation from the stored parts only.
    """

    kind: Literal["npc_profile"] = "npc_profile"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "NPC Profile"
    personality: DualPersonalityResult | NpcActionResult
    need: NpcActionResult
    motive: NpcActionResult
    motive_expansion: MotiveFollowUpResult | None = None
    color: DetailResult
    properties: DualPropertyResult

    derived_on_decode: ClassVar[tuple[str, ...]] = ("label", "interpretation")
    transient_fields: ClassVar[frozenset[str]] = frozenset({"motive_expansion"})

    def derive_dice(self) -> list[int]:
        # the expansion re-embeds the motive roll, so only its own dice are added
        expansion = list(self.motive_expansion.dice_values[len(self.motive.dice_values):]) if self.motive_expansion else []
        return (
            combined_dice(self.personality, self.need, self.motive)
            + expansion
            + combined_dice(self.color, self.properties)
        )

    def derive_interpretation(self) -> str:
        motive = self.motive_expansion.interpretation if self.motive_expansion else self.motive.result
        return (
            f"{self.personality.interpretation}; needs {self.need.result}; motive: {motive}; "
            f"{self.color.result}; {self.properties.interpretation}"
        )


class ComplexNpcResult(RollResult):
    kind: Literal["complex_npc"] = "complex_npc"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Complex NPC"
    name: NameResult | None = None
    profile: NpcProfileResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.name, self.profile)

    def derive_interpretation(self) -> str:
        if self.name is not None:
            return f"{self.name.name}: {self.profile.interpretation}"
        return self.profile.interpretation or ""
