"""Scene framing results."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, fate_symbols, is_doubles
from app.models.results.oracle import IdeaResult, InterruptPlotPointResult, RandomEventResult, TableEntryResult


class SceneType(str, Enum):
    NORMAL = "normal"
    ALTER_ADD = "alter_add"
    ALTER_REMOVE = "alter_remove"
    INTERRUPT_FAVORABLE = "interrupt_favorable"
    INTERRUPT_UNFAVORABLE = "interrupt_unfavorable"

    @property
    def display(self) -> str:
        return {
            SceneType.NORMAL: "Normal",
            SceneType.ALTER_ADD: "Alter (Add)",
            SceneType.ALTER_REMOVE: "Alter (Remove)",
            SceneType.INTERRUPT_FAVORABLE: "Interrupt (Favorable)",
            SceneType.INTERRUPT_UNFAVORABLE: "Interrupt (Unfavorable)",
        }[self]

    @property
    def is_alter(self) -> bool:
        return self in (SceneType.ALTER_ADD, SceneType.ALTER_REMOVE)

    @property
    def is_interrupt(self) -> bool:
        return self in (SceneType.INTERRUPT_FAVORABLE, SceneType.INTERRUPT_UNFAVORABLE)


class SceneCheckOutcome(str, Enum):
    DRAMATIC_TWIST = "dramatic_twist"
    COMPLICATION = "complication"
    DELAY = "delay"
    EXPECTED = "expected"
    ADVANTAGE = "advantage"
    OPPORTUNITY = "opportunity"
    REVELATION = "revelation"

    @property
    def display(self) -> str:
        return self.value.replace("_", " ").title()


class NextSceneResult(RollResult):
    kind: Literal["next_scene"] = "next_scene"
    category: RollCategory = RollCategory.FATE
    label: str = "Next Scene"
    fate_dice: tuple[int, ...]
    scene_type: SceneType

    dice_fields: ClassVar[tuple[str, ...]] = ("fate_dice",)

    def derive_dice(self) -> list[int]:
        return list(self.fate_dice)

    def derive_interpretation(self) -> str:
        return f"{self.scene_type.display} ({fate_symbols(self.fate_dice)})"


class SceneFocusResult(RollResult):
    kind: Literal["scene_focus"] = "scene_focus"
    label: str = "Scene Focus"
    roll: int
    focus: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.focus


class NextSceneFollowUpResult(RollResult):
    """A next-scene roll with its follow-up composed in.

    Alter scenes carry a focus, or a modifier plus idea; interrupts carry a
    plot point. The total stays the fate sum.
    """

    kind: Literal["next_scene_follow_up"] = "next_scene_follow_up"
    category: RollCategory = RollCategory.FATE
    label: str = "Next Scene"
    scene: NextSceneResult
    focus: SceneFocusResult | None = None
    modifier: TableEntryResult | None = None
    idea: IdeaResult | None = None
    plot_point: InterruptPlotPointResult | None = None

    def derive_dice(self) -> list[int]:
        return combined_dice(self.scene, self.focus, self.modifier, self.idea, self.plot_point)

    def derive_total(self) -> int:
        return self.scene.raw_total

    def derive_interpretation(self) -> str:
        follow_up = None
        if self.focus is not None:
            follow_up = self.focus.focus
        elif self.modifier is not None and self.idea is not None:
            follow_up = f"{self.modifier.entry} {self.idea.word}"
        elif self.plot_point is not None:
            follow_up = self.plot_point.interpretation
        scene = self.scene.scene_type.display
        return f"{scene} → {follow_up}" if follow_up else scene


class SceneCheckResult(RollResult):
    """2d6 plus the chaos modifier, clamped to 2..12.

    Doubles interrupt the scene; the triggered random event keeps its own
    dice.
    """

    kind: Literal["scene_check"] = "scene_check"
    chaos_level: str = "Normal"
    rolls: tuple[int, ...]
    modifier: int = 0
    modified_total: int
    outcome: SceneCheckOutcome
    interrupt_event: RandomEventResult | None = None

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)
    total_field: ClassVar[str | None] = "modified_total"

    @property
    def is_interrupt(self) -> bool:
        return is_doubles(self.rolls)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return self.modified_total

    def derive_interpretation(self) -> str:
        text = self.outcome.display
        if self.is_interrupt:
            text += " + INTERRUPT!"
        return text

    def derive_label(self) -> str:
        return f"Scene Check ({self.chaos_level})"
