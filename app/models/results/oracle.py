"""Yes/no oracles, meaning tables and random events."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, fate_symbols

INTENSITY_LABELS = ["Minimal", "Minor", "Mundane", "Moderate", "Major", "Maximum"]


def intensity_label(roll: int) -> str:
    return INTENSITY_LABELS[max(1, min(roll, len(INTENSITY_LABELS))) - 1]


class CheckOutcome(str, Enum):
    YES_AND = "yes_and"
    YES_BECAUSE = "yes_because"
    YES_BUT = "yes_but"
    YES = "yes"
    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"
    NO = "no"
    NO_BUT = "no_but"
    NO_BECAUSE = "no_because"
    NO_AND = "no_and"

    @property
    def display(self) -> str:
        return _CHECK_DISPLAY[self]

    @property
    def is_yes(self) -> bool:
        return self in (CheckOutcome.YES_AND, CheckOutcome.YES_BECAUSE, CheckOutcome.YES_BUT, CheckOutcome.YES)


_CHECK_DISPLAY = {
    CheckOutcome.YES_AND: "Yes, and...",
    CheckOutcome.YES_BECAUSE: "Yes, because...",
    CheckOutcome.YES_BUT: "Yes, but...",
    CheckOutcome.YES: "Yes",
    CheckOutcome.FAVORABLE: "Favorable",
    CheckOutcome.UNFAVORABLE: "Unfavorable",
    CheckOutcome.NO: "No",
    CheckOutcome.NO_BUT: "No, but...",
    CheckOutcome.NO_BECAUSE: "No, because...",
    CheckOutcome.NO_AND: "No, and...",
}


class FateCheckTrigger(str, Enum):
    RANDOM_EVENT = "random_event"
    INVALID_ASSUMPTION = "invalid_assumption"


class ExpectationOutcome(str, Enum):
    EXPECTED_INTENSIFIED = "expected_intensified"
    EXPECTED = "expected"
    NEXT_MOST_EXPECTED = "next_most_expected"
    FAVORABLE = "favorable"
    MODIFIED_IDEA = "modified_idea"
    UNFAVORABLE = "unfavorable"
    OPPOSITE = "opposite"
    OPPOSITE_INTENSIFIED = "opposite_intensified"

    @property
    def display(self) -> str:
        return self.value.replace("_", " ").capitalize()


# --- Word tables ---


class TableEntryResult(RollResult):
    """A single roll on one named word table."""

    kind: Literal["table_entry"] = "table_entry"
    table: str
    roll: int
    entry: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.entry

    def derive_label(self) -> str:
        return self.table.replace("_", " ").title()


class IdeaResult(RollResult):
    kind: Literal["idea"] = "idea"
    idea_category: str
    roll: int
    word: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.word

    def derive_label(self) -> str:
        return self.idea_category


class RandomEventFocusResult(RollResult):
    kind: Literal["random_event_focus"] = "random_event_focus"
    label: str = "Random Event Focus"
    roll: int
    focus: str

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.focus


class RandomEventResult(RollResult):
    """Focus, modifier and idea; the category die stays out of the dice."""

    kind: Literal["random_event"] = "random_event"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Random Event"
    focus_roll: int
    focus: str
    modifier_roll: int
    modifier: str
    category_roll: int
    idea: IdeaResult

    dice_fields: ClassVar[tuple[str, ...]] = ("focus_roll", "modifier_roll", "idea")

    def derive_dice(self) -> list[int]:
        return [self.focus_roll, self.modifier_roll] + combined_dice(self.idea)

    def derive_interpretation(self) -> str:
        return f"{self.focus}: {self.modifier} {self.idea.word}"


class DiscoverMeaningResult(RollResult):
    kind: Literal["discover_meaning"] = "discover_meaning"
    label: str = "Discover Meaning"
    first_roll: int
    second_roll: int
    first_word: str
    second_word: str

    dice_fields: ClassVar[tuple[str, ...]] = ("first_roll", "second_roll")

    def derive_dice(self) -> list[int]:
        return [self.first_roll, self.second_roll]

    def derive_interpretation(self) -> str:
        return f"{self.first_word} {self.second_word}"


class PayThePriceResult(RollResult):
    kind: Literal["pay_the_price"] = "pay_the_price"
    roll: int
    result: str
    is_major_twist: bool = False

    dice_fields: ClassVar[tuple[str, ...]] = ("roll",)

    def derive_dice(self) -> list[int]:
        return [self.roll]

    def derive_interpretation(self) -> str:
        return self.result

    def derive_label(self) -> str:
        return "Major Plot Twist" if self.is_major_twist else "Pay the Price"


class InterruptPlotPointResult(RollResult):
    kind: Literal["interrupt_plot_point"] = "interrupt_plot_point"
    label: str = "Interrupt / Plot Point"
    category_roll: int
    event_roll: int
    plot_category: str
    event: str

    dice_fields: ClassVar[tuple[str, ...]] = ("category_roll", "event_roll")

    def derive_dice(self) -> list[int]:
        return [self.category_roll, self.event_roll]

    def derive_interpretation(self) -> str:
        return f"{self.plot_category}: {self.event}"


# --- Checks ---


class FateCheckResult(RollResult):
    """2dF read left/right, plus a d6 intensity.

    A random event raised by double blanks is attached, not composed: its
    dice stay inside ``random_event``.
    """

    kind: Literal["fate_check"] = "fate_check"
    category: RollCategory = RollCategory.FATE
    likelihood: str = "Even Odds"
    fate_dice: tuple[int, ...]
    intensity: int
    primary_on_left: bool
    outcome: CheckOutcome
    special_trigger: FateCheckTrigger | None = None
    random_event: RandomEventResult | None = None

    dice_fields: ClassVar[tuple[str, ...]] = ("fate_dice", "intensity")

    @property
    def intensity_label(self) -> str:
        return intensity_label(self.intensity)

    def derive_dice(self) -> list[int]:
        return list(self.fate_dice) + [self.intensity]

    def derive_total(self) -> int:
        return sum(self.fate_dice)

    def derive_interpretation(self) -> str:
        text = f"{self.outcome.display} ({self.intensity_label})"
        if self.special_trigger is FateCheckTrigger.INVALID_ASSUMPTION:
            text += " [Invalid assumption]"
        elif self.special_trigger is FateCheckTrigger.RANDOM_EVENT:
            text += " [Random event]"
            if self.random_event is not None:
                text += f" {self.random_event.interpretation}"
        return text

    def derive_label(self) -> str:
        return f"Fate Check ({self.likelihood})"


class OracleCheckResult(RollResult):
    """2d6 yes/no check; the likelihood shifts the total, never the dice."""

    kind: Literal["oracle_check"] = "oracle_check"
    likelihood: str = "Even Odds"
    rolls: tuple[int, ...]
    modifier: int = 0
    outcome: CheckOutcome

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    @property
    def modified_total(self) -> int:
        return self.raw_total + self.modifier

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_interpretation(self) -> str:
        total = sum(self.rolls)
        return f"{self.outcome.display} ({total}{self.modifier:+d} = {total + self.modifier})"

    def derive_label(self) -> str:
        return f"Oracle Check ({self.likelihood})"


class ExpectationCheckResult(RollResult):
    """Tests an expectation with 2dF.

    The meaning triggered on ``0 0`` is not stored; a restored result
    recomputes its label and interpretation without it.
    """

    kind: Literal["expectation_check"] = "expectation_check"
    category: RollCategory = RollCategory.FATE
    label: str = "Expectation Check"
    fate_dice: tuple[int, ...]
    outcome: ExpectationOutcome
    meaning: DiscoverMeaningResult | None = None

    derived_on_decode: ClassVar[tuple[str, ...]] = ("label", "interpretation")
    transient_fields: ClassVar[frozenset[str]] = frozenset({"meaning"})

    dice_fields: ClassVar[tuple[str, ...]] = ("fate_dice",)

    def derive_dice(self) -> list[int]:
        return list(self.fate_dice)

    def derive_interpretation(self) -> str:
        text = f"{self.outcome.display} ({fate_symbols(self.fate_dice)})"
        if self.meaning is not None:
            text += f" → {self.meaning.interpretation}"
        return text


class ScaleResult(RollResult):
    """2dF + 1d6 on the scale table."""

    kind: Literal["scale"] = "scale"
    category: RollCategory = RollCategory.FATE
    label: str = "Scale"
    fate_dice: tuple[int, ...]
    intensity_roll: int
    scale_value: int
    modifier_label: str
    multiplier: float

    dice_fields: ClassVar[tuple[str, ...]] = ("fate_dice", "intensity_roll")
    total_field: ClassVar[str | None] = "scale_value"

    def derive_dice(self) -> list[int]:
        return list(self.fate_dice) + [self.intensity_roll]

    def derive_total(self) -> int:
        return self.scale_value

    def derive_interpretation(self) -> str:
        return self.modifier_label


class ScaledValueResult(RollResult):
    kind: Literal["scaled_value"] = "scaled_value"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Scaled Value"
    base_value: float
    scale: ScaleResult

    @property
    def scaled(self) -> float:
        return round(self.base_value * self.scale.multiplier, 2)

    def derive_dice(self) -> list[int]:
        return combined_dice(self.scale)

    def derive_total(self) -> int:
        return self.scale.raw_total

    def derive_interpretation(self) -> str:
        return f"{self.base_value:g} → {self.scaled:g} ({self.scale.modifier_label})"
