"""Detail, color, history and property results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, joined_interpretation
from app.models.results.oracle import intensity_label
from app.modules.dice.roller import Skew


class DetailResult(RollResult):
    """One roll on a detail-style table (Detail, Color, History).

    ``all_rolls`` holds both faces when skewed; the total is the kept face.
    """

    kind: Literal["detail"] = "detail"
    detail_type: str = "Detail"
    roll: int
    all_rolls: tuple[int, ...] = ()
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
        return self.detail_type


class PropertyResult(RollResult):
    kind: Literal["property"] = "property"
    label: str = "Property"
    property_roll: int
    property_name: str
    intensity_roll: int

    dice_fields: ClassVar[tuple[str, ...]] = ("property_roll", "intensity_roll")

    @property
    def intensity(self) -> str:
        return intensity_label(self.intensity_roll)

    def derive_dice(self) -> list[int]:
        return [self.property_roll, self.intensity_roll]

    def derive_interpretation(self) -> str:
        return f"{self.property_name} ({self.intensity})"


class DualPropertyResult(RollResult):
    """Two properties; the total counts only the property dice."""

    kind: Literal["dual_property"] = "dual_property"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Two Properties"
    first: PropertyResult
    second: PropertyResult

    def derive_dice(self) -> list[int]:
        return combined_dice(self.first, self.second)

    def derive_total(self) -> int:
        return self.first.property_roll + self.second.property_roll

    def derive_interpretation(self) -> str:
        return joined_interpretation(self.first, self.second, separator=" & ")


class DetailFollowUpResult(RollResult):
    """A detail whose History or Property result was rolled out."""

    kind: Literal["detail_follow_up"] = "detail_follow_up"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Detail"
    detail: DetailResult
    history: DetailResult | None = None
    follow_up_property: PropertyResult | None = None

    def derive_dice(self) -> list[int]:
        return combined_dice(self.detail, self.history, self.follow_up_property)

    def derive_total(self) -> int:
        return self.detail.raw_total

    def derive_interpretation(self) -> str:
        follow_up = joined_interpretation(self.history, self.follow_up_property)
        if follow_up:
            return f"{self.detail.result} → {follow_up}"
        return self.detail.result
