"""Treasure and item results."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, combined_dice, joined_interpretation
from app.models.results.details import DetailResult, PropertyResult
from app.modules.dice.roller import Skew


class ObjectTreasureResult(RollResult):
    """4d6: the first kept die picks the category, the rest pick its columns."""

    kind: Literal["object_treasure"] = "object_treasure"
    rolls: tuple[int, ...]
    kept_rolls: tuple[int, ...]
    skew: Skew = Skew.NONE
    treasure_category: str
    columns: tuple[str, ...]

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return sum(self.kept_rolls)

    def derive_interpretation(self) -> str:
        return f"{self.treasure_category}: {' '.join(self.columns)}"

    def derive_label(self) -> str:
        return f"Treasure ({self.treasure_category})"


class ItemCreationResult(RollResult):
    """A base item with two properties and an optional color."""

    kind: Literal["item_creation"] = "item_creation"
    category: RollCategory = RollCategory.COMPOSITE
    label: str = "Item Creation"
    base_item: ObjectTreasureResult
    first_property: PropertyResult
    second_property: PropertyResult
    color: DetailResult | None = None

    def derive_dice(self) -> list[int]:
        return combined_dice(self.base_item, self.first_property, self.second_property, self.color)

    def derive_interpretation(self) -> str:
        return joined_interpretation(self.base_item, self.first_property, self.second_property, self.color)
