"""Results of plain dice expressions."""

from __future__ import annotations

from typing import ClassVar, Literal

from app.models.results.base import RollCategory, RollResult, fate_symbols


class DiceRollResult(RollResult):
    """A standard ``NdM`` expression, optionally keep-highest or skewed."""

    kind: Literal["dice_roll"] = "dice_roll"
    category: RollCategory = RollCategory.STANDARD
    expression: str
    rolls: tuple[int, ...]
    kept_rolls: tuple[int, ...] | None = None
    discarded_rolls: tuple[int, ...] | None = None
    modifier: int = 0

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        counted = self.kept_rolls if self.kept_rolls is not None else self.rolls
        return sum(counted) + self.modifier

    def derive_interpretation(self) -> str:
        return f"{self.expression} = {self.derive_total()}"

    def derive_label(self) -> str:
        return self.expression


class FateRollResult(RollResult):
    """``NdF`` fate dice; faces are -1, 0 or +1."""

    kind: Literal["fate_roll"] = "fate_roll"
    category: RollCategory = RollCategory.FATE
    expression: str = "4dF"
    rolls: tuple[int, ...]
    discarded_rolls: tuple[int, ...] | None = None
    modifier: int = 0

    dice_fields: ClassVar[tuple[str, ...]] = ("rolls",)

    def derive_dice(self) -> list[int]:
        return list(self.rolls)

    def derive_total(self) -> int:
        return sum(self.rolls) + self.modifier

    def derive_interpretation(self) -> str:
        return fate_symbols(self.rolls)

    def derive_label(self) -> str:
        return self.expression
