"""Deterministic roll source for the oracle generators."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class Skew(str, Enum):
    """How a skewed roll picks between its two dice."""

    NONE = "none"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"

    @property
    def symbol(self) -> str:
        return {"none": "", "advantage": "@+", "disadvantage": "@-"}[self.value]


def parse_skew(value: Skew | str) -> Skew:
    """Coerce a skew given by name or symbol, rejecting anything else."""
    if isinstance(value, Skew):
        return value
    aliases = {"+": Skew.ADVANTAGE, "@+": Skew.ADVANTAGE, "-": Skew.DISADVANTAGE, "@-": Skew.DISADVANTAGE}
    if value in aliases:
        return aliases[value]
    try:
        return Skew(value)
    except ValueError:
        accepted = ", ".join(s.value for s in Skew)
        raise ValueError(f"Unknown skew {value!r} (expected one of: {accepted})") from None


@dataclass
class SkewedRoll:
    first: int
    second: int
    chosen: int

    @property
    def is_doubles(self) -> bool:
        return self.first == self.second

    @property
    def faces(self) -> list[int]:
        return [self.first, self.second]


class RollSource:
    """Seedable pseudo-random source that every generator draws from.

    The same seed and the same sequence of calls always yields the same
    sequence of results. A source belongs to one session at a time; sharing
    it between concurrent callers breaks reproducibility.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def roll_die(self, sides: int) -> int:
        """Roll one die with faces ``1..sides``.

        Raises:
            ValueError: If ``sides`` is not positive.
        """
        if sides <= 0:
            raise ValueError(f"sides must be > 0, got {sides}")
        return self._rng.randint(1, sides)

    def roll_dice(self, count: int, sides: int) -> list[int]:
        """Roll ``count`` dice in call order (never sorted)."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if sides <= 0:
            raise ValueError(f"sides must be > 0, got {sides}")
        return [self.roll_die(sides) for _ in range(count)]

    def pick_uniform(self, n: int) -> int:
        """Pick an index in ``[0, n)`` with equal weight."""
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")
        return self._rng.randrange(n)

    def pick_weighted(self, weights: list[int] | list[float]) -> int:
        """Pick an index with probability ``weights[i] / sum(weights)``.

        One uniform draw in ``[0, sum)`` is scanned against the cumulative
        weights.

        Raises:
            ValueError: If weights are empty, negative, or sum to zero.
        """
        if not weights:
            raise ValueError("weights must not be empty")
        if any(w < 0 for w in weights):
            raise ValueError("weights must not be negative")
        total = sum(weights)
        if total <= 0:
            raise ValueError("weights must not sum to zero")

        draw = self._rng.random() * total
        cumulative = 0.0
        for index, weight in enumerate(weights):
            cumulative += weight
            if draw < cumulative:
                return index
        # Float rounding can leave draw == total; land on the last non-zero weight.
        return max(i for i, w in enumerate(weights) if w > 0)

    def roll_fate_die(self) -> int:
        return self.pick_uniform(3) - 1

    def roll_fate_dice(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.roll_fate_die() for _ in range(count)]

    def roll_with_advantage(self, sides: int) -> SkewedRoll:
        first, second = self.roll_die(sides), self.roll_die(sides)
        return SkewedRoll(first=first, second=second, chosen=max(first, second))

    def roll_with_disadvantage(self, sides: int) -> SkewedRoll:
        first, second = self.roll_die(sides), self.roll_die(sides)
        return SkewedRoll(first=first, second=second, chosen=min(first, second))

    def roll_skewed(self, sides: int, skew: Skew | str = Skew.NONE) -> tuple[int, list[int]]:
        """Roll one die, or two under a skew.

        Returns:
            The kept face and every face rolled, in roll order.
        """
        skew = parse_skew(skew)
        if skew is Skew.ADVANTAGE:
            roll = self.roll_with_advantage(sides)
            return roll.chosen, roll.faces
        if skew is Skew.DISADVANTAGE:
            roll = self.roll_with_disadvantage(sides)
            return roll.chosen, roll.faces
        face = self.roll_die(sides)
        return face, [face]
