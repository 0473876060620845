"""Dice expression parser: supports NdM, NdM+X, NdMkK, NdF and @+/@- skew."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.modules.dice.roller import RollSource, Skew


@dataclass
class ParsedDice:
    """Result of parsing a dice expression."""

    original: str
    dice_count: int
    dice_sides: int  # 0 for fate dice
    modifier: int = 0
    keep_highest: int | None = None
    is_fate: bool = False
    skew: Skew = Skew.NONE


@dataclass
class DiceExpressionResult:
    """Full result of evaluating a dice expression."""

    expression: str
    individual_rolls: list[int] = field(default_factory=list)
    kept_rolls: list[int] | None = None
    discarded_rolls: list[int] | None = None  # the losing set under a skew
    subtotal: int = 0
    modifier: int = 0
    total: int = 0
    is_fate: bool = False
    skew: Skew = Skew.NONE


_DICE_PATTERN = re.compile(
    r"^(\d*)d(\d+|f)"  # NdM or NdF
    r"(?:k(\d+))?"  # optional kK
    r"(?:\s*([+-])\s*(\d+))?"  # optional +X or -X
    r"(?:\s*@([+-]))?$",  # optional @+ / @-
    re.IGNORECASE,
)


def parse_expression(expr: str, max_dice: int = 100) -> ParsedDice:
    """Parse a dice expression string into a ParsedDice.

    Supported formats:
        NdM        - e.g. 2d6
        NdM+X      - e.g. 2d6+3
        NdM-X      - e.g. 2d6-2
        NdMkK      - e.g. 4d10k2 (keep highest K)
        dM         - e.g. d100 (shorthand for 1dM)
        NdF        - e.g. 4dF (fate dice, faces -1/0/+1)
        ...@+      - e.g. 1d10@+ (roll twice, keep the higher total)
        ...@-      - e.g. 1d10@- (roll twice, keep the lower total)

    Args:
        expr: The expression string.
        max_dice: Largest dice count accepted.

    Returns:
        ParsedDice with all parsed components.

    Raises:
        ValueError: If the expression cannot be parsed.
    """
    expr = expr.strip()
    if not expr:
        raise ValueError("Empty dice expression")

    dice_match = _DICE_PATTERN.match(expr)
    if not dice_match:
        raise ValueError(f"Invalid dice expression: {expr}")

    count_str, sides_str, keep_str, sign, mod_val, skew_sign = dice_match.groups()

    dice_count = int(count_str) if count_str else 1
    is_fate = sides_str.lower() == "f"
    sides = 0 if is_fate else int(sides_str)
    keep_highest = int(keep_str) if keep_str else None
    modifier = 0
    if sign and mod_val:
        modifier = int(mod_val) if sign == "+" else -int(mod_val)

    if dice_count <= 0:
        raise ValueError(f"Dice count must be positive: {expr}")
    if dice_count > max_dice:
        raise ValueError(f"Cannot roll more than {max_dice} dice: {expr}")
    if not is_fate and sides <= 0:
        raise ValueError(f"Dice must have at least one side: {expr}")
    if keep_highest is not None and keep_highest > dice_count:
        raise ValueError(f"Cannot keep {keep_highest} dice from {dice_count} rolls")

    skew = Skew.NONE
    if skew_sign:
        skew = Skew.ADVANTAGE if skew_sign == "+" else Skew.DISADVANTAGE

    return ParsedDice(
        original=expr,
        dice_count=dice_count,
        dice_sides=sides,
        modifier=modifier,
        keep_highest=keep_highest,
        is_fate=is_fate,
        skew=skew,
    )


def _roll_once(parsed: ParsedDice, source: RollSource) -> tuple[list[int], list[int] | None, int]:
    if parsed.is_fate:
        rolls = source.roll_fate_dice(parsed.dice_count)
    else:
        rolls = source.roll_dice(parsed.dice_count, parsed.dice_sides)

    if parsed.keep_highest is not None and rolls:
        kept = sorted(rolls, reverse=True)[: parsed.keep_highest]
        return rolls, kept, sum(kept)
    return rolls, None, sum(rolls)


def evaluate(parsed: ParsedDice, source: RollSource) -> DiceExpressionResult:
    """Roll dice according to a ParsedDice and return the full result."""
    rolls, kept, subtotal = _roll_once(parsed, source)
    discarded = None

    if parsed.skew is not Skew.NONE:
        other_rolls, other_kept, other_subtotal = _roll_once(parsed, source)
        prefer_other = (
            other_subtotal > subtotal
            if parsed.skew is Skew.ADVANTAGE
            else other_subtotal < subtotal
        )
        if prefer_other:
            discarded = rolls
            rolls, kept, subtotal = other_rolls, other_kept, other_subtotal
        else:
            discarded = other_rolls

    return DiceExpressionResult(
        expression=parsed.original,
        individual_rolls=rolls,
        kept_rolls=kept,
        discarded_rolls=discarded,
        subtotal=subtotal,
        modifier=parsed.modifier,
        total=subtotal + parsed.modifier,
        is_fate=parsed.is_fate,
        skew=parsed.skew,
    )


def roll_expression(expr: str, source: RollSource, max_dice: int = 100) -> DiceExpressionResult:
    """Convenience: parse + evaluate in one call."""
    return evaluate(parse_expression(expr, max_dice), source)
