"""Plain dice generators."""

from __future__ import annotations

from app.infra.config import settings
from app.models.results import DiceRollResult, FateRollResult
from app.modules.dice.parser import evaluate, parse_expression
from app.modules.dice.roller import RollSource


def roll_dice(source: RollSource, expression: str = "1d20") -> DiceRollResult | FateRollResult:
    """Roll a dice expression (``2d6+3``, ``4d10k2``, ``4dF``, ``1d20@+``)."""
    parsed = parse_expression(expression, settings.max_dice_count)
    rolled = evaluate(parsed, source)
    if parsed.is_fate:
        return FateRollResult(
            expression=parsed.original,
            rolls=rolled.individual_rolls,
            discarded_rolls=rolled.discarded_rolls,
            modifier=rolled.modifier,
        )
    return DiceRollResult(
        expression=parsed.original,
        rolls=rolled.individual_rolls,
        kept_rolls=rolled.kept_rolls,
        discarded_rolls=rolled.discarded_rolls,
        modifier=rolled.modifier,
    )


def roll_fate(source: RollSource, count: int = 4) -> FateRollResult:
    if count <= 0 or count > settings.max_dice_count:
        raise ValueError(f"count must be in 1..{settings.max_dice_count}, got {count}")
    return FateRollResult(expression=f"{count}dF", rolls=source.roll_fate_dice(count))
