"""Tests for the dice expression parser."""

import pytest

from app.modules.dice.parser import (
    ParsedDice,
    evaluate,
    parse_expression,
    roll_expression,
)
from app.modules.dice.roller import RollSource, Skew


def test_parse_simple_dice():
    parsed = parse_expression("2d6")
    assert parsed.dice_count == 2
    assert parsed.dice_sides == 6
    assert parsed.modifier == 0
    assert parsed.is_fate is False
    assert parsed.skew is Skew.NONE


def test_parse_single_die():
    parsed = parse_expression("d100")
    assert parsed.dice_count == 1
    assert parsed.dice_sides == 100


def test_parse_dice_with_positive_modifier():
    parsed = parse_expression("3d8+5")
    assert parsed.dice_count == 3
    assert parsed.dice_sides == 8
    assert parsed.modifier == 5


def test_parse_dice_with_negative_modifier():
    parsed = parse_expression("2d6-2")
    assert parsed.dice_count == 2
    assert parsed.modifier == -2


def test_parse_keep_highest():
    parsed = parse_expression("4d10k2")
    assert parsed.dice_count == 4
    assert parsed.dice_sides == 10
    assert parsed.keep_highest == 2


def test_parse_fate_dice():
    parsed = parse_expression("4dF")
    assert parsed.is_fate is True
    assert parsed.dice_count == 4
    assert parsed.dice_sides == 0


def test_parse_skew_suffix():
    assert parse_expression("1d10@+").skew is Skew.ADVANTAGE
    assert parse_expression("2d6+1@-").skew is Skew.DISADVANTAGE


def test_parse_invalid_expression():
    with pytest.raises(ValueError):
        parse_expression("abc123")


def test_parse_empty_expression():
    with pytest.raises(ValueError):
        parse_expression("")


def test_parse_zero_sides():
    with pytest.raises(ValueError):
        parse_expression("2d0")


def test_parse_too_many_dice():
    with pytest.raises(ValueError, match="more than 10"):
        parse_expression("11d6", max_dice=10)


def test_keep_more_than_rolled_raises():
    with pytest.raises(ValueError, match="Cannot keep"):
        parse_expression("2d6k5")


def test_evaluate_basic(source: RollSource):
    parsed = ParsedDice(original="2d6", dice_count=2, dice_sides=6)
    result = evaluate(parsed, source)
    assert len(result.individual_rolls) == 2
    assert all(1 <= r <= 6 for r in result.individual_rolls)
    assert result.total == sum(result.individual_rolls)


def test_evaluate_keep_highest(source: RollSource):
    parsed = ParsedDice(original="4d6k2", dice_count=4, dice_sides=6, keep_highest=2)
    result = evaluate(parsed, source)
    assert len(result.individual_rolls) == 4
    assert result.kept_rolls == sorted(result.individual_rolls, reverse=True)[:2]
    assert result.subtotal == sum(result.kept_rolls)


def test_evaluate_fate(source: RollSource):
    result = roll_expression("4dF+1", source)
    assert result.is_fate is True
    assert all(r in (-1, 0, 1) for r in result.individual_rolls)
    assert result.total == sum(result.individual_rolls) + 1


def test_evaluate_advantage_keeps_higher_set():
    for seed in range(30):
        result = roll_expression("2d6@+", RollSource(seed))
        assert result.discarded_rolls is not None
        assert result.subtotal >= sum(result.discarded_rolls)


def test_evaluate_disadvantage_keeps_lower_set():
    for seed in range(30):
        result = roll_expression("2d6@-", RollSource(seed))
        assert result.subtotal <= sum(result.discarded_rolls)


def test_roll_expression_convenience(source: RollSource):
    result = roll_expression("2d6+3", source)
    assert len(result.individual_rolls) == 2
    assert result.modifier == 3
    assert result.total == result.subtotal + 3


def test_roll_expression_is_reproducible():
    first = roll_expression("3d20k1-2", RollSource("replay"))
    second = roll_expression("3d20k1-2", RollSource("replay"))
    assert first == second
