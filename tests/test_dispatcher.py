"""Tests for generator dispatch and parameter validation."""

import pytest

from app.domain.dispatcher import (
    CATALOG,
    InvalidParametersError,
    UnknownGeneratorError,
    describe_catalog,
    invoke,
    resolve,
)
from app.models.results.dice import DiceRollResult, FateRollResult
from app.models.results.ironsworn import IronswornActionResult, IronswornOutcome
from app.modules.dice.roller import RollSource


def test_resolve_known_operation():
    assert resolve("oracle", "fate_check") is CATALOG["oracle"]["fate_check"]


@pytest.mark.parametrize("generator,operation", [("oracle", "nope"), ("nope", "fate_check")])
def test_resolve_unknown_operation(generator: str, operation: str):
    with pytest.raises(UnknownGeneratorError):
        resolve(generator, operation)


def test_invoke_passes_params(source: RollSource):
    result = invoke(source, "dice", "roll_dice", {"expression": "3d6+2"})
    assert isinstance(result, DiceRollResult)
    assert len(result.dice_values) == 3
    assert result.raw_total == sum(result.dice_values) + 2


def test_invoke_fate_expression(source: RollSource):
    result = invoke(source, "dice", "roll_dice", {"expression": "4dF"})
    assert isinstance(result, FateRollResult)
    assert all(v in (-1, 0, 1) for v in result.dice_values)


def test_invoke_unknown_parameter_name(source: RollSource):
    with pytest.raises(InvalidParametersError, match="oracle.fate_check"):
        invoke(source, "oracle", "fate_check", {"odds": "Likely"})


@pytest.mark.parametrize(
    "generator,operation,params",
    [
        ("oracle", "fate_check", {"likelihood": "Certain"}),
        ("oracle", "oracle_check", {"likelihood": "Maybe"}),
        ("scene", "scene_check", {"chaos_level": "Mayhem"}),
        ("exploration", "roll_weather", {"season": "Monsoon"}),
        ("exploration", "check_dungeon_encounter", {"danger_level": 11}),
        ("exploration", "check_dungeon_encounter", {"danger_level": True}),
        ("ironsworn", "action_roll", {"stat": 6}),
        ("ironsworn", "oracle_roll", {"die_type": 12}),
        ("npc", "roll_need", {"skew": "sideways"}),
        ("dice", "roll_dice", {"expression": "2d0"}),
        ("dice", "roll_dice", {"expression": "1000d6"}),
        ("dice", "roll_fate", {"count": 0}),
        ("oracle", "scale_value", {"base_value": "ten"}),
        ("wilderness", "initialize_at", {"environment_row": 0}),
    ],
)
def test_invoke_rejects_bad_values(source: RollSource, generator: str, operation: str, params: dict):
    with pytest.raises(InvalidParametersError):
        invoke(source, generator, operation, params)


def test_invalid_parameters_is_a_value_error():
    assert issubclass(InvalidParametersError, ValueError)
    assert issubclass(UnknownGeneratorError, LookupError)


def test_skew_accepts_symbols():
    advantage = invoke(RollSource(4), "npc", "roll_need", {"skew": "+"})
    assert len(advantage.dice_values) == 2
    assert advantage.roll == max(advantage.dice_values)


def test_describe_catalog_lists_every_operation():
    described = describe_catalog()
    assert set(described) == set(CATALOG)
    for generator, operations in CATALOG.items():
        assert set(described[generator]) == set(operations)


def test_describe_catalog_parameters():
    fate_check = describe_catalog()["oracle"]["fate_check"]
    names = [p["name"] for p in fate_check]
    assert names == ["likelihood", "primary_on_left"]
    assert fate_check[0] == {"name": "likelihood", "default": "Even Odds", "required": False}

    need = describe_catalog()["npc"]["roll_need"]
    assert need[0]["default"] == "none"


class TestIronsworn:
    def test_action_score_is_capped(self):
        result = IronswornActionResult(action_die=6, stat=5, adds=4, challenge_dice=[3, 9])
        assert result.raw_total == 10
        assert result.outcome is IronswornOutcome.STRONG_HIT

    def test_ties_go_to_the_challenge_dice(self):
        result = IronswornActionResult(action_die=3, stat=2, adds=0, challenge_dice=[5, 4])
        assert result.outcome is IronswornOutcome.WEAK_HIT
        assert IronswornActionResult(action_die=1, stat=0, challenge_dice=[1, 1]).outcome is IronswornOutcome.MISS

    def test_match_is_reported(self):
        result = IronswornActionResult(action_die=4, stat=1, challenge_dice=[7, 7])
        assert result.is_match
        assert result.interpretation.endswith("(match)")
