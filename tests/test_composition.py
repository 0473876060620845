"""Tests for embedding and triggering between generators."""

import sys

import pytest

from app.domain.composition import combined_dice, combined_total, is_doubles, joined_interpretation, trigger
from app.domain.oracles import oracle, scene
from app.domain.oracles.oracle import ORACLE_LIKELIHOOD_MODIFIERS, _fate_check_outcome
from app.models.results.npc import DualPersonalityResult, NpcActionResult
from app.models.results.oracle import CheckOutcome, FateCheckTrigger, OracleCheckResult
from app.modules.dice.roller import RollSource, Skew
from tests.conftest import find_seed


def _action(roll: int, all_rolls: list[int] | None = None, result: str = "Curious") -> NpcActionResult:
    return NpcActionResult(
        column="Personality",
        roll=roll,
        all_rolls=all_rolls or [],
        skew=Skew.ADVANTAGE if all_rolls else Skew.NONE,
        result=result,
    )


class TestEmbedding:
    def test_dice_concatenate_in_order(self):
        first = _action(7, [3, 7], "Curious")
        second = _action(5, result="Stubborn")
        parent = DualPersonalityResult(primary=first, secondary=second)

        assert first.dice_values == (3, 7)
        assert second.dice_values == (5,)
        assert parent.dice_values == (3, 7, 5)
        assert parent.raw_total == 3 + 7 + 5
        assert parent.interpretation == "Curious but Stubborn"

    def test_helpers_skip_absent_parts(self):
        first = _action(4)
        assert combined_dice(first, None, first) == [4, 4]
        assert combined_total(None, first) == 4
        assert joined_interpretation(first, None, "extra", "", separator=" / ") == "Curious / extra"

    def test_is_doubles(self):
        assert is_doubles([3, 3])
        assert is_doubles([2, 2, 5])
        assert not is_doubles([3, 4])
        assert not is_doubles([6])

    def test_helpers_live_with_the_models(self):
        from app.domain import composition
        from app.models.results import base

        assert composition.combined_dice is base.combined_dice
        assert composition.is_doubles is base.is_doubles
        for name, module in list(sys.modules.items()):
            if name.startswith("app.models."):
                borrowed = [
                    attr for attr, value in vars(module).items()
                    if str(getattr(value, "__module__", "") or "").startswith("app.domain")
                ]
                assert borrowed == [], name


class TestTriggering:
    def test_trigger_skips_generator_when_condition_false(self):
        calls = []
        assert trigger(False, lambda: calls.append(1)) is None
        assert calls == []
        assert trigger(True, lambda: "ran") == "ran"

    def test_scene_check_doubles_attach_interrupt(self):
        seed = find_seed(lambda r: is_doubles(r.rolls), scene.scene_check)
        result = scene.scene_check(RollSource(seed))

        assert result.is_interrupt
        assert result.interrupt_event is not None
        assert result.dice_values == result.rolls
        assert "INTERRUPT" in result.interpretation

        # the event is what a fresh source yields after the two check dice
        replay = RollSource(seed)
        replay.roll_dice(2, 6)
        assert result.interrupt_event.dice_values == oracle.random_event(replay).dice_values

    def test_scene_check_without_doubles_has_no_interrupt(self):
        seed = find_seed(lambda r: not is_doubles(r.rolls), scene.scene_check)
        result = scene.scene_check(RollSource(seed))
        assert result.interrupt_event is None

    def test_deciding_does_not_draw(self):
        seed = find_seed(lambda r: not is_doubles(r.rolls), scene.scene_check)
        source = RollSource(seed)
        scene.scene_check(source)

        expected = RollSource(seed)
        expected.roll_dice(2, 6)
        assert source.roll_die(1000) == expected.roll_die(1000)

    def test_fate_check_double_blank_primary_left_triggers_event(self):
        seed = find_seed(
            lambda r: r.fate_dice == (0, 0),
            lambda s: oracle.fate_check(s, primary_on_left=True),
        )
        result = oracle.fate_check(RollSource(seed), primary_on_left=True)
        assert result.special_trigger is FateCheckTrigger.RANDOM_EVENT
        assert result.random_event is not None
        assert result.dice_values == (0, 0, result.intensity)

    def test_fate_check_double_blank_primary_right_flags_assumption(self):
        seed = find_seed(
            lambda r: r.fate_dice == (0, 0),
            lambda s: oracle.fate_check(s, primary_on_left=False),
        )
        result = oracle.fate_check(RollSource(seed), primary_on_left=False)
        assert result.special_trigger is FateCheckTrigger.INVALID_ASSUMPTION
        assert result.random_event is None
        assert "Invalid assumption" in result.interpretation

    def test_fate_check_without_blanks_has_no_trigger(self):
        seed = find_seed(lambda r: r.fate_dice != (0, 0), oracle.fate_check)
        result = oracle.fate_check(RollSource(seed))
        assert result.special_trigger is None
        assert result.random_event is None

    def test_expectation_check_triggers_meaning_only_on_blanks(self):
        for seed in range(100):
            result = oracle.expectation_check(RollSource(seed))
            assert (result.meaning is not None) == (result.fate_dice == (0, 0))


class TestOracleCheckScenario:
    def test_seed_42_neutral(self):
        result = oracle.oracle_check(RollSource(42), "Even Odds")
        assert isinstance(result, OracleCheckResult)
        assert len(result.dice_values) == 2
        assert 2 <= result.raw_total <= 12
        assert result.modifier == 0
        assert result.outcome in set(CheckOutcome)

    @pytest.mark.parametrize("likelihood", ["Very Unlikely", "Unlikely", "Likely", "Very Likely"])
    def test_seed_42_modifier_shifts_total_only(self, likelihood: str):
        neutral = oracle.oracle_check(RollSource(42), "Even Odds")
        shifted = oracle.oracle_check(RollSource(42), likelihood)

        delta = ORACLE_LIKELIHOOD_MODIFIERS[likelihood]
        assert shifted.dice_values == neutral.dice_values
        assert shifted.raw_total == neutral.raw_total
        assert shifted.modified_total - neutral.modified_total == delta


C = CheckOutcome
FATE_CHECK_TABLE = {
    # (first, second): (Even Odds, Likely, Unlikely)
    (1, 1): (C.YES_AND, C.YES_AND, C.YES_AND),
    (1, 0): (C.YES_BECAUSE, C.YES, C.YES),
    (1, -1): (C.YES_BUT, C.YES_BUT, C.NO_BUT),
    (0, 1): (C.FAVORABLE, C.YES, C.YES),
    (0, 0): (C.YES_BUT, C.YES, C.NO),
    (0, -1): (C.UNFAVORABLE, C.NO, C.NO),
    (-1, 1): (C.NO_BUT, C.YES_BUT, C.NO_BUT),
    (-1, 0): (C.NO_BECAUSE, C.NO, C.NO),
    (-1, -1): (C.NO_AND, C.NO_AND, C.NO_AND),
}


class TestFateCheckOutcomes:
    @pytest.mark.parametrize(
        "first,second,likelihood,expected",
        [
            (first, second, likelihood, outcomes[column])
            for (first, second), outcomes in FATE_CHECK_TABLE.items()
            for column, likelihood in enumerate(["Even Odds", "Likely", "Unlikely"])
        ],
    )
    def test_outcome_table(self, first: int, second: int, likelihood: str, expected: CheckOutcome):
        assert _fate_check_outcome(likelihood, first, second) is expected

    def test_first_die_is_primary_on_either_side(self):
        seed = find_seed(
            lambda r: r.fate_dice == (1, 0),
            lambda s: oracle.fate_check(s, primary_on_left=False),
        )
        result = oracle.fate_check(RollSource(seed), primary_on_left=False)
        assert result.outcome is CheckOutcome.YES_BECAUSE
        assert result.special_trigger is None

    @pytest.mark.parametrize("likelihood", ["Even Odds", "Likely", "Unlikely"])
    def test_side_never_changes_outcome(self, likelihood: str):
        for seed in range(60):
            left = oracle.fate_check(RollSource(seed), likelihood, primary_on_left=True)
            right = oracle.fate_check(RollSource(seed), likelihood, primary_on_left=False)
            assert left.fate_dice == right.fate_dice
            assert left.outcome is right.outcome
