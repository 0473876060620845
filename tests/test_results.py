"""Encode/decode tests for the roll result entities."""

import json
from typing import get_origin

import pytest
from pydantic import ValidationError

from app.domain.dispatcher import CATALOG, invoke
from app.domain.oracles import details, dungeon, npc, oracle, settlement
from app.domain.registry import registry
from app.models.results import RESULT_TYPES, RollCategory, RollResult
from app.models.results.dice import DiceRollResult
from app.models.results.oracle import DiscoverMeaningResult, ExpectationCheckResult, ExpectationOutcome, ScaleResult
from app.modules.dice.roller import RollSource
from tests.conftest import find_seed

SEEDS = [0, 1, 2, 3, 42, 1234, "session:7"]
OPERATIONS = [(generator, operation) for generator, ops in CATALOG.items() for operation in ops]

BASE_KEYS = {"kind", "category", "label", "diceValues", "rawTotal", "interpretation", "createdAt", "extra"}


def _restore(result: RollResult) -> RollResult:
    document = json.loads(json.dumps(result.encode()))
    return registry.decode(document)


@pytest.mark.parametrize("generator,operation", OPERATIONS)
def test_round_trip_preserves_observable_fields(generator: str, operation: str):
    for seed in SEEDS:
        result = invoke(RollSource(seed), generator, operation)
        restored = _restore(result)

        assert type(restored) is type(result), f"{generator}.{operation} fell back to {type(restored).__name__}"
        assert restored.kind == result.kind
        assert restored.category == result.category
        assert restored.dice_values == result.dice_values
        assert restored.raw_total == result.raw_total
        assert restored.created_at == result.created_at


@pytest.mark.parametrize("generator,operation", OPERATIONS)
def test_encoded_document_shape(generator: str, operation: str):
    document = invoke(RollSource(11), generator, operation).encode()
    assert set(document) == BASE_KEYS
    assert isinstance(document["extra"], dict)
    assert document["category"] in {c.value for c in RollCategory}
    assert all(isinstance(v, int) for v in document["diceValues"])
    json.dumps(document)


@pytest.mark.parametrize("generator,operation", OPERATIONS)
def test_generators_are_deterministic(generator: str, operation: str):
    first = invoke(RollSource(99), generator, operation)
    second = invoke(RollSource(99), generator, operation)
    assert first.dice_values == second.dice_values
    assert first.raw_total == second.raw_total
    assert first.interpretation == second.interpretation


def test_every_result_type_is_registered():
    kinds = [t.model_fields["kind"].default for t in RESULT_TYPES]
    assert len(kinds) == len(set(kinds))
    assert all(kind in registry for kind in kinds)


def test_composite_embeds_full_documents():
    result = oracle.random_event(RollSource(5))
    idea = result.encode()["extra"]["idea"]
    assert idea["kind"] == "idea"
    assert idea["diceValues"] == list(result.idea.dice_values)
    assert "extra" in idea


def test_nested_results_restore_as_their_own_types():
    result = npc.generate_complex_npc(RollSource(8))
    restored = _restore(result)
    assert type(restored.profile) is type(result.profile)
    assert type(restored.profile.personality) is type(result.profile.personality)
    assert restored.profile.properties.dice_values == result.profile.properties.dice_values


def test_explicit_values_win_over_derivation():
    result = DiceRollResult(expression="2d6", rolls=[3, 4], raw_total=99, label="custom")
    assert result.raw_total == 99
    assert result.label == "custom"
    assert result.dice_values == (3, 4)


def test_derivation_without_explicit_values():
    result = DiceRollResult(expression="3d6k2+1", rolls=[2, 6, 5], kept_rolls=[6, 5], modifier=1)
    assert result.dice_values == (2, 6, 5)
    assert result.raw_total == 12
    assert result.interpretation == "3d6k2+1 = 12"
    assert result.label == "3d6k2+1"


class TestRecomputedOnRestore:
    def test_expectation_check_drops_meaning(self):
        seed = find_seed(lambda r: r.meaning is not None, oracle.expectation_check)
        result = oracle.expectation_check(RollSource(seed))
        assert result.outcome is ExpectationOutcome.MODIFIED_IDEA
        assert "meaning" not in result.encode()["extra"]

        restored = _restore(result)
        assert isinstance(restored, ExpectationCheckResult)
        assert restored.meaning is None
        assert restored.dice_values == result.dice_values
        assert restored.interpretation == "Modified idea (0 0)"

    def test_expectation_check_without_meaning_is_unchanged(self):
        result = ExpectationCheckResult(fate_dice=[1, 0], outcome=ExpectationOutcome.EXPECTED)
        restored = _restore(result)
        assert restored.interpretation == result.interpretation
        assert restored.label == result.label

    def test_npc_profile_drops_motive_expansion(self):
        seed = find_seed(lambda r: r.motive_expansion is not None, npc.generate_profile)
        result = npc.generate_profile(RollSource(seed))
        restored = _restore(result)
        assert restored.motive_expansion is None
        assert restored.dice_values == result.dice_values
        assert restored.raw_total == result.raw_total
        assert f"motive: {result.motive.result};" in restored.interpretation

    def test_simple_npc_keeps_texts_only(self):
        result = settlement.generate_simple_npc(RollSource(3))
        assert result.name_text
        assert result.profile_text

        document = result.encode()
        assert "name" not in document["extra"]
        assert "profile" not in document["extra"]

        restored = _restore(result)
        assert restored.name is None
        assert restored.profile is None
        assert restored.name_text == result.name_text
        assert restored.interpretation == result.interpretation
        assert restored.dice_values == result.dice_values

    def test_dungeon_detail_label_recomputed(self):
        result = dungeon.generate_passage(RollSource(4), "d6", "advantage")
        document = result.encode()
        document["label"] = "stale"
        restored = registry.decode(document)
        assert restored.label == "Dungeon Passage"


def test_derivation_never_draws_randomness():
    meaning = DiscoverMeaningResult(first_roll=1, second_roll=2, first_word="Abandoned", second_word="Ambition")
    again = DiscoverMeaningResult.model_validate(meaning.model_dump())
    assert again.interpretation == meaning.interpretation == "Abandoned Ambition"


def _without(result: RollResult, *names: str) -> dict:
    document = json.loads(json.dumps(result.encode()))
    for name in names:
        del document["extra"][name]
    return document


def _recoverable_fields(result: RollResult) -> list[str]:
    result_type = type(result)
    names = [
        name for name in result_type.dice_fields
        if result_type.model_fields[name].annotation is int
        or get_origin(result_type.model_fields[name].annotation) is tuple
    ]
    return names + [name for name in (result_type.total_field, result_type.faces_field) if name]


class TestMissingFieldDefaults:
    def test_scale_rebuilds_fate_dice_from_dice_values(self):
        result = oracle.roll_scale(RollSource(1))
        restored = registry.decode(_without(result, "fate_dice"))

        assert isinstance(restored, ScaleResult)
        assert restored.fate_dice == result.fate_dice
        assert restored.fate_dice == result.dice_values[:2]

    def test_scale_rebuilds_value_from_total(self):
        result = oracle.roll_scale(RollSource(2))
        restored = registry.decode(_without(result, "scale_value", "intensity_roll"))

        assert isinstance(restored, ScaleResult)
        assert restored.scale_value == result.raw_total
        assert restored.intensity_roll == result.dice_values[-1]

    def test_fate_check_rebuilds_intensity_after_fate_dice(self):
        result = oracle.fate_check(RollSource(3), primary_on_left=True)
        restored = registry.decode(_without(result, "intensity"))
        assert restored.intensity == result.intensity
        assert restored.outcome is result.outcome

    def test_run_takes_the_dice_left_by_single_dice(self):
        result = invoke(RollSource(10), "ironsworn", "action_roll")
        restored = registry.decode(_without(result, "challenge_dice"))
        assert restored.challenge_dice == result.challenge_dice
        assert restored.action_die == result.dice_values[0]

    def test_skewed_detail_rebuilds_faces_and_kept_roll(self):
        result = details.roll_detail(RollSource(4), "advantage")
        restored = registry.decode(_without(result, "roll", "all_rolls"))

        assert type(restored) is type(result)
        assert restored.all_rolls == result.all_rolls
        assert len(restored.all_rolls) == 2
        assert restored.roll == result.roll == max(result.all_rolls)

    def test_artisan_establishment_rebuilds_its_roll(self):
        seed = find_seed(lambda r: r.artisan_roll is not None, settlement.roll_establishment)
        result = settlement.roll_establishment(RollSource(seed))
        restored = registry.decode(_without(result, "roll"))

        assert type(restored) is type(result)
        assert restored.roll == result.roll
        assert restored.artisan_roll == result.artisan_roll

    def test_optional_embedded_result_defaults_to_none(self):
        seed = find_seed(lambda r: r.random_event is not None, lambda s: oracle.fate_check(s, primary_on_left=True))
        result = oracle.fate_check(RollSource(seed), primary_on_left=True)
        restored = registry.decode(_without(result, "random_event"))

        assert type(restored) is type(result)
        assert restored.random_event is None
        assert restored.interpretation == result.interpretation

    def test_text_fields_are_not_invented(self):
        result = oracle.discover_meaning(RollSource(5))
        restored = registry.decode(_without(result, "first_word"))
        assert type(restored) is RollResult
        assert restored.kind == "discover_meaning"

    def test_dice_that_do_not_fit_are_not_guessed(self):
        result = oracle.roll_scale(RollSource(6))
        document = _without(result, "fate_dice")
        document["diceValues"] = document["diceValues"][:1]
        restored = registry.decode(document)
        assert type(restored) is RollResult

    @pytest.mark.parametrize("generator,operation", OPERATIONS)
    def test_each_recoverable_field(self, generator: str, operation: str):
        for seed in (0, 1, 42):
            result = invoke(RollSource(seed), generator, operation)
            for name in _recoverable_fields(result):
                restored = registry.decode(_without(result, name))

                assert type(restored) is type(result), f"{result.kind} without {name}"
                if name == type(result).faces_field:
                    assert restored.derive_dice() == list(result.dice_values)
                else:
                    assert getattr(restored, name) == getattr(result, name)


class TestImmutability:
    def test_assigning_a_field_raises(self):
        meaning = DiscoverMeaningResult(first_roll=1, second_roll=2, first_word="Abandoned", second_word="Ambition")
        with pytest.raises(ValidationError):
            meaning.first_word = "changed"
        assert meaning.interpretation == "Abandoned Ambition"

    def test_derived_fields_cannot_be_reassigned(self):
        result = oracle.random_event(RollSource(7))
        with pytest.raises(ValidationError):
            result.interpretation = "something else"

    def test_dice_are_tuples(self):
        result = oracle.fate_check(RollSource(8))
        assert isinstance(result.dice_values, tuple)
        assert isinstance(result.fate_dice, tuple)
        with pytest.raises(AttributeError):
            result.dice_values.append(99)

    def test_restored_results_are_frozen(self):
        restored = _restore(oracle.discover_meaning(RollSource(9)))
        with pytest.raises(ValidationError):
            restored.first_word = "changed"
