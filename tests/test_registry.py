"""Tests for the result registry lifecycle and its decode fallback."""

import logging

import pytest

from app.domain.registry import (
    DuplicateKindError,
    RegistryFrozenError,
    RegistryNotReadyError,
    ResultRegistry,
    build_registry,
    registry,
)
from app.models.results import RESULT_TYPES, RollCategory, RollResult
from app.models.results.oracle import IdeaResult, RandomEventResult
from app.domain.oracles import oracle
from app.modules.dice.roller import RollSource


def _generic_document(**overrides) -> dict:
    document = {
        "kind": "from_the_future",
        "category": "standard",
        "label": "Future Roll",
        "diceValues": [4, 2],
        "rawTotal": 6,
        "interpretation": "something new",
        "createdAt": "2026-01-05T10:00:00+00:00",
        "extra": {"sparkle": True},
    }
    document.update(overrides)
    return document


class TestLifecycle:
    def test_duplicate_registration_fails(self):
        reg = ResultRegistry()
        reg.register_type(IdeaResult)
        with pytest.raises(DuplicateKindError, match="idea"):
            reg.register_type(IdeaResult)

    def test_duplicate_raw_registration_fails(self):
        reg = ResultRegistry()
        reg.register("custom", RollResult.decode)
        with pytest.raises(DuplicateKindError):
            reg.register("custom", IdeaResult.decode)

    def test_register_after_freeze_fails(self):
        reg = ResultRegistry()
        reg.freeze()
        with pytest.raises(RegistryFrozenError):
            reg.register_type(IdeaResult)

    def test_decode_before_freeze_fails(self):
        reg = ResultRegistry()
        reg.register_type(IdeaResult)
        with pytest.raises(RegistryNotReadyError):
            reg.decode(_generic_document())

    def test_build_registry_is_frozen_and_complete(self):
        reg = build_registry()
        assert reg.is_frozen
        assert len(reg) == len(RESULT_TYPES)
        assert "roll" in reg
        assert reg.kinds == sorted(reg.kinds)

    def test_process_registry_has_every_kind(self):
        for result_type in RESULT_TYPES:
            assert result_type.model_fields["kind"].default in registry


class TestFallback:
    def test_unknown_kind_degrades_to_generic(self, caplog):
        with caplog.at_level(logging.INFO, logger="oracle-core.registry"):
            result = registry.decode(_generic_document())

        assert type(result) is RollResult
        assert result.kind == "from_the_future"
        assert result.label == "Future Roll"
        assert result.dice_values == (4, 2)
        assert result.raw_total == 6
        assert result.interpretation == "something new"
        assert result.created_at.year == 2026
        assert not hasattr(result, "sparkle")
        assert "Unknown result kind" in caplog.text

    def test_generic_encode_drops_extra(self):
        result = registry.decode(_generic_document())
        assert result.encode()["extra"] == {}

    def test_missing_kind_degrades_to_generic(self):
        document = _generic_document()
        del document["kind"]
        result = registry.decode(document)
        assert type(result) is RollResult
        assert result.kind == "roll"

    def test_malformed_extra_degrades_to_generic(self, caplog):
        document = oracle.random_event(RollSource(1)).encode()
        document["extra"]["idea"] = "not a document"

        with caplog.at_level(logging.WARNING, logger="oracle-core.registry"):
            result = registry.decode(document)

        assert type(result) is RollResult
        assert result.kind == "random_event"
        assert result.category is RollCategory.COMPOSITE
        assert list(result.dice_values) == document["diceValues"]
        assert "Could not decode" in caplog.text

    def test_extra_of_wrong_type_degrades_to_generic(self):
        document = oracle.discover_meaning(RollSource(1)).encode()
        document["extra"] = ["first", "second"]
        result = registry.decode(document)
        assert type(result) is RollResult
        assert result.kind == "discover_meaning"

    def test_bad_base_fields_still_decode(self):
        result = registry.decode(_generic_document(rawTotal="lots", createdAt="yesterday"))
        assert type(result) is RollResult
        assert result.kind == "from_the_future"

    def test_non_mapping_document(self):
        result = registry.decode(["not", "a", "document"])
        assert type(result) is RollResult

    def test_nested_unknown_kind_fails_parent_only(self):
        document = oracle.random_event(RollSource(2)).encode()
        document["extra"]["idea"]["kind"] = "renamed_idea"
        result = registry.decode(document)
        # the parent requires an IdeaResult, so the whole record degrades
        assert type(result) is RollResult
        assert list(result.dice_values) == document["diceValues"]

    def test_known_kind_decodes_to_variant(self):
        event = oracle.random_event(RollSource(3))
        result = registry.decode(event.encode())
        assert isinstance(result, RandomEventResult)
        assert isinstance(result.idea, IdeaResult)
        assert result.idea == event.idea
