"""Tests for session history persistence."""

import pytest

from app.domain import history
from app.domain.dispatcher import invoke
from app.domain.registry import registry
from app.models.db_models import HistoryRecord
from app.models.results import RollResult
from app.models.results.oracle import FateCheckResult
from app.modules.dice.roller import RollSource


async def _roll(db, session, generator="oracle", operation="fate_check", params=None):
    source = await history.next_roll_source(db, session)
    result = invoke(source, generator, operation, params)
    record = await history.append_result(db, session.id, result)
    return record, result


@pytest.mark.asyncio
async def test_create_session_with_seed(db_session):
    session = await history.create_session(db_session, name="Delve", seed=42)
    assert session.id
    assert session.name == "Delve"
    assert session.seed == "42"


@pytest.mark.asyncio
async def test_create_session_draws_seed(db_session):
    first = await history.create_session(db_session)
    second = await history.create_session(db_session)
    assert first.seed
    assert first.seed != second.seed


@pytest.mark.asyncio
async def test_get_missing_session(db_session):
    with pytest.raises(history.SessionNotFoundError):
        await history.get_session(db_session, "missing")


@pytest.mark.asyncio
async def test_append_and_load_in_order(db_session):
    session = await history.create_session(db_session, seed="s")
    rolled = [await _roll(db_session, session) for _ in range(3)]
    rolled.append(await _roll(db_session, session, "npc", "generate_complex_npc"))

    entries = await history.load_history(db_session, session.id, registry)
    assert [record.seq for record, _ in entries] == [1, 2, 3, 4]
    for (record, restored), (_, original) in zip(entries, rolled):
        assert type(restored) is type(original)
        assert restored.dice_values == original.dice_values
        assert restored.raw_total == original.raw_total
        assert record.kind == original.kind


@pytest.mark.asyncio
async def test_session_rolls_are_replayable(db_session):
    session = await history.create_session(db_session, seed="replay")
    record, result = await _roll(db_session, session)

    replayed = invoke(RollSource(f"replay:{record.seq}"), "oracle", "fate_check")
    assert replayed.dice_values == result.dice_values


@pytest.mark.asyncio
async def test_each_roll_gets_its_own_source(db_session):
    session = await history.create_session(db_session, seed="fresh")
    rolls = [(await _roll(db_session, session, "dice", "roll_dice", {"expression": "10d100"}))[1] for _ in range(2)]
    assert rolls[0].dice_values != rolls[1].dice_values


@pytest.mark.asyncio
async def test_pagination(db_session):
    session = await history.create_session(db_session)
    for _ in range(5):
        await _roll(db_session, session)

    page = await history.load_history(db_session, session.id, registry, limit=2, offset=2)
    assert [record.seq for record, _ in page] == [3, 4]


@pytest.mark.asyncio
async def test_removed_seq_is_not_reused(db_session):
    session = await history.create_session(db_session, seed="gap")
    await _roll(db_session, session)
    await _roll(db_session, session)

    assert await history.remove_record(db_session, session.id, 2) is True
    assert await history.remove_record(db_session, session.id, 2) is False

    record, _ = await _roll(db_session, session)
    assert record.seq == 3
    assert session.roll_count == 3


@pytest.mark.asyncio
async def test_clear_history(db_session):
    session = await history.create_session(db_session)
    for _ in range(3):
        await _roll(db_session, session)

    assert await history.clear_history(db_session, session.id) == 3
    assert await history.load_history(db_session, session.id, registry) == []

    record, _ = await _roll(db_session, session)
    assert record.seq == 4


@pytest.mark.asyncio
async def test_unknown_kind_in_history_degrades(db_session):
    session = await history.create_session(db_session)
    await _roll(db_session, session)
    db_session.add(
        HistoryRecord(
            session_id=session.id,
            seq=2,
            kind="from_the_future",
            category="standard",
            label="Future",
            document_json='{"kind": "from_the_future", "category": "standard", "label": "Future",'
            ' "diceValues": [9], "rawTotal": 9, "extra": {"x": 1}}',
        )
    )
    await _roll(db_session, session)

    entries = await history.load_history(db_session, session.id, registry)
    kinds = [type(result) for _, result in entries]
    assert kinds == [FateCheckResult, RollResult, FateCheckResult]
    assert entries[1][1].dice_values == (9,)


@pytest.mark.asyncio
async def test_corrupt_json_degrades(db_session):
    session = await history.create_session(db_session)
    db_session.add(
        HistoryRecord(
            session_id=session.id,
            seq=1,
            kind="fate_check",
            category="fate",
            label="Fate Check (Even Odds)",
            document_json="{not json",
        )
    )
    await db_session.flush()

    [(record, result)] = await history.load_history(db_session, session.id, registry)
    assert type(result) is RollResult
    assert result.kind == "fate_check"
    assert result.label == "Fate Check (Even Odds)"
