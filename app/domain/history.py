"""Session history: append, load and prune encoded roll results."""

from __future__ import annotations

import json
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.registry import ResultRegistry
from app.models.db_models import HistoryRecord, RollSession
from app.models.results import RollResult
from app.modules.dice.roller import RollSource

logger = logging.getLogger("oracle-core.history")


class SessionNotFoundError(LookupError):
    pass


async def create_session(db: AsyncSession, name: str = "", seed: str | int | None = None) -> RollSession:
    session = RollSession(name=name)
    if seed is not None:
        session.seed = str(seed)
    db.add(session)
    await db.flush()
    return session


async def get_session(db: AsyncSession, session_id: str) -> RollSession:
    session = await db.get(RollSession, session_id)
    if session is None:
        raise SessionNotFoundError(f"Session not found: {session_id}")
    return session


async def _next_seq(db: AsyncSession, session: RollSession) -> int:
    # seqs freed by removed records are never handed out again
    result = await db.execute(
        select(func.coalesce(func.max(HistoryRecord.seq), 0)).where(
            HistoryRecord.session_id == session.id
        )
    )
    return max(result.scalar_one(), session.roll_count or 0) + 1


async def next_roll_source(db: AsyncSession, session: RollSession) -> RollSource:
    """Source for the session's next invocation, seeded from ``<seed>:<seq>``.

    Every history entry can be replayed from its session seed and sequence
    number, and no two invocations share a source.
    """
    seq = await _next_seq(db, session)
    return RollSource(f"{session.seed}:{seq}")


async def append_result(db: AsyncSession, session_id: str, result: RollResult) -> HistoryRecord:
    session = await get_session(db, session_id)
    seq = await _next_seq(db, session)
    session.roll_count = seq
    record = HistoryRecord(
        session_id=session_id,
        seq=seq,
        kind=result.kind,
        category=result.category.value,
        label=result.label,
        document_json=json.dumps(result.encode()),
    )
    db.add(record)
    await db.flush()
    logger.debug("Appended #%d %s to session %s", seq, result.kind, session_id)
    return record


def restore_record(record: HistoryRecord, registry: ResultRegistry) -> RollResult:
    """Decode one stored record; unreadable JSON degrades to a generic result."""
    try:
        document = json.loads(record.document_json)
    except (TypeError, ValueError):
        logger.warning("History record #%d of session %s is not valid JSON", record.seq, record.session_id)
        document = {"kind": record.kind, "category": record.category, "label": record.label}
    return registry.decode(document)


async def load_history(
    db: AsyncSession,
    session_id: str,
    registry: ResultRegistry,
    limit: int = 50,
    offset: int = 0,
) -> list[tuple[HistoryRecord, RollResult]]:
    """Records in seq order, each paired with its decoded result."""
    await get_session(db, session_id)
    result = await db.execute(
        select(HistoryRecord)
        .where(HistoryRecord.session_id == session_id)
        .order_by(HistoryRecord.seq)
        .limit(limit)
        .offset(offset)
    )
    return [(record, restore_record(record, registry)) for record in result.scalars().all()]


async def remove_record(db: AsyncSession, session_id: str, seq: int) -> bool:
    result = await db.execute(
        delete(HistoryRecord).where(
            HistoryRecord.session_id == session_id, HistoryRecord.seq == seq
        )
    )
    return result.rowcount > 0


async def clear_history(db: AsyncSession, session_id: str) -> int:
    await get_session(db, session_id)
    result = await db.execute(delete(HistoryRecord).where(HistoryRecord.session_id == session_id))
    logger.info("Cleared %d records from session %s", result.rowcount, session_id)
    return result.rowcount
