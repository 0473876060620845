"""Session API: seeded play sessions and their roll history."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain import history
from app.domain.registry import registry
from app.infra.config import settings
from app.infra.db import get_db
from app.models.db_models import RollSession

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


# --- Request schemas ---


class CreateSessionRequest(BaseModel):
    name: str = ""
    seed: int | str | None = None


def _session_dict(session: RollSession) -> dict:
    return {
        "id": session.id,
        "name": session.name,
        "seed": session.seed,
        "roll_count": session.roll_count or 0,
        "created_at": session.created_at.isoformat() if session.created_at else None,
    }


@router.post("")
async def create_session(
    req: CreateSessionRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    session = await history.create_session(db, name=req.name, seed=req.seed)
    return _session_dict(session)


@router.get("/{session_id}")
async def get_session(
    session_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    try:
        session = await history.get_session(db, session_id)
    except history.SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return _session_dict(session)


# --- History ---


@router.get("/{session_id}/history")
async def get_history(
    session_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> dict:
    limit = min(limit or settings.history_page_size, settings.history_max_page_size)
    try:
        entries = await history.load_history(db, session_id, registry, limit=limit, offset=offset)
    except history.SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return {
        "session_id": session_id,
        "limit": limit,
        "offset": offset,
        "records": [
            {"seq": record.seq, "result": result.encode()}
            for record, result in entries
        ],
    }


@router.delete("/{session_id}/history")
async def clear_history(
    session_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    try:
        removed = await history.clear_history(db, session_id)
    except history.SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return {"removed": removed}


@router.delete("/{session_id}/history/{seq}")
async def remove_record(
    session_id: str,
    seq: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    if not await history.remove_record(db, session_id, seq):
        raise HTTPException(status_code=404, detail="History record not found")
    return {"removed": 1}
