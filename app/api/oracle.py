"""Oracle API: generator catalogue, rolls and document restore."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain import history
from app.domain.dispatcher import (
    InvalidParametersError,
    UnknownGeneratorError,
    describe_catalog,
    invoke,
)
from app.domain.registry import registry
from app.infra.config import settings
from app.infra.db import get_db
from app.modules.dice.roller import RollSource

router = APIRouter(prefix="/api/oracle", tags=["oracle"])


# --- Request schemas ---


class RollRequest(BaseModel):
    generator: str
    operation: str
    params: dict[str, Any] = Field(default_factory=dict)
    seed: int | str | None = None
    session_id: str | None = None


class DecodeRequest(BaseModel):
    document: dict[str, Any]


# --- Catalogue ---


@router.get("/generators")
async def list_generators() -> dict:
    return describe_catalog()


# --- Rolls ---


@router.post("/roll")
async def roll(
    req: RollRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """Invoke one generator operation and return its encoded result.

    With a ``session_id`` the roll is seeded from the session and appended
    to its history; ``seed`` is ignored in that case.
    """
    try:
        if req.session_id is not None:
            session = await history.get_session(db, req.session_id)
            source = await history.next_roll_source(db, session)
            result = invoke(source, req.generator, req.operation, req.params)
            record = await history.append_result(db, session.id, result)
            return {"seq": record.seq, "result": result.encode()}

        seed = req.seed if req.seed is not None else settings.default_seed
        result = invoke(RollSource(seed), req.generator, req.operation, req.params)
    except (UnknownGeneratorError, history.SessionNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidParametersError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return {"seq": None, "result": result.encode()}


@router.post("/decode")
async def decode(req: DecodeRequest) -> dict:
    """Restore a document and return it re-encoded, falling back to a generic roll."""
    return registry.decode(req.document).encode()
