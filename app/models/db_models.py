"""SQLAlchemy ORM models for oracle-core."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _uuid() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class RollSession(Base):
    """A play session owning its seed and its roll history."""

    __tablename__ = "roll_sessions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(128), default="")
    seed: Mapped[str] = mapped_column(String(64), nullable=False, default=_uuid)
    roll_count: Mapped[int] = mapped_column(Integer, default=0)  # seqs are never reused
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    records: Mapped[list[HistoryRecord]] = relationship(
        back_populates="session", cascade="all, delete-orphan"
    )

    def __str__(self) -> str:
        return f"Session {self.id[:8]} ({self.name or 'unnamed'})"


class HistoryRecord(Base):
    """One encoded roll result in a session's history."""

    __tablename__ = "history_records"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_uuid)
    session_id: Mapped[str] = mapped_column(String(32), ForeignKey("roll_sessions.id"))
    seq: Mapped[int] = mapped_column(Integer, nullable=False)
    kind: Mapped[str] = mapped_column(String(64), nullable=False)
    category: Mapped[str] = mapped_column(String(16), nullable=False)
    label: Mapped[str] = mapped_column(String(128), default="")
    document_json: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    session: Mapped[RollSession] = relationship(back_populates="records")

    def __str__(self) -> str:
        return f"#{self.seq} {self.kind}"

    __table_args__ = (
        Index("ix_history_session_seq", "session_id", "seq", unique=True),
    )
