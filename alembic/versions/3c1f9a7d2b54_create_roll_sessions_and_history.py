"""create_roll_sessions_and_history

Revision ID: 3c1f9a7d2b54
Revises:
Create Date: 2026-10-18 09:12:41.503118
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '3c1f9a7d2b54'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "roll_sessions",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(128), nullable=False, server_default=""),
        sa.Column("seed", sa.String(64), nullable=False),
        sa.Column("roll_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "history_records",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("session_id", sa.String(32), sa.ForeignKey("roll_sessions.id"), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("kind", sa.String(64), nullable=False),
        sa.Column("category", sa.String(16), nullable=False),
        sa.Column("label", sa.String(128), nullable=False, server_default=""),
        sa.Column("document_json", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_history_session_seq", "history_records", ["session_id", "seq"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_history_session_seq", table_name="history_records")
    op.drop_table("history_records")
    op.drop_table("roll_sessions")
