"""Print a session's history, restored from the stored documents.

Usage:
    python scripts/replay_session.py <session_id>
"""

from __future__ import annotations

import asyncio
import sys

from app.domain import history
from app.domain.registry import registry
from app.infra.db import async_session_factory, init_db


async def replay(session_id: str) -> None:
    await init_db()
    async with async_session_factory() as db:
        try:
            session = await history.get_session(db, session_id)
        except history.SessionNotFoundError:
            print(f"Error: Session '{session_id}' not found.")
            sys.exit(1)

        print(f"{session} seed={session.seed}")
        entries = await history.load_history(db, session_id, registry, limit=session.roll_count or 0)
        for record, result in entries:
            print(f"  #{record.seq:<4} {result}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/replay_session.py <session_id>")
        sys.exit(1)
    asyncio.run(replay(sys.argv[1]))
