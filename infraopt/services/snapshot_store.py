"""Snapshot Store — SQLAlchemy implementation of the SnapshotRepository protocol.

Invariants:
    - save() upserts the single row for ledger_key and commits
    - load() returns the stored payload dict, or None for a fresh ledger
    - Every DB failure surfaces as DatabaseError (via DatabaseSessionManager)

Design Decisions:
    - Select-then-update over dialect-specific UPSERT: works on PostgreSQL and SQLite alike
"""

import logging

from sqlalchemy import select

from infraopt.infrastructure.database import DatabaseSessionManager
from infraopt.models.ledger_snapshot import LedgerSnapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Persists ledger snapshots, one row per ledger_key."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def load(self, ledger_key: str) -> dict | None:
        async with self._manager.session() as db:
            result = await db.execute(
                select(LedgerSnapshot).where(LedgerSnapshot.ledger_key == ledger_key),
            )
            row = result.scalar_one_or_none()
            return dict(row.payload) if row else None

    async def save(self, ledger_key: str, snapshot: dict) -> None:
        async with self._manager.session() as db:
            result = await db.execute(
                select(LedgerSnapshot).where(LedgerSnapshot.ledger_key == ledger_key),
            )
            row = result.scalar_one_or_none()
            if row is None:
                row = LedgerSnapshot(ledger_key=ledger_key)
                db.add(row)
            row.payload = snapshot
            row.block_height = snapshot.get("block_height", 0)
            await db.commit()
        logger.debug(
            "Ledger snapshot saved",
            extra={"ledger_key": ledger_key, "block_height": snapshot.get("block_height")},
        )
