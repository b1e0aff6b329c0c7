"""Ledger Snapshot ORM — one row per ledger holding its latest serialized state.

Invariants:
    - ledger_key is unique: a process owns exactly one row and overwrites it
    - payload is the dict produced by core/ledger_snapshot.ledger_to_snapshot
    - block_height mirrors payload["block_height"] for querying without JSON access

Design Decisions:
    - JSON column over one table per registry: the ledger is restored as a whole,
      never queried per record (ADR: persistence is the host's concern, keep it flat)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infraopt.db.base import Base


class LedgerSnapshot(Base):
    """Latest persisted state of one ledger."""
    __tablename__ = "ledger_snapshots"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    ledger_key: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    block_height: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
