"""Ledger snapshots — one JSON row per ledger.

Revision ID: 001_ledger_snapshots
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_ledger_snapshots"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ledger_snapshots",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("ledger_key", sa.String(64), nullable=False),
        sa.Column("block_height", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("payload", sa.JSON, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("ledger_key", name="uq_ledger_snapshots_ledger_key"),
    )


def downgrade() -> None:
    op.drop_table("ledger_snapshots")
