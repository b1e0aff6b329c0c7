"""ORM Models — SQLAlchemy declarative models for ledger persistence.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from infraopt.models.ledger_snapshot import LedgerSnapshot  # noqa: F401
