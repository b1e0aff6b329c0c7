"""Services Layer — ledger runtime host and snapshot persistence.

Invariants:
    - Every ledger mutation goes through LedgerRuntime.submit (one writer at a time)
    - Persistence depends on the SnapshotRepository protocol, not on SQLAlchemy directly

Design Decisions:
    - Imperative shell around the pure core/ registries (ADR: impureim sandwich)
"""
