"""Core Layer — pure ledger logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Every operation is synchronous and deterministic given its CallContext

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
