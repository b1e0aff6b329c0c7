"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core registries that produce the snapshots are never async themselves
"""

from typing import Protocol


class SnapshotRepository(Protocol):
    """Contract for ledger snapshot persistence — implemented by shell."""
    async def load(self, ledger_key: str) -> dict | None: ...
    async def save(self, ledger_key: str, snapshot: dict) -> None: ...
