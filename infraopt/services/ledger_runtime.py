"""Ledger Runtime — single-writer host that serializes every ledger operation.

Invariants:
    - One exclusive lock guards the whole ledger: operations never interleave
    - Each submitted (mutating) call advances the block clock exactly once, before running,
      and the height is fixed for that call via CallContext
    - Reads take the same lock but never advance the clock
    - Failed operations are logged and re-raised unchanged (never retried, never swallowed)
    - commit() saves one snapshot per mutation, one commit at a time
    - A commit whose snapshot save fails leaves the ledger as it was before the call

Design Decisions:
    - threading.Lock over asyncio.Lock for the ledger: core operations are synchronous and
      never await, and the lock also holds if a sync caller drives the runtime from threads
    - Module-level runtime singleton initialized in lifespan (same lifecycle as db_manager)
"""

import asyncio
import logging
import threading
from typing import Callable, TypeVar

from infraopt.core.domain_types import BlockHeight, CallContext, Principal
from infraopt.core.errors import DatabaseError, InfraOptError
from infraopt.core.ledger import Ledger, create_ledger
from infraopt.core.ledger_snapshot import ledger_from_snapshot, ledger_to_snapshot
from infraopt.core.records import Registration
from infraopt.core.repository_protocols import SnapshotRepository
from infraopt.infrastructure.block_clock import BlockClock

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerRuntime:
    """Owns a Ledger, its BlockClock, and the lock that serializes access to both."""

    def __init__(
        self, ledger: Ledger, clock: BlockClock | None = None,
        ledger_key: str = "default", store: SnapshotRepository | None = None,
    ):
        self._ledger = ledger
        self._clock = clock or BlockClock()
        self._lock = threading.Lock()
        self._persist_lock = asyncio.Lock()
        self.ledger_key = ledger_key
        self.store = store

    @classmethod
    def fresh(
        cls, owner: str, genesis_block_height: int = 0, **kwargs,
    ) -> "LedgerRuntime":
        return cls(
            create_ledger(Principal(owner)), BlockClock(genesis_block_height), **kwargs,
        )

    @classmethod
    def restore(
        cls, snapshot: dict | None, owner: str, genesis_block_height: int = 0,
        **kwargs,
    ) -> "LedgerRuntime":
        """Rebuild from a stored snapshot; the clock never starts below genesis."""
        ledger, height = ledger_from_snapshot(snapshot, Principal(owner))
        clock = BlockClock(genesis_block_height)
        clock.fast_forward(height)
        return cls(ledger, clock, **kwargs)

    @property
    def owner(self) -> Principal:
        return self._ledger.owner

    def block_height(self) -> BlockHeight:
        with self._lock:
            return self._clock.current()

    def submit(
        self, caller: str, operation: str,
        fn: Callable[[Ledger, CallContext], T], entity_id: str | None = None,
    ) -> T:
        """Run one mutating operation as an atomic, serialized transaction."""
        with self._lock:
            ctx = CallContext(
                caller=Principal(caller), block_height=self._clock.advance(),
            )
            log_extra = {
                "caller": caller, "operation": operation,
                "entity_id": entity_id, "block_height": ctx.block_height,
            }
            try:
                result = fn(self._ledger, ctx)
            except InfraOptError as e:
                logger.warning(
                    f"{operation} rejected: {e.message}",
                    extra={**log_extra, "error_code": e.code},
                )
                raise
            if isinstance(result, Registration) and result.replaced:
                logger.warning(
                    f"{operation} overwrote existing entry",
                    extra={**log_extra, "replaced": True},
                )
            else:
                logger.info(f"{operation} committed", extra=log_extra)
            return result

    def read(self, fn: Callable[[Ledger], T]) -> T:
        """Run a read-only function against a consistent view of the ledger."""
        with self._lock:
            return fn(self._ledger)

    def snapshot(self) -> dict:
        with self._lock:
            return ledger_to_snapshot(self._ledger, self._clock.current())

    async def commit(
        self, caller: str, operation: str,
        fn: Callable[[Ledger, CallContext], T], entity_id: str | None = None,
    ) -> T:
        """submit() then save the snapshot; a failed save rolls the ledger back.

        Commits never overlap, so the pre-call snapshot is still the latest
        state when a rollback happens. The clock is not rolled back.
        """
        async with self._persist_lock:
            before = self.snapshot() if self.store is not None else None
            result = self.submit(caller, operation, fn, entity_id)
            if self.store is None:
                return result
            try:
                await self.store.save(self.ledger_key, self.snapshot())
            except DatabaseError:
                self._rollback(before)
                logger.error(
                    f"{operation} rolled back: snapshot save failed",
                    extra={
                        "caller": caller, "operation": operation,
                        "entity_id": entity_id, "ledger_key": self.ledger_key,
                    },
                )
                raise
            return result

    def _rollback(self, snapshot: dict) -> None:
        ledger, _ = ledger_from_snapshot(snapshot, self.owner)
        with self._lock:
            self._ledger = ledger


# Singleton (initialized on startup)
runtime: LedgerRuntime | None = None


def init_runtime(instance: LedgerRuntime) -> LedgerRuntime:
    global runtime
    runtime = instance
    return runtime


def get_runtime() -> LedgerRuntime:
    """FastAPI dependency for the process-wide ledger runtime."""
    if runtime is None:
        raise RuntimeError("Ledger runtime not initialized")
    return runtime
