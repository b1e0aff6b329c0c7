"""Infrastructure Registry — stores infrastructure records and moves them through verification.

Invariants:
    - register/verify consult the AuthorizationGuard before touching the map
    - New records start PENDING with performance_score=0, stamped with the call's block height
    - verify moves PENDING -> VERIFIED exactly once; any other status is rejected
    - performance_score is accepted as given (no range check beyond non-negative ints)
    - get/is_verified never raise; absence is a valid answer

Design Decisions:
    - Re-registration overwrites silently and reports it via Registration.replaced
      (kept for callers that rely on idempotent re-registration)
    - One dict per registry, no cross-registry cascades
"""

from dataclasses import replace

from infraopt.core.domain_types import (
    CallContext, InfrastructureId, InfrastructureStatus,
)
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.enforce_lifecycle import validate_verification
from infraopt.core.errors import ERR_OWNER_ONLY_INFRASTRUCTURE
from infraopt.core.records import InfrastructureRecord, Registration


class InfrastructureRegistry:
    """Keyed store of InfrastructureRecord with a PENDING -> VERIFIED lifecycle."""

    def __init__(
        self, guard: AuthorizationGuard,
        records: dict[InfrastructureId, InfrastructureRecord] | None = None,
    ):
        self._guard = guard
        self._records: dict[InfrastructureId, InfrastructureRecord] = dict(records or {})

    def register(
        self, ctx: CallContext, infrastructure_id: InfrastructureId,
        infrastructure_type: str, quantum_compatible: bool,
    ) -> Registration[InfrastructureRecord]:
        denied = self._guard.check(ctx, "register", ERR_OWNER_ONLY_INFRASTRUCTURE)
        if denied:
            raise denied
        record = InfrastructureRecord(
            owner=ctx.caller,
            infrastructure_type=infrastructure_type,
            status=InfrastructureStatus.PENDING,
            verification_timestamp=ctx.block_height,
            quantum_compatibility=quantum_compatible,
            performance_score=0,
        )
        replaced = infrastructure_id in self._records
        self._records[infrastructure_id] = record
        return Registration(record=record, replaced=replaced)

    def verify(
        self, ctx: CallContext, infrastructure_id: InfrastructureId,
        performance_score: int,
    ) -> InfrastructureRecord:
        denied = self._guard.check(ctx, "verify", ERR_OWNER_ONLY_INFRASTRUCTURE)
        if denied:
            raise denied
        current = self._records.get(infrastructure_id)
        error = validate_verification(ctx, infrastructure_id, current)
        if error:
            raise error
        verified = replace(
            current,
            status=InfrastructureStatus.VERIFIED,
            verification_timestamp=ctx.block_height,
            performance_score=performance_score,
        )
        self._records[infrastructure_id] = verified
        return verified

    def get(self, infrastructure_id: str) -> InfrastructureRecord | None:
        return self._records.get(InfrastructureId(infrastructure_id))

    def is_verified(self, infrastructure_id: str) -> bool:
        record = self.get(infrastructure_id)
        return record is not None and record.status == InfrastructureStatus.VERIFIED

    def items(self) -> list[tuple[InfrastructureId, InfrastructureRecord]]:
        """All records, sorted by id."""
        return sorted(self._records.items())

    def __contains__(self, infrastructure_id: object) -> bool:
        return infrastructure_id in self._records

    def __len__(self) -> int:
        return len(self._records)
