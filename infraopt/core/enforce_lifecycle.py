"""Lifecycle Enforcement — preconditions for infrastructure status transitions.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error on violation, None on success
    - Only PENDING records may be verified; the check compares against PENDING,
      so FAILED and MAINTENANCE records are rejected too
"""

from infraopt.core.domain_types import CallContext, InfrastructureStatus
from infraopt.core.errors import (
    AlreadyVerifiedError, ErrorContext, InfrastructureNotFoundError,
)
from infraopt.core.records import InfrastructureRecord


def check_infrastructure_exists(
    ctx: CallContext, infrastructure_id: str, record: InfrastructureRecord | None,
) -> InfrastructureNotFoundError | None:
    if record is None:
        return InfrastructureNotFoundError(
            infrastructure_id,
            ErrorContext(
                caller=ctx.caller, operation="verify",
                entity_id=infrastructure_id, block_height=ctx.block_height,
            ),
        )
    return None


def check_pending(
    ctx: CallContext, infrastructure_id: str, record: InfrastructureRecord,
) -> AlreadyVerifiedError | None:
    if record.status != InfrastructureStatus.PENDING:
        return AlreadyVerifiedError(
            infrastructure_id, record.status.value,
            ErrorContext(
                caller=ctx.caller, operation="verify",
                entity_id=infrastructure_id, block_height=ctx.block_height,
            ),
        )
    return None


def validate_verification(
    ctx: CallContext, infrastructure_id: str, record: InfrastructureRecord | None,
) -> InfrastructureNotFoundError | AlreadyVerifiedError | None:
    """Chain verification checks. Returns first error or None."""
    missing = check_infrastructure_exists(ctx, infrastructure_id, record)
    if missing or record is None:
        return missing
    return check_pending(ctx, infrastructure_id, record)
