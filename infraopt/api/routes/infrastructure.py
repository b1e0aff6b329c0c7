"""Infrastructure Routes — register, verify, and look up infrastructure records.

Invariants:
    - Mutations go through LedgerRuntime.commit (serialized, clock advanced once)
    - Lookups of unknown ids return 200 with null, never 404
    - Snapshot persisted with every mutation; a failed save undoes the mutation (503)
"""

import logging

from fastapi import APIRouter, Depends, status

from infraopt.api.dependencies import EntityIdPath, get_caller
from infraopt.core.domain_types import InfrastructureId
from infraopt.schemas.infrastructure import (
    InfrastructureRegister, InfrastructureRegistered,
    InfrastructureResponse, InfrastructureVerify,
)
from infraopt.services.ledger_runtime import LedgerRuntime, get_runtime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/infrastructure", tags=["infrastructure"])


@router.post(
    "", response_model=InfrastructureRegistered,
    status_code=status.HTTP_201_CREATED,
)
async def register_infrastructure(
    body: InfrastructureRegister,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    """Register infrastructure as PENDING. Re-registering an id overwrites it."""
    infrastructure_id = InfrastructureId(body.infrastructure_id)
    registration = await runtime.commit(
        caller, "register",
        lambda ledger, ctx: ledger.infrastructure.register(
            ctx, infrastructure_id, body.infrastructure_type, body.quantum_compatible,
        ),
        entity_id=infrastructure_id,
    )
    return InfrastructureRegistered(
        infrastructure_id=infrastructure_id,
        replaced=registration.replaced,
        record=InfrastructureResponse.model_validate(registration.record),
    )


@router.post(
    "/{infrastructure_id}/verify", response_model=InfrastructureResponse,
)
async def verify_infrastructure(
    infrastructure_id: EntityIdPath,
    body: InfrastructureVerify,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    """Move a PENDING record to VERIFIED with the given performance score."""
    record = await runtime.commit(
        caller, "verify",
        lambda ledger, ctx: ledger.infrastructure.verify(
            ctx, InfrastructureId(infrastructure_id), body.performance_score,
        ),
        entity_id=infrastructure_id,
    )
    return InfrastructureResponse.model_validate(record)


@router.get(
    "/{infrastructure_id}", response_model=InfrastructureResponse | None,
)
async def get_infrastructure(
    infrastructure_id: EntityIdPath,
    runtime: LedgerRuntime = Depends(get_runtime),
):
    record = runtime.read(lambda ledger: ledger.infrastructure.get(infrastructure_id))
    return InfrastructureResponse.model_validate(record) if record else None


@router.get("/{infrastructure_id}/verified")
async def is_infrastructure_verified(
    infrastructure_id: EntityIdPath,
    runtime: LedgerRuntime = Depends(get_runtime),
):
    verified = runtime.read(
        lambda ledger: ledger.infrastructure.is_verified(infrastructure_id),
    )
    return {"infrastructure_id": infrastructure_id, "verified": verified}
