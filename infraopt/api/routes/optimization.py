"""Optimization Routes — rules, resource allocations, and optimization cycles.

Invariants:
    - Rules are stored only; nothing here evaluates or executes them
    - Allocation over capacity -> INVALID_THRESHOLD (400)
    - A cycle runs only when POST /cycles is called by the owner; nothing schedules it
"""

import logging

from fastapi import APIRouter, Depends, status

from infraopt.api.dependencies import EntityIdPath, get_caller
from infraopt.core.domain_types import AllocationId, RuleId
from infraopt.schemas.optimization import (
    AllocationCreate, AllocationCreated, AllocationResponse, CycleResult,
    OptimizationStats, RuleCreate, RuleCreated, RuleResponse,
)
from infraopt.services.ledger_runtime import LedgerRuntime, get_runtime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/optimization", tags=["optimization"])


# ─── Rules ───────────────────────────────────────────────────────

@router.post(
    "/rules", response_model=RuleCreated, status_code=status.HTTP_201_CREATED,
)
async def create_rule(
    body: RuleCreate,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    rule_id = RuleId(body.rule_id)
    registration = await runtime.commit(
        caller, "create_rule",
        lambda ledger, ctx: ledger.rules.create_rule(
            ctx, rule_id, body.rule_name, body.trigger_condition,
            body.optimization_action, body.priority, body.quantum_enhanced,
        ),
        entity_id=rule_id,
    )
    return RuleCreated(
        rule_id=rule_id,
        replaced=registration.replaced,
        record=RuleResponse.model_validate(registration.record),
    )


@router.get("/rules/{rule_id}", response_model=RuleResponse | None)
async def get_rule(
    rule_id: EntityIdPath, runtime: LedgerRuntime = Depends(get_runtime),
):
    rule = runtime.read(lambda ledger: ledger.rules.get(rule_id))
    return RuleResponse.model_validate(rule) if rule else None


# ─── Allocations ─────────────────────────────────────────────────

@router.post(
    "/allocations", response_model=AllocationCreated,
    status_code=status.HTTP_201_CREATED,
)
async def allocate_resources(
    body: AllocationCreate,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    allocation_id = AllocationId(body.allocation_id)
    registration = await runtime.commit(
        caller, "allocate",
        lambda ledger, ctx: ledger.allocations.allocate(
            ctx, allocation_id, body.resource_type, body.allocated_amount,
            body.max_capacity, body.quantum_optimized,
        ),
        entity_id=allocation_id,
    )
    return AllocationCreated(
        allocation_id=allocation_id,
        replaced=registration.replaced,
        record=AllocationResponse.model_validate(registration.record),
    )


@router.get(
    "/allocations/{allocation_id}", response_model=AllocationResponse | None,
)
async def get_allocation(
    allocation_id: EntityIdPath, runtime: LedgerRuntime = Depends(get_runtime),
):
    allocation = runtime.read(lambda ledger: ledger.allocations.get(allocation_id))
    return AllocationResponse.model_validate(allocation) if allocation else None


# ─── Cycles ──────────────────────────────────────────────────────

@router.post("/cycles", response_model=CycleResult)
async def execute_cycle(
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    """Run one optimization cycle (+1 cycle, +2 global efficiency)."""
    cycles, height = await runtime.commit(
        caller, "execute_cycle",
        lambda ledger, ctx: (ledger.cycles.execute_cycle(ctx), ctx.block_height),
    )
    return CycleResult(optimization_cycles=cycles, block_height=height)


@router.get("/stats", response_model=OptimizationStats)
async def get_stats(runtime: LedgerRuntime = Depends(get_runtime)):
    return OptimizationStats(**runtime.read(lambda ledger: ledger.cycles.get_stats()))
