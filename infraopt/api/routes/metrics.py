"""Metric Routes — register, update, and evaluate performance metrics.

Invariants:
    - Threshold band errors come from the registry as INVALID_THRESHOLD (400)
    - Unknown metric on update -> METRIC_NOT_FOUND (404); on lookup -> 200 with null / false
"""

import logging

from fastapi import APIRouter, Depends, status

from infraopt.api.dependencies import EntityIdPath, get_caller
from infraopt.core.domain_types import MetricId
from infraopt.schemas.metrics import (
    MetricRegister, MetricRegistered, MetricResponse, MetricUpdate,
)
from infraopt.services.ledger_runtime import LedgerRuntime, get_runtime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/metrics", tags=["metrics"])


@router.post(
    "", response_model=MetricRegistered, status_code=status.HTTP_201_CREATED,
)
async def register_metric(
    body: MetricRegister,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    metric_id = MetricId(body.metric_id)
    registration = await runtime.commit(
        caller, "register_metric",
        lambda ledger, ctx: ledger.metrics.register_metric(
            ctx, metric_id, body.metric_name, body.target_value,
            body.threshold_min, body.threshold_max, body.optimization_type,
        ),
        entity_id=metric_id,
    )
    return MetricRegistered(
        metric_id=metric_id,
        replaced=registration.replaced,
        record=MetricResponse.model_validate(registration.record),
    )


@router.put("/{metric_id}/value", response_model=MetricResponse)
async def update_metric(
    metric_id: EntityIdPath,
    body: MetricUpdate,
    caller: str = Depends(get_caller),
    runtime: LedgerRuntime = Depends(get_runtime),
):
    """Record a new measurement. Out-of-band values are accepted."""
    metric = await runtime.commit(
        caller, "update_metric",
        lambda ledger, ctx: ledger.metrics.update_metric(
            ctx, MetricId(metric_id), body.value,
        ),
        entity_id=metric_id,
    )
    return MetricResponse.model_validate(metric)


@router.get("/{metric_id}", response_model=MetricResponse | None)
async def get_metric(
    metric_id: EntityIdPath,
    runtime: LedgerRuntime = Depends(get_runtime),
):
    metric = runtime.read(lambda ledger: ledger.metrics.get(metric_id))
    return MetricResponse.model_validate(metric) if metric else None


@router.get("/{metric_id}/optimal")
async def is_metric_optimal(
    metric_id: EntityIdPath,
    runtime: LedgerRuntime = Depends(get_runtime),
):
    optimal = runtime.read(lambda ledger: ledger.metrics.is_metric_optimal(metric_id))
    return {"metric_id": metric_id, "optimal": optimal}
