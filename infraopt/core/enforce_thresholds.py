"""Threshold & Capacity Enforcement — numeric bounds for metrics and allocations.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Threshold band must be non-empty: threshold_min < threshold_max, strictly
    - Band membership is inclusive on both ends
    - Allocations may fill capacity exactly but never exceed it
    - Efficiency scoring is a fixed two-tier policy, independent of amount/capacity

Design Decisions:
    - Band checked only at registration: current values may drift outside the band,
      is_within_band is how that drift is observed
"""

from infraopt.core.domain_types import (
    CLASSICAL_EFFICIENCY_SCORE, QUANTUM_EFFICIENCY_SCORE, CallContext,
)
from infraopt.core.errors import ErrorContext, InvalidThresholdError


def check_threshold_band(
    ctx: CallContext, metric_id: str, threshold_min: int, threshold_max: int,
) -> InvalidThresholdError | None:
    if threshold_min >= threshold_max:
        return InvalidThresholdError(
            f"threshold_min ({threshold_min}) must be below "
            f"threshold_max ({threshold_max})",
            ErrorContext(
                caller=ctx.caller, operation="register_metric",
                entity_id=metric_id, block_height=ctx.block_height,
            ),
        )
    return None


def check_capacity(
    ctx: CallContext, allocation_id: str, amount: int, max_capacity: int,
) -> InvalidThresholdError | None:
    if amount > max_capacity:
        return InvalidThresholdError(
            f"allocated amount ({amount}) exceeds max capacity ({max_capacity})",
            ErrorContext(
                caller=ctx.caller, operation="allocate",
                entity_id=allocation_id, block_height=ctx.block_height,
            ),
        )
    return None


def is_within_band(value: int, threshold_min: int, threshold_max: int) -> bool:
    return threshold_min <= value <= threshold_max


def efficiency_score_for(quantum_optimized: bool) -> int:
    """95 for quantum-optimized allocations, 80 otherwise."""
    return QUANTUM_EFFICIENCY_SCORE if quantum_optimized else CLASSICAL_EFFICIENCY_SCORE
