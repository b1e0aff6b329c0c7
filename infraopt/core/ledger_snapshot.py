"""Ledger Snapshot — serialization / deserialization for the whole ledger.

Invariants:
    - ledger_to_snapshot produces a JSON-safe dict (no Enums, no dataclasses)
    - ledger_from_snapshot rebuilds an equivalent Ledger from that dict
    - Missing keys fall back to empty registries / initial optimization state
    - The owner is never read from a snapshot; it is always supplied by the caller

Design Decisions:
    - Snapshots double as the equality witness in tests: two ledgers with equal
      snapshots are indistinguishable through every read operation
    - Registry entries serialized sorted by id so equal states give equal dicts
"""

from dataclasses import asdict
from enum import Enum

from infraopt.core.allocation_registry import AllocationRegistry
from infraopt.core.domain_types import (
    AllocationId, BlockHeight, InfrastructureId, InfrastructureStatus,
    MetricId, OptimizationType, Principal, RuleId, UnvalidatedText,
)
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.infrastructure_registry import InfrastructureRegistry
from infraopt.core.ledger import Ledger
from infraopt.core.metric_registry import MetricRegistry
from infraopt.core.optimization_cycle import OptimizationCycleEngine, OptimizationState
from infraopt.core.records import (
    InfrastructureRecord, OptimizationRule, PerformanceMetric, ResourceAllocation,
)
from infraopt.core.rule_registry import RuleRegistry

SNAPSHOT_VERSION = 1


def _plain(record: object) -> dict:
    """Dataclass -> dict with str Enums flattened to their values."""
    return {
        key: (value.value if isinstance(value, Enum) else value)
        for key, value in asdict(record).items()
    }


def ledger_to_snapshot(ledger: Ledger, block_height: int) -> dict:
    """Serialize a Ledger to a JSON-safe dict. Pure, no IO."""
    state = ledger.cycles.state
    return {
        "version": SNAPSHOT_VERSION,
        "block_height": block_height,
        "infrastructure": {k: _plain(r) for k, r in ledger.infrastructure.items()},
        "metrics": {k: _plain(m) for k, m in ledger.metrics.items()},
        "rules": {k: _plain(r) for k, r in sorted(ledger.rules.items())},
        "allocations": {k: _plain(a) for k, a in ledger.allocations.items()},
        "optimization": {
            "global_efficiency_score": state.global_efficiency_score,
            "optimization_cycles": state.optimization_cycles,
        },
    }


def _infrastructure_from(data: dict) -> InfrastructureRecord:
    return InfrastructureRecord(
        owner=Principal(data["owner"]),
        infrastructure_type=data["infrastructure_type"],
        status=InfrastructureStatus(data["status"]),
        verification_timestamp=BlockHeight(data["verification_timestamp"]),
        quantum_compatibility=bool(data["quantum_compatibility"]),
        performance_score=data.get("performance_score", 0),
    )


def _metric_from(data: dict) -> PerformanceMetric:
    return PerformanceMetric(
        metric_name=data["metric_name"],
        current_value=data.get("current_value", 0),
        target_value=data["target_value"],
        threshold_min=data["threshold_min"],
        threshold_max=data["threshold_max"],
        optimization_type=OptimizationType(data["optimization_type"]),
        last_measured=BlockHeight(data["last_measured"]),
    )


def _rule_from(data: dict) -> OptimizationRule:
    return OptimizationRule(
        rule_name=data["rule_name"],
        trigger_condition=UnvalidatedText(data["trigger_condition"]),
        optimization_action=UnvalidatedText(data["optimization_action"]),
        priority=data["priority"],
        quantum_enhanced=bool(data["quantum_enhanced"]),
        execution_count=data.get("execution_count", 0),
    )


def _allocation_from(data: dict) -> ResourceAllocation:
    return ResourceAllocation(
        resource_type=data["resource_type"],
        allocated_amount=data["allocated_amount"],
        max_capacity=data["max_capacity"],
        efficiency_score=data["efficiency_score"],
        quantum_optimized=bool(data["quantum_optimized"]),
    )


def ledger_from_snapshot(
    data: dict | None, owner: Principal,
) -> tuple[Ledger, BlockHeight]:
    """Rebuild a Ledger and its block height from a snapshot dict. Pure, no IO."""
    data = data or {}
    guard = AuthorizationGuard(owner)
    optimization = data.get("optimization") or {}
    state = OptimizationState()
    if "global_efficiency_score" in optimization:
        state.global_efficiency_score = optimization["global_efficiency_score"]
    if "optimization_cycles" in optimization:
        state.optimization_cycles = optimization["optimization_cycles"]

    ledger = Ledger(
        guard=guard,
        infrastructure=InfrastructureRegistry(guard, {
            InfrastructureId(k): _infrastructure_from(v)
            for k, v in (data.get("infrastructure") or {}).items()
        }),
        metrics=MetricRegistry(guard, {
            MetricId(k): _metric_from(v)
            for k, v in (data.get("metrics") or {}).items()
        }),
        rules=RuleRegistry(guard, {
            RuleId(k): _rule_from(v)
            for k, v in (data.get("rules") or {}).items()
        }),
        allocations=AllocationRegistry(guard, {
            AllocationId(k): _allocation_from(v)
            for k, v in (data.get("allocations") or {}).items()
        }),
        cycles=OptimizationCycleEngine(guard, state),
    )
    return ledger, BlockHeight(data.get("block_height", 0))
