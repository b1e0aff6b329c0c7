"""Ledger Records — immutable value objects stored in each registry.

Invariants:
    - Records are frozen: a registry swaps a whole record or nothing (no partial writes)
    - Field names follow the ledger data model; enums are typed, never raw strings
    - Registration.replaced is True when an existing id was overwritten

Design Decisions:
    - Frozen dataclasses + dataclasses.replace over in-place mutation: a failed precondition
      can never leave a half-updated record visible
    - Registration wraps the silent-overwrite behavior so callers see it explicitly
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from infraopt.core.domain_types import (
    BlockHeight, InfrastructureStatus, OptimizationType, Principal, UnvalidatedText,
)


@dataclass(frozen=True)
class InfrastructureRecord:
    owner: Principal
    infrastructure_type: str
    status: InfrastructureStatus
    verification_timestamp: BlockHeight
    quantum_compatibility: bool
    performance_score: int = 0


@dataclass(frozen=True)
class PerformanceMetric:
    metric_name: str
    current_value: int
    target_value: int
    threshold_min: int
    threshold_max: int
    optimization_type: OptimizationType
    last_measured: BlockHeight


@dataclass(frozen=True)
class OptimizationRule:
    """Declarative trigger/action pair. Stored only; evaluated elsewhere."""
    rule_name: str
    trigger_condition: UnvalidatedText
    optimization_action: UnvalidatedText
    priority: int
    quantum_enhanced: bool
    execution_count: int = 0


@dataclass(frozen=True)
class ResourceAllocation:
    resource_type: str
    allocated_amount: int
    max_capacity: int
    efficiency_score: int
    quantum_optimized: bool


R = TypeVar("R")


@dataclass(frozen=True)
class Registration(Generic[R]):
    """Result of a create-or-overwrite operation."""
    record: R
    replaced: bool
