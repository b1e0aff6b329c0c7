"""Ledger — composition of the authorization guard, the four registries, and the cycle engine.

Invariants:
    - Exactly one AuthorizationGuard per ledger, shared by every component
    - Registries are independent: no operation in one touches another
    - Ledger itself adds no behavior; callers reach components through its attributes

Design Decisions:
    - Plain composition over a facade with forwarding methods: each component keeps its
      own narrow surface (ADR: no god objects)
"""

from dataclasses import dataclass

from infraopt.core.allocation_registry import AllocationRegistry
from infraopt.core.domain_types import Principal
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.infrastructure_registry import InfrastructureRegistry
from infraopt.core.metric_registry import MetricRegistry
from infraopt.core.optimization_cycle import OptimizationCycleEngine, OptimizationState
from infraopt.core.rule_registry import RuleRegistry


@dataclass
class Ledger:
    guard: AuthorizationGuard
    infrastructure: InfrastructureRegistry
    metrics: MetricRegistry
    rules: RuleRegistry
    allocations: AllocationRegistry
    cycles: OptimizationCycleEngine

    @property
    def owner(self) -> Principal:
        return self.guard.owner


def create_ledger(
    owner: Principal, optimization_state: OptimizationState | None = None,
) -> Ledger:
    """Build an empty ledger owned by `owner`."""
    guard = AuthorizationGuard(owner)
    return Ledger(
        guard=guard,
        infrastructure=InfrastructureRegistry(guard),
        metrics=MetricRegistry(guard),
        rules=RuleRegistry(guard),
        allocations=AllocationRegistry(guard),
        cycles=OptimizationCycleEngine(guard, optimization_state),
    )
