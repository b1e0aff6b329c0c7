"""Resource Allocation Registry — capacity-bounded allocations with a fixed efficiency tier.

Invariants:
    - allocate rejects amount > max_capacity before writing (amount == capacity is allowed)
    - efficiency_score is 95 when quantum_optimized, 80 otherwise, for every valid allocation
"""

from infraopt.core.domain_types import AllocationId, CallContext
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.enforce_thresholds import check_capacity, efficiency_score_for
from infraopt.core.errors import ERR_OWNER_ONLY_PERFORMANCE
from infraopt.core.records import Registration, ResourceAllocation


class AllocationRegistry:
    """Keyed store of ResourceAllocation."""

    def __init__(
        self, guard: AuthorizationGuard,
        allocations: dict[AllocationId, ResourceAllocation] | None = None,
    ):
        self._guard = guard
        self._allocations: dict[AllocationId, ResourceAllocation] = dict(allocations or {})

    def allocate(
        self, ctx: CallContext, allocation_id: AllocationId, resource_type: str,
        amount: int, max_capacity: int, quantum_optimized: bool,
    ) -> Registration[ResourceAllocation]:
        error = (
            self._guard.check(ctx, "allocate", ERR_OWNER_ONLY_PERFORMANCE)
            or check_capacity(ctx, allocation_id, amount, max_capacity)
        )
        if error:
            raise error
        allocation = ResourceAllocation(
            resource_type=resource_type,
            allocated_amount=amount,
            max_capacity=max_capacity,
            efficiency_score=efficiency_score_for(quantum_optimized),
            quantum_optimized=quantum_optimized,
        )
        replaced = allocation_id in self._allocations
        self._allocations[allocation_id] = allocation
        return Registration(record=allocation, replaced=replaced)

    def get(self, allocation_id: str) -> ResourceAllocation | None:
        return self._allocations.get(AllocationId(allocation_id))

    def items(self) -> list[tuple[AllocationId, ResourceAllocation]]:
        """All allocations, sorted by id."""
        return sorted(self._allocations.items())

    def __contains__(self, allocation_id: object) -> bool:
        return allocation_id in self._allocations

    def __len__(self) -> int:
        return len(self._allocations)
