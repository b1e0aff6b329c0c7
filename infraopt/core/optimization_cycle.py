"""Optimization Cycle Engine — fixed-step global efficiency counter.

Invariants:
    - OptimizationState starts at global_efficiency_score=75, optimization_cycles=0
    - execute_cycle adds exactly 1 cycle and 2 efficiency points, or nothing at all
    - No ceiling, no decay, no link to metric values
    - Nothing runs a cycle implicitly; only an authorized execute_cycle call does

Design Decisions:
    - State is an injected dataclass, not a module global: one ledger owns one state,
      and tests can start from any state they construct
"""

from dataclasses import dataclass

from infraopt.core.domain_types import (
    EFFICIENCY_STEP_PER_CYCLE, INITIAL_GLOBAL_EFFICIENCY, CallContext,
)
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.errors import ERR_OWNER_ONLY_PERFORMANCE


@dataclass
class OptimizationState:
    """Ledger-wide efficiency aggregate — mutated only by OptimizationCycleEngine."""
    global_efficiency_score: int = INITIAL_GLOBAL_EFFICIENCY
    optimization_cycles: int = 0


class OptimizationCycleEngine:
    """Advances the OptimizationState one fixed step per authorized call."""

    def __init__(self, guard: AuthorizationGuard, state: OptimizationState | None = None):
        self._guard = guard
        self._state = state if state is not None else OptimizationState()

    @property
    def state(self) -> OptimizationState:
        return self._state

    def execute_cycle(self, ctx: CallContext) -> int:
        """Run one cycle. Returns the new cycle count."""
        denied = self._guard.check(ctx, "execute_cycle", ERR_OWNER_ONLY_PERFORMANCE)
        if denied:
            raise denied
        self._state.optimization_cycles += 1
        self._state.global_efficiency_score += EFFICIENCY_STEP_PER_CYCLE
        return self._state.optimization_cycles

    def get_stats(self) -> dict:
        return {
            "global_efficiency_score": self._state.global_efficiency_score,
            "optimization_cycles": self._state.optimization_cycles,
        }
