"""Optimization Cycle Engine — fixed +1 cycle / +2 efficiency step.

Tests cover:
    - initial stats are 75 / 0
    - n cycles give 75 + 2n efficiency and n cycles
    - unauthorized cycles change nothing
    - an injected state is advanced in place
"""

import pytest

from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.errors import UnauthorizedError
from infraopt.core.optimization_cycle import OptimizationCycleEngine, OptimizationState


def test_initial_stats(ledger):
    assert ledger.cycles.get_stats() == {
        "global_efficiency_score": 75,
        "optimization_cycles": 0,
    }


def test_single_cycle(ledger, owner_ctx):
    assert ledger.cycles.execute_cycle(owner_ctx) == 1
    assert ledger.cycles.get_stats() == {
        "global_efficiency_score": 77,
        "optimization_cycles": 1,
    }


@pytest.mark.parametrize("n", [2, 3, 10, 100])
def test_n_cycles(ledger, at, n):
    for height in range(n):
        result = ledger.cycles.execute_cycle(at(height + 1))
    assert result == n
    assert ledger.cycles.get_stats() == {
        "global_efficiency_score": 75 + 2 * n,
        "optimization_cycles": n,
    }


def test_efficiency_has_no_ceiling(ledger, owner_ctx):
    for _ in range(20):
        ledger.cycles.execute_cycle(owner_ctx)
    # 75 + 40 passes 100 with no clamping
    assert ledger.cycles.get_stats()["global_efficiency_score"] == 115


def test_cycle_by_stranger(ledger, owner_ctx, stranger_ctx):
    ledger.cycles.execute_cycle(owner_ctx)
    with pytest.raises(UnauthorizedError) as exc:
        ledger.cycles.execute_cycle(stranger_ctx)
    assert exc.value.ledger_code == 500
    assert ledger.cycles.get_stats() == {
        "global_efficiency_score": 77,
        "optimization_cycles": 1,
    }


def test_cycles_independent_of_metrics(ledger, owner_ctx):
    ledger.metrics.register_metric(owner_ctx, "m", "M", 80, 60, 90, "latency")
    ledger.metrics.update_metric(owner_ctx, "m", 5)
    ledger.cycles.execute_cycle(owner_ctx)
    assert ledger.cycles.get_stats()["global_efficiency_score"] == 77


def test_injected_state_is_advanced(owner, owner_ctx):
    state = OptimizationState(global_efficiency_score=90, optimization_cycles=7)
    engine = OptimizationCycleEngine(AuthorizationGuard(owner), state)
    engine.execute_cycle(owner_ctx)
    assert (state.global_efficiency_score, state.optimization_cycles) == (92, 8)
    assert engine.state is state
