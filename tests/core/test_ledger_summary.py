"""Ledger Summary — counts derived from the ledger read surface."""

from infraopt.core.domain_types import OptimizationType
from infraopt.core.ledger_summary import compute_ledger_summary


def test_empty_ledger_summary(ledger):
    summary = compute_ledger_summary(ledger)
    assert summary["infrastructure_total"] == 0
    assert summary["infrastructure_by_status"] == {
        "pending": 0, "verified": 0, "failed": 0, "maintenance": 0,
    }
    assert summary["metrics_total"] == 0
    assert summary["allocated_amount_total"] == 0
    assert summary["global_efficiency_score"] == 75
    assert summary["optimization_cycles"] == 0


def test_populated_ledger_summary(ledger, owner_ctx):
    ledger.infrastructure.register(owner_ctx, "s1", "env", True)
    ledger.infrastructure.register(owner_ctx, "s2", "env", False)
    ledger.infrastructure.verify(owner_ctx, "s1", 85)
    ledger.metrics.register_metric(owner_ctx, "in", "In", 80, 60, 90, OptimizationType.BANDWIDTH)
    ledger.metrics.register_metric(owner_ctx, "out", "Out", 10, 5, 15, OptimizationType.LATENCY)
    ledger.metrics.update_metric(owner_ctx, "in", 75)
    ledger.rules.create_rule(owner_ctx, "r", "R", "t", "a", 1, False)
    ledger.allocations.allocate(owner_ctx, "a1", "r", 50, 100, True)
    ledger.allocations.allocate(owner_ctx, "a2", "r", 30, 40, False)
    ledger.cycles.execute_cycle(owner_ctx)

    summary = compute_ledger_summary(ledger)

    assert summary["infrastructure_total"] == 2
    assert summary["infrastructure_by_status"]["verified"] == 1
    assert summary["infrastructure_by_status"]["pending"] == 1
    assert summary["quantum_compatible_infrastructure"] == 1
    assert summary["metrics_total"] == 2
    assert summary["metrics_optimal"] == 1
    assert summary["metrics_out_of_band"] == 1
    assert summary["rules_total"] == 1
    assert summary["allocations_total"] == 2
    assert summary["quantum_optimized_allocations"] == 1
    assert summary["allocated_amount_total"] == 80
    assert summary["capacity_total"] == 140
    assert summary["global_efficiency_score"] == 77
    assert summary["optimization_cycles"] == 1
