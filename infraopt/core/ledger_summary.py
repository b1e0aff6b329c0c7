"""Ledger Summary — pure computation of registry counts for dashboards and probes.

Invariants:
    - All inputs come from the Ledger read surface (no IO, no DB)
    - Returns a flat dict of integer counts (serializable as JSON)
    - Never raises; empty registries give zeros
"""

from infraopt.core.domain_types import InfrastructureStatus
from infraopt.core.ledger import Ledger


def compute_ledger_summary(ledger: Ledger) -> dict:
    """Compute summary counts from a Ledger. Pure, no IO."""
    records = [r for _, r in ledger.infrastructure.items()]
    by_status = {
        status.value: sum(1 for r in records if r.status == status)
        for status in InfrastructureStatus
    }
    metric_ids = [metric_id for metric_id, _ in ledger.metrics.items()]
    optimal = sum(1 for m in metric_ids if ledger.metrics.is_metric_optimal(m))
    allocations = [a for _, a in ledger.allocations.items()]
    stats = ledger.cycles.get_stats()

    return {
        "infrastructure_total": len(records),
        "infrastructure_by_status": by_status,
        "quantum_compatible_infrastructure": sum(
            1 for r in records if r.quantum_compatibility
        ),
        "metrics_total": len(metric_ids),
        "metrics_optimal": optimal,
        "metrics_out_of_band": len(metric_ids) - optimal,
        "rules_total": len(ledger.rules),
        "allocations_total": len(allocations),
        "quantum_optimized_allocations": sum(
            1 for a in allocations if a.quantum_optimized
        ),
        "allocated_amount_total": sum(a.allocated_amount for a in allocations),
        "capacity_total": sum(a.max_capacity for a in allocations),
        "global_efficiency_score": stats["global_efficiency_score"],
        "optimization_cycles": stats["optimization_cycles"],
    }
