"""Ledger Snapshot — serialization round-trip and the no-partial-write guarantee.

Tests cover:
    - snapshot is JSON-safe (enums flattened, json.dumps succeeds)
    - rebuilding from a snapshot gives an equal snapshot
    - missing sections fall back to empty registries / initial optimization state
    - owner always comes from the caller, never from the snapshot
    - every rejected mutating call leaves the ledger snapshot unchanged
"""

import json

import pytest

from infraopt.core.domain_types import InfrastructureStatus, OptimizationType
from infraopt.core.errors import InfraOptError
from infraopt.core.ledger_snapshot import (
    SNAPSHOT_VERSION, ledger_from_snapshot, ledger_to_snapshot,
)


@pytest.fixture
def populated(ledger, at):
    ledger.infrastructure.register(at(1), "s1", "env", True)
    ledger.infrastructure.register(at(2), "s2", "traffic", False)
    ledger.infrastructure.verify(at(3), "s1", 85)
    ledger.metrics.register_metric(at(4), "bw", "Bandwidth", 80, 60, 90, OptimizationType.BANDWIDTH)
    ledger.metrics.update_metric(at(5), "bw", 75)
    ledger.rules.create_rule(at(6), "r1", "Balance", "bandwidth > 85%", "redistribute", 1, True)
    ledger.allocations.allocate(at(7), "a1", "quantum-processor", 50, 100, True)
    ledger.cycles.execute_cycle(at(8))
    return ledger


def test_snapshot_is_json_safe(populated):
    snapshot = ledger_to_snapshot(populated, 8)
    assert json.loads(json.dumps(snapshot)) == snapshot
    assert snapshot["version"] == SNAPSHOT_VERSION
    assert snapshot["block_height"] == 8
    assert snapshot["infrastructure"]["s1"]["status"] == "verified"
    assert snapshot["metrics"]["bw"]["optimization_type"] == "bandwidth"
    assert snapshot["optimization"] == {
        "global_efficiency_score": 77, "optimization_cycles": 1,
    }


def test_rebuild_gives_equal_snapshot(populated, owner):
    snapshot = ledger_to_snapshot(populated, 8)
    rebuilt, height = ledger_from_snapshot(snapshot, owner)
    assert height == 8
    assert ledger_to_snapshot(rebuilt, height) == snapshot


def test_rebuilt_ledger_answers_reads(populated, owner):
    rebuilt, _ = ledger_from_snapshot(ledger_to_snapshot(populated, 8), owner)
    assert rebuilt.infrastructure.get("s1").status == InfrastructureStatus.VERIFIED
    assert rebuilt.infrastructure.is_verified("s2") is False
    assert rebuilt.metrics.is_metric_optimal("bw") is True
    assert rebuilt.rules.get("r1").execution_count == 0
    assert rebuilt.allocations.get("a1").efficiency_score == 95
    assert rebuilt.cycles.get_stats()["optimization_cycles"] == 1


@pytest.mark.parametrize("data", [None, {}, {"version": 1}])
def test_missing_sections_give_empty_ledger(owner, data):
    ledger, height = ledger_from_snapshot(data, owner)
    assert height == 0
    assert len(ledger.infrastructure) == 0
    assert len(ledger.metrics) == 0
    assert ledger.cycles.get_stats() == {
        "global_efficiency_score": 75, "optimization_cycles": 0,
    }


def test_owner_comes_from_caller(populated, stranger):
    snapshot = ledger_to_snapshot(populated, 8)
    rebuilt, _ = ledger_from_snapshot(snapshot, stranger)
    assert rebuilt.owner == stranger


# ─── rejected calls write nothing ────────────────────────────────

REJECTED_BY_STRANGER = [
    ("register", lambda lg, ctx: lg.infrastructure.register(ctx, "new", "t", True)),
    ("register-existing", lambda lg, ctx: lg.infrastructure.register(ctx, "s2", "t", True)),
    ("verify", lambda lg, ctx: lg.infrastructure.verify(ctx, "s2", 50)),
    ("register_metric", lambda lg, ctx: lg.metrics.register_metric(
        ctx, "bw", "X", 1, 0, 2, OptimizationType.ENERGY)),
    ("update_metric", lambda lg, ctx: lg.metrics.update_metric(ctx, "bw", 1)),
    ("create_rule", lambda lg, ctx: lg.rules.create_rule(ctx, "r1", "X", "t", "a", 9, False)),
    ("allocate", lambda lg, ctx: lg.allocations.allocate(ctx, "a1", "r", 1, 2, False)),
    ("execute_cycle", lambda lg, ctx: lg.cycles.execute_cycle(ctx)),
]


@pytest.mark.parametrize(
    "call", [c for _, c in REJECTED_BY_STRANGER], ids=[n for n, _ in REJECTED_BY_STRANGER],
)
def test_unauthorized_call_leaves_ledger_unchanged(populated, stranger_ctx, call):
    before = ledger_to_snapshot(populated, 8)
    with pytest.raises(InfraOptError):
        call(populated, stranger_ctx)
    assert ledger_to_snapshot(populated, 8) == before


REJECTED_FOR_OWNER = [
    ("verify-verified", lambda lg, ctx: lg.infrastructure.verify(ctx, "s1", 10)),
    ("verify-missing", lambda lg, ctx: lg.infrastructure.verify(ctx, "nope", 10)),
    ("empty-band", lambda lg, ctx: lg.metrics.register_metric(
        ctx, "bw", "X", 1, 5, 5, OptimizationType.ENERGY)),
    ("update-missing", lambda lg, ctx: lg.metrics.update_metric(ctx, "nope", 1)),
    ("over-capacity", lambda lg, ctx: lg.allocations.allocate(ctx, "a1", "r", 3, 2, False)),
]


@pytest.mark.parametrize(
    "call", [c for _, c in REJECTED_FOR_OWNER], ids=[n for n, _ in REJECTED_FOR_OWNER],
)
def test_failed_precondition_leaves_ledger_unchanged(populated, owner_ctx, call):
    before = ledger_to_snapshot(populated, 8)
    with pytest.raises(InfraOptError):
        call(populated, owner_ctx)
    assert ledger_to_snapshot(populated, 8) == before
