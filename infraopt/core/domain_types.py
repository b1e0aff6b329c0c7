"""Domain Types — rich types that replace bare primitives across the ledger.

Invariants:
    - Every registry key is a bounded string wrapped in its own NewType
    - Principal and BlockHeight come from the host, never fabricated by core
    - All valid states encoded as Enums — no raw string matching
    - Policy constants (95/80 efficiency tiers, +2 per cycle, 75 baseline) live here only

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (snapshots and API bodies are JSON)
    - CallContext is frozen: the clock is fixed for an operation's duration
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InfrastructureId = NewType("InfrastructureId", str)
MetricId = NewType("MetricId", str)
RuleId = NewType("RuleId", str)
AllocationId = NewType("AllocationId", str)
Principal = NewType("Principal", str)


# ─── Value Types ─────────────────────────────────────────────────

BlockHeight = NewType("BlockHeight", int)        # logical clock, non-decreasing
UnvalidatedText = NewType("UnvalidatedText", str)  # opaque, consumed by external evaluators


# ─── Bounds ──────────────────────────────────────────────────────

MAX_ID_LENGTH: int = 64
MAX_LABEL_LENGTH: int = 64
MAX_RULE_TEXT_LENGTH: int = 256
# One URL path segment: ids must be addressable as /{id}
ID_PATTERN: str = r"^[A-Za-z0-9][A-Za-z0-9_.:-]*$"


# ─── Policy Constants ────────────────────────────────────────────

QUANTUM_EFFICIENCY_SCORE: int = 95
CLASSICAL_EFFICIENCY_SCORE: int = 80
INITIAL_GLOBAL_EFFICIENCY: int = 75
EFFICIENCY_STEP_PER_CYCLE: int = 2


# ─── Enums ───────────────────────────────────────────────────────

class InfrastructureStatus(str, Enum):
    """Verification lifecycle. Core only moves PENDING -> VERIFIED."""
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"            # reserved for external collaborators
    MAINTENANCE = "maintenance"  # reserved for external collaborators


class OptimizationType(str, Enum):
    """What a performance metric optimizes for."""
    BANDWIDTH = "bandwidth"
    LATENCY = "latency"
    ENERGY = "energy"
    QUANTUM_COHERENCE = "quantum_coherence"


# ─── Call Context ────────────────────────────────────────────────

@dataclass(frozen=True)
class CallContext:
    """Host-supplied facts for one operation: who is calling, and at which height."""
    caller: Principal
    block_height: BlockHeight
