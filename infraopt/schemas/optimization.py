"""Optimization Schemas — rules, allocations, and cycle statistics.

Invariants:
    - trigger_condition / optimization_action are length-bounded only; content is opaque
    - allocated_amount <= max_capacity is NOT checked here (registry reports INVALID_THRESHOLD)
"""

from pydantic import BaseModel, ConfigDict, Field

from infraopt.core.domain_types import MAX_RULE_TEXT_LENGTH
from infraopt.schemas.fields import EntityId, Label


class RuleCreate(BaseModel):
    rule_id: EntityId
    rule_name: Label
    trigger_condition: str = Field(max_length=MAX_RULE_TEXT_LENGTH)
    optimization_action: str = Field(max_length=MAX_RULE_TEXT_LENGTH)
    priority: int = Field(ge=0)
    quantum_enhanced: bool = False


class RuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    rule_name: str
    trigger_condition: str
    optimization_action: str
    priority: int
    quantum_enhanced: bool
    execution_count: int


class RuleCreated(BaseModel):
    rule_id: str
    replaced: bool
    record: RuleResponse


class AllocationCreate(BaseModel):
    allocation_id: EntityId
    resource_type: Label
    allocated_amount: int = Field(ge=0)
    max_capacity: int = Field(ge=0)
    quantum_optimized: bool = False


class AllocationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    resource_type: str
    allocated_amount: int
    max_capacity: int
    efficiency_score: int
    quantum_optimized: bool


class AllocationCreated(BaseModel):
    allocation_id: str
    replaced: bool
    record: AllocationResponse


class CycleResult(BaseModel):
    optimization_cycles: int
    block_height: int


class OptimizationStats(BaseModel):
    global_efficiency_score: int
    optimization_cycles: int
