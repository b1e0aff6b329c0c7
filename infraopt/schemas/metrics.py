"""Metric Schemas — request/response models for the metric registry.

Invariants:
    - All numeric fields are unsigned integers (ge=0)
    - Threshold ordering (min < max) is NOT checked here: the registry owns that rule
      and reports it as INVALID_THRESHOLD, not as a generic validation error
"""

from pydantic import BaseModel, ConfigDict, Field

from infraopt.core.domain_types import OptimizationType
from infraopt.schemas.fields import EntityId, Label


class MetricRegister(BaseModel):
    metric_id: EntityId
    metric_name: Label
    target_value: int = Field(ge=0)
    threshold_min: int = Field(ge=0)
    threshold_max: int = Field(ge=0)
    optimization_type: OptimizationType


class MetricUpdate(BaseModel):
    value: int = Field(ge=0)


class MetricResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    metric_name: str
    current_value: int
    target_value: int
    threshold_min: int
    threshold_max: int
    optimization_type: OptimizationType
    last_measured: int


class MetricRegistered(BaseModel):
    metric_id: str
    replaced: bool
    record: MetricResponse
