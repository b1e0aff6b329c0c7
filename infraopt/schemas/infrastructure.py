"""Infrastructure Schemas — request/response models for the infrastructure registry.

Invariants:
    - Ids and type labels are bounded, stripped strings (schemas/fields.py)
    - performance_score is an unsigned integer; no upper bound
"""

from pydantic import BaseModel, ConfigDict, Field

from infraopt.core.domain_types import InfrastructureStatus
from infraopt.schemas.fields import EntityId, Label


class InfrastructureRegister(BaseModel):
    """Register (or re-register) an infrastructure record."""
    infrastructure_id: EntityId
    infrastructure_type: Label
    quantum_compatible: bool


class InfrastructureVerify(BaseModel):
    performance_score: int = Field(ge=0)


class InfrastructureResponse(BaseModel):
    """Public view of an InfrastructureRecord."""
    model_config = ConfigDict(from_attributes=True)

    owner: str
    infrastructure_type: str
    status: InfrastructureStatus
    verification_timestamp: int
    quantum_compatibility: bool
    performance_score: int


class InfrastructureRegistered(BaseModel):
    infrastructure_id: str
    replaced: bool
    record: InfrastructureResponse
