"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary: string bounds and unsigned integers
    - Domain rules (thresholds, capacity, lifecycle) stay in core/ and surface as InfraOptError

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
