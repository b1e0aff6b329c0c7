"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the ledger is not loaded or, with persistence on,
      the database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import infraopt.infrastructure.database as db_module
import infraopt.services.ledger_runtime as runtime_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "infraopt-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — ledger loaded, plus database connectivity when persisting."""
    runtime = runtime_module.runtime
    if runtime is None:
        return _not_ready("ledger_not_loaded")
    checks = {"ledger": "loaded"}
    if runtime.store is not None:
        manager = db_module.db_manager
        db_ok = await manager.health_check() if manager else False
        if not db_ok:
            return _not_ready("database_unavailable")
        checks["database"] = "healthy"
    return {"status": "ready", "checks": checks}


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
