"""Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InfraOptError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Ledger restored from its stored snapshot on startup when persistence is on

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Owner always taken from settings, even when a snapshot exists
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infraopt.api.error_handlers import register_error_handlers
from infraopt.api.routes import health, infrastructure, ledger, metrics, optimization
from infraopt.config import Settings, get_settings
import infraopt.infrastructure.database as db_module
from infraopt.infrastructure.database import init_db
from infraopt.infrastructure.observability import setup_logging
from infraopt.services.ledger_runtime import LedgerRuntime, init_runtime
from infraopt.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


async def build_runtime(settings: Settings) -> LedgerRuntime:
    """Create the ledger runtime, restoring persisted state when enabled."""
    if not settings.snapshot_persistence:
        return LedgerRuntime.fresh(
            settings.owner_principal, settings.genesis_block_height,
            ledger_key=settings.ledger_key,
        )
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    store = SnapshotStore(manager)
    snapshot = await store.load(settings.ledger_key)
    if snapshot:
        logger.info(
            "Ledger restored from snapshot",
            extra={
                "ledger_key": settings.ledger_key,
                "block_height": snapshot.get("block_height"),
            },
        )
    return LedgerRuntime.restore(
        snapshot, settings.owner_principal, settings.genesis_block_height,
        ledger_key=settings.ledger_key, store=store,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_runtime(await build_runtime(settings))
    logger.info("Ledger API started")
    yield
    logger.info("Ledger API shutting down")
    if db_module.db_manager is not None:
        await db_module.db_manager.dispose()


app = FastAPI(
    title="Infrastructure Optimization Ledger API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(infrastructure.router)
app.include_router(metrics.router)
app.include_router(optimization.router)
app.include_router(ledger.router)

register_error_handlers(app)
