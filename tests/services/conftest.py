"""Service test fixtures — async DB, ledger runtime, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a fresh ledger
    - The runtime singleton is swapped in per test and restored afterwards
    - db_manager patched so readiness probes and SnapshotStore see the test DB

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised here)
    - ASGITransport does not run the lifespan: fixtures install the runtime directly
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from infraopt.api.dependencies import CALLER_HEADER
from infraopt.db.base import Base
from infraopt.infrastructure.database import DatabaseSessionManager
import infraopt.infrastructure.database as db_module
import infraopt.services.ledger_runtime as runtime_module
from infraopt.services.ledger_runtime import LedgerRuntime
from infraopt.services.snapshot_store import SnapshotStore
from infraopt.main import app

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
STRANGER = "ST2DIFFERENT_ADDRESS"


@pytest.fixture
def owner_headers():
    return {CALLER_HEADER: OWNER}


@pytest.fixture
def stranger_headers():
    return {CALLER_HEADER: STRANGER}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    original_manager = db_module.db_manager
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original_manager


@pytest.fixture
def snapshot_store(test_manager):
    return SnapshotStore(test_manager)


@pytest.fixture
def ledger_runtime(snapshot_store):
    return LedgerRuntime.fresh(OWNER, store=snapshot_store)


@pytest.fixture
async def client(ledger_runtime):
    """FastAPI test client with the ledger runtime installed."""
    original_runtime = runtime_module.runtime
    runtime_module.runtime = ledger_runtime

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    runtime_module.runtime = original_runtime
