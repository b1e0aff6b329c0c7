"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database and pin the owner identity
os.environ.setdefault("OWNER_PRINCIPAL", "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM")
os.environ.setdefault("SNAPSHOT_PERSISTENCE", "false")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
