"""Core fixtures — an empty ledger and call contexts at fixed block heights."""

import pytest

from infraopt.core.domain_types import BlockHeight, CallContext, Principal
from infraopt.core.ledger import create_ledger

OWNER = Principal("ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM")
STRANGER = Principal("ST2DIFFERENT_ADDRESS")


@pytest.fixture
def owner():
    return OWNER


@pytest.fixture
def stranger():
    return STRANGER


@pytest.fixture
def at():
    """Build a CallContext: at(height) for the owner, at(height, caller) for anyone."""
    def _at(height: int, caller: str = OWNER) -> CallContext:
        return CallContext(caller=Principal(caller), block_height=BlockHeight(height))
    return _at


@pytest.fixture
def ledger():
    return create_ledger(OWNER)


@pytest.fixture
def owner_ctx(at):
    return at(1000)


@pytest.fixture
def stranger_ctx(at):
    return at(1000, STRANGER)
