"""Authorization Guard — owner-only predicate.

Tests cover:
    - Owner allowed, anyone else denied
    - Denial is returned, not raised, and carries call context
    - Empty owner rejected at construction
"""

import pytest

from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.errors import UnauthorizedError


def test_owner_is_allowed(owner, owner_ctx):
    guard = AuthorizationGuard(owner)
    assert guard.is_owner(owner)
    assert guard.check(owner_ctx, "register") is None


def test_stranger_is_denied(owner, stranger_ctx):
    guard = AuthorizationGuard(owner)
    error = guard.check(stranger_ctx, "register")
    assert isinstance(error, UnauthorizedError)
    assert error.caller == stranger_ctx.caller
    assert error.context.operation == "register"
    assert error.context.block_height == 1000


def test_denial_uses_requested_ledger_code(owner, stranger_ctx):
    guard = AuthorizationGuard(owner)
    assert guard.check(stranger_ctx, "allocate", 500).ledger_code == 500


def test_owner_comparison_is_exact(owner, at):
    guard = AuthorizationGuard(owner)
    assert guard.check(at(1, owner.lower()), "verify") is not None
    assert guard.check(at(1, owner + " "), "verify") is not None


def test_empty_owner_rejected():
    with pytest.raises(ValueError):
        AuthorizationGuard("")
