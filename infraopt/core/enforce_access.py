"""Authorization Guard — single predicate deciding whether a caller may mutate the ledger.

Invariants:
    - The owner is fixed at construction and never reassigned
    - check() is PURE: returns UnauthorizedError on deny, None on allow
    - Every mutating registry operation calls check() before reading or writing state

Design Decisions:
    - Return the error (not raise): registries chain checks with `or`, first error wins
      (ADR: same shape as the other enforce_* checks)
    - ledger_code passed per call: the infrastructure and performance contracts
      report the same denial under different numeric codes
"""

from infraopt.core.domain_types import CallContext, Principal
from infraopt.core.errors import (
    ERR_OWNER_ONLY_INFRASTRUCTURE, ErrorContext, UnauthorizedError,
)


class AuthorizationGuard:
    """Owner-only access predicate."""

    __slots__ = ("_owner",)

    def __init__(self, owner: Principal):
        if not owner:
            raise ValueError("owner principal must be non-empty")
        self._owner = owner

    @property
    def owner(self) -> Principal:
        return self._owner

    def is_owner(self, caller: Principal) -> bool:
        return caller == self._owner

    def check(
        self, ctx: CallContext, operation: str,
        ledger_code: int = ERR_OWNER_ONLY_INFRASTRUCTURE,
    ) -> UnauthorizedError | None:
        """Deny with UnauthorizedError unless ctx.caller is the owner."""
        if self.is_owner(ctx.caller):
            return None
        return UnauthorizedError(
            ctx.caller, ledger_code,
            ErrorContext(
                caller=ctx.caller, operation=operation,
                block_height=ctx.block_height,
            ),
        )
