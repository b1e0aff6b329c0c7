"""API Dependencies — caller identity, path ids, and ledger runtime injection.

Invariants:
    - Caller identity comes from the X-Caller-Principal header on every mutating route
    - The header value is passed through untouched; only the AuthorizationGuard judges it
    - Path ids obey the same ID_PATTERN as body ids, so every stored id is addressable

Design Decisions:
    - Missing header is a request validation error (400), not an authorization decision
"""

from typing import Annotated

from fastapi import Header, Path

from infraopt.core.domain_types import ID_PATTERN, MAX_ID_LENGTH

CALLER_HEADER = "X-Caller-Principal"

EntityIdPath = Annotated[
    str, Path(min_length=1, max_length=MAX_ID_LENGTH, pattern=ID_PATTERN),
]


async def get_caller(
    caller: str = Header(
        alias=CALLER_HEADER, min_length=1, max_length=MAX_ID_LENGTH * 2,
    ),
) -> str:
    return caller
