"""Ledger Routes — read-only views over the whole ledger.

Invariants:
    - Nothing here mutates the ledger or advances the clock
"""

from fastapi import APIRouter, Depends

from infraopt.core.ledger_summary import compute_ledger_summary
from infraopt.services.ledger_runtime import LedgerRuntime, get_runtime

router = APIRouter(prefix="/api/v1/ledger", tags=["ledger"])


@router.get("/summary")
async def get_ledger_summary(runtime: LedgerRuntime = Depends(get_runtime)):
    """Counts per registry plus the optimization stats."""
    summary = runtime.read(compute_ledger_summary)
    return {
        "owner": runtime.owner,
        "block_height": runtime.block_height(),
        **summary,
    }
