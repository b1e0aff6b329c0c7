"""Block Clock — host-side logical clock supplying block heights to the ledger.

Invariants:
    - Height never decreases
    - current() is read-only; only LedgerRuntime calls advance()
    - advance() is called by the host runtime, once per submitted mutating call

Design Decisions:
    - One height per submitted call, accepted or rejected: mirrors a chain where every
      transaction lands in its own block
    - Not thread-safe on its own: LedgerRuntime advances it under its exclusive lock
"""

from infraopt.core.domain_types import BlockHeight


class BlockClock:
    """Monotonic block-height counter."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"block height cannot be negative: {start}")
        self._height = BlockHeight(start)

    def current(self) -> BlockHeight:
        return self._height

    def advance(self) -> BlockHeight:
        self._height = BlockHeight(self._height + 1)
        return self._height

    def fast_forward(self, height: int) -> BlockHeight:
        """Jump to `height` if it is ahead; never moves backwards."""
        if height > self._height:
            self._height = BlockHeight(height)
        return self._height
