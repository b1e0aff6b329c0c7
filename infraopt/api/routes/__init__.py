"""Route Modules — one file per registry/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to LedgerRuntime + core registries)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
