"""Infrastructure Layer — database access, logical clock, and cross-cutting concerns.

Invariants:
    - Infrastructure imports only core/errors.py and core/domain_types.py from the core
    - Database failures surface as DatabaseError, never as raw driver exceptions

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
