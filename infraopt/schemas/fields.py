"""Shared Field Types — bounded, whitespace-stripped strings used by every request schema.

Invariants:
    - Every entity id is stripped, 1-64 chars, and a single URL path segment (ID_PATTERN)
    - Labels (types, names) are stripped and 1-64 chars; any characters allowed
    - Stripping happens before length and pattern checks

Design Decisions:
    - One Annotated alias per kind of string so all registries agree on what an id is
"""

from typing import Annotated

from pydantic import StringConstraints

from infraopt.core.domain_types import ID_PATTERN, MAX_ID_LENGTH, MAX_LABEL_LENGTH

EntityId = Annotated[str, StringConstraints(
    strip_whitespace=True, min_length=1, max_length=MAX_ID_LENGTH, pattern=ID_PATTERN,
)]

Label = Annotated[str, StringConstraints(
    strip_whitespace=True, min_length=1, max_length=MAX_LABEL_LENGTH,
)]
