"""Strongly typed identifiers for Quote.Vote domain entities.

Ids are carried as strings. Callers may hold them as UUIDs or other
objects, so comparisons always go through the canonical ``str(...)`` form.
"""

from typing import NewType

PostId = NewType("PostId", str)
UserId = NewType("UserId", str)


def same_id(left: object, right: object) -> bool:
    """Compare two identifiers by their canonical string form."""
    return str(left) == str(right)
