"""Domain value objects for Quote.Vote."""

from quotevote.domain.value.identifiers import PostId, UserId, same_id
from quotevote.domain.value.types import VoteType

__all__ = [
    # Identifiers
    "PostId",
    "UserId",
    "same_id",
    # Types
    "VoteType",
]
