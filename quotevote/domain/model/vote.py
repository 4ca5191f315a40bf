"""Vote records and vote events.

A post keeps one ``VoteRecord`` per distinct voter in ``voted_by``.
A ``VoteEvent`` is what arrives when somebody votes.
"""

from pydantic import field_validator

from quotevote.domain.model.common import DomainModel
from quotevote.domain.value import PostId, UserId, VoteType


class VoteRecord(DomainModel):
    """A single voter's current vote on a post."""

    user_id: UserId
    type: VoteType

    @field_validator("user_id", mode="before")
    @classmethod
    def canonical_user_id(cls, v: object) -> str:
        """Store ids in their canonical string form."""
        return cls.canonical_id(v)


class VoteEvent(DomainModel):
    """A vote submitted by a user.

    Ids are normalized to strings so UUIDs and plain strings
    for the same identifier compare equal.
    """

    post_id: PostId
    user_id: UserId
    type: VoteType

    @field_validator("post_id", "user_id", mode="before")
    @classmethod
    def canonical_ids(cls, v: object) -> str:
        """Store ids in their canonical string form."""
        return cls.canonical_id(v)
