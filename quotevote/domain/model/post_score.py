"""Post score state.

The part of a post document owned by scoring: who voted how, the
denormalized up/down totals and the trending counter.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, computed_field, field_validator

from quotevote.domain.model.common import DomainModel
from quotevote.domain.model.vote import VoteRecord
from quotevote.domain.value import PostId, VoteType


class PostScore(DomainModel):
    """Score state of a single post.

    Invariants:
    - upvotes/downvotes equal the number of matching entries in voted_by
    - day_points is never negative
    """

    id: PostId
    voted_by: list[VoteRecord] = Field(default_factory=list)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    day_points: int = Field(default=0, ge=0)
    point_timestamp: Optional[datetime] = None

    @field_validator("point_timestamp")
    @classmethod
    def utc_point_timestamp(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store timestamps as aware UTC; naive values are taken to be UTC."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @computed_field
    @property
    def net_score(self) -> int:
        """Up votes count +1, down votes count -1."""
        return self.upvotes - self.downvotes

    def count_votes(self, vote_type: VoteType) -> int:
        """Count voted_by entries of the given type."""
        return sum(1 for record in self.voted_by if record.type == vote_type)
