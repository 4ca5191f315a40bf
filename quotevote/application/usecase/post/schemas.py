"""Shared post score response schema."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from quotevote.domain.model import PostScore


class PostScoreResponse(BaseModel):
    """Score state of a post as returned to clients."""

    post_id: str
    upvotes: int
    downvotes: int
    net_score: int
    voter_count: int
    day_points: int
    point_timestamp: Optional[datetime]

    @classmethod
    def from_domain(cls, post: PostScore) -> "PostScoreResponse":
        return cls(
            post_id=str(post.id),
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            net_score=post.net_score,
            voter_count=len(post.voted_by),
            day_points=post.day_points,
            point_timestamp=post.point_timestamp,
        )
