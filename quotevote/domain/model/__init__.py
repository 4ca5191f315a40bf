"""Domain model entities for Quote.Vote."""

from quotevote.domain.model.post_score import PostScore
from quotevote.domain.model.rate_limit import RateLimitEntry
from quotevote.domain.model.vote import VoteEvent, VoteRecord

__all__ = [
    "PostScore",
    "RateLimitEntry",
    "VoteEvent",
    "VoteRecord",
]
