"""Repository interfaces for Quote.Vote domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quotevote.domain.repository.post_score import PostScoreRepository

__all__ = [
    "PostScoreRepository",
]
