"""Post use cases."""

from .get_post_score import GetPostScoreRequest, GetPostScoreUseCase
from .list_trending import (
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
)
from .schemas import PostScoreResponse

__all__ = [
    "GetPostScoreRequest",
    "GetPostScoreUseCase",
    "ListTrendingRequest",
    "ListTrendingResponse",
    "ListTrendingUseCase",
    "PostScoreResponse",
]
