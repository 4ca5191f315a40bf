"""List trending posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import ScoreService

from .schemas import PostScoreResponse


class ListTrendingRequest(BaseModel):
    """List trending request."""

    limit: Optional[int] = Field(default=None, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListTrendingResponse(BaseModel):
    """List trending response."""

    posts: list[PostScoreResponse]


class ListTrendingUseCase(BaseUseCase[ListTrendingRequest, ListTrendingResponse]):
    """Use case for listing posts by trending momentum."""

    def __init__(self, score_service: ScoreService) -> None:
        """Initialize list trending use case.

        Args:
            score_service: Score domain service
        """
        self.score_service = score_service

    async def execute(self, request: ListTrendingRequest) -> ListTrendingResponse:
        """Execute list trending flow.

        Args:
            request: Pagination parameters

        Returns:
            Posts active in the trending window, hottest first
        """
        posts = await self.score_service.list_trending(
            limit=request.limit, offset=request.offset
        )
        return ListTrendingResponse(
            posts=[PostScoreResponse.from_domain(post) for post in posts]
        )
