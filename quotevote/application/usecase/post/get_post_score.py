"""Get post score use case."""

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.error import NotFoundError
from quotevote.domain.service import ScoreService
from quotevote.domain.value import PostId

from .schemas import PostScoreResponse


class GetPostScoreRequest(BaseModel):
    """Get post score request."""

    post_id: str


class GetPostScoreUseCase(BaseUseCase[GetPostScoreRequest, PostScoreResponse]):
    """Use case for reading a post's tallies and trending counter."""

    def __init__(self, score_service: ScoreService) -> None:
        """Initialize get post score use case.

        Args:
            score_service: Score domain service
        """
        self.score_service = score_service

    async def execute(self, request: GetPostScoreRequest) -> PostScoreResponse:
        """Execute get post score flow.

        Args:
            request: Get post score request

        Returns:
            The post's score state

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.score_service.get_post_score(PostId(request.post_id))
        if post is None:
            raise NotFoundError("Post", request.post_id)
        return PostScoreResponse.from_domain(post)
