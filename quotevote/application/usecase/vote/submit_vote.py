"""Submit vote use case."""

from typing import Optional

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.application.usecase.post.schemas import PostScoreResponse
from quotevote.config import RateLimitSettings
from quotevote.domain.model import VoteEvent
from quotevote.domain.service import RateLimiter, ScoreService
from quotevote.domain.value import PostId, UserId, VoteType

VOTE_ACTION = "vote"


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    post_id: str
    user_id: Optional[str]  # None for anonymous callers
    type: VoteType


class SubmitVoteResponse(BaseModel):
    """Submit vote response.

    ``score`` is None when the post could not be found or read.
    """

    post_id: str
    type: VoteType
    score: Optional[PostScoreResponse]


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, SubmitVoteResponse]):
    """Use case for voting on a post."""

    def __init__(
        self,
        rate_limiter: RateLimiter,
        score_service: ScoreService,
        rate_limit_settings: RateLimitSettings,
    ) -> None:
        """Initialize submit vote use case.

        Args:
            rate_limiter: Process-wide rate limiter
            score_service: Score domain service
            rate_limit_settings: Rate limit settings (vote quota)
        """
        self.rate_limiter = rate_limiter
        self.score_service = score_service
        self.rate_limit_settings = rate_limit_settings

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            The post's score after the vote was applied

        Raises:
            ValueError: If the vote has no voter
            RateLimitExceededError: If the voter is over their vote quota
        """
        if not request.user_id:
            raise ValueError("A voter is required to vote")

        self.rate_limiter.check_rate_limit(
            request.user_id,
            VOTE_ACTION,
            limit=self.rate_limit_settings.vote_limit,
        )

        post_id = PostId(request.post_id)
        await self.score_service.update_score(
            VoteEvent(
                post_id=post_id,
                user_id=UserId(request.user_id),
                type=request.type,
            )
        )

        post = await self.score_service.try_get_post_score(post_id)
        return SubmitVoteResponse(
            post_id=request.post_id,
            type=request.type,
            score=PostScoreResponse.from_domain(post) if post else None,
        )
