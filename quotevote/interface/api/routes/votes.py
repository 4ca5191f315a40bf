"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from quotevote.application.usecase.vote import (
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from quotevote.domain.error import RateLimitExceededError
from quotevote.domain.value import VoteType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    user_id: str | None = None
    type: VoteType


@router.post("/posts/{post_id}/vote", response_model=SubmitVoteResponse)
async def vote_on_post(
    post_id: str,
    request: VoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
) -> SubmitVoteResponse:
    """Vote on a post.

    Args:
        post_id: Post ID
        request: Voter and vote direction
        submit_vote_use_case: Submit vote use case from DI

    Returns:
        The post's score after the vote

    Raises:
        HTTPException: 429 when the voter is over quota, 400 on invalid votes
    """
    try:
        return await submit_vote_use_case.execute(
            SubmitVoteRequest(
                post_id=post_id,
                user_id=request.user_id,
                type=request.type,
            )
        )
    except RateLimitExceededError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(e.retry_after)},
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
