"""Post score routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from quotevote.application.usecase.post import (
    GetPostScoreRequest,
    GetPostScoreUseCase,
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
    PostScoreResponse,
)
from quotevote.domain.error import NotFoundError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/trending", response_model=ListTrendingResponse)
async def list_trending(
    list_trending_use_case: FromDishka[ListTrendingUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListTrendingResponse:
    """List posts active in the trending window, hottest first.

    Args:
        list_trending_use_case: List trending use case from DI
        limit: Page size (defaults to the configured page size)
        offset: Number of posts to skip

    Returns:
        Trending posts
    """
    return await list_trending_use_case.execute(
        ListTrendingRequest(limit=limit, offset=offset)
    )


@router.get("/{post_id}/score", response_model=PostScoreResponse)
async def get_post_score(
    post_id: str,
    get_post_score_use_case: FromDishka[GetPostScoreUseCase],
) -> PostScoreResponse:
    """Get a post's vote tallies and trending counter.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_post_score_use_case.execute(
            GetPostScoreRequest(post_id=post_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
