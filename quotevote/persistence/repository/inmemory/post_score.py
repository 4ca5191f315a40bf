"""In-memory post score repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from quotevote.domain.model.post_score import PostScore
from quotevote.domain.model.vote import VoteRecord
from quotevote.domain.repository.post_score import PostScoreRepository
from quotevote.domain.value import PostId


class InMemoryPostScoreRepository(PostScoreRepository):
    """In-memory implementation of PostScoreRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[str, PostScore] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[PostScore]:
        """Find a post's score state by ID."""
        return self._posts.get(str(post_id))

    async def find_active_since(
        self, post_id: PostId, window_start: datetime, now: datetime
    ) -> Optional[PostScore]:
        """Find a post whose point_timestamp lies in [window_start, now)."""
        post = self._posts.get(str(post_id))
        if post is None or post.point_timestamp is None:
            return None
        if window_start <= post.point_timestamp < now:
            return post
        return None

    async def save(self, post_score: PostScore) -> PostScore:
        """Save or replace a post's score state."""
        self._posts[str(post_score.id)] = post_score
        return post_score

    async def update_tally(
        self,
        post_id: PostId,
        voted_by: Sequence[VoteRecord],
        upvotes: int,
        downvotes: int,
    ) -> None:
        """Overwrite voters and totals (posts are immutable, so replace)."""
        post = self._posts.get(str(post_id))
        if post:
            self._posts[str(post_id)] = post.model_copy(
                update={
                    "voted_by": list(voted_by),
                    "upvotes": upvotes,
                    "downvotes": downvotes,
                }
            )

    async def update_trending(
        self, post_id: PostId, day_points: int, point_timestamp: datetime
    ) -> None:
        """Overwrite the trending counter and timestamp."""
        post = self._posts.get(str(post_id))
        if post:
            self._posts[str(post_id)] = post.model_copy(
                update={"day_points": day_points, "point_timestamp": point_timestamp}
            )

    async def find_trending(
        self, since: datetime, limit: int = 30, offset: int = 0
    ) -> list[PostScore]:
        """Find warm posts, hottest first."""
        posts = [
            p
            for p in self._posts.values()
            if p.point_timestamp is not None and p.point_timestamp >= since
        ]
        posts.sort(key=lambda p: (p.day_points, p.point_timestamp), reverse=True)

        # Paginate
        return posts[offset : offset + limit]
