"""Score domain service.

Keeps a post's vote tallies and its trending counter in step with the
votes that arrive. Scoring is best-effort: failures are logged and never
reach the caller, so a vote submission is never blocked by scoring.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import logfire

from quotevote.config import ScoringSettings
from quotevote.domain.model.post_score import PostScore
from quotevote.domain.model.vote import VoteEvent, VoteRecord
from quotevote.domain.repository import PostScoreRepository
from quotevote.domain.value import PostId, VoteType, same_id

from .base import Service


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ScoreService(Service):
    """Domain service for vote tallies and trending."""

    def __init__(
        self,
        post_score_repository: PostScoreRepository,
        settings: ScoringSettings,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize score service.

        Args:
            post_score_repository: Post score repository
            settings: Scoring settings
            clock: Source of "now", defaults to UTC wall clock
        """
        self.post_score_repository = post_score_repository
        super().__init__(clock or utc_now)
        self.settings = settings

    @property
    def trending_window(self) -> timedelta:
        return timedelta(hours=self.settings.trending_window_hours)

    async def update_score(self, vote: VoteEvent) -> None:
        """Apply a vote to the post's tallies.

        A first-time voter is appended to voted_by and advances trending.
        A returning voter has their record switched to the new type.

        Never raises: missing posts and store failures are logged.

        Args:
            vote: The submitted vote
        """
        with logfire.span(
            "score_service.update_score",
            post_id=vote.post_id,
            user_id=vote.user_id,
            vote_type=vote.type.value,
        ):
            try:
                post = await self.post_score_repository.find_by_id(vote.post_id)
                if post is None:
                    logfire.warn("Vote for missing post", post_id=vote.post_id)
                    return

                voted_by = list(post.voted_by)
                existing_index = next(
                    (
                        i
                        for i, record in enumerate(voted_by)
                        if same_id(record.user_id, vote.user_id)
                    ),
                    None,
                )

                if existing_index is None:
                    voted_by.append(VoteRecord(user_id=vote.user_id, type=vote.type))
                    upvotes, downvotes = self._bump(post, vote.type)
                    await self.post_score_repository.update_tally(
                        vote.post_id, voted_by, upvotes, downvotes
                    )
                    await self.update_trending(vote.post_id)
                else:
                    previous = voted_by[existing_index].type
                    if previous == vote.type and not self.settings.legacy_vote_change_counts:
                        logfire.debug(
                            "Vote unchanged",
                            post_id=vote.post_id,
                            user_id=vote.user_id,
                        )
                        return

                    voted_by[existing_index] = VoteRecord(
                        user_id=vote.user_id, type=vote.type
                    )
                    upvotes, downvotes = self._bump(post, vote.type)
                    if not self.settings.legacy_vote_change_counts:
                        upvotes, downvotes = self._drop(upvotes, downvotes, previous)
                    await self.post_score_repository.update_tally(
                        vote.post_id, voted_by, upvotes, downvotes
                    )

                logfire.debug(
                    "Score updated",
                    post_id=vote.post_id,
                    upvotes=upvotes,
                    downvotes=downvotes,
                )
            except Exception as e:
                logfire.error(
                    "Failed to update score",
                    post_id=vote.post_id,
                    vote=vote.model_dump(mode="json"),
                    error=str(e),
                    _exc_info=True,
                )

    async def update_trending(self, post_id: PostId) -> None:
        """Advance the post's trending counter.

        If the last trending update is inside the trailing window the
        counter grows by one, otherwise it restarts at 1. Either way the
        timestamp moves to now.

        Never raises: store failures are logged.

        Args:
            post_id: Post ID
        """
        with logfire.span("score_service.update_trending", post_id=post_id):
            try:
                now = self.now()
                window_start = now - self.trending_window

                recent = await self.post_score_repository.find_active_since(
                    post_id, window_start, now
                )
                day_points = recent.day_points + 1 if recent else 1

                await self.post_score_repository.update_trending(
                    post_id, day_points=day_points, point_timestamp=now
                )
                logfire.debug(
                    "Trending updated",
                    post_id=post_id,
                    day_points=day_points,
                    warm=recent is not None,
                )
            except Exception as e:
                logfire.error(
                    "Failed to update trending",
                    post_id=post_id,
                    error=str(e),
                    _exc_info=True,
                )

    async def get_post_score(self, post_id: PostId) -> PostScore | None:
        """Get a post's score state.

        Args:
            post_id: Post ID

        Returns:
            Score state if found, None otherwise
        """
        return await self.post_score_repository.find_by_id(post_id)

    async def try_get_post_score(self, post_id: PostId) -> PostScore | None:
        """Get a post's score state, logging store failures instead of raising.

        Used to read back a score after a vote, where a failed read must not
        fail the vote.
        """
        try:
            return await self.post_score_repository.find_by_id(post_id)
        except Exception as e:
            logfire.error(
                "Failed to read post score",
                post_id=post_id,
                error=str(e),
                _exc_info=True,
            )
            return None

    async def list_trending(
        self, limit: int | None = None, offset: int = 0
    ) -> list[PostScore]:
        """List posts that are warm in the trending window, hottest first.

        Args:
            limit: Page size, defaults to the configured trending page size
            offset: Number of posts to skip

        Returns:
            Score states ordered by day_points, then recency
        """
        since = self.now() - self.trending_window
        return await self.post_score_repository.find_trending(
            since=since,
            limit=limit or self.settings.trending_page_size,
            offset=offset,
        )

    @staticmethod
    def _bump(post: PostScore, vote_type: VoteType) -> tuple[int, int]:
        if vote_type == VoteType.UP:
            return post.upvotes + 1, post.downvotes
        return post.upvotes, post.downvotes + 1

    @staticmethod
    def _drop(upvotes: int, downvotes: int, vote_type: VoteType) -> tuple[int, int]:
        if vote_type == VoteType.UP:
            return max(upvotes - 1, 0), downvotes
        return upvotes, max(downvotes - 1, 0)
