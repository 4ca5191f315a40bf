"""Post score repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from quotevote.domain.model.post_score import PostScore
from quotevote.domain.model.vote import VoteRecord
from quotevote.domain.value import PostId


class PostScoreRepository(ABC):
    """Repository for the scoring fields of a post.

    Defines the contract for the document store the score engine reads
    and writes. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[PostScore]:
        """Find a post's score state by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The score state if the post exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_since(
        self, post_id: PostId, window_start: datetime, now: datetime
    ) -> Optional[PostScore]:
        """Find a post whose last trending update falls in a window.

        Matches only when ``window_start <= point_timestamp < now``.

        Args:
            post_id: The post's unique identifier
            window_start: Inclusive lower bound
            now: Exclusive upper bound

        Returns:
            The score state if the post was active in the window, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post_score: PostScore) -> PostScore:
        """Save a post's score state (create or replace).

        Args:
            post_score: The score state to save

        Returns:
            The saved score state
        """
        pass

    @abstractmethod
    async def update_tally(
        self,
        post_id: PostId,
        voted_by: Sequence[VoteRecord],
        upvotes: int,
        downvotes: int,
    ) -> None:
        """Overwrite the voter list and vote totals in a single write.

        No-op if the post does not exist.

        Args:
            post_id: The post ID
            voted_by: Full list of voters
            upvotes: New up vote total
            downvotes: New down vote total
        """
        pass

    @abstractmethod
    async def update_trending(
        self, post_id: PostId, day_points: int, point_timestamp: datetime
    ) -> None:
        """Overwrite the trending counter and its timestamp.

        No-op if the post does not exist.

        Args:
            post_id: The post ID
            day_points: New trending counter
            point_timestamp: Time of this trending update
        """
        pass

    @abstractmethod
    async def find_trending(
        self, since: datetime, limit: int = 30, offset: int = 0
    ) -> List[PostScore]:
        """Find posts updated since a point in time, hottest first.

        Ordered by day_points descending, then point_timestamp descending.

        Args:
            since: Only include posts with point_timestamp at or after this
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of score states
        """
        pass
