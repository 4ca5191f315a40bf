"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

import logfire

from quotevote.domain.model import PostScore, VoteRecord
from quotevote.domain.value import PostId, UserId, VoteType
from quotevote.persistence.repository.inmemory import InMemoryPostScoreRepository

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


class FakeClock:
    """Settable wall clock returning aware UTC datetimes."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class FakeTimer:
    """Settable monotonic clock in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_post_score(
    post_id: str = "P1",
    votes: Optional[dict[str, VoteType]] = None,
    day_points: int = 0,
    point_timestamp: Optional[datetime] = None,
) -> PostScore:
    """Helper to build a post whose totals agree with its voters.

    Args:
        post_id: Post ID
        votes: Mapping of user ID to vote type
        day_points: Trending counter
        point_timestamp: Last trending update

    Returns:
        PostScore with consistent upvotes/downvotes
    """
    votes = votes or {}
    voted_by = [
        VoteRecord(user_id=UserId(user_id), type=vote_type)
        for user_id, vote_type in votes.items()
    ]
    return PostScore(
        id=PostId(post_id),
        voted_by=voted_by,
        upvotes=sum(1 for t in votes.values() if t == VoteType.UP),
        downvotes=sum(1 for t in votes.values() if t == VoteType.DOWN),
        day_points=day_points,
        point_timestamp=point_timestamp,
    )


class FailingPostScoreRepository(InMemoryPostScoreRepository):
    """Repository whose reads or writes blow up on demand."""

    def __init__(self, fail_reads: bool = False, fail_writes: bool = False) -> None:
        super().__init__()
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = 0

    async def find_by_id(self, post_id: PostId) -> Optional[PostScore]:
        if self.fail_reads:
            raise ConnectionError("store unavailable")
        return await super().find_by_id(post_id)

    async def update_tally(
        self,
        post_id: PostId,
        voted_by: Sequence[VoteRecord],
        upvotes: int,
        downvotes: int,
    ) -> None:
        self.writes += 1
        if self.fail_writes:
            raise ConnectionError("store unavailable")
        await super().update_tally(post_id, voted_by, upvotes, downvotes)

    async def update_trending(
        self, post_id: PostId, day_points: int, point_timestamp: datetime
    ) -> None:
        self.writes += 1
        if self.fail_writes:
            raise ConnectionError("store unavailable")
        await super().update_trending(post_id, day_points, point_timestamp)
