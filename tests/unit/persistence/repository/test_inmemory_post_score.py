"""Unit tests for InMemoryPostScoreRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from quotevote.domain.model import VoteRecord
from quotevote.domain.value import PostId, UserId, VoteType
from quotevote.persistence.repository.inmemory import InMemoryPostScoreRepository
from tests.conftest import make_post_score

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo() -> InMemoryPostScoreRepository:
    return InMemoryPostScoreRepository()


class TestFindActiveSince:
    """Tests for the trending window lookup."""

    @pytest.mark.asyncio
    async def test_inside_window(self, repo):
        await repo.save(make_post_score("P1", day_points=3, point_timestamp=NOW - timedelta(hours=1)))

        post = await repo.find_active_since(PostId("P1"), NOW - timedelta(hours=24), NOW)

        assert post is not None
        assert post.day_points == 3

    @pytest.mark.asyncio
    async def test_lower_bound_inclusive_upper_bound_exclusive(self, repo):
        start = NOW - timedelta(hours=24)
        await repo.save(make_post_score("lower", point_timestamp=start))
        await repo.save(make_post_score("upper", point_timestamp=NOW))

        assert await repo.find_active_since(PostId("lower"), start, NOW) is not None
        assert await repo.find_active_since(PostId("upper"), start, NOW) is None

    @pytest.mark.asyncio
    async def test_without_timestamp_or_post(self, repo):
        await repo.save(make_post_score("P1"))

        assert await repo.find_active_since(PostId("P1"), NOW - timedelta(hours=24), NOW) is None
        assert await repo.find_active_since(PostId("nope"), NOW - timedelta(hours=24), NOW) is None


class TestUpdates:
    """Tests for tally and trending writes."""

    @pytest.mark.asyncio
    async def test_update_tally_replaces_voters_and_totals(self, repo):
        # Arrange
        await repo.save(make_post_score("P1", day_points=2, point_timestamp=NOW))
        voters = [VoteRecord(user_id=UserId("U1"), type=VoteType.DOWN)]

        # Act
        await repo.update_tally(PostId("P1"), voters, upvotes=0, downvotes=1)

        # Assert
        post = await repo.find_by_id(PostId("P1"))
        assert post.voted_by == voters
        assert post.downvotes == 1
        assert post.day_points == 2
        assert post.point_timestamp == NOW

    @pytest.mark.asyncio
    async def test_update_trending_leaves_tally(self, repo):
        # Arrange
        await repo.save(make_post_score("P1", votes={"U1": VoteType.UP}))

        # Act
        await repo.update_trending(PostId("P1"), day_points=5, point_timestamp=NOW)

        # Assert
        post = await repo.find_by_id(PostId("P1"))
        assert post.day_points == 5
        assert post.point_timestamp == NOW
        assert post.upvotes == 1

    @pytest.mark.asyncio
    async def test_updates_on_missing_post_are_ignored(self, repo):
        await repo.update_tally(PostId("ghost"), [], upvotes=1, downvotes=0)
        await repo.update_trending(PostId("ghost"), day_points=1, point_timestamp=NOW)

        assert await repo.find_by_id(PostId("ghost")) is None


class TestFindTrending:
    """Tests for trending listing."""

    @pytest.mark.asyncio
    async def test_orders_and_paginates(self, repo):
        # Arrange
        for i, points in enumerate([4, 9, 1, 6]):
            await repo.save(
                make_post_score(f"P{i}", day_points=points, point_timestamp=NOW - timedelta(minutes=i))
            )
        await repo.save(make_post_score("stale", day_points=99, point_timestamp=NOW - timedelta(days=3)))

        # Act
        first_page = await repo.find_trending(since=NOW - timedelta(hours=24), limit=2)
        second_page = await repo.find_trending(since=NOW - timedelta(hours=24), limit=2, offset=2)

        # Assert
        assert [p.id for p in first_page] == ["P1", "P3"]
        assert [p.id for p in second_page] == ["P0", "P2"]
