"""Unit tests for SubmitVoteUseCase."""

import pytest

from quotevote.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from quotevote.config import RateLimitSettings, ScoringSettings
from quotevote.domain.error import RateLimitExceededError
from quotevote.domain.repository import PostScoreRepository
from quotevote.domain.service import RateLimiter, ScoreService
from quotevote.domain.value import PostId, VoteType
from tests.conftest import FailingPostScoreRepository, make_post_score
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSubmitVoteUseCase:
    """Tests for SubmitVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_updates_score(self, unit_env):
        """A first vote should be tallied and returned."""
        # Arrange
        post_repo = await unit_env.get(PostScoreRepository)
        await post_repo.save(make_post_score("P1"))
        use_case = await unit_env.get(SubmitVoteUseCase)

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(post_id="P1", user_id="U1", type=VoteType.UP)
        )

        # Assert
        assert response.post_id == "P1"
        assert response.type == VoteType.UP
        assert response.score.upvotes == 1
        assert response.score.net_score == 1
        assert response.score.voter_count == 1
        assert response.score.day_points == 1

    @pytest.mark.asyncio
    async def test_vote_change_is_reflected(self, unit_env):
        """Switching a vote moves it between buckets."""
        # Arrange
        post_repo = await unit_env.get(PostScoreRepository)
        await post_repo.save(make_post_score("P1", votes={"U1": VoteType.UP}))
        use_case = await unit_env.get(SubmitVoteUseCase)

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(post_id="P1", user_id="U1", type=VoteType.DOWN)
        )

        # Assert
        assert response.score.upvotes == 0
        assert response.score.downvotes == 1
        assert response.score.net_score == -1

    @pytest.mark.asyncio
    async def test_missing_post_returns_no_score(self, unit_env):
        """Voting on an unknown post succeeds without a score."""
        # Arrange
        use_case = await unit_env.get(SubmitVoteUseCase)

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(post_id="ghost", user_id="U1", type=VoteType.UP)
        )

        # Assert
        assert response.score is None
        post_repo = await unit_env.get(PostScoreRepository)
        assert await post_repo.find_by_id(PostId("ghost")) is None

    @pytest.mark.asyncio
    async def test_anonymous_vote_rejected(self, unit_env):
        """Votes need a voter."""
        # Arrange
        use_case = await unit_env.get(SubmitVoteUseCase)
        rate_limiter = await unit_env.get(RateLimiter)

        # Act & Assert
        with pytest.raises(ValueError, match="voter is required"):
            await use_case.execute(
                SubmitVoteRequest(post_id="P1", user_id=None, type=VoteType.UP)
            )
        assert len(rate_limiter) == 0

    @pytest.mark.asyncio
    async def test_vote_quota_enforced(self, unit_env):
        """Votes past the quota are rejected and not tallied."""
        # Arrange
        post_repo = await unit_env.get(PostScoreRepository)
        settings = await unit_env.get(RateLimitSettings)
        use_case = await unit_env.get(SubmitVoteUseCase)
        for i in range(settings.vote_limit):
            await post_repo.save(make_post_score(f"P{i}"))
            await use_case.execute(
                SubmitVoteRequest(post_id=f"P{i}", user_id="U1", type=VoteType.UP)
            )
        await post_repo.save(make_post_score("extra"))

        # Act & Assert
        with pytest.raises(RateLimitExceededError) as exc_info:
            await use_case.execute(
                SubmitVoteRequest(post_id="extra", user_id="U1", type=VoteType.UP)
            )
        assert exc_info.value.action == "vote"
        assert exc_info.value.retry_after > 0

        post = await post_repo.find_by_id(PostId("extra"))
        assert post.upvotes == 0

    @pytest.mark.asyncio
    async def test_quota_is_per_voter(self, unit_env):
        """Another voter is unaffected by someone else's quota."""
        # Arrange
        post_repo = await unit_env.get(PostScoreRepository)
        settings = await unit_env.get(RateLimitSettings)
        rate_limiter = await unit_env.get(RateLimiter)
        use_case = await unit_env.get(SubmitVoteUseCase)
        await post_repo.save(make_post_score("P1"))
        for _ in range(settings.vote_limit):
            rate_limiter.check_rate_limit("U1", "vote", limit=settings.vote_limit)

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(post_id="P1", user_id="U2", type=VoteType.UP)
        )

        # Assert
        assert response.score.upvotes == 1

    @pytest.mark.asyncio
    async def test_store_outage_still_accepts_vote(self):
        """A vote succeeds without a score when the store cannot be read."""
        # Arrange
        settings = RateLimitSettings()
        use_case = SubmitVoteUseCase(
            rate_limiter=RateLimiter(settings),
            score_service=ScoreService(
                FailingPostScoreRepository(fail_reads=True), ScoringSettings()
            ),
            rate_limit_settings=settings,
        )

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(post_id="P1", user_id="U1", type=VoteType.UP)
        )

        # Assert
        assert response.post_id == "P1"
        assert response.type == VoteType.UP
        assert response.score is None
