"""Application layer DI providers."""

from dishka import Scope, provide

from quotevote.application.usecase.post import (
    GetPostScoreUseCase,
    ListTrendingUseCase,
)
from quotevote.application.usecase.vote import SubmitVoteUseCase
from quotevote.config import RateLimitSettings
from quotevote.domain.service import RateLimiter, ScoreService
from quotevote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(
        self,
        rate_limiter: RateLimiter,
        score_service: ScoreService,
        rate_limit_settings: RateLimitSettings,
    ) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(
            rate_limiter=rate_limiter,
            score_service=score_service,
            rate_limit_settings=rate_limit_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_post_score_use_case(
        self, score_service: ScoreService
    ) -> GetPostScoreUseCase:
        """Provide get post score use case."""
        return GetPostScoreUseCase(score_service=score_service)

    @provide(scope=Scope.REQUEST)
    def get_list_trending_use_case(
        self, score_service: ScoreService
    ) -> ListTrendingUseCase:
        """Provide list trending use case."""
        return ListTrendingUseCase(score_service=score_service)
