"""Domain layer DI providers."""

from dishka import Scope, provide

from quotevote.config import RateLimitSettings, ScoringSettings
from quotevote.domain.repository import PostScoreRepository
from quotevote.domain.service import RateLimiter, ScoreService
from quotevote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The score service is REQUEST-scoped to align with repository/session
    lifecycle. The rate limiter is APP-scoped: its window map is process-wide.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, settings: RateLimitSettings) -> RateLimiter:
        """Provide the process-wide rate limiter."""
        return RateLimiter(settings=settings)

    @provide
    def get_score_service(
        self,
        post_score_repository: PostScoreRepository,
        settings: ScoringSettings,
    ) -> ScoreService:
        """Provide score domain service."""
        return ScoreService(
            post_score_repository=post_score_repository, settings=settings
        )
