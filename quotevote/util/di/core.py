"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quotevote.config import RateLimitSettings, ScoringSettings, Settings
from quotevote.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_scoring_settings(self, settings: Settings) -> ScoringSettings:
        """Provide scoring settings."""
        return settings.scoring

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limit
