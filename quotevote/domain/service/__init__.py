"""Domain services."""

from .base import Service
from .rate_limiter import RateLimiter, resolve_actor_id
from .score_service import ScoreService

__all__ = [
    "RateLimiter",
    "ScoreService",
    "Service",
    "resolve_actor_id",
]
