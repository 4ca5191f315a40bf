"""In-memory repository implementations for testing."""

from .post_score import InMemoryPostScoreRepository

__all__ = [
    "InMemoryPostScoreRepository",
]
