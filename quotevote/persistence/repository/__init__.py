"""PostgreSQL repository implementations."""

from quotevote.persistence.repository.post_score import PostgresPostScoreRepository

__all__ = [
    "PostgresPostScoreRepository",
]
