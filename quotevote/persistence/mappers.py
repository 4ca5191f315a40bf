"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence

from quotevote.domain.model import PostScore, VoteRecord
from quotevote.domain.value import PostId, UserId, VoteType


def row_to_post_score(row: Dict[str, Any]) -> PostScore:
    """Convert database row to PostScore domain model.

    Args:
        row: Database row as dict

    Returns:
        PostScore domain model
    """
    return PostScore(
        id=PostId(str(row["id"])),
        voted_by=voted_by_from_json(row.get("voted_by") or []),
        upvotes=row.get("upvotes") or 0,
        downvotes=row.get("downvotes") or 0,
        day_points=row.get("day_points") or 0,
        point_timestamp=row.get("point_timestamp"),
    )


def post_score_to_dict(post_score: PostScore) -> Dict[str, Any]:
    """Convert PostScore domain model to database dict.

    Args:
        post_score: PostScore domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": str(post_score.id),
        "voted_by": voted_by_to_json(post_score.voted_by),
        "upvotes": post_score.upvotes,
        "downvotes": post_score.downvotes,
        "day_points": post_score.day_points,
        "point_timestamp": post_score.point_timestamp,
    }


def voted_by_from_json(items: Sequence[Dict[str, Any]]) -> list[VoteRecord]:
    """Convert the JSONB voter list to vote records.

    Accepts both ``user_id`` and the legacy ``userId`` key.
    """
    return [
        VoteRecord(
            user_id=UserId(str(item.get("user_id", item.get("userId")))),
            type=VoteType(item["type"]),
        )
        for item in items
    ]


def voted_by_to_json(records: Sequence[VoteRecord]) -> list[Dict[str, str]]:
    """Convert vote records to the JSONB voter list."""
    return [{"user_id": str(r.user_id), "type": r.type.value} for r in records]
