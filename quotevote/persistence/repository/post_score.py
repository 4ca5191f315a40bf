"""PostgreSQL implementation of PostScore repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, desc, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from quotevote.domain.model import PostScore, VoteRecord
from quotevote.domain.repository.post_score import PostScoreRepository
from quotevote.domain.value import PostId
from quotevote.persistence.mappers import (
    post_score_to_dict,
    row_to_post_score,
    voted_by_to_json,
)
from quotevote.persistence.tables import posts_table


class PostgresPostScoreRepository(PostScoreRepository):
    """PostgreSQL implementation of PostScoreRepository.

    Scoring reads and writes run inside a SAVEPOINT so a failed statement
    rolls back on its own without poisoning the request's transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[PostScore]:
        """Find a post's score state by ID."""
        with logfire.span("post_score_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == str(post_id))
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
            return row_to_post_score(row._asdict()) if row else None

    async def find_active_since(
        self, post_id: PostId, window_start: datetime, now: datetime
    ) -> Optional[PostScore]:
        """Find a post whose point_timestamp lies in [window_start, now)."""
        stmt = select(posts_table).where(
            and_(
                posts_table.c.id == str(post_id),
                posts_table.c.point_timestamp >= window_start,
                posts_table.c.point_timestamp < now,
            )
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post_score(row._asdict()) if row else None

    async def save(self, post_score: PostScore) -> PostScore:
        """Insert or replace a post's score state."""
        values = post_score_to_dict(post_score)
        stmt = pg_insert(posts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return post_score

    async def update_tally(
        self,
        post_id: PostId,
        voted_by: Sequence[VoteRecord],
        upvotes: int,
        downvotes: int,
    ) -> None:
        """Overwrite voters and totals in one UPDATE."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == str(post_id))
            .values(
                voted_by=voted_by_to_json(voted_by),
                upvotes=upvotes,
                downvotes=downvotes,
            )
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def update_trending(
        self, post_id: PostId, day_points: int, point_timestamp: datetime
    ) -> None:
        """Overwrite the trending counter and timestamp."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == str(post_id))
            .values(day_points=day_points, point_timestamp=point_timestamp)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def find_trending(
        self, since: datetime, limit: int = 30, offset: int = 0
    ) -> List[PostScore]:
        """Find warm posts, hottest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.point_timestamp >= since)
            .order_by(desc(posts_table.c.day_points), desc(posts_table.c.point_timestamp))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_score(row._asdict()) for row in result.fetchall()]
