"""SQLAlchemy table definitions for Quote.Vote.

Only the scoring columns of the posts table are declared here; the rest
of the post document belongs to the content side of the application.
"""

from sqlalchemy import CheckConstraint, Column, Index, Integer, MetaData, String, Table
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (scoring columns)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(64), primary_key=True),
    # [{"user_id": "...", "type": "up" | "down"}, ...], one entry per voter
    Column("voted_by", JSONB, nullable=False, server_default="[]"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("day_points", Integer, nullable=False, server_default="0"),
    Column("point_timestamp", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvotes >= 0", name="check_posts_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="check_posts_downvotes_non_negative"),
    CheckConstraint("day_points >= 0", name="check_posts_day_points_non_negative"),
)

# Trending listing: hottest first, most recent breaks ties
Index(
    "idx_posts_trending",
    posts_table.c.day_points.desc(),
    posts_table.c.point_timestamp.desc(),
)
