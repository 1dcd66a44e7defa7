"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core and the row mappers.
They match the schema defined in Alembic migrations.

Users live in the auth service, so ``user_id`` columns carry no foreign key.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False, server_default=""),  # Denormalized
    Column("avatar", Text, nullable=False, server_default=""),  # Denormalized
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_user_id", posts_table.c.user_id)

# ============================================================================
# POST LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    # Insertion order; likes are listed newest first
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_like"),
)

Index("idx_post_likes_post_id", post_likes_table.c.post_id)

# ============================================================================
# POST COMMENTS TABLE
# ============================================================================
post_comments_table = Table(
    "post_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False, server_default=""),
    Column("avatar", Text, nullable=False, server_default=""),
    # Insertion order; comments are listed newest first
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_post_comments_post_id", post_comments_table.c.post_id)
