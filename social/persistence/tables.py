"""SQLAlchemy Core table definitions.

These tables match the schema defined in the Alembic migrations. Column
types are the generic SQLAlchemy ones so the same metadata serves
PostgreSQL in production and SQLite in tests.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("avatar", Text, nullable=True),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

# Window ordering: newest first, id breaks ties
Index("idx_posts_created_at_id", posts_table.c.created_at.desc(), posts_table.c.id.desc())
Index("idx_posts_user_id", posts_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "comment_id",
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("message", Text, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_replies_comment_id", replies_table.c.comment_id, replies_table.c.created_at)

# ============================================================================
# POST_LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

Index("idx_post_likes_user_id", post_likes_table.c.user_id)

# ============================================================================
# COMMENT_LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "comment_id",
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_likes_comment_user"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "follower_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "followed_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("follower_id", "followed_id", name="uq_follows_follower_followed"),
)

Index("idx_follows_followed_id", follows_table.c.followed_id)
