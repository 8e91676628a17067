"""SQLAlchemy table definitions for commentary.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (owned by the blog, read here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, Identity(start=1), primary_key=True),
    Column("title", String(100), nullable=False),
    Column("url", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    # Identity starts at 1: id 0 is the virtual root of comment trees
    Column("id", BigInteger, Identity(start=1), primary_key=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("parent_id", BigInteger, nullable=False, server_default="0"),  # 0 = top-level
    Column("author", String(50), nullable=False),
    Column("email", String(255), nullable=False),
    Column("author_url", String(127), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "status",
        Enum(
            "published",
            "auditing",
            "recycle",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="auditing",
    ),
    Column("ip_address", String(127), nullable=True),
    Column("user_agent", String(512), nullable=True),
    Column("gravatar_md5", String(128), nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("parent_id >= 0", name="parent_id_non_negative"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_status", comments_table.c.status)
Index("idx_comments_created_at", comments_table.c.created_at.desc())
