"""SQLAlchemy table definitions for snippet comments.

These tables are used with SQLAlchemy Core and manual mapping.
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
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SNIPPETS TABLE (owned by the snippet service, read here for visibility)
# ============================================================================
snippets_table = Table(
    "snippets",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("owner_id", UUID, nullable=False),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column("title", String(200), nullable=False, server_default=""),
    Column("language", String(50), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_snippets_owner_id", snippets_table.c.owner_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    # Insertion order, used to keep listing order stable for equal created_at
    Column("seq", BigInteger, Identity(always=True), nullable=False, unique=True),
    Column(
        "snippet_id",
        UUID,
        ForeignKey("snippets.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=True),  # NULL for anonymous authors
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("body", Text, nullable=False),
    Column(
        "status",
        Enum("visible", "hidden", name="comment_status", create_type=False),
        nullable=False,
        server_default="visible",
    ),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
)

Index(
    "idx_comments_snippet_created",
    comments_table.c.snippet_id,
    comments_table.c.created_at,
)
Index(
    "idx_comments_parent_created",
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)

# ============================================================================
# COMMENT FLAGS TABLE
# ============================================================================
comment_flags_table = Table(
    "comment_flags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reporter_user_id", UUID, nullable=True),  # NULL for anonymous flags
    Column(
        "reason",
        Enum(
            "spam", "abuse", "off-topic", "other",
            name="comment_flag_reason",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("message", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comment_flags_comment_id", comment_flags_table.c.comment_id)
Index("idx_comment_flags_reporter", comment_flags_table.c.reporter_user_id)
# Anonymous flags share reporter_user_id=NULL and must still collide
Index(
    "uq_comment_flags_comment_reporter_reason",
    comment_flags_table.c.comment_id,
    comment_flags_table.c.reporter_user_id,
    comment_flags_table.c.reason,
    unique=True,
    postgresql_nulls_not_distinct=True,
)
