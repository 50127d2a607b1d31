"""initial_schema

Create the schema for snippet comments:
- Snippets (read for visibility decisions, owned by the snippet service)
- Comments (flat rows with a parent pointer, soft delete, reply counters)
- Comment flags (moderation signals, one per comment/reporter/reason)

Revision ID: 3c1f0a7d9e42
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9e42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_status AS ENUM ('visible', 'hidden');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_flag_reason AS ENUM ('spam', 'abuse', 'off-topic', 'other');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # SNIPPETS table
    # ========================================================================
    op.create_table(
        "snippets",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("title", sa.String(200), nullable=False, server_default=""),
        sa.Column("language", sa.String(50), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_snippets_owner_id", "snippets", ["owner_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        # Insertion order, breaks created_at ties in listings
        sa.Column(
            "seq", sa.BigInteger(), sa.Identity(always=True), nullable=False
        ),
        sa.Column("snippet_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "visible", "hidden", name="comment_status", create_type=False
            ),
            nullable=False,
            server_default="visible",
        ),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["snippet_id"], ["snippets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("seq", name="uq_comments_seq"),
        sa.CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
    )
    op.create_index(
        "idx_comments_snippet_created", "comments", ["snippet_id", "created_at"]
    )
    op.create_index(
        "idx_comments_parent_created", "comments", ["parent_id", "created_at"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_status", "comments", ["status"])

    # ========================================================================
    # COMMENT_FLAGS table
    # ========================================================================
    op.create_table(
        "comment_flags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reporter_user_id", sa.UUID(), nullable=True),
        sa.Column(
            "reason",
            postgresql.ENUM(
                "spam",
                "abuse",
                "off-topic",
                "other",
                name="comment_flag_reason",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comment_flags_comment_id", "comment_flags", ["comment_id"])
    op.create_index(
        "idx_comment_flags_reporter", "comment_flags", ["reporter_user_id"]
    )
    # NULLS NOT DISTINCT (PostgreSQL 15+) so anonymous flags deduplicate
    op.create_index(
        "uq_comment_flags_comment_reporter_reason",
        "comment_flags",
        ["comment_id", "reporter_user_id", "reason"],
        unique=True,
        postgresql_nulls_not_distinct=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comment_flags")
    op.drop_table("comments")
    op.drop_table("snippets")
    op.execute("DROP TYPE IF EXISTS comment_flag_reason")
    op.execute("DROP TYPE IF EXISTS comment_status")
