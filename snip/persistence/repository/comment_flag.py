"""PostgreSQL implementation of CommentFlag repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from snip.domain.model import CommentFlag
from snip.domain.repository import CommentFlagRepository
from snip.domain.value import CommentId, FlagReason, UserId
from snip.persistence.mappers import comment_flag_to_dict, row_to_comment_flag
from snip.persistence.tables import comment_flags_table


class PostgresCommentFlagRepository(CommentFlagRepository):
    """PostgreSQL implementation of CommentFlagRepository.

    Duplicate detection is left to the unique index on
    (comment_id, reporter_user_id, reason), declared NULLS NOT DISTINCT so
    that anonymous flags collide as well.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag unless an identical one exists."""
        stmt = (
            insert(comment_flags_table)
            .values(**comment_flag_to_dict(flag))
            .on_conflict_do_nothing()
            .returning(comment_flags_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def remove(
        self,
        comment_id: CommentId,
        reporter_user_id: Optional[UserId],
        reason: FlagReason,
    ) -> bool:
        """Delete the flag matching (comment, reporter, reason)."""
        reporter = comment_flags_table.c.reporter_user_id
        stmt = (
            delete(comment_flags_table)
            .where(comment_flags_table.c.comment_id == comment_id)
            .where(comment_flags_table.c.reason == reason.value)
            .where(
                reporter.is_(None)
                if reporter_user_id is None
                else reporter == reporter_user_id
            )
            .returning(comment_flags_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = len(result.fetchall()) > 0
        await self.session.flush()
        return removed

    async def find_by_comment(self, comment_id: CommentId) -> List[CommentFlag]:
        """Find all flags on a comment, oldest first."""
        stmt = (
            select(comment_flags_table)
            .where(comment_flags_table.c.comment_id == comment_id)
            .order_by(comment_flags_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_flag(row._asdict()) for row in result.fetchall()]
