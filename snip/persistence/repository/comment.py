"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from snip.domain.model import Comment
from snip.domain.repository import CommentRepository
from snip.domain.value import CommentId, SnippetId, SortOrder
from snip.persistence.mappers import comment_to_dict, row_to_comment
from snip.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _live_level(self, stmt, snippet_id: SnippetId, parent_id: CommentId | None):
        stmt = stmt.where(comments_table.c.snippet_id == snippet_id).where(
            comments_table.c.deleted_at.is_(None)
        )
        if parent_id is None:
            return stmt.where(comments_table.c.parent_id.is_(None))
        return stmt.where(comments_table.c.parent_id == parent_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def list_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
        order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """List non-deleted comments of one thread level."""
        stmt = self._live_level(select(comments_table), snippet_id, parent_id)

        created = comments_table.c.created_at
        # Ties stay in insertion order in both directions
        stmt = stmt.order_by(
            created.desc() if order == SortOrder.DESC else created.asc(),
            comments_table.c.seq.asc(),
        )
        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count non-deleted comments of one thread level."""
        stmt = self._live_level(
            select(func.count()).select_from(comments_table), snippet_id, parent_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def update_body(
        self, comment_id: CommentId, body: str
    ) -> Optional[Comment]:
        """Replace the body of a comment and stamp edited_at."""
        now = datetime.now()
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(body=body, edited_at=now, updated_at=now)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Set deleted_at unless it is already set."""
        now = datetime.now()
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(reply_count=comments_table.c.reply_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Atomically decrement reply_count by 1 (minimum 0)."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                reply_count=func.greatest(comments_table.c.reply_count - 1, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
