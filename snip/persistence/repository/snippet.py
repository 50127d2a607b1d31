"""PostgreSQL implementation of Snippet repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snip.domain.model import Snippet
from snip.domain.repository import SnippetRepository
from snip.domain.value import SnippetId
from snip.persistence.mappers import row_to_snippet
from snip.persistence.tables import snippets_table


class PostgresSnippetRepository(SnippetRepository):
    """Reads the snippets table; rows are written by the snippet service."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID."""
        stmt = select(snippets_table).where(snippets_table.c.id == snippet_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_snippet(row._asdict()) if row else None
