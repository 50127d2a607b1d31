"""PostgreSQL repository implementations."""

from snip.persistence.repository.comment import PostgresCommentRepository
from snip.persistence.repository.comment_flag import PostgresCommentFlagRepository
from snip.persistence.repository.snippet import PostgresSnippetRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommentFlagRepository",
    "PostgresSnippetRepository",
]
