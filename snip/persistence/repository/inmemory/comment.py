"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from snip.domain.model.comment import Comment
from snip.domain.repository.comment import CommentRepository
from snip.domain.value import CommentId, SnippetId, SortOrder


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    The dict keeps insertion order, which stands in for the seq column.
    Each mutation is a single synchronous replace with no await in
    between, so concurrent coroutines cannot interleave inside one.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _live_level(
        self, snippet_id: SnippetId, parent_id: CommentId | None
    ) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.snippet_id == snippet_id
            and c.parent_id == parent_id
            and c.deleted_at is None
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def list_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
        order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """List non-deleted comments of one thread level."""
        comments = self._live_level(snippet_id, parent_id)

        # Stable sort keeps insertion order for equal created_at
        comments.sort(key=lambda c: c.created_at, reverse=order == SortOrder.DESC)

        # Paginate
        return comments[offset : offset + limit]

    async def count_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count non-deleted comments of one thread level."""
        return len(self._live_level(snippet_id, parent_id))

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_body(
        self, comment_id: CommentId, body: str
    ) -> Optional[Comment]:
        """Replace the body of a comment and stamp edited_at."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        now = datetime.now()
        updated = comment.model_copy(
            update={"body": body, "edited_at": now, "updated_at": now}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Set deleted_at unless it is already set."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return False
        now = datetime.now()
        self._comments[comment_id] = comment.model_copy(
            update={"deleted_at": now, "updated_at": now}
        )
        return True

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"reply_count": comment.reply_count + 1}
            )

    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Atomically decrement reply_count by 1 (minimum 0)."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"reply_count": max(comment.reply_count - 1, 0)}
            )
