"""Comment entity.

Comments form a flat collection with a nullable parent pointer. A thread
is rebuilt one level at a time by listing the children of a parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from snip.domain.model.common import DomainModel
from snip.domain.value import CommentId, CommentStatus, SnippetId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a snippet or a reply to another comment on
    the same snippet.

    Lifecycle has two independent axes:
    - deletion: deleted_at is set once by a soft delete and never cleared
    - visibility: status moves to HIDDEN through external moderation

    A soft-deleted comment keeps its row and its children keep pointing
    at it, so the thread shape survives deletion.
    """

    id: CommentId
    snippet_id: SnippetId
    author_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    body: str = Field(min_length=1)
    status: CommentStatus = CommentStatus.VISIBLE
    reply_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def is_publicly_visible(self) -> bool:
        """Whether anyone who can read the snippet may see this comment."""
        return not self.is_deleted and self.status == CommentStatus.VISIBLE
