"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from snip.domain.model import Comment


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    snippet_id: str
    author_id: str | None
    parent_id: str | None
    body: str
    status: str
    reply_count: int
    created_at: datetime
    updated_at: datetime
    edited_at: datetime | None
    deleted_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            snippet_id=str(comment.snippet_id),
            author_id=str(comment.author_id) if comment.author_id else None,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            body=comment.body,
            status=comment.status.value,
            reply_count=comment.reply_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            edited_at=comment.edited_at,
            deleted_at=comment.deleted_at,
        )
