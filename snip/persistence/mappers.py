"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from snip.domain.model import Comment, CommentFlag, Snippet
from snip.domain.value import (
    CommentFlagId,
    CommentId,
    CommentStatus,
    FlagReason,
    SnippetId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value else None


def row_to_snippet(row: Dict[str, Any]) -> Snippet:
    """Convert database row to Snippet domain model.

    Args:
        row: Database row as dict

    Returns:
        Snippet domain model
    """
    return Snippet(
        id=SnippetId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        is_public=row["is_public"],
        title=row.get("title") or "",
        language=row.get("language"),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    author_id = _optional_uuid(row.get("author_id"))
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        snippet_id=SnippetId(_uuid(row["snippet_id"])),
        author_id=UserId(author_id) if author_id else None,
        parent_id=CommentId(parent_id) if parent_id else None,
        body=row["body"],
        status=CommentStatus(row["status"]),
        reply_count=row["reply_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        edited_at=row.get("edited_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Enums are stored by value.
    """
    return comment.model_dump(mode="python") | {"status": comment.status.value}


def row_to_comment_flag(row: Dict[str, Any]) -> CommentFlag:
    """Convert database row to CommentFlag domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentFlag domain model
    """
    reporter = _optional_uuid(row.get("reporter_user_id"))
    return CommentFlag(
        id=CommentFlagId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_user_id=UserId(reporter) if reporter else None,
        reason=FlagReason(row["reason"]),
        message=row.get("message"),
        created_at=row["created_at"],
    )


def comment_flag_to_dict(flag: CommentFlag) -> Dict[str, Any]:
    """Convert CommentFlag domain model to database dict."""
    return flag.model_dump() | {"reason": flag.reason.value}
