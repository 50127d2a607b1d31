"""Domain value objects for snippet comments."""

from snip.domain.value.identifiers import (
    CommentFlagId,
    CommentId,
    SnippetId,
    UserId,
)
from snip.domain.value.types import (
    Caller,
    CommentStatus,
    FlagReason,
    PageMeta,
    Role,
    SortOrder,
)

__all__ = [
    # Identifiers
    "UserId",
    "SnippetId",
    "CommentId",
    "CommentFlagId",
    # Types
    "Caller",
    "CommentStatus",
    "FlagReason",
    "PageMeta",
    "Role",
    "SortOrder",
]
