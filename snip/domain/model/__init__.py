"""Domain model entities for snippet comments."""

from snip.domain.model.comment import Comment
from snip.domain.model.comment_flag import CommentFlag
from snip.domain.model.snippet import Snippet

__all__ = [
    "Comment",
    "CommentFlag",
    "Snippet",
]
