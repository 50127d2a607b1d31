"""Repository interfaces for the snippet comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from snip.domain.repository.comment import CommentRepository
from snip.domain.repository.comment_flag import CommentFlagRepository
from snip.domain.repository.snippet import SnippetRepository

__all__ = [
    "CommentRepository",
    "CommentFlagRepository",
    "SnippetRepository",
]
