"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_flag import InMemoryCommentFlagRepository
from .snippet import InMemorySnippetRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentFlagRepository",
    "InMemorySnippetRepository",
]
