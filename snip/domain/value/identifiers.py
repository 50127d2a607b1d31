"""Strongly typed identifiers for snippet-sharing domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
SnippetId = NewType("SnippetId", UUID)
CommentId = NewType("CommentId", UUID)
CommentFlagId = NewType("CommentFlagId", UUID)
