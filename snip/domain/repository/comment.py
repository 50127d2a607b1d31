"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from snip.domain.model.comment import Comment
from snip.domain.value import CommentId, SnippetId, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including deleted and hidden comments.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
        order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """List non-deleted comments of one thread level.

        Sorted by created_at in the given direction, ties kept in
        insertion order.

        Args:
            snippet_id: The snippet ID
            parent_id: Parent comment ID, or None for top-level comments
            order: Sort direction on created_at
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_live(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count non-deleted comments matching the list_live filter.

        Args:
            snippet_id: The snippet ID
            parent_id: Parent comment ID, or None for top-level comments

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_body(
        self, comment_id: CommentId, body: str
    ) -> Optional[Comment]:
        """Replace the body and stamp edited_at.

        Args:
            comment_id: The comment ID
            body: New body text

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Set deleted_at if it is not already set.

        The check and the write happen in one conditional update, so two
        concurrent deletes of the same comment see exactly one True.

        Args:
            comment_id: The comment ID

        Returns:
            True if this call deleted the comment, False if it was already
            deleted or does not exist
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1.

        Args:
            comment_id: The parent comment ID
        """
        pass

    @abstractmethod
    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Atomically decrement reply_count by 1 (minimum 0).

        Args:
            comment_id: The parent comment ID
        """
        pass
