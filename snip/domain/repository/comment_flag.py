"""Comment flag repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from snip.domain.model.comment_flag import CommentFlag
from snip.domain.value import CommentId, FlagReason, UserId


class CommentFlagRepository(ABC):
    """Repository for CommentFlag entity."""

    @abstractmethod
    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag, skipping it if an identical one exists.

        Uniqueness is (comment_id, reporter_user_id, reason) with a None
        reporter treated as a regular value.

        Args:
            flag: The flag to insert

        Returns:
            True if a row was inserted, False if it was a duplicate
        """
        pass

    @abstractmethod
    async def remove(
        self,
        comment_id: CommentId,
        reporter_user_id: Optional[UserId],
        reason: FlagReason,
    ) -> bool:
        """Delete the flag matching the uniqueness scope.

        Args:
            comment_id: The comment ID
            reporter_user_id: Reporter, or None for anonymous flags
            reason: Flag reason

        Returns:
            True if a flag was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[CommentFlag]:
        """Find all flags lodged on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            List of flags, oldest first
        """
        pass
