"""In-memory comment flag repository for testing."""

from typing import Optional

from snip.domain.model.comment_flag import CommentFlag
from snip.domain.repository.comment_flag import CommentFlagRepository
from snip.domain.value import CommentId, FlagReason, UserId

_FlagKey = tuple[CommentId, Optional[UserId], FlagReason]


class InMemoryCommentFlagRepository(CommentFlagRepository):
    """In-memory implementation of CommentFlagRepository for testing.

    Keyed by the uniqueness scope, with None as an ordinary key value.
    """

    def __init__(self) -> None:
        self._flags: dict[_FlagKey, CommentFlag] = {}

    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag unless an identical one exists."""
        key = (flag.comment_id, flag.reporter_user_id, flag.reason)
        if key in self._flags:
            return False
        self._flags[key] = flag
        return True

    async def remove(
        self,
        comment_id: CommentId,
        reporter_user_id: Optional[UserId],
        reason: FlagReason,
    ) -> bool:
        """Delete the flag matching (comment, reporter, reason)."""
        return self._flags.pop((comment_id, reporter_user_id, reason), None) is not None

    async def find_by_comment(self, comment_id: CommentId) -> list[CommentFlag]:
        """Find all flags on a comment, oldest first."""
        flags = [f for f in self._flags.values() if f.comment_id == comment_id]
        flags.sort(key=lambda f: f.created_at)
        return flags
