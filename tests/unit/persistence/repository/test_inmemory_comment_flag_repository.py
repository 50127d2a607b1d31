"""Unit tests for InMemoryCommentFlagRepository."""

from uuid import uuid4

import pytest

from snip.domain.model import CommentFlag
from snip.domain.value import CommentFlagId, CommentId, FlagReason, UserId
from snip.persistence.repository.inmemory import InMemoryCommentFlagRepository


def _flag(comment_id, reporter=None, reason=FlagReason.SPAM) -> CommentFlag:
    return CommentFlag(
        id=CommentFlagId(uuid4()),
        comment_id=comment_id,
        reporter_user_id=reporter,
        reason=reason,
    )


class TestInMemoryCommentFlagRepository:
    """Tests for flag uniqueness scope."""

    @pytest.mark.asyncio
    async def test_duplicate_is_skipped(self):
        repo = InMemoryCommentFlagRepository()
        comment_id = CommentId(uuid4())
        reporter = UserId(uuid4())

        assert await repo.add(_flag(comment_id, reporter)) is True
        assert await repo.add(_flag(comment_id, reporter)) is False
        assert len(await repo.find_by_comment(comment_id)) == 1

    @pytest.mark.asyncio
    async def test_null_reporters_collide(self):
        repo = InMemoryCommentFlagRepository()
        comment_id = CommentId(uuid4())

        assert await repo.add(_flag(comment_id, None)) is True
        assert await repo.add(_flag(comment_id, None)) is False

    @pytest.mark.asyncio
    async def test_remove_matches_scope(self):
        # Arrange
        repo = InMemoryCommentFlagRepository()
        comment_id = CommentId(uuid4())
        reporter = UserId(uuid4())
        await repo.add(_flag(comment_id, reporter, FlagReason.SPAM))
        await repo.add(_flag(comment_id, reporter, FlagReason.ABUSE))

        # Act
        removed = await repo.remove(comment_id, reporter, FlagReason.SPAM)
        removed_again = await repo.remove(comment_id, reporter, FlagReason.SPAM)

        # Assert
        assert removed is True
        assert removed_again is False
        remaining = await repo.find_by_comment(comment_id)
        assert [f.reason for f in remaining] == [FlagReason.ABUSE]
