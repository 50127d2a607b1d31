"""Integration tests for PostgresCommentFlagRepository.

Duplicate flags are rejected by the unique index on
(comment_id, reporter_user_id, reason), declared NULLS NOT DISTINCT.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from snip.domain.model import Comment, CommentFlag
from snip.domain.repository import CommentFlagRepository, CommentRepository
from snip.domain.value import CommentFlagId, CommentId, CommentStatus, FlagReason, UserId
from snip.persistence.tables import snippets_table
from tests.conftest import make_caller, make_snippet
from tests.harness import create_database_fixture

# Integration test fixture - real persistence, skipped without PostgreSQL
database_env = create_database_fixture()


async def _seed_comment(container) -> CommentId:
    snippet = make_snippet(make_caller())
    comment = Comment(
        id=CommentId(uuid4()),
        snippet_id=snippet.id,
        author_id=UserId(uuid4()),
        body="Try a dict instead",
        status=CommentStatus.VISIBLE,
    )
    async with container() as request:
        session = await request.get(AsyncSession)
        await session.execute(insert(snippets_table).values(**snippet.model_dump()))
        repo = await request.get(CommentRepository)
        await repo.insert(comment)
    return comment.id


def _flag(
    comment_id: CommentId,
    reporter: UserId | None = None,
    reason: FlagReason = FlagReason.SPAM,
) -> CommentFlag:
    return CommentFlag(
        id=CommentFlagId(uuid4()),
        comment_id=comment_id,
        reporter_user_id=reporter,
        reason=reason,
    )


async def _flags_on(container, comment_id: CommentId) -> list[CommentFlag]:
    async with container() as request:
        repo = await request.get(CommentFlagRepository)
        return await repo.find_by_comment(comment_id)


class TestCommentFlagRepositoryIntegration:
    """Conflict-skip semantics of add and remove."""

    @pytest.mark.asyncio
    async def test_anonymous_duplicate_is_skipped(self, database_env):
        # Arrange
        comment_id = await _seed_comment(database_env)

        # Act
        async with database_env() as request:
            repo = await request.get(CommentFlagRepository)
            first = await repo.add(_flag(comment_id))
            second = await repo.add(_flag(comment_id))

        # Assert
        assert first is True
        assert second is False
        flags = await _flags_on(database_env, comment_id)
        assert len(flags) == 1
        assert flags[0].reporter_user_id is None

    @pytest.mark.asyncio
    async def test_concurrent_identical_flags_store_one(self, database_env):
        # Arrange
        comment_id = await _seed_comment(database_env)
        reporter = UserId(uuid4())

        async def add():
            async with database_env() as request:
                repo = await request.get(CommentFlagRepository)
                return await repo.add(_flag(comment_id, reporter))

        # Act
        results = await asyncio.gather(*(add() for _ in range(3)))

        # Assert
        assert sorted(results) == [False, False, True]
        assert len(await _flags_on(database_env, comment_id)) == 1

    @pytest.mark.asyncio
    async def test_distinct_reasons_and_reporters_are_kept(self, database_env):
        # Arrange
        comment_id = await _seed_comment(database_env)
        reporter = UserId(uuid4())

        # Act
        async with database_env() as request:
            repo = await request.get(CommentFlagRepository)
            await repo.add(_flag(comment_id, reporter, FlagReason.SPAM))
            await repo.add(_flag(comment_id, reporter, FlagReason.ABUSE))
            await repo.add(_flag(comment_id, None, FlagReason.SPAM))

        # Assert
        assert len(await _flags_on(database_env, comment_id)) == 3

    @pytest.mark.asyncio
    async def test_remove_anonymous_flag(self, database_env):
        # Arrange
        comment_id = await _seed_comment(database_env)
        reporter = UserId(uuid4())
        async with database_env() as request:
            repo = await request.get(CommentFlagRepository)
            await repo.add(_flag(comment_id))
            await repo.add(_flag(comment_id, reporter))

        # Act
        async with database_env() as request:
            repo = await request.get(CommentFlagRepository)
            removed = await repo.remove(comment_id, None, FlagReason.SPAM)
            removed_again = await repo.remove(comment_id, None, FlagReason.SPAM)

        # Assert
        assert removed is True
        assert removed_again is False
        remaining = await _flags_on(database_env, comment_id)
        assert [f.reporter_user_id for f in remaining] == [reporter]
