"""Integration tests for PostgresCommentRepository.

These tests run against PostgreSQL and exercise the guarantees that only
the database can give: atomic counter updates, the conditional soft
delete, and stable ordering of comments created at the same instant.
Each writer opens its own request scope, so it gets its own session and
connection.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from snip.domain.model import Comment
from snip.domain.repository import CommentRepository
from snip.domain.value import CommentId, CommentStatus, SnippetId, SortOrder, UserId
from snip.persistence.tables import snippets_table
from tests.conftest import make_caller, make_snippet
from tests.harness import create_database_fixture

# Integration test fixture - real persistence, skipped without PostgreSQL
database_env = create_database_fixture()

FIXED_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


async def _seed_snippet(container) -> SnippetId:
    snippet = make_snippet(make_caller())
    async with container() as request:
        session = await request.get(AsyncSession)
        await session.execute(insert(snippets_table).values(**snippet.model_dump()))
    return snippet.id


async def _seed_comment(
    container,
    snippet_id: SnippetId,
    parent_id: CommentId | None = None,
    created_at: datetime = FIXED_TIME,
) -> Comment:
    comment = Comment(
        id=CommentId(uuid4()),
        snippet_id=snippet_id,
        author_id=UserId(uuid4()),
        parent_id=parent_id,
        body="Nice use of a generator here",
        status=CommentStatus.VISIBLE,
        created_at=created_at,
        updated_at=created_at,
    )
    async with container() as request:
        repo = await request.get(CommentRepository)
        return await repo.insert(comment)


async def _find(container, comment_id: CommentId) -> Comment | None:
    async with container() as request:
        repo = await request.get(CommentRepository)
        return await repo.find_by_id(comment_id)


class TestReplyCountIntegration:
    """Reply counters are updated in the database, not read-modify-write."""

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_not_lost(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        parent = await _seed_comment(database_env, snippet_id)

        async def increment():
            async with database_env() as request:
                repo = await request.get(CommentRepository)
                await repo.increment_reply_count(parent.id)

        # Act
        await asyncio.gather(*(increment() for _ in range(10)))

        # Assert
        assert (await _find(database_env, parent.id)).reply_count == 10

    @pytest.mark.asyncio
    async def test_decrement_stops_at_zero(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        parent = await _seed_comment(database_env, snippet_id)

        # Act
        async with database_env() as request:
            repo = await request.get(CommentRepository)
            await repo.increment_reply_count(parent.id)
            await repo.decrement_reply_count(parent.id)
            await repo.decrement_reply_count(parent.id)

        # Assert
        assert (await _find(database_env, parent.id)).reply_count == 0


class TestSoftDeleteIntegration:
    """Only one caller performs the deleted_at transition."""

    @pytest.mark.asyncio
    async def test_second_delete_reports_no_transition(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        comment = await _seed_comment(database_env, snippet_id)

        # Act
        async with database_env() as request:
            repo = await request.get(CommentRepository)
            first = await repo.soft_delete(comment.id)
            second = await repo.soft_delete(comment.id)

        # Assert
        assert first is True
        assert second is False
        assert (await _find(database_env, comment.id)).deleted_at is not None

    @pytest.mark.asyncio
    async def test_concurrent_deletes_transition_once(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        comment = await _seed_comment(database_env, snippet_id)

        async def delete():
            async with database_env() as request:
                repo = await request.get(CommentRepository)
                return await repo.soft_delete(comment.id)

        # Act
        results = await asyncio.gather(*(delete() for _ in range(3)))

        # Assert
        assert sorted(results) == [False, False, True]

    @pytest.mark.asyncio
    async def test_deleted_comments_are_not_live(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        kept = await _seed_comment(database_env, snippet_id)
        gone = await _seed_comment(database_env, snippet_id)

        # Act
        async with database_env() as request:
            repo = await request.get(CommentRepository)
            await repo.soft_delete(gone.id)
            items = await repo.list_live(snippet_id)
            total = await repo.count_live(snippet_id)

        # Assert
        assert [c.id for c in items] == [kept.id]
        assert total == 1


class TestListLiveIntegration:
    """Ordering of one thread level."""

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order_in_both_directions(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        tied = [await _seed_comment(database_env, snippet_id) for _ in range(3)]
        newer = await _seed_comment(
            database_env, snippet_id, created_at=FIXED_TIME + timedelta(minutes=5)
        )
        tied_ids = [c.id for c in tied]

        # Act
        async with database_env() as request:
            repo = await request.get(CommentRepository)
            ascending = await repo.list_live(snippet_id, order=SortOrder.ASC)
            descending = await repo.list_live(snippet_id, order=SortOrder.DESC)

        # Assert
        assert [c.id for c in ascending] == tied_ids + [newer.id]
        assert [c.id for c in descending] == [newer.id] + tied_ids

    @pytest.mark.asyncio
    async def test_replies_are_listed_under_their_parent_only(self, database_env):
        # Arrange
        snippet_id = await _seed_snippet(database_env)
        parent = await _seed_comment(database_env, snippet_id)
        reply = await _seed_comment(database_env, snippet_id, parent_id=parent.id)

        # Act
        async with database_env() as request:
            repo = await request.get(CommentRepository)
            top_level = await repo.list_live(snippet_id)
            replies = await repo.list_live(snippet_id, parent_id=parent.id)

        # Assert
        assert [c.id for c in top_level] == [parent.id]
        assert [c.id for c in replies] == [reply.id]
