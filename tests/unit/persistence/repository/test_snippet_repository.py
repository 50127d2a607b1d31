"""Unit tests for the snippet repositories."""

import pytest

from snip.domain.repository import SnippetRepository
from snip.persistence.repository import PostgresSnippetRepository
from snip.persistence.repository.inmemory import InMemorySnippetRepository
from tests.conftest import make_caller, make_snippet


class TestSnippetRepositoryIsReadOnly:
    """Snippets belong to another service; this one only reads them."""

    def test_interface_only_declares_lookup(self):
        assert SnippetRepository.__abstractmethods__ == frozenset({"find_by_id"})

    def test_postgres_repository_has_no_write_path(self):
        assert not hasattr(PostgresSnippetRepository, "save")

    @pytest.mark.asyncio
    async def test_inmemory_repository_can_be_seeded(self):
        # Arrange
        repo = InMemorySnippetRepository()
        snippet = make_snippet(make_caller(), is_public=False)

        # Act
        await repo.save(snippet)

        # Assert
        assert await repo.find_by_id(snippet.id) == snippet
