"""In-memory snippet repository for testing."""

from typing import Optional

from snip.domain.model.snippet import Snippet
from snip.domain.repository.snippet import SnippetRepository
from snip.domain.value import SnippetId


class InMemorySnippetRepository(SnippetRepository):
    """In-memory implementation of SnippetRepository for testing.

    ``save`` is not part of SnippetRepository; tests use it to seed the
    snippets another service would own.
    """

    def __init__(self) -> None:
        self._snippets: dict[SnippetId, Snippet] = {}

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID."""
        return self._snippets.get(snippet_id)

    async def save(self, snippet: Snippet) -> Snippet:
        """Seed or replace a snippet."""
        self._snippets[snippet.id] = snippet
        return snippet
