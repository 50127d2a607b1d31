"""Snippet repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from snip.domain.model.snippet import Snippet
from snip.domain.value import SnippetId


class SnippetRepository(ABC):
    """Read-only access to snippets for visibility decisions.

    Snippets are owned by another part of the system and are never written
    through this interface.
    """

    @abstractmethod
    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID.

        Args:
            snippet_id: The snippet's unique identifier

        Returns:
            The snippet if found, None otherwise
        """
        pass
