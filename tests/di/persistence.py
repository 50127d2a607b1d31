"""Mock persistence providers for testing."""

from dishka import Scope, provide

from snip.domain.repository import (
    CommentFlagRepository,
    CommentRepository,
    SnippetRepository,
)
from snip.persistence.repository.inmemory import (
    InMemoryCommentFlagRepository,
    InMemoryCommentRepository,
    InMemorySnippetRepository,
)
from snip.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests within one container.
    Every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_snippet_repository(self) -> SnippetRepository:
        """Provide in-memory snippet repository."""
        return InMemorySnippetRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_flag_repository(self) -> CommentFlagRepository:
        """Provide in-memory comment flag repository."""
        return InMemoryCommentFlagRepository()
