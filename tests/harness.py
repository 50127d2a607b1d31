"""Test harness for unit, integration and API tests.

Integration tests assume a PostgreSQL instance is reachable with the
settings loaded from environment variables (configure via .env or export).
"""

import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import ENUM
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine

from snip.config import Settings
from snip.interface.api.app import create_app
from snip.persistence.tables import comment_flags_table, comments_table, metadata
from snip.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    unmocking and yields a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding an HTTP client and the app container.

    The client talks to the app in-process through ASGITransport. The
    container is returned too so tests can seed repositories directly.

    Returns:
        Pytest fixture function that yields (AsyncClient, AsyncContainer)
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container=container, settings=Settings())

        # Unhandled errors come back as 500 responses instead of raising
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client, container

        await container.close()

    return _api_environment


def _create_schema(connection) -> None:
    # Table enums are declared create_type=False, so create them explicitly
    for enum_type in (comments_table.c.status.type, comment_flags_table.c.reason.type):
        ENUM(*enum_type.enums, name=enum_type.name).create(connection, checkfirst=True)
    metadata.create_all(connection, checkfirst=True)


def create_database_fixture(connect_timeout: float = 5.0):
    """Factory for fixtures yielding an app-scoped container on PostgreSQL.

    Unlike create_env_fixture, the yielded container is the APP container:
    every ``async with container() as request`` opens its own session, which
    is committed when the block exits. Tests use that to run concurrent
    writers on separate connections.

    Tables are created if missing, never dropped. Tests seed rows with fresh
    UUIDs so they do not interfere with each other or with existing data.
    The fixture skips when no database is reachable.

    Usage:
        database_env = create_database_fixture()

        @pytest.mark.asyncio
        async def test_increment(database_env):
            async with database_env() as request:
                repo = await request.get(CommentRepository)
                ...
    """

    @pytest_asyncio.fixture
    async def _database_environment():
        container = build_test_container(unmock={"persistence"})
        try:
            engine = await container.get(AsyncEngine)
            async with asyncio.timeout(connect_timeout):
                async with engine.begin() as connection:
                    await connection.run_sync(_create_schema)
        except (OSError, TimeoutError, DBAPIError) as e:
            await container.close()
            pytest.skip(f"PostgreSQL is not reachable: {e}")

        yield container

        await container.close()

    return _database_environment
