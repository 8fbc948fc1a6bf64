"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
import pytest_asyncio

from blogql.database import DataClient, Database
from blogql.graphql.context import build_context

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """Provide a fresh in-memory database with all tables created."""
    db = Database(TEST_DATABASE_URL, echo=False)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture(scope="function")
def client(database: Database) -> DataClient:
    """Data client bound to the test database."""
    return DataClient(database)


@pytest.fixture(scope="function")
def graphql_context(database: Database) -> dict[str, Any]:
    """Resolver context as the HTTP handler would build it (without a request)."""
    return build_context(database)


@pytest_asyncio.fixture(scope="function")
async def alice(client: DataClient) -> Any:
    """A registered user with one published post and one draft."""
    return await client.users.create(
        email="alice@example.com",
        name="Alice",
        posts=[
            {"title": "Hello World", "content": "My first post", "published": True},
            {"title": "Work in progress", "content": "hello again", "published": False},
        ],
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
