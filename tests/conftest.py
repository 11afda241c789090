"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from travelogue.database.seed_data import SeedSummary


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[str, None, None]:
    """Return the URL of a throwaway SQLite database file."""
    yield f"sqlite:///{tmp_path / 'travelogue.db'}"


@pytest_asyncio.fixture(scope="function")
async def db_schema(test_database: str) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at the test database and create tables."""
    from travelogue.database.connection import (
        close_database,
        create_schema,
        init_database,
        reset_database,
    )

    reset_database()
    init_database(test_database, force_reinit=True)
    await create_schema()

    yield test_database

    await close_database()


@pytest_asyncio.fixture(scope="function")
async def seeded(db_schema: str) -> SeedSummary:
    """Seed the demonstration data into the test database."""
    from travelogue.database.connection import get_async_session
    from travelogue.database.seed_data import seed_initial_data

    async with get_async_session() as session:
        return await seed_initial_data(session)


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
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
