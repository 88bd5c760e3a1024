"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite database URL, unique per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'customers.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(database_url: str) -> AsyncGenerator[Any, None]:
    """Provide an initialized `Database` with the customers table created."""
    from customers_api.database import init_database

    db = await init_database(database_url)
    yield db
    await db.dispose()


@pytest.fixture
def info(database: Any) -> Any:
    """Mock GraphQL info object whose context carries the test database."""
    mock_info = MagicMock(spec=strawberry.Info)
    mock_info.context = {"request": MagicMock(), "db": database}
    return mock_info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    import os

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
