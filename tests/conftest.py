"""
Shared pytest fixtures for user service tests.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from user_service.core.config import Settings
from user_service.domain.repositories.user_repository import UserRepository
from user_service.infrastructure.db.postgres_connection import init_schema
from user_service.infrastructure.db.sql_user_repository import SqlUserRepository


@pytest.fixture
def settings():
    """Default settings; the database section is never connected to in tests."""
    return Settings()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def sqlite_url(tmp_path):
    """URL of a throwaway SQLite file standing in for PostgreSQL."""
    return f"sqlite+aiosqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def sqlite_engine(sqlite_url):
    """Engine not yet bound to any event loop; the app lifespan disposes it."""
    return create_async_engine(sqlite_url)


@pytest_asyncio.fixture
async def sql_repository(sqlite_url):
    """SqlUserRepository over an initialized SQLite database."""
    engine = create_async_engine(sqlite_url, hide_parameters=True)
    await init_schema(engine)
    yield SqlUserRepository(engine)
    await engine.dispose()


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a config file and return its path."""

    def _write(text: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mock_container():
    """Container whose get() returns whatever the test put in ``registry``."""
    container = MagicMock()
    container.registry = {}
    container.get.side_effect = lambda key: container.registry[key]
    return container
