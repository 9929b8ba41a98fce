"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-supabase-key")

from tests.fakes import FakeSupabaseClient  # noqa: E402


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def fake_supabase() -> FakeSupabaseClient:
    """Provide an empty in-memory store."""
    return FakeSupabaseClient()


@pytest.fixture
def mock_supabase_client() -> MagicMock:
    """Provide a mocked Supabase client for query-shape assertions.

    Returns:
        MagicMock: Mocked Supabase client.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )
    return mock_client


@pytest.fixture
def app_factory(fake_supabase: FakeSupabaseClient) -> Generator[Any, None, None]:
    """Provide the application wired to the in-memory store.

    Yields:
        FastAPI: Application with the database client dependency overridden.
    """
    from src.api.deps import get_db_client
    from src.main import app

    app.dependency_overrides[get_db_client] = lambda: fake_supabase
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_factory: Any) -> Generator[TestClient, None, None]:
    """Provide a test client backed by the in-memory store.

    Yields:
        TestClient: FastAPI test client.
    """
    with TestClient(app_factory) as test_client:
        yield test_client
