"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi.testclient import TestClient

from socialql.store import EntityStore


@pytest.fixture
def store() -> EntityStore:
    """Fresh, empty entity store."""
    return EntityStore()


@pytest.fixture
def mock_info(store: EntityStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def client(store: EntityStore) -> Generator[TestClient, None, None]:
    """Test client for an app serving ``store``."""
    from socialql.api.app import create_app

    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def graphql(client: TestClient):
    """POST a GraphQL document and return the decoded JSON body."""

    def execute(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()

    return execute


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
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
