"""
Shared pytest fixtures for the client registry tests.

Each test gets its own registry and app, so nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from client_registry import ClientRegistry
from server.api_http import create_app


@pytest.fixture
def registry() -> ClientRegistry:
    """Registry holding the two startup clients (ids 1 and 2)."""
    return ClientRegistry.with_seed()


@pytest.fixture
def empty_registry() -> ClientRegistry:
    return ClientRegistry()


@pytest.fixture
def app(registry):
    return create_app(registry=registry)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def empty_client(empty_registry) -> TestClient:
    """Client for an app whose registry starts with no clients."""
    return TestClient(create_app(registry=empty_registry))
