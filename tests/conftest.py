"""Pytest configuration and shared fixtures for striker-server tests.

This module provides common fixtures used across all test modules,
including the store fixture, services, test app creation and async client setup.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from striker_server import create_app
from striker_server.catalog import default_fixture
from striker_server.config import StrikerServerSettings
from striker_server.services import BundleAssemblyService, CatalogQueryService


@pytest.fixture
def store_fixture():
    """Create the built-in mock store fixture.

    Returns:
        StoreFixture: Jerseys, players and bundle configuration.
    """
    return default_fixture()


@pytest.fixture
def catalog_service(store_fixture):
    """Create a CatalogQueryService over the mock fixture."""
    return CatalogQueryService(fixture=store_fixture)


@pytest.fixture
def bundle_service(store_fixture):
    """Create a BundleAssemblyService over the mock bundle configuration."""
    return BundleAssemblyService(bundle_config=store_fixture.bundle)


@pytest.fixture
def test_settings():
    """Create test settings using the built-in fixture.

    Returns:
        StrikerServerSettings: Settings instance configured for testing.
    """
    return StrikerServerSettings(
        host="127.0.0.1",
        port=8000,
        fixture_path=None,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
