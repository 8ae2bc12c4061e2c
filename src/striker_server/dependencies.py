"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject common dependencies like settings and services.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from striker_server.catalog import StoreFixture
from striker_server.config import StrikerServerSettings
from striker_server.services import BundleAssemblyService, CatalogQueryService
from striker_server.tools import ToolExecutionService, ToolSchemaService


@lru_cache
def get_settings() -> StrikerServerSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the STRIKER_ prefix.

    Returns:
        StrikerServerSettings: The application configuration settings.
    """
    return StrikerServerSettings()


def get_fixture(request: Request) -> StoreFixture:
    """Get the store fixture from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        StoreFixture: The fixture loaded during application startup.

    Raises:
        HTTPException: If the fixture is not loaded (503 Service Unavailable).
    """
    fixture = getattr(request.app.state, "fixture", None)
    if fixture is None:
        raise HTTPException(
            status_code=503,
            detail="Store fixture not loaded",
        )
    return fixture


def get_catalog_service(request: Request) -> CatalogQueryService:
    """Get a CatalogQueryService over the app's fixture."""
    return CatalogQueryService(fixture=get_fixture(request))


def get_bundle_service(request: Request) -> BundleAssemblyService:
    """Get a BundleAssemblyService over the app's bundle configuration."""
    return BundleAssemblyService(bundle_config=get_fixture(request).bundle)


def get_tool_schema_service(request: Request) -> ToolSchemaService:
    """Get a ToolSchemaService over the app's bundle configuration."""
    return ToolSchemaService(bundle_config=get_fixture(request).bundle)


def get_tool_execution_service(request: Request) -> ToolExecutionService:
    """Get a ToolExecutionService wired to the catalog and bundle services.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolExecutionService: A new ToolExecutionService instance.

    Raises:
        HTTPException: If the fixture is not loaded (503 Service Unavailable).
    """
    return ToolExecutionService(
        catalog_service=get_catalog_service(request),
        bundle_service=get_bundle_service(request),
    )
