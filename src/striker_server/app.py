"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from striker_server.catalog import StoreFixture, default_fixture, load_fixture
from striker_server.config import StrikerServerSettings
from striker_server.routers import cart, catalog, health, tools

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Loads the store fixture once at startup and stores it in app.state.
    A fixture passed to create_app() takes precedence over the configured
    fixture file.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: StrikerServerSettings = app.state.settings

    if getattr(app.state, "fixture", None) is None:
        fixture_path = settings.resolved_fixture_path
        if fixture_path is not None:
            app.state.fixture = load_fixture(fixture_path)
        else:
            app.state.fixture = default_fixture()
            logger.info("Using built-in mock fixture")

    fixture: StoreFixture = app.state.fixture
    logger.info(
        f"Serving {len(fixture.jerseys)} jerseys and {len(fixture.players)} players, "
        f"competitions: {', '.join(fixture.bundle.supported_competitions)}"
    )

    yield

    logger.info("striker-server shutting down")


def create_app(
    settings: StrikerServerSettings | None = None,
    fixture: StoreFixture | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept optional settings
    and fixture objects for testing or explicit configuration.

    Args:
        settings: Optional StrikerServerSettings instance. If not provided,
                  settings will be loaded from environment variables.
        fixture: Optional StoreFixture to serve instead of the configured one.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from striker_server.dependencies import get_settings

        settings = get_settings()

    logging.getLogger("striker_server").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="striker-server",
        description="Mock backend for Hat-Trick customized jersey tools",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings and fixture in app.state for lifespan and dependency access
    app.state.settings = settings
    app.state.fixture = fixture

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(cart.router)
    app.include_router(tools.router)

    return app
