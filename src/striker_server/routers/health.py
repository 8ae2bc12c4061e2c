"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from striker_server.catalog import StoreFixture
from striker_server.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of the striker-server,
    along with the size of the loaded fixture if there is one.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    fixture: StoreFixture | None = getattr(request.app.state, "fixture", None)
    if fixture is None:
        logger.debug("Health check without a loaded fixture")
        return HealthResponse(status="ok", version="0.1.0")

    return HealthResponse(
        status="ok",
        version="0.1.0",
        jerseys=len(fixture.jerseys),
        players=len(fixture.players),
    )
