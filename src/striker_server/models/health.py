"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of striker-server.
        jerseys: Number of jerseys in the loaded fixture.
        players: Number of players in the loaded fixture.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of striker-server")
    jerseys: int | None = Field(
        default=None,
        description="Number of jerseys in the catalog, if loaded",
    )
    players: int | None = Field(
        default=None,
        description="Number of players available, if loaded",
    )
