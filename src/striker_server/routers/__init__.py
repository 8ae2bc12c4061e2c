"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
Each router module defines endpoints for a specific domain (health, catalog, cart, tools).
"""

from striker_server.routers import cart, catalog, health, tools

__all__ = [
    "cart",
    "catalog",
    "health",
    "tools",
]
