"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from striker_server.models.cart import (
    AddBundleRequest,
    AddBundleResponse,
    BundleDetails,
    CartLineAttribute,
    CartLineDetail,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from striker_server.models.catalog import (
    JerseySearchResponse,
    JerseySummary,
    PlayerDetail,
    PlayerListResponse,
    PriceRange,
    VariantDetail,
)
from striker_server.models.health import HealthResponse
from striker_server.models.tools import (
    ToolCallRequest,
    ToolDefinition,
    ToolListResponse,
)

__all__ = [
    "AddBundleRequest",
    "AddBundleResponse",
    "BundleDetails",
    "CartLineAttribute",
    "CartLineDetail",
    "HealthResponse",
    "JerseySearchResponse",
    "JerseySummary",
    "PlayerDetail",
    "PlayerListResponse",
    "PriceRange",
    "ToolCallRequest",
    "ToolDefinition",
    "ToolListResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
]
