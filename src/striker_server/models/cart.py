"""Pydantic models for the Hat-Trick add-to-cart endpoint.

Request fields are untyped and optional so that the bundle service decides
every outcome, the same way it does for tool calls: absent fields are missing
(400) and values of the wrong type or range are validation errors (422 with
an {"error": ...} body).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AddBundleRequest(BaseModel):
    """Request body for POST /api/v1/cart/bundles."""

    jerseyVariantId: Any = Field(
        None, description="The Variant ID of the base jersey product"
    )
    competition: Any = Field(
        None, description="The competition badge to apply (e.g., 'LALIGA', 'UCL')"
    )
    customName: Any = Field(
        None, description="The player name to print on the jersey"
    )
    customNumber: Any = Field(
        None, description="The player number to print on the jersey"
    )


class CartLineAttribute(BaseModel):
    """A key/value attribute on a cart line."""

    key: str
    value: str


class CartLineDetail(BaseModel):
    """A planned cart line."""

    merchandiseId: str = Field(..., description="Variant reference to add")
    quantity: int = Field(..., description="Quantity to add")
    attributes: list[CartLineAttribute] | None = Field(
        default=None,
        description="Customization attributes (customization service line only)",
    )


class BundleDetails(BaseModel):
    """Human-readable summary of a composed bundle."""

    jersey: str = Field(..., description="Jersey variant reference")
    badge: str = Field(..., description="Badge display name")
    customization: str = Field(..., description="Printed text as 'NAME #NUMBER'")
    items_added: int = Field(..., description="Number of cart lines planned")


class AddBundleResponse(BaseModel):
    """Response body for a successfully composed bundle."""

    success: bool
    message: str
    details: BundleDetails
    cart_lines: list[CartLineDetail] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ValidationErrorDetail(BaseModel):
    """A user-facing validation error."""

    type: str = Field("validation_error", description="Error type")
    data: str = Field(..., description="Message to show to the user")


class ValidationErrorResponse(BaseModel):
    """Response body for a rejected bundle request."""

    error: ValidationErrorDetail
