"""Pydantic models for jersey search and player list responses."""

from pydantic import BaseModel, ConfigDict, Field


class VariantDetail(BaseModel):
    """A jersey variant."""

    id: str = Field(..., description="Variant reference")
    title: str = Field(..., description="Variant title (e.g., 'Medium')")
    price: str = Field(..., description="Decimal price (e.g., '120.00')")
    currency: str = Field(..., description="ISO 4217 currency code")

    model_config = ConfigDict(from_attributes=True)


class PriceRange(BaseModel):
    """Price range of a jersey, taken from its first variant."""

    min: str = Field(..., description="Price of the first variant")
    currency: str = Field(..., description="Currency of the first variant")


class JerseySummary(BaseModel):
    """A jersey search result."""

    product_id: str = Field(..., description="Product reference")
    title: str = Field(..., description="Product title")
    variants: list[VariantDetail] = Field(
        default_factory=list,
        description="All variants of the product",
    )
    price_range: PriceRange


class JerseySearchResponse(BaseModel):
    """Response model for GET /api/v1/jerseys."""

    products: list[JerseySummary] = Field(
        default_factory=list,
        description="Jerseys whose title matches the query",
    )


class PlayerDetail(BaseModel):
    """A player available for jersey customization."""

    name: str = Field(..., description="Name as printed on the jersey")
    number: int = Field(..., description="Shirt number")
    team: str = Field(..., description="Team name")

    model_config = ConfigDict(from_attributes=True)


class PlayerListResponse(BaseModel):
    """Response model for GET /api/v1/players."""

    players: list[PlayerDetail] = Field(
        default_factory=list,
        description="Players matching the team filter",
    )
