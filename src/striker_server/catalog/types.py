"""Type definitions for the store fixture.

This module contains the frozen dataclasses that describe the catalog
(jerseys and their variants), the player list offered for customization,
and the bundle configuration used by the Hat-Trick add-to-cart operation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class CatalogVariant:
    """A purchasable variant of a catalog product.

    Attributes:
        id: Opaque variant reference (e.g., a Shopify ProductVariant gid)
        title: Variant title (e.g., "Medium")
        price: Decimal price as a string (e.g., "120.00")
        currency: ISO 4217 currency code (e.g., "EUR")
    """

    id: str
    title: str
    price: str
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class CatalogProduct:
    """A catalog product (jersey) with one or more variants."""

    id: str
    title: str
    variants: tuple[CatalogVariant, ...]


@dataclass(frozen=True)
class Player:
    """A player whose name and number can be printed on a jersey.

    The number is display data only and is not checked for uniqueness.
    """

    name: str
    number: int
    team: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "number": self.number, "team": self.team}


@dataclass(frozen=True)
class CompetitionBadge:
    """A competition badge product that can be sewn onto a jersey."""

    key: str
    variant_id: str
    name: str
    handle: str = ""


@dataclass(frozen=True)
class CustomizationServiceRef:
    """The name/number printing service added as the third bundle line."""

    variant_id: str
    product_id: str
    handle: str = "customization-service"


@dataclass(frozen=True)
class BundleConfig:
    """Configuration for the Hat-Trick bundle.

    Attributes:
        badges: Competition code -> badge, in declaration order. The key set is
            the set of supported competitions.
        customization_service: Product reference for the printing service
        name_property: Cart line attribute key holding the printed name
        number_property: Cart line attribute key holding the printed number
    """

    badges: Mapping[str, CompetitionBadge]
    customization_service: CustomizationServiceRef
    name_property: str = "Name"
    number_property: str = "Number"

    def __post_init__(self) -> None:
        # Freeze the mapping so no caller can add or drop competitions at runtime
        object.__setattr__(self, "badges", MappingProxyType(dict(self.badges)))

    @property
    def supported_competitions(self) -> list[str]:
        """Get the supported competition codes in declaration order."""
        return list(self.badges.keys())


@dataclass(frozen=True)
class StoreFixture:
    """All static data served by striker-server."""

    jerseys: tuple[CatalogProduct, ...]
    players: tuple[Player, ...]
    bundle: BundleConfig
