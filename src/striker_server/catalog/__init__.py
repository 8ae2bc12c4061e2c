"""Store fixture data for striker-server.

This package provides the read-only jersey catalog, player list and
Hat-Trick bundle configuration, plus loading of substitute fixtures from JSON.
"""

from striker_server.catalog.fixtures import (
    default_bundle_config,
    default_fixture,
    fixture_from_dict,
    load_fixture,
)
from striker_server.catalog.types import (
    BundleConfig,
    CatalogProduct,
    CatalogVariant,
    CompetitionBadge,
    CustomizationServiceRef,
    Player,
    StoreFixture,
)

__all__ = [
    # Fixture construction
    "default_bundle_config",
    "default_fixture",
    "fixture_from_dict",
    "load_fixture",
    # Data types
    "BundleConfig",
    "CatalogProduct",
    "CatalogVariant",
    "CompetitionBadge",
    "CustomizationServiceRef",
    "Player",
    "StoreFixture",
]
