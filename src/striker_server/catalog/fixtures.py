"""Default store fixture and JSON fixture loading.

The default fixture holds the mock jersey catalog, the player list and the
Hat-Trick bundle configuration. A fixture with the same shape can be loaded
from a JSON file to stand in real data:

{
    "jerseys": [{"id": ..., "title": ..., "variants": [{...}]}],
    "players": [{"name": ..., "number": ..., "team": ...}],
    "bundle": {
        "badges": {"LALIGA": {"variant_id": ..., "name": ..., "handle": ...}},
        "customization_service": {"variant_id": ..., "product_id": ..., "handle": ...},
        "properties": {"name": "Name", "number": "Number"}
    }
}
"""

import json
import logging
from pathlib import Path
from typing import Any

from striker_server.catalog.types import (
    BundleConfig,
    CatalogProduct,
    CatalogVariant,
    CompetitionBadge,
    CustomizationServiceRef,
    Player,
    StoreFixture,
)

logger = logging.getLogger(__name__)


def default_bundle_config() -> BundleConfig:
    """Build the mock Hat-Trick bundle configuration."""
    return BundleConfig(
        badges={
            "LALIGA": CompetitionBadge(
                key="LALIGA",
                variant_id="gid://shopify/ProductVariant/MOCK_BADGE_LALIGA_456",
                name="La Liga Badge",
                handle="badge-laliga",
            ),
            "UCL": CompetitionBadge(
                key="UCL",
                variant_id="gid://shopify/ProductVariant/MOCK_BADGE_UCL_789",
                name="Champions League Badge",
                handle="badge-ucl",
            ),
        },
        customization_service=CustomizationServiceRef(
            variant_id="gid://shopify/ProductVariant/MOCK_CUSTOM_SERVICE_123",
            product_id="gid://shopify/Product/MOCK_CUSTOM_SERVICE_PRODUCT",
            handle="customization-service",
        ),
        name_property="Name",
        number_property="Number",
    )


def default_fixture() -> StoreFixture:
    """Build the mock catalog, player list and bundle configuration."""
    jerseys = (
        CatalogProduct(
            id="gid://shopify/Product/MOCK_JERSEY_RM_HOME",
            title="Real Madrid Home Jersey 23/24",
            variants=(
                CatalogVariant(
                    id="gid://shopify/ProductVariant/MOCK_VAR_RM_HOME_M",
                    title="Medium",
                    price="120.00",
                    currency="EUR",
                ),
            ),
        ),
        CatalogProduct(
            id="gid://shopify/Product/MOCK_JERSEY_BARCA_HOME",
            title="FC Barcelona Home Jersey 23/24",
            variants=(
                CatalogVariant(
                    id="gid://shopify/ProductVariant/MOCK_VAR_BARCA_HOME_M",
                    title="Medium",
                    price="115.00",
                    currency="EUR",
                ),
            ),
        ),
    )

    players = (
        Player(name="VINICIUS JR", number=7, team="Real Madrid"),
        Player(name="BELLINGHAM", number=5, team="Real Madrid"),
        Player(name="MODRIC", number=10, team="Real Madrid"),
        Player(name="LEWANDOWSKI", number=9, team="FC Barcelona"),
        Player(name="PEDRI", number=8, team="FC Barcelona"),
        Player(name="GAVI", number=6, team="FC Barcelona"),
    )

    return StoreFixture(
        jerseys=jerseys,
        players=players,
        bundle=default_bundle_config(),
    )


def fixture_from_dict(data: dict[str, Any]) -> StoreFixture:
    """Convert a dictionary to a StoreFixture.

    Args:
        data: Fixture data as a dictionary (see module docstring for shape)

    Returns:
        StoreFixture: The parsed fixture

    Raises:
        ValueError: If a required key is missing or a value has the wrong type
    """
    try:
        jerseys = tuple(
            CatalogProduct(
                id=product["id"],
                title=product["title"],
                variants=tuple(
                    CatalogVariant(
                        id=variant["id"],
                        title=variant["title"],
                        price=str(variant["price"]),
                        currency=variant["currency"],
                    )
                    for variant in product["variants"]
                ),
            )
            for product in data["jerseys"]
        )

        players = tuple(
            Player(name=p["name"], number=int(p["number"]), team=p["team"])
            for p in data["players"]
        )

        bundle_data = data["bundle"]
        service = bundle_data["customization_service"]
        properties = bundle_data.get("properties", {})
        bundle = BundleConfig(
            badges={
                key: CompetitionBadge(
                    key=key,
                    variant_id=badge["variant_id"],
                    name=badge["name"],
                    handle=badge.get("handle", ""),
                )
                for key, badge in bundle_data["badges"].items()
            },
            customization_service=CustomizationServiceRef(
                variant_id=service["variant_id"],
                product_id=service["product_id"],
                handle=service.get("handle", "customization-service"),
            ),
            name_property=properties.get("name", "Name"),
            number_property=properties.get("number", "Number"),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid fixture data: {e!r}")

    for product in jerseys:
        if not product.variants:
            raise ValueError(f"Product '{product.id}' has no variants")

    return StoreFixture(jerseys=jerseys, players=players, bundle=bundle)


def load_fixture(path: Path) -> StoreFixture:
    """Load a StoreFixture from a JSON file.

    Args:
        path: Path to the JSON fixture file

    Returns:
        StoreFixture: The loaded fixture

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    if not path.exists():
        raise FileNotFoundError(f"Fixture file '{path}' not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Fixture file is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise ValueError("Fixture file must contain a JSON object")

    fixture = fixture_from_dict(data)
    logger.info(
        f"Loaded fixture from {path}: {len(fixture.jerseys)} jerseys, "
        f"{len(fixture.players)} players, "
        f"{len(fixture.bundle.badges)} badges"
    )
    return fixture
