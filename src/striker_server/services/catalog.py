"""Catalog query service.

This module provides the CatalogQueryService class for read-only lookups
over the jersey catalog and the player list of a StoreFixture.
"""

import logging
from typing import Any, TypedDict

from striker_server.catalog import CatalogProduct, StoreFixture

logger = logging.getLogger(__name__)


class PriceRange(TypedDict):
    """Price range block of a jersey summary."""

    min: str
    currency: str


class JerseySummary(TypedDict):
    """Search result entry for a jersey."""

    product_id: str
    title: str
    variants: list[dict[str, Any]]
    price_range: PriceRange


class CatalogQueryService:
    """Service for searching jerseys and listing players.

    Filtering is case-insensitive substring matching. Unknown filters yield
    an empty list, never an error.
    """

    def __init__(self, fixture: StoreFixture):
        """Initialize the CatalogQueryService.

        Args:
            fixture: The store fixture to query. It is never modified.
        """
        self.fixture = fixture

    def search_jerseys(self, query: Any = None) -> list[JerseySummary]:
        """Search jerseys by title.

        Args:
            query: Optional search term. Empty or None returns every jersey,
                any other non-string value matches nothing.

        Returns:
            List of jersey summaries in catalog order
        """
        logger.debug(f"Searching jerseys with query: {query!r}")

        jerseys = list(self.fixture.jerseys)
        if query:
            if not isinstance(query, str):
                return []
            lower_query = query.lower()
            jerseys = [j for j in jerseys if lower_query in j.title.lower()]

        return [self._summarize(jersey) for jersey in jerseys]

    def list_players(self, team: Any = None) -> list[dict[str, Any]]:
        """List players available for customization.

        Args:
            team: Optional team filter. Empty or None returns every player,
                any other non-string value matches nothing.

        Returns:
            List of player dictionaries with keys: name, number, team
        """
        logger.debug(f"Getting player list, team filter: {team!r}")

        players = list(self.fixture.players)
        if team:
            if not isinstance(team, str):
                return []
            lower_team = team.lower()
            players = [p for p in players if lower_team in p.team.lower()]

        return [player.to_dict() for player in players]

    def _summarize(self, jersey: CatalogProduct) -> JerseySummary:
        """Project a catalog product to a search summary.

        The price range is taken from the first variant only.

        Args:
            jersey: The product to summarize

        Returns:
            Summary with product_id, title, variants and price_range
        """
        first_variant = jersey.variants[0]
        return JerseySummary(
            product_id=jersey.id,
            title=jersey.title,
            variants=[variant.to_dict() for variant in jersey.variants],
            price_range=PriceRange(
                min=first_variant.price,
                currency=first_variant.currency,
            ),
        )
