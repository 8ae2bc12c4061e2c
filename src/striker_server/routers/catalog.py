"""Catalog router for jersey search and the player list.

This module provides REST API endpoints for:
- Searching jerseys by title
- Listing players available for customization, optionally by team
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from striker_server.dependencies import get_catalog_service
from striker_server.models.catalog import JerseySearchResponse, PlayerListResponse
from striker_server.services import CatalogQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get(
    "/jerseys",
    response_model=JerseySearchResponse,
    summary="Search jerseys",
)
async def search_jerseys(
    service: Annotated[CatalogQueryService, Depends(get_catalog_service)],
    query: Annotated[str | None, Query(description="Search term")] = None,
) -> JerseySearchResponse:
    """Search the jersey catalog.

    Matching is a case-insensitive substring match on the title. Without a
    query every jersey is returned.

    Args:
        service: Injected CatalogQueryService
        query: Optional search term

    Returns:
        Matching jerseys with their variants and price range
    """
    products = service.search_jerseys(query)
    logger.info(f"Jersey search {query!r} matched {len(products)} products")
    return JerseySearchResponse.model_validate({"products": products})


@router.get(
    "/players",
    response_model=PlayerListResponse,
    summary="List players",
)
async def list_players(
    service: Annotated[CatalogQueryService, Depends(get_catalog_service)],
    team: Annotated[str | None, Query(description="Team filter")] = None,
) -> PlayerListResponse:
    """List players whose name and number can be printed on a jersey.

    Args:
        service: Injected CatalogQueryService
        team: Optional case-insensitive team filter

    Returns:
        Matching players
    """
    players = service.list_players(team)
    return PlayerListResponse.model_validate({"players": players})
