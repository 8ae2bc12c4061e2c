"""Integration tests for jersey search and player list API endpoints."""

import pytest


@pytest.mark.asyncio
async def test_search_jerseys_all(async_client):
    """Test searching jerseys without a query."""
    response = await async_client.get("/api/v1/jerseys")

    assert response.status_code == 200
    data = response.json()
    assert len(data["products"]) == 2


@pytest.mark.asyncio
async def test_search_jerseys_by_query(async_client):
    """Test searching jerseys by a case-insensitive query."""
    response = await async_client.get("/api/v1/jerseys", params={"query": "barcelona"})

    assert response.status_code == 200
    products = response.json()["products"]
    assert len(products) == 1
    assert products[0] == {
        "product_id": "gid://shopify/Product/MOCK_JERSEY_BARCA_HOME",
        "title": "FC Barcelona Home Jersey 23/24",
        "variants": [
            {
                "id": "gid://shopify/ProductVariant/MOCK_VAR_BARCA_HOME_M",
                "title": "Medium",
                "price": "115.00",
                "currency": "EUR",
            }
        ],
        "price_range": {"min": "115.00", "currency": "EUR"},
    }


@pytest.mark.asyncio
async def test_search_jerseys_no_match(async_client):
    """Test that an unmatched query returns an empty list."""
    response = await async_client.get(
        "/api/v1/jerseys", params={"query": "zzz-no-match"}
    )

    assert response.status_code == 200
    assert response.json() == {"products": []}


@pytest.mark.asyncio
async def test_list_players_all(async_client):
    """Test listing all players."""
    response = await async_client.get("/api/v1/players")

    assert response.status_code == 200
    assert len(response.json()["players"]) == 6


@pytest.mark.asyncio
async def test_list_players_by_team(async_client):
    """Test listing players of one team."""
    response = await async_client.get("/api/v1/players", params={"team": "real madrid"})

    assert response.status_code == 200
    players = response.json()["players"]
    assert [p["name"] for p in players] == ["VINICIUS JR", "BELLINGHAM", "MODRIC"]


@pytest.mark.asyncio
async def test_list_players_is_idempotent(async_client):
    """Test that repeated calls return byte-identical bodies."""
    first = await async_client.get("/api/v1/players", params={"team": "fc"})
    second = await async_client.get("/api/v1/players", params={"team": "fc"})

    assert first.content == second.content


@pytest.mark.asyncio
async def test_catalog_without_fixture(async_client, test_app):
    """Test that catalog endpoints fail with 503 when no fixture is loaded."""
    test_app.state.fixture = None

    response = await async_client.get("/api/v1/jerseys")

    assert response.status_code == 503
