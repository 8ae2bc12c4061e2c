"""Integration tests for the Hat-Trick add-to-cart API endpoint."""

import pytest

from striker_server.dependencies import get_bundle_service


def bundle_body(**overrides) -> dict:
    """Build a valid request body, with optional overrides."""
    body = {
        "jerseyVariantId": "J1",
        "competition": "UCL",
        "customName": "VINICIUS JR",
        "customNumber": 7,
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_add_bundle(async_client):
    """Test composing a bundle."""
    response = await async_client.post("/api/v1/cart/bundles", json=bundle_body())

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["details"] == {
        "jersey": "J1",
        "badge": "Champions League Badge",
        "customization": "VINICIUS JR #7",
        "items_added": 3,
    }
    assert [line["merchandiseId"] for line in data["cart_lines"]] == [
        "J1",
        "gid://shopify/ProductVariant/MOCK_BADGE_UCL_789",
        "gid://shopify/ProductVariant/MOCK_CUSTOM_SERVICE_123",
    ]
    assert "attributes" not in data["cart_lines"][0]
    assert "attributes" not in data["cart_lines"][1]
    assert data["cart_lines"][2]["attributes"] == [
        {"key": "Name", "value": "VINICIUS JR"},
        {"key": "Number", "value": "7"},
    ]


@pytest.mark.asyncio
async def test_add_bundle_numeric_string(async_client):
    """Test that a numeric string number is accepted."""
    response = await async_client.post(
        "/api/v1/cart/bundles", json=bundle_body(customNumber="10")
    )

    assert response.status_code == 200
    assert response.json()["details"]["customization"] == "VINICIUS JR #10"


@pytest.mark.asyncio
@pytest.mark.parametrize("number", [-1, 100, "abc", True, [7]])
async def test_add_bundle_invalid_number(async_client, number):
    """Test that an invalid number is returned as a validation error."""
    response = await async_client.post(
        "/api/v1/cart/bundles", json=bundle_body(customNumber=number)
    )

    assert response.status_code == 422
    assert response.json() == {
        "error": {
            "type": "validation_error",
            "data": "Jersey number must be between 0 and 99.",
        }
    }


@pytest.mark.asyncio
async def test_add_bundle_unknown_competition(async_client):
    """Test that an unknown competition is returned as a validation error."""
    response = await async_client.post(
        "/api/v1/cart/bundles", json=bundle_body(competition="PREMIER")
    )

    assert response.status_code == 422
    assert response.json()["error"]["data"] == (
        "Invalid competition: PREMIER. Supported: LALIGA, UCL"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing, message",
    [
        ("jerseyVariantId", "Jersey Variant ID is required"),
        ("competition", "Competition is required"),
        ("customName", "Custom Name is required"),
        ("customNumber", "Custom Number is required"),
    ],
)
async def test_add_bundle_missing_field(async_client, missing, message):
    """Test that a missing field is rejected with 400."""
    body = bundle_body()
    del body[missing]

    response = await async_client.post("/api/v1/cart/bundles", json=body)

    assert response.status_code == 400
    assert response.json() == {"detail": message}


@pytest.mark.asyncio
async def test_add_bundle_non_string_name(async_client):
    """Test that a non-string name is a validation error, not a cart line."""
    response = await async_client.post(
        "/api/v1/cart/bundles", json=bundle_body(customName={"a": 1})
    )

    assert response.status_code == 422
    assert response.json() == {
        "error": {"type": "validation_error", "data": "Custom Name must be a string."}
    }


@pytest.mark.asyncio
async def test_add_bundle_unexpected_failure(async_client, test_app):
    """Test that an unexpected service failure becomes a 500."""

    class BrokenBundleService:
        def compose_bundle(self, request):
            raise RuntimeError("badge lookup exploded")

    test_app.dependency_overrides[get_bundle_service] = lambda: BrokenBundleService()

    response = await async_client.post("/api/v1/cart/bundles", json=bundle_body())

    test_app.dependency_overrides.clear()
    assert response.status_code == 500
    assert "badge lookup exploded" in response.json()["detail"]
