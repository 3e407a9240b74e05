import pytest
from httpx import ASGITransport, AsyncClient

from tripclient.core.client_lifecycle import get_api_client, get_identity_cache
from tripclient.core.identity_cache import IdentityCache
from tripclient.main import app

AUTH = {"Authorization": "Bearer tok-123"}


@pytest.fixture
def identity_cache():
    return IdentityCache()


@pytest.fixture
async def gateway_client(make_client, fake_backend, identity_cache):
    """Gateway app wired to the in-memory backend."""
    api = make_client(fake_backend)

    async def override_api_client():
        return api

    app.dependency_overrides[get_api_client] = override_api_client
    app.dependency_overrides[get_identity_cache] = lambda: identity_cache
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_gateway_health(gateway_client):
    response = await gateway_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_itinerary_view_is_camel_cased(gateway_client, fake_backend):
    response = await gateway_client.get("/itineraries/it-1", headers=AUTH)

    assert response.status_code == 200
    body = response.json()
    assert body["itinerary"]["startDate"] == "2024-06-01"
    assert body["itinerary"]["dayPlans"][0]["activities"][0]["startTime"] == "09:00:00"
    assert len(body["weather"]) == 2
    assert fake_backend.requests[0].headers["authorization"] == "Bearer tok-123"


@pytest.mark.asyncio
async def test_missing_itinerary_maps_to_404(gateway_client):
    response = await gateway_client.get("/itineraries/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "resource not found."}


@pytest.mark.asyncio
async def test_write_routes_require_token(gateway_client, fake_backend):
    response = await gateway_client.put("/itineraries/it-1/days/day-1/reorder", json={"activityIds": ["c", "a", "b"]})

    assert response.status_code == 401
    assert fake_backend.requests == []


@pytest.mark.asyncio
async def test_reorder_route(gateway_client):
    response = await gateway_client.put(
        "/itineraries/it-1/days/day-1/reorder",
        json={"activityIds": ["c", "a", "b"]},
        headers=AUTH,
    )

    assert response.status_code == 200
    assert [activity["id"] for activity in response.json()["activities"]] == ["c", "a", "b"]


@pytest.mark.asyncio
async def test_backend_outage_maps_to_bad_gateway(gateway_client, fake_backend):
    fake_backend.weather_status = 500

    response = await gateway_client.get(
        "/weather/forecast",
        params={"destination": "Paris", "startDate": "2024-06-01", "endDate": "2024-06-03"},
    )

    assert response.status_code == 502


@pytest.mark.asyncio
async def test_forecast_rejects_inverted_dates(gateway_client, fake_backend):
    response = await gateway_client.get(
        "/weather/forecast",
        params={"destination": "Paris", "startDate": "2024-06-03", "endDate": "2024-06-01"},
    )

    assert response.status_code == 400
    assert fake_backend.requests == []


@pytest.mark.asyncio
async def test_mis_shaped_backend_payload_maps_to_bad_gateway(gateway_client, fake_backend):
    fake_backend.itineraries["it-1"]["dayPlans"][0]["activities"][0]["category"] = None

    response = await gateway_client.get("/itineraries/it-1", headers=AUTH)

    assert response.status_code == 502
    assert "Itinerary" in response.json()["detail"]


@pytest.mark.asyncio
async def test_unexpected_backend_status_maps_to_bad_gateway(gateway_client, fake_backend):
    fake_backend.weather_status = 302

    response = await gateway_client.get(
        "/weather/forecast",
        params={"destination": "Paris", "startDate": "2024-06-01", "endDate": "2024-06-03"},
    )

    assert response.status_code == 502


@pytest.mark.asyncio
async def test_sign_out_requires_token(gateway_client, identity_cache):
    identity_cache.set("clerk_ada", "user-42")
    identity_cache.set("clerk_bob", "user-43")

    response = await gateway_client.post("/users/sign-out", json={})

    assert response.status_code == 401
    assert len(identity_cache) == 2


@pytest.mark.asyncio
async def test_sign_out_needs_an_external_id(gateway_client, identity_cache):
    identity_cache.set("clerk_ada", "user-42")

    response = await gateway_client.post("/users/sign-out", json={}, headers=AUTH)

    assert response.status_code == 422
    assert identity_cache.get("clerk_ada") == "user-42"


@pytest.mark.asyncio
async def test_sign_out_forgets_only_that_user(gateway_client, identity_cache):
    identity_cache.set("clerk_ada", "user-42")
    identity_cache.set("clerk_bob", "user-43")

    response = await gateway_client.post("/users/sign-out", json={"externalId": "clerk_ada"}, headers=AUTH)

    assert response.status_code == 204
    assert "clerk_ada" not in identity_cache
    assert identity_cache.get("clerk_bob") == "user-43"
