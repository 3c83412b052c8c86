"""Tests for the REST API.

The app runs against the in-memory database configured in conftest, with
the weather provider dependency replaced by a fake.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import FakeProvider
from sky_planner.api import create_app
from sky_planner.api.dependencies import get_weather_provider
from sky_planner.providers.base import (
    TRANSPORT_ERROR_MESSAGE,
    ProviderError,
    RateLimitError,
    UpstreamError,
)

EVENT = {
    "name": "Picnic",
    "location": "Nairobi, Kenya",
    "date": "2099-06-15",
    "time": "16:00",
}


@pytest.fixture
def client(fake_provider: FakeProvider):
    app = create_app()
    app.dependency_overrides[get_weather_provider] = lambda: fake_provider
    with TestClient(app) as test_client:
        yield test_client


def create_event(client: TestClient, **overrides) -> dict:
    response = client.post("/api/events/", json={**EVENT, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestEvents:
    """Tests for /api/events."""

    def test_create_event(self, client: TestClient):
        event = create_event(client)

        assert event["id"]
        assert event["date"] == "2099-06-15"
        assert event["time"] == "16:00:00"
        assert event["scheduled_for"] == "Jun 15, 2099, 4:00 PM"
        assert event["weather"]["temperature_c"] == 22
        assert event["weather"]["uv_band"] == "High"
        assert event["weather_display"]["uv_index"] == "6 (High)"
        assert event["risk"] == {
            "level": "low",
            "badge_class": "bg-success",
            "icon": "bi-check-circle-fill",
        }
        assert [item["name"] for item in event["packing_list"]] == [
            "Water bottle",
            "Sunscreen",
            "Sunglasses",
        ]
        assert event["packing_list"][0]["icon"] == "droplet"
        assert event["time_slots"] == [
            {"label": "10:00", "risk": "low"},
            {"label": "12:00", "risk": "low"},
            {"label": "14:00", "risk": "low"},
        ]

    def test_list_events(self, client: TestClient):
        assert client.get("/api/events/").json() == []

        first = create_event(client)
        second = create_event(client, location="Mombasa, Kenya", date="2099-06-01")

        events = client.get("/api/events/").json()
        assert [e["id"] for e in events] == [second["id"], first["id"]]

    def test_get_event(self, client: TestClient):
        created = create_event(client)

        response = client.get(f"/api/events/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Picnic"

    def test_get_missing_event(self, client: TestClient):
        response = client.get("/api/events/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"detail": "Event does-not-exist not found"}

    def test_update_name_keeps_recommendations(self, client: TestClient, fake_provider):
        created = create_event(client)

        response = client.patch(f"/api/events/{created['id']}", json={"name": "Brunch"})

        assert response.status_code == 200
        updated = response.json()
        assert updated["name"] == "Brunch"
        assert updated["packing_list"] == created["packing_list"]
        assert fake_provider.calls == ["Nairobi, Kenya"]

    def test_update_location_reassesses(self, client: TestClient):
        created = create_event(client)

        response = client.patch(
            f"/api/events/{created['id']}", json={"location": "Mombasa, Kenya"}
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["risk"]["level"] == "high"
        assert updated["weather_display"]["condition"] == "Thunderstorm"

    def test_update_to_past_rejected(self, client: TestClient):
        created = create_event(client)

        response = client.patch(f"/api/events/{created['id']}", json={"date": "2001-01-01"})

        assert response.status_code == 422
        assert response.json() == {"detail": "Please select a future date and time"}

    def test_delete_event(self, client: TestClient):
        created = create_event(client)

        response = client.delete(f"/api/events/{created['id']}")
        assert response.status_code == 204

        assert client.get(f"/api/events/{created['id']}").status_code == 404
        assert client.delete(f"/api/events/{created['id']}").status_code == 404

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "  "},
            {"location": ""},
            {"date": "2001-01-01"},
            {"time": "not-a-time"},
        ],
    )
    def test_invalid_submission(self, client: TestClient, overrides: dict):
        response = client.post("/api/events/", json={**EVENT, **overrides})
        assert response.status_code == 422
        assert client.get("/api/events/").json() == []


class TestWeatherErrors:
    """Tests for weather failures surfacing through the API."""

    def test_provider_error(self, client: TestClient, fake_provider):
        fake_provider.responses["Atlantis"] = ProviderError(
            "Your API request failed.", provider="weatherstack"
        )

        response = client.post("/api/events/", json={**EVENT, "location": "Atlantis"})

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Weather API error: Your API request failed.",
            "error": "provider_error",
        }
        assert client.get("/api/events/").json() == []

    def test_upstream_error(self, client: TestClient, fake_provider):
        fake_provider.responses["Atlantis"] = UpstreamError(
            "Invalid response format from weather API", provider="weatherstack"
        )

        response = client.post("/api/events/", json={**EVENT, "location": "Atlantis"})

        assert response.status_code == 502
        assert response.json()["error"] == "upstream_error"

    def test_rate_limited(self, client: TestClient, fake_provider):
        fake_provider.responses["Atlantis"] = RateLimitError(
            "weatherstack", retry_after=60, status_code=429
        )

        response = client.post("/api/events/", json={**EVENT, "location": "Atlantis"})

        assert response.status_code == 503
        assert response.headers["Retry-After"] == "60"
        assert response.json()["detail"] == TRANSPORT_ERROR_MESSAGE

    def test_failed_edit_leaves_event_unchanged(self, client: TestClient, fake_provider):
        created = create_event(client)
        fake_provider.responses["Atlantis"] = ProviderError(
            "Your API request failed.", provider="weatherstack"
        )

        response = client.patch(f"/api/events/{created['id']}", json={"location": "Atlantis"})
        assert response.status_code == 502

        stored = client.get(f"/api/events/{created['id']}").json()
        assert stored["location"] == "Nairobi, Kenya"
        assert stored["weather"] == created["weather"]


class TestWeatherPreview:
    """Tests for /api/weather."""

    def test_preview(self, client: TestClient):
        response = client.get("/api/weather/", params={"location": "Mombasa, Kenya"})

        assert response.status_code == 200
        body = response.json()
        assert body["location"] == "Mombasa, Kenya"
        assert body["risk"]["level"] == "high"
        assert body["weather_display"]["temperature"] == "38°C"
        assert [slot["risk"] for slot in body["time_slots"]] == ["low", "high", "high"]
        assert client.get("/api/events/").json() == []

    def test_location_required(self, client: TestClient):
        assert client.get("/api/weather/").status_code == 422
        assert client.get("/api/weather/", params={"location": ""}).status_code == 422
