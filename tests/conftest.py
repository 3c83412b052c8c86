"""Pytest fixtures for Sky Planner tests.

This module provides test fixtures that ensure:
1. No external API calls are made (the weather provider is faked or mocked)
2. Databases are in-memory SQLite, created fresh per test
3. Isolated test environment with controlled configuration
"""

import datetime as dt
import os
from typing import Any

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("WEATHERSTACK_API_KEY", "test-access-key")
os.environ.setdefault("DEBUG", "true")

from sky_planner.models.weather import Reading
from sky_planner.providers.base import WeatherError, WeatherProvider
from sky_planner.providers.weatherstack import normalize

FUTURE_DATE = dt.date(2099, 6, 15)
FUTURE_TIME = dt.time(16, 0)


class FakeProvider(WeatherProvider):
    """Weather provider serving canned Weatherstack payloads.

    Payloads are keyed by location; a WeatherError registered for a
    location is raised instead.
    """

    name = "fake"
    base_url = "http://weather.invalid"

    def __init__(self, responses: dict[str, Any] | None = None):
        super().__init__(api_key="fake-key")
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[str] = []

    async def get_current(self, location: str) -> Reading:
        self.calls.append(location)
        response = self.responses[location]
        if isinstance(response, WeatherError):
            raise response
        return self._translate_response(response)

    def _translate_response(self, response_data: dict[str, Any]) -> Reading:
        return normalize(response_data)


def weatherstack_payload(
    temperature: float = 20,
    description: str = "Sunny",
    precip: float = 0,
    wind_speed: float = 0,
    uv_index: float | None = 1,
) -> dict[str, Any]:
    """Build a Weatherstack `current` response."""
    return {
        "request": {"type": "City", "query": "Test", "language": "en", "unit": "m"},
        "location": {"name": "Test", "country": "Testland"},
        "current": {
            "observation_time": "12:00 PM",
            "temperature": temperature,
            "weather_code": 113,
            "weather_descriptions": [description],
            "wind_speed": wind_speed,
            "wind_degree": 180,
            "wind_dir": "S",
            "pressure": 1015,
            "precip": precip,
            "humidity": 60,
            "cloudcover": 10,
            "feelslike": temperature,
            "uv_index": uv_index,
            "visibility": 10,
        },
    }


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from sky_planner.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def db_session():
    """Fresh in-memory database session."""
    from sky_planner.database.connection import (
        close_db,
        create_tables,
        get_db,
        init_db,
    )

    await init_db("sqlite+aiosqlite:///:memory:")
    await create_tables()
    async with get_db() as session:
        yield session
    await close_db()


# =============================================================================
# Readings and payloads
# =============================================================================


@pytest.fixture
def mild_reading() -> Reading:
    """Comfortable conditions: low risk, water bottle only."""
    return Reading(
        temperature_c=20,
        condition="Sunny",
        precipitation_pct=0,
        wind_speed_kmh=0,
        uv_index=1,
    )


@pytest.fixture
def cool_drizzle_reading() -> Reading:
    """Cool with light rain chance: low risk, but rain and warm gear."""
    return Reading(
        temperature_c=10,
        condition="Light drizzle",
        precipitation_pct=25,
        wind_speed_kmh=5,
        uv_index=3,
    )


@pytest.fixture
def severe_reading() -> Reading:
    """Hot, wet and windy: high risk on every factor."""
    return Reading(
        temperature_c=38,
        condition="Thunderstorm",
        precipitation_pct=80,
        wind_speed_kmh=30,
        uv_index=9,
    )


@pytest.fixture
def sunny_payload() -> dict[str, Any]:
    return weatherstack_payload(
        temperature=22, description="Partly cloudy", precip=0, wind_speed=13, uv_index=6
    )


@pytest.fixture
def stormy_payload() -> dict[str, Any]:
    return weatherstack_payload(
        temperature=38, description="Thunderstorm", precip=80, wind_speed=30, uv_index=9
    )


@pytest.fixture
def fake_provider(sunny_payload, stormy_payload) -> FakeProvider:
    """Fake provider knowing two locations."""
    return FakeProvider(
        {
            "Nairobi, Kenya": sunny_payload,
            "Mombasa, Kenya": stormy_payload,
        }
    )
