"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from sky_planner.config import Settings, get_settings


def test_defaults_from_test_environment():
    settings = get_settings()
    assert settings.weatherstack_api_key == "test-access-key"
    assert settings.weather_configured
    assert settings.weather_max_attempts == 1


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@db/sky", "postgresql+asyncpg://u:p@db/sky"),
        ("sqlite:///./events.db", "sqlite+aiosqlite:///./events.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_database_url_uses_async_driver(url: str, expected: str):
    assert Settings(database_url=url).database_url == expected


def test_log_level_case_insensitive():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("WEATHERSTACK_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.weatherstack_api_key is None
    assert not settings.weather_configured


@pytest.mark.parametrize("attempts", [0, 6])
def test_max_attempts_bounds(attempts: int):
    with pytest.raises(ValidationError):
        Settings(weather_max_attempts=attempts)


def test_settings_fields():
    """Test every setting is one the app or CLI reads."""
    assert set(Settings.model_fields) == {
        "app_name",
        "app_version",
        "debug",
        "log_level",
        "allowed_origins",
        "database_url",
        "database_echo",
        "create_tables_on_startup",
        "weatherstack_api_key",
        "weatherstack_base_url",
        "weather_timeout_seconds",
        "weather_max_attempts",
        "user_agent",
    }
