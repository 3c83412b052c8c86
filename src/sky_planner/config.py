"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Secrets (the weather API key) should be provided via environment variables,
not committed config files.

## Environment Variables

- WEATHERSTACK_API_KEY: Weatherstack access key (required to fetch weather)
- DATABASE_URL: Database connection string (default: local SQLite file)
- WEATHER_TIMEOUT_SECONDS: HTTP timeout for weather requests (default: 10)
- WEATHER_MAX_ATTEMPTS: Attempts per weather request on network errors
  (default: 1, no automatic retry)
- LOG_LEVEL: Logging level (default: INFO)
- DEBUG: Enable debug mode (default: false)

## Example .env file

```
WEATHERSTACK_API_KEY=your-weatherstack-access-key
DATABASE_URL=sqlite+aiosqlite:///./sky_planner.db
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Sky Planner"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./sky_planner.db",
        description="Async SQLAlchemy connection string",
    )
    database_echo: bool = False  # Log SQL queries
    create_tables_on_startup: bool = True

    # Weather provider
    weatherstack_api_key: str | None = None
    weatherstack_base_url: str = "http://api.weatherstack.com"
    weather_timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    weather_max_attempts: int = Field(default=1, ge=1, le=5)
    user_agent: str = "sky-planner/0.1.0"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure the database URL uses an async driver."""
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @property
    def weather_configured(self) -> bool:
        """Check if a weather API key is configured."""
        return bool(self.weatherstack_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
