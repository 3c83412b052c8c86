"""Weatherstack provider.

## API Documentation Summary
Source: https://weatherstack.com/documentation

## Endpoint
- Base URL: http://api.weatherstack.com (HTTPS on paid plans)
- Current weather: GET /current?access_key={key}&query={location}&units=m

## Authentication
- API key passed as the `access_key` query parameter

## Response Format
```json
{
  "request": {"type": "City", "query": "Nairobi, Kenya", "unit": "m"},
  "location": {"name": "Nairobi", "country": "Kenya", ...},
  "current": {
    "temperature": 22,
    "weather_descriptions": ["Partly cloudy"],
    "precip": 0,
    "wind_speed": 13,
    "uv_index": 6,
    ...
  }
}
```

Errors are returned with HTTP 200 and an `error` object instead of
`current`:
```json
{"success": false, "error": {"code": 101, "type": "invalid_access_key", "info": "..."}}
```

## Variable Translation (metric units -> Reading)
| Weatherstack Field         | Reading Field      | Notes                         |
|----------------------------|--------------------|-------------------------------|
| temperature                | temperature_c      | Required, passed through      |
| weather_descriptions[0]    | condition          | Defaults to "Unknown"         |
| precip                     | precipitation_pct  | Defaults to 0                 |
| wind_speed                 | wind_speed_kmh     | Defaults to 0                 |
| uv_index                   | uv_index           | Default 5, rounded, 1-11      |
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import ValidationError

from sky_planner.config import Settings
from sky_planner.models.weather import (
    DEFAULT_UV_INDEX,
    UNKNOWN_CONDITION,
    UV_INDEX_MAX,
    UV_INDEX_MIN,
    Reading,
)
from sky_planner.providers.base import (
    ProviderError,
    UpstreamError,
    WeatherProvider,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "weatherstack"
INVALID_FORMAT_MESSAGE = "Invalid response format from weather API"
UNKNOWN_ERROR_MESSAGE = "Unknown API error"


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def normalize_uv_index(raw: Any) -> int:
    """Default, round and clamp a raw UV index into 1-11.

    Raises:
        UpstreamError: If the value is not numeric
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        # JSON integers can exceed float range
        return min(max(raw, UV_INDEX_MIN), UV_INDEX_MAX)
    value = _number(raw, "uv_index", default=DEFAULT_UV_INDEX)
    return min(max(_round_half_up(value), UV_INDEX_MIN), UV_INDEX_MAX)


def _number(raw: Any, field: str, default: float | None = None) -> float:
    if raw is None:
        if default is None:
            raise UpstreamError(
                f"{INVALID_FORMAT_MESSAGE}: missing '{field}'",
                provider=PROVIDER_NAME,
            )
        return default
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise UpstreamError(
            f"{INVALID_FORMAT_MESSAGE}: '{field}' is not numeric",
            provider=PROVIDER_NAME,
        )
    try:
        value = float(raw)
    except (ValueError, OverflowError) as e:
        raise UpstreamError(
            f"{INVALID_FORMAT_MESSAGE}: '{field}' is not numeric",
            provider=PROVIDER_NAME,
        ) from e
    if not math.isfinite(value):
        raise UpstreamError(
            f"{INVALID_FORMAT_MESSAGE}: '{field}' is not finite",
            provider=PROVIDER_NAME,
        )
    return value


def _condition(descriptions: Any) -> str:
    if isinstance(descriptions, list) and descriptions:
        first = descriptions[0]
        if isinstance(first, str) and first:
            return first
    return UNKNOWN_CONDITION


def normalize(payload: Any) -> Reading:
    """Translate a Weatherstack `current` response into a Reading.

    Args:
        payload: Decoded JSON body

    Returns:
        Normalized reading; `uv_index` is always within 1-11

    Raises:
        ProviderError: If the payload carries an error object
        UpstreamError: If the payload lacks a usable `current` section
    """
    if not isinstance(payload, dict):
        raise UpstreamError(INVALID_FORMAT_MESSAGE, provider=PROVIDER_NAME)

    error = payload.get("error")
    if error:
        info = error.get("info") if isinstance(error, dict) else None
        raise ProviderError(info or UNKNOWN_ERROR_MESSAGE, provider=PROVIDER_NAME)

    current = payload.get("current")
    if not isinstance(current, dict):
        raise UpstreamError(INVALID_FORMAT_MESSAGE, provider=PROVIDER_NAME)

    try:
        return Reading(
            temperature_c=_number(current.get("temperature"), "temperature"),
            condition=_condition(current.get("weather_descriptions")),
            precipitation_pct=_number(current.get("precip"), "precip", default=0),
            wind_speed_kmh=_number(current.get("wind_speed"), "wind_speed", default=0),
            uv_index=normalize_uv_index(current.get("uv_index")),
        )
    except ValidationError as e:
        raise UpstreamError(
            f"{INVALID_FORMAT_MESSAGE}: {e.error_count()} invalid field(s)",
            provider=PROVIDER_NAME,
        ) from e


class WeatherstackProvider(WeatherProvider):
    """Weatherstack current-conditions provider.

    Example:
        ```python
        async with WeatherstackProvider(api_key="your-api-key") as provider:
            reading = await provider.get_current("Nairobi, Kenya")
        ```
    """

    name = PROVIDER_NAME
    base_url = "http://api.weatherstack.com"
    requires_api_key = True

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherstackProvider:
        """Create a provider configured from application settings."""
        return cls(
            api_key=settings.weatherstack_api_key,
            user_agent=settings.user_agent,
            timeout=settings.weather_timeout_seconds,
            max_attempts=settings.weather_max_attempts,
            base_url=settings.weatherstack_base_url,
        )

    async def get_current(self, location: str) -> Reading:
        """Get current weather for a location from Weatherstack.

        Args:
            location: Free-text location (e.g., "Nairobi, Kenya")

        Returns:
            Normalized reading

        Raises:
            ValueError: If location is blank
            ProviderError: If the API key is missing or the API reports an error
            UpstreamError: If the response body is not usable
            TransportError: If the request fails
        """
        if not location or not location.strip():
            raise ValueError("Location is required")

        if not self.api_key:
            raise ProviderError(
                "API key required for Weatherstack",
                provider=self.name,
            )

        params: dict[str, Any] = {
            "access_key": self.api_key,
            "query": location.strip(),
            "units": "m",
        }

        logger.debug(f"Fetching current weather for {location!r}")
        response = await self._fetch(f"{self.base_url}/current", params=params)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Unparseable response from {self.name}")
            raise UpstreamError(
                f"Failed to parse response: {e}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        try:
            return self._translate_response(data)
        except ProviderError as e:
            error = data.get("error") if isinstance(data, dict) else None
            code = error.get("code") if isinstance(error, dict) else None
            logger.error(f"{self.name} API error {code}: {e.message}")
            raise
        except UpstreamError:
            logger.warning(f"Unexpected response format from {self.name}: {data!r}")
            raise

    def _translate_response(self, response_data: dict[str, Any]) -> Reading:
        """Translate a Weatherstack response. See module docstring for mapping."""
        return normalize(response_data)
