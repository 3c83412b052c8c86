"""Base weather provider abstraction.

This module defines the interface for weather data providers and the error
taxonomy every provider raises.

## Canonical Data Format

Providers translate their API responses into the `Reading` model defined in
`sky_planner.models.weather`:
- Temperature: Celsius (°C)
- Wind speed: kilometers per hour (km/h)
- Precipitation: percentage as reported by the provider
- UV index: integer clamped to 1-11

## Errors

| Exception       | Raised when                                            |
|-----------------|--------------------------------------------------------|
| ProviderError   | The provider returned an explicit error payload        |
| UpstreamError   | The response body lacks the expected shape             |
| TransportError  | Non-success HTTP status, timeout or network failure    |
| RateLimitError  | HTTP 429 (a TransportError)                            |

Callers surface these to the user and must not persist a partially
enriched event when one is raised.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from sky_planner.models.weather import Reading

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_MESSAGE = (
    "Failed to fetch weather data. Please check your API key and connection."
)


class WeatherError(Exception):
    """Base exception for weather provider errors."""

    kind = "weather_error"

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.response_body = response_body

    @property
    def user_message(self) -> str:
        """Message suitable for showing to the user."""
        return f"Weather API error: {self.message}"


class ProviderError(WeatherError):
    """Raised when the provider returns an explicit error payload."""

    kind = "provider_error"


class UpstreamError(WeatherError):
    """Raised when a successful response has an unrecognizable body."""

    kind = "upstream_error"


class TransportError(WeatherError):
    """Raised on non-success status codes and network failures."""

    kind = "transport_error"

    @property
    def user_message(self) -> str:
        return TRANSPORT_ERROR_MESSAGE


class RateLimitError(TransportError):
    """Raised when provider rate limit is exceeded."""

    kind = "rate_limited"

    def __init__(
        self,
        provider: str,
        retry_after: int | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            f"Rate limit exceeded for {provider}",
            provider=provider,
            status_code=status_code,
        )
        self.retry_after = retry_after


class WeatherProvider(ABC):
    """Abstract base class for weather data providers.

    Attributes:
        name: Human-readable provider name
        base_url: Base URL for the API
        requires_api_key: Whether this provider requires an API key

    Example:
        ```python
        async with WeatherstackProvider(api_key="your-key") as provider:
            reading = await provider.get_current("Nairobi, Kenya")
        ```
    """

    name: str
    base_url: str
    requires_api_key: bool = False

    def __init__(
        self,
        api_key: str | None = None,
        user_agent: str | None = None,
        timeout: float = 30.0,
        max_attempts: int = 1,
        base_url: str | None = None,
    ):
        """Initialize the provider.

        Args:
            api_key: API key if required by the provider
            user_agent: User-Agent string for requests
            timeout: Request timeout in seconds
            max_attempts: Attempts per request for timeouts/network errors
                (1 disables retrying)
            base_url: Override the provider's default base URL
        """
        self.api_key = api_key
        self.user_agent = user_agent or "sky-planner/0.1.0"
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        if base_url:
            self.base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> WeatherProvider:
        """Enter async context manager."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    async def _fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Fetch data from the API.

        Timeouts and network errors are retried up to `max_attempts` times
        in total; the final failure is raised as a TransportError.

        Raises:
            TransportError: On non-success status or network failure
            RateLimitError: If rate limit is exceeded
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=1, min=2, max=10),
                retry=retry_if_exception_type(
                    (httpx.TimeoutException, httpx.NetworkError)
                ),
                reraise=True,
            ):
                with attempt:
                    response = await self._get(url, params=params, headers=headers)
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            logger.error(f"{self.name} request failed: {e!r}")
            raise TransportError(
                f"Request to {self.name} failed: {e}",
                provider=self.name,
            ) from e

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(f"{self.name} rate limit exceeded")
            raise RateLimitError(
                self.name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                status_code=429,
            )

        if response.status_code >= 400:
            logger.error(f"{self.name} responded with status {response.status_code}")
            raise TransportError(
                f"API responded with status {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

        return response

    async def _get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        client = self._get_client()
        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)
        return await client.get(url, params=params, headers=request_headers)

    @abstractmethod
    async def get_current(self, location: str) -> Reading:
        """Get current weather for a free-text location.

        Args:
            location: Location name (e.g., "Nairobi, Kenya")

        Returns:
            Normalized reading

        Raises:
            WeatherError: If the reading cannot be retrieved
        """
        pass

    @abstractmethod
    def _translate_response(self, response_data: dict[str, Any]) -> Reading:
        """Translate a provider-specific response to a Reading."""
        pass
