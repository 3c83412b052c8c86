"""Weather data providers."""

from sky_planner.providers.base import (
    ProviderError,
    RateLimitError,
    TransportError,
    UpstreamError,
    WeatherError,
    WeatherProvider,
)
from sky_planner.providers.weatherstack import WeatherstackProvider, normalize

__all__ = [
    "WeatherError",
    "ProviderError",
    "UpstreamError",
    "TransportError",
    "RateLimitError",
    "WeatherProvider",
    "WeatherstackProvider",
    "normalize",
]
