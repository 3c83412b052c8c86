"""FastAPI dependencies for the planner and its collaborators."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sky_planner.config import get_settings
from sky_planner.database.connection import get_db_session
from sky_planner.planner import EventPlanner
from sky_planner.providers.base import WeatherProvider
from sky_planner.providers.weatherstack import WeatherstackProvider
from sky_planner.store import EventStore


async def get_weather_provider() -> AsyncGenerator[WeatherProvider, None]:
    """Provide a weather provider for the duration of a request."""
    async with WeatherstackProvider.from_settings(get_settings()) as provider:
        yield provider


async def get_planner(
    provider: WeatherProvider = Depends(get_weather_provider),
    db: AsyncSession = Depends(get_db_session),
) -> EventPlanner:
    """Provide an EventPlanner bound to the request's session."""
    return EventPlanner(provider, EventStore(db))
