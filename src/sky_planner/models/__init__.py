"""Domain models for weather-aware event planning."""

from sky_planner.models.weather import Reading, UVBand
from sky_planner.models.recommendation import (
    PackingItem,
    RiskLevel,
    TimeSlot,
    WeatherAssessment,
)
from sky_planner.models.event import (
    Event,
    EventCreate,
    EventUpdate,
    EventValidationError,
    validate_schedule,
)

__all__ = [
    # Weather
    "Reading",
    "UVBand",
    # Recommendation
    "PackingItem",
    "RiskLevel",
    "TimeSlot",
    "WeatherAssessment",
    # Event
    "Event",
    "EventCreate",
    "EventUpdate",
    "EventValidationError",
    "validate_schedule",
]
