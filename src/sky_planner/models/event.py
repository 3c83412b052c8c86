"""Event models and form validation."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, field_validator, model_validator

from sky_planner.models.recommendation import RiskLevel, TimeSlot, WeatherAssessment
from sky_planner.models.weather import Reading


class EventValidationError(ValueError):
    """Raised when submitted event fields are missing or not schedulable."""


def validate_schedule(
    event_date: dt.date,
    event_time: dt.time,
    now: dt.datetime | None = None,
) -> dt.datetime:
    """Ensure the event starts strictly in the future.

    Args:
        event_date: Event date
        event_time: Event start time
        now: Reference time (defaults to local now)

    Returns:
        The combined start datetime

    Raises:
        EventValidationError: If the start is not after `now`
    """
    scheduled = dt.datetime.combine(event_date, event_time)
    reference = now or dt.datetime.now()
    if scheduled <= reference:
        raise EventValidationError("Please select a future date and time")
    return scheduled


def _require_text(value: str | None, field_name: str) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise EventValidationError(f"{field_name} is required")
    return value


class EventCreate(BaseModel):
    """Fields submitted when creating an event."""

    name: str = Field(..., description="Event name")
    location: str = Field(..., description="Free-text location, e.g. 'Nairobi, Kenya'")
    date: dt.date = Field(..., description="Event date")
    time: dt.time = Field(..., description="Event start time")

    @field_validator("name", "location")
    @classmethod
    def strip_required(cls, v: str, info) -> str:
        return _require_text(v, info.field_name.capitalize())

    @model_validator(mode="after")
    def check_future(self) -> "EventCreate":
        validate_schedule(self.date, self.time)
        return self


class EventUpdate(BaseModel):
    """Fields submitted when editing an event. Omitted fields are unchanged."""

    name: str | None = None
    location: str | None = None
    date: dt.date | None = None
    time: dt.time | None = None

    @field_validator("name", "location")
    @classmethod
    def strip_optional(cls, v: str | None, info) -> str | None:
        return _require_text(v, info.field_name.capitalize())


class Event(BaseModel):
    """An outdoor event enriched with weather-derived recommendations."""

    # Identity
    id: str | None = Field(default=None, description="Unique event identifier")

    # Submitted fields
    name: str = Field(..., description="Event name")
    location: str = Field(..., description="Free-text location")
    date: dt.date = Field(..., description="Event date")
    time: dt.time = Field(..., description="Event start time")

    # Derived fields
    weather: Reading | None = Field(default=None, description="Weather at creation/edit")
    risk_level: RiskLevel | None = Field(default=None, description="Weather risk")
    packing_list: list[str] = Field(
        default_factory=list, description="Recommended items, in rule order"
    )
    time_slots: list[TimeSlot] = Field(
        default_factory=list, description="Recommended time slots"
    )

    # Metadata
    created_at: dt.datetime | None = Field(default=None)
    updated_at: dt.datetime | None = Field(default=None)

    @property
    def starts_at(self) -> dt.datetime:
        """Combined start date and time."""
        return dt.datetime.combine(self.date, self.time)

    def with_assessment(self, assessment: WeatherAssessment) -> "Event":
        """Return a copy of this event with weather-derived fields replaced."""
        return self.model_copy(
            update={
                "weather": assessment.weather,
                "risk_level": assessment.risk_level,
                "packing_list": list(assessment.packing_list),
                "time_slots": list(assessment.time_slots),
            }
        )

    def needs_reassessment(self, update: EventUpdate) -> bool:
        """Check if an edit changes the location or date."""
        if update.location is not None and update.location != self.location:
            return True
        if update.date is not None and update.date != self.date:
            return True
        return False
