"""Event routes.

Create, list, view, edit and delete weather-enriched events.
"""

from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from sky_planner.api.dependencies import get_planner
from sky_planner.formatting import (
    format_event_datetime,
    item_icon,
    reading_display,
    risk_badge_class,
    risk_icon,
)
from sky_planner.models.event import Event, EventCreate, EventUpdate
from sky_planner.models.recommendation import RiskLevel, TimeSlot
from sky_planner.models.weather import Reading
from sky_planner.planner import EventPlanner

router = APIRouter()


class PackingItemResponse(BaseModel):
    """A packing list entry with its icon."""

    name: str
    icon: str


class RiskResponse(BaseModel):
    """Risk level with presentation hints."""

    level: RiskLevel
    badge_class: str
    icon: str


class EventResponse(BaseModel):
    """An event as returned by the API."""

    id: str
    name: str
    location: str
    date: dt.date
    time: dt.time
    scheduled_for: str
    weather: Reading | None
    weather_display: dict[str, str] | None
    risk: RiskResponse | None
    packing_list: list[PackingItemResponse]
    time_slots: list[TimeSlot]
    created_at: dt.datetime | None
    updated_at: dt.datetime | None


def risk_response(level: RiskLevel) -> RiskResponse:
    return RiskResponse(
        level=level,
        badge_class=risk_badge_class(level),
        icon=risk_icon(level),
    )


def packing_response(items: list[str]) -> list[PackingItemResponse]:
    return [PackingItemResponse(name=item, icon=item_icon(item)) for item in items]


def event_response(event: Event) -> EventResponse:
    return EventResponse(
        id=event.id or "",
        name=event.name,
        location=event.location,
        date=event.date,
        time=event.time,
        scheduled_for=format_event_datetime(event.date, event.time),
        weather=event.weather,
        weather_display=reading_display(event.weather) if event.weather else None,
        risk=risk_response(event.risk_level) if event.risk_level else None,
        packing_list=packing_response(event.packing_list),
        time_slots=event.time_slots,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


@router.get("/", response_model=list[EventResponse])
async def list_events(
    planner: EventPlanner = Depends(get_planner),
) -> list[EventResponse]:
    """List all events, soonest first."""
    events = await planner.list_events()
    return [event_response(e) for e in events]


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventCreate,
    planner: EventPlanner = Depends(get_planner),
) -> EventResponse:
    """Create an event and enrich it with weather recommendations."""
    event = await planner.create_event(data)
    return event_response(event)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    planner: EventPlanner = Depends(get_planner),
) -> EventResponse:
    """Get a single event."""
    event = await planner.get_event(event_id)
    return event_response(event)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    data: EventUpdate,
    planner: EventPlanner = Depends(get_planner),
) -> EventResponse:
    """Edit an event. Weather is refreshed when the location or date changes."""
    event = await planner.update_event(event_id, data)
    return event_response(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    planner: EventPlanner = Depends(get_planner),
) -> None:
    """Delete an event."""
    await planner.delete_event(event_id)
