"""Event planning workflows.

The planner is the single place where user requests meet the weather
provider, the recommendation engine and the event store:

1. Create: fetch weather for the location, assess it, store the event.
2. Edit: merge submitted fields; if the location or date changed, fetch and
   assess again. Otherwise the stored weather fields are kept as they are.
3. Delete: remove the event.

Weather failures propagate to the caller unchanged. Because the store is
only written after a successful assessment, a failed fetch never leaves a
partially enriched event behind.
"""

from __future__ import annotations

import logging

from sky_planner.models.event import (
    Event,
    EventCreate,
    EventUpdate,
    validate_schedule,
)
from sky_planner.models.recommendation import WeatherAssessment
from sky_planner.providers.base import WeatherProvider
from sky_planner.recommendations.assessment import assess
from sky_planner.store import EventStore

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event id does not exist."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class EventPlanner:
    """Create, edit and delete weather-enriched events.

    Example:
        ```python
        async with get_db() as session, WeatherstackProvider.from_settings(settings) as provider:
            planner = EventPlanner(provider, EventStore(session))
            event = await planner.create_event(
                EventCreate(name="Picnic", location="Nairobi", date=..., time=...)
            )
            print(event.risk_level, event.packing_list)
        ```
    """

    def __init__(self, provider: WeatherProvider, store: EventStore):
        """Initialize the planner.

        Args:
            provider: Weather provider used for lookups
            store: Event persistence
        """
        self.provider = provider
        self.store = store

    async def preview(self, location: str) -> WeatherAssessment:
        """Fetch and assess weather for a location without storing anything."""
        reading = await self.provider.get_current(location)
        return assess(reading)

    async def list_events(self) -> list[Event]:
        """List all events, soonest first."""
        return await self.store.list_events()

    async def get_event(self, event_id: str) -> Event:
        """Get an event by id.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        event = await self.store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def create_event(self, data: EventCreate) -> Event:
        """Create an event enriched with weather recommendations.

        Raises:
            WeatherError: If weather cannot be fetched; nothing is stored
        """
        assessment = await self.preview(data.location)

        event = Event(
            name=data.name,
            location=data.location,
            date=data.date,
            time=data.time,
        ).with_assessment(assessment)

        stored = await self.store.add_event(event)
        logger.info(
            f"Created event {stored.id} at {stored.location!r} "
            f"with {assessment.risk_level.value} risk"
        )
        return stored

    async def update_event(self, event_id: str, data: EventUpdate) -> Event:
        """Apply an edit to an event.

        Weather-derived fields are recomputed only when the location or date
        changes.

        Raises:
            EventNotFoundError: If the event does not exist
            EventValidationError: If the edited schedule is not in the future
            WeatherError: If weather cannot be fetched; the event is unchanged
        """
        current = await self.get_event(event_id)

        changes = data.model_dump(exclude_none=True)
        updated = current.model_copy(update=changes)
        validate_schedule(updated.date, updated.time)

        if current.needs_reassessment(data):
            logger.info(f"Location or date changed for event {event_id}, reassessing")
            assessment = await self.preview(updated.location)
            updated = updated.with_assessment(assessment)

        saved = await self.store.save_event(updated)
        if saved is None:
            raise EventNotFoundError(event_id)
        return saved

    async def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        if not await self.store.delete_event(event_id):
            raise EventNotFoundError(event_id)
