"""Event persistence.

`EventStore` converts between the `Event` domain model and the `events`
table. It commits on every write so that a workflow either stores a fully
enriched event or nothing at all.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sky_planner.database.models import EventRecord
from sky_planner.models.event import Event
from sky_planner.models.recommendation import RiskLevel, TimeSlot
from sky_planner.models.weather import Reading

logger = logging.getLogger(__name__)


def record_to_event(record: EventRecord) -> Event:
    """Build an Event from a stored record."""
    return Event(
        id=record.id,
        name=record.name,
        location=record.location,
        date=record.date,
        time=record.time,
        weather=Reading.model_validate(record.weather) if record.weather else None,
        risk_level=RiskLevel(record.risk_level) if record.risk_level else None,
        packing_list=list(record.packing_list or []),
        time_slots=[TimeSlot.model_validate(s) for s in record.time_slots or []],
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _apply_event(record: EventRecord, event: Event) -> None:
    record.name = event.name
    record.location = event.location
    record.date = event.date
    record.time = event.time
    record.weather = event.weather.model_dump(mode="json") if event.weather else None
    record.risk_level = event.risk_level.value if event.risk_level else None
    record.packing_list = list(event.packing_list)
    record.time_slots = [s.model_dump(mode="json") for s in event.time_slots]


class EventStore:
    """CRUD access to stored events.

    Example:
        ```python
        async with get_db() as session:
            store = EventStore(session)
            events = await store.list_events()
        ```
    """

    def __init__(self, db: AsyncSession):
        """Initialize the store.

        Args:
            db: Database session
        """
        self.db = db

    async def list_events(self) -> list[Event]:
        """List all events, soonest first."""
        result = await self.db.execute(
            select(EventRecord).order_by(EventRecord.date, EventRecord.time)
        )
        return [record_to_event(r) for r in result.scalars().all()]

    async def get_event(self, event_id: str) -> Event | None:
        """Get an event by id, or None if it does not exist."""
        record = await self.db.get(EventRecord, event_id)
        return record_to_event(record) if record else None

    async def add_event(self, event: Event) -> Event:
        """Store a new event and return it with its assigned id."""
        record = EventRecord()
        if event.id:
            record.id = event.id
        _apply_event(record, event)

        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)

        logger.info(f"Stored event {record.id} ({record.name!r})")
        return record_to_event(record)

    async def save_event(self, event: Event) -> Event | None:
        """Overwrite an existing event. Returns None if it does not exist."""
        if not event.id:
            raise ValueError("Cannot save an event without an id")

        record = await self.db.get(EventRecord, event.id)
        if record is None:
            return None

        _apply_event(record, event)
        await self.db.commit()
        await self.db.refresh(record)

        logger.info(f"Updated event {record.id}")
        return record_to_event(record)

    async def delete_event(self, event_id: str) -> bool:
        """Delete an event. Returns False if it does not exist."""
        record = await self.db.get(EventRecord, event_id)
        if record is None:
            return False

        await self.db.delete(record)
        await self.db.commit()

        logger.info(f"Deleted event {event_id}")
        return True
