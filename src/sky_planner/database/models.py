"""Database models for Sky Planner.

## Schema Overview

```
events
  id            string UUID primary key
  name          event name
  location      free-text location used for the weather lookup
  date, time    scheduled start
  weather       JSON Reading captured at creation / last reassessment
  risk_level    low | medium | high
  packing_list  JSON list of item names, in rule order
  time_slots    JSON list of {label, risk}
```

Column types are portable so the same schema runs on SQLite (aiosqlite)
and PostgreSQL (asyncpg).
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Any

from sqlalchemy import JSON, Date, DateTime, Index, String, Time
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    type_annotation_map = {
        dict[str, Any]: JSON,
        list[Any]: JSON,
    }


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class EventRecord(Base):
    """A stored outdoor event and its weather-derived fields."""

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)

    # Weather-derived fields
    weather: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    risk_level: Mapped[str | None] = mapped_column(String(10))
    packing_list: Mapped[list[Any]] = mapped_column(JSON, default=list)
    time_slots: Mapped[list[Any]] = mapped_column(JSON, default=list)

    # Timestamps
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (Index("ix_events_schedule", "date", "time"),)

    def __repr__(self) -> str:
        return f"<EventRecord {self.id} {self.name!r}>"
