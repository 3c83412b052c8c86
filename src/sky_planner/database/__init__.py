"""Database module for Sky Planner.

This module provides:
- SQLAlchemy async database connection
- The stored event model
"""

from sky_planner.database.connection import (
    close_db,
    create_tables,
    get_db,
    get_db_session,
    init_db,
)
from sky_planner.database.models import Base, EventRecord

__all__ = [
    # Connection
    "get_db",
    "get_db_session",
    "init_db",
    "close_db",
    "create_tables",
    # Models
    "Base",
    "EventRecord",
]
