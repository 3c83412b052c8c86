"""FastAPI application and routes.

This module provides the REST API for Sky Planner.

## API Structure

- /api/events - Create, list, view, edit and delete events
- /api/weather - Weather and recommendations preview for a location
- /health - Health check

## Errors

Weather failures return 502 (503 when rate limited) with a user-facing
`detail` message and an `error` kind; no event is stored or changed.
"""

from sky_planner.api.app import create_app

__all__ = ["create_app"]
