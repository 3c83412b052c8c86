"""Exception handlers mapping domain errors to HTTP responses.

| Exception             | Status | Body detail                           |
|-----------------------|--------|---------------------------------------|
| ProviderError         | 502    | Provider message                      |
| UpstreamError         | 502    | Invalid response message              |
| TransportError        | 502    | Generic connection message            |
| RateLimitError        | 503    | Generic connection message            |
| EventNotFoundError    | 404    | "Event <id> not found"                |
| EventValidationError  | 422    | Validation message                    |
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sky_planner.models.event import EventValidationError
from sky_planner.planner import EventNotFoundError
from sky_planner.providers.base import RateLimitError, WeatherError

logger = logging.getLogger(__name__)


async def weather_error_handler(request: Request, exc: WeatherError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc.kind}: {exc.message}")
    status_code = status.HTTP_502_BAD_GATEWAY
    headers = None
    if isinstance(exc, RateLimitError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        if exc.retry_after:
            headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.user_message, "error": exc.kind},
        headers=headers,
    )


async def not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def validation_error_handler(
    request: Request, exc: EventValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain exception handlers to an application."""
    app.add_exception_handler(WeatherError, weather_error_handler)
    app.add_exception_handler(EventNotFoundError, not_found_handler)
    app.add_exception_handler(EventValidationError, validation_error_handler)
