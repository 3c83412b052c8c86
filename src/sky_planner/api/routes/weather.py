"""Weather preview routes.

Lets the front end show the assessment for a location before an event is
saved.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from sky_planner.api.dependencies import get_planner
from sky_planner.api.routes.events import (
    PackingItemResponse,
    RiskResponse,
    packing_response,
    risk_response,
)
from sky_planner.formatting import reading_display
from sky_planner.models.recommendation import TimeSlot
from sky_planner.models.weather import Reading
from sky_planner.planner import EventPlanner

router = APIRouter()


class AssessmentResponse(BaseModel):
    """Weather and recommendations for a location."""

    location: str
    weather: Reading
    weather_display: dict[str, str]
    risk: RiskResponse
    packing_list: list[PackingItemResponse]
    time_slots: list[TimeSlot]


@router.get("/", response_model=AssessmentResponse)
async def preview_weather(
    location: str = Query(..., min_length=1, description="Free-text location"),
    planner: EventPlanner = Depends(get_planner),
) -> AssessmentResponse:
    """Get current weather and recommendations for a location."""
    assessment = await planner.preview(location)
    return AssessmentResponse(
        location=location,
        weather=assessment.weather,
        weather_display=reading_display(assessment.weather),
        risk=risk_response(assessment.risk_level),
        packing_list=packing_response(assessment.packing_list),
        time_slots=assessment.time_slots,
    )
