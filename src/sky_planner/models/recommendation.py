"""Recommendation models derived from a weather reading."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sky_planner.models.weather import Reading


class RiskLevel(str, Enum):
    """Qualitative weather risk for an event day."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PackingItem(str, Enum):
    """Items the packing list generator can recommend.

    Members compare equal to their display names, so a packing list of
    members is also a list of strings.
    """

    WATER_BOTTLE = "Water bottle"
    UMBRELLA = "Umbrella"
    WATERPROOF_JACKET = "Waterproof jacket"
    WARM_JACKET = "Warm jacket"
    BLANKET = "Blanket"
    HAT = "Hat"
    LIGHT_CLOTHING = "Light clothing"
    SUNSCREEN = "Sunscreen"
    SUNGLASSES = "Sunglasses"
    WINDBREAKER = "Windbreaker"


class TimeSlot(BaseModel):
    """A recommended window in the event day and its risk."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Slot start, e.g. '10:00'")
    risk: RiskLevel = Field(..., description="Risk during this slot")


class WeatherAssessment(BaseModel):
    """Everything the engine derives from one reading.

    This is the partial event update merged into an event record on
    creation, or on edit when the location or date changed.
    """

    weather: Reading
    risk_level: RiskLevel
    packing_list: list[str] = Field(default_factory=list)
    time_slots: list[TimeSlot] = Field(default_factory=list)
