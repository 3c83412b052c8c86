"""Normalized weather reading models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

UV_INDEX_MIN = 1
UV_INDEX_MAX = 11
DEFAULT_UV_INDEX = 5
UNKNOWN_CONDITION = "Unknown"


class UVBand(str, Enum):
    """Descriptive UV exposure bands."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"
    EXTREME = "Extreme"

    @classmethod
    def from_index(cls, uv_index: float) -> "UVBand":
        """Map a UV index to its descriptive band.

        Bands follow the WHO scale:
            <= 2  Low
            <= 5  Moderate
            <= 7  High
            <= 10 Very High
            11+   Extreme
        """
        if uv_index <= 2:
            return cls.LOW
        if uv_index <= 5:
            return cls.MODERATE
        if uv_index <= 7:
            return cls.HIGH
        if uv_index <= 10:
            return cls.VERY_HIGH
        return cls.EXTREME


class Reading(BaseModel):
    """A normalized snapshot of current weather at an event location.

    Readings are produced by the provider normalizer and consumed by every
    recommendation function. They are immutable; recommendation code never
    writes back into a reading.
    """

    model_config = ConfigDict(frozen=True)

    temperature_c: float = Field(..., description="Temperature in Celsius")
    condition: str = Field(
        default=UNKNOWN_CONDITION, description="Free-text weather description"
    )
    precipitation_pct: float = Field(
        default=0, ge=0, description="Precipitation as reported by the provider (%)"
    )
    wind_speed_kmh: float = Field(
        default=0, ge=0, description="Wind speed in kilometers per hour"
    )
    uv_index: int = Field(
        default=DEFAULT_UV_INDEX,
        ge=UV_INDEX_MIN,
        le=UV_INDEX_MAX,
        description="UV index, always within 1-11",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uv_band(self) -> UVBand:
        """Descriptive band for the UV index."""
        return UVBand.from_index(self.uv_index)

    @property
    def temperature_f(self) -> float:
        """Temperature in Fahrenheit."""
        return self.temperature_c * 9 / 5 + 32
