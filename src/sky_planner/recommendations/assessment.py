"""Combine the recommendation functions over a single reading."""

from __future__ import annotations

from sky_planner.models.recommendation import WeatherAssessment
from sky_planner.models.weather import Reading
from sky_planner.recommendations.packing import generate_packing_list
from sky_planner.recommendations.risk import classify
from sky_planner.recommendations.time_slots import generate_time_slots


def assess(reading: Reading) -> WeatherAssessment:
    """Derive risk, packing list and time slots from a reading.

    Each derivation is independent and pure; the result is a fresh
    partial event update that callers merge into an event.
    """
    return WeatherAssessment(
        weather=reading,
        risk_level=classify(reading),
        packing_list=generate_packing_list(reading),
        time_slots=generate_time_slots(reading),
    )
