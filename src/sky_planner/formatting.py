"""Display helpers for readings, risk levels and packing items.

These produce the strings and CSS/icon names the web front end renders.
Lookups are exhaustive over the enums; only free-form packing item names
that are not a known `PackingItem` fall back to a generic icon.
"""

from __future__ import annotations

import datetime as dt

from sky_planner.models.recommendation import PackingItem, RiskLevel
from sky_planner.models.weather import Reading

RISK_BADGE_CLASSES: dict[RiskLevel, str] = {
    RiskLevel.LOW: "bg-success",
    RiskLevel.MEDIUM: "bg-warning text-dark",
    RiskLevel.HIGH: "bg-danger",
}

RISK_ICONS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "bi-check-circle-fill",
    RiskLevel.MEDIUM: "bi-exclamation-triangle-fill",
    RiskLevel.HIGH: "bi-x-circle-fill",
}

ITEM_ICONS: dict[PackingItem, str] = {
    PackingItem.WATER_BOTTLE: "droplet",
    PackingItem.UMBRELLA: "umbrella",
    PackingItem.WATERPROOF_JACKET: "shield-check",
    PackingItem.WARM_JACKET: "thermometer-low",
    PackingItem.BLANKET: "grid-3x3",
    PackingItem.HAT: "person-badge",
    PackingItem.LIGHT_CLOTHING: "coat-hanger",
    PackingItem.SUNSCREEN: "sun",
    PackingItem.SUNGLASSES: "eyeglasses",
    PackingItem.WINDBREAKER: "wind",
}

DEFAULT_ITEM_ICON = "check-circle"


def _number(value: float) -> str:
    """Format a number without a trailing '.0'."""
    return f"{value:g}"


def format_temperature(temperature_c: float) -> str:
    return f"{_number(temperature_c)}°C"


def format_precipitation(precipitation_pct: float) -> str:
    return f"{_number(precipitation_pct)}%"


def format_wind_speed(wind_speed_kmh: float) -> str:
    return f"{_number(wind_speed_kmh)} km/h"


def format_uv(reading: Reading) -> str:
    """Format UV index with its band, e.g. '9 (Very High)'."""
    return f"{reading.uv_index} ({reading.uv_band.value})"


def reading_display(reading: Reading) -> dict[str, str]:
    """Display strings for every field of a reading."""
    return {
        "temperature": format_temperature(reading.temperature_c),
        "condition": reading.condition,
        "precipitation": format_precipitation(reading.precipitation_pct),
        "wind_speed": format_wind_speed(reading.wind_speed_kmh),
        "uv_index": format_uv(reading),
    }


def describe_conditions(reading: Reading) -> str:
    """One-line summary of a reading."""
    return (
        f"{reading.condition}, {reading.temperature_c:.0f}°C "
        f"({reading.temperature_f:.0f}°F), "
        f"{format_precipitation(reading.precipitation_pct)} precipitation, "
        f"wind {format_wind_speed(reading.wind_speed_kmh)}, "
        f"UV {format_uv(reading)}"
    )


def format_event_datetime(event_date: dt.date, event_time: dt.time) -> str:
    """Format an event's schedule, e.g. 'Oct 21, 2025, 4:00 PM'."""
    hour = event_time.hour % 12 or 12
    period = "AM" if event_time.hour < 12 else "PM"
    return (
        f"{event_date:%b} {event_date.day}, {event_date.year}, "
        f"{hour}:{event_time.minute:02d} {period}"
    )


def risk_badge_class(risk: RiskLevel) -> str:
    return RISK_BADGE_CLASSES[risk]


def risk_icon(risk: RiskLevel) -> str:
    return RISK_ICONS[risk]


def item_icon(item: str) -> str:
    """Icon name for a packing list entry."""
    try:
        return ITEM_ICONS[PackingItem(item)]
    except ValueError:
        return DEFAULT_ITEM_ICON
