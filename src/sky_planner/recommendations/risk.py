"""Risk classification for event-day weather.

Each weather factor contributes 0, 1 or 2 points; the total maps to a
risk level. Bands are checked most severe first, so a temperature of 3°C
scores 2 (below 5) rather than 1 (below 10).

| Factor            | +2           | +1           |
|-------------------|--------------|--------------|
| Temperature (°C)  | < 5 or > 35  | < 10 or > 30 |
| Precipitation (%) | > 70         | > 30         |
| Wind (km/h)       | > 25         | > 15         |

Total >= 3 is high risk, >= 1 medium, 0 low.
"""

from __future__ import annotations

from sky_planner.models.recommendation import RiskLevel
from sky_planner.models.weather import Reading

HIGH_RISK_SCORE = 3
MEDIUM_RISK_SCORE = 1


def temperature_score(temperature_c: float) -> int:
    """Score temperature extremes."""
    if temperature_c < 5 or temperature_c > 35:
        return 2
    if temperature_c < 10 or temperature_c > 30:
        return 1
    return 0


def precipitation_score(precipitation_pct: float) -> int:
    """Score precipitation."""
    if precipitation_pct > 70:
        return 2
    if precipitation_pct > 30:
        return 1
    return 0


def wind_score(wind_speed_kmh: float) -> int:
    """Score wind speed."""
    if wind_speed_kmh > 25:
        return 2
    if wind_speed_kmh > 15:
        return 1
    return 0


def risk_score(reading: Reading) -> int:
    """Total risk score (0-6) for a reading."""
    return (
        temperature_score(reading.temperature_c)
        + precipitation_score(reading.precipitation_pct)
        + wind_score(reading.wind_speed_kmh)
    )


def classify(reading: Reading) -> RiskLevel:
    """Classify a reading into a risk level.

    Args:
        reading: Normalized weather reading

    Returns:
        RiskLevel for the reading
    """
    score = risk_score(reading)
    if score >= HIGH_RISK_SCORE:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW
