"""Time slot recommendations for the event day.

The advisor annotates a fixed set of daytime slots with a risk level, using
the day's overall classification as the baseline: mornings and early
evenings are treated as low risk, midday carries the baseline, and late
afternoon is one step worse than a low baseline.

Five candidates are built but only the first three are recommended, to
keep the recommendation panel short.
"""

from __future__ import annotations

from sky_planner.models.recommendation import RiskLevel, TimeSlot
from sky_planner.models.weather import Reading
from sky_planner.recommendations.risk import classify

MAX_RECOMMENDED_SLOTS = 3


def candidate_time_slots(base_risk: RiskLevel) -> list[TimeSlot]:
    """Build every candidate slot for a baseline risk.

    Args:
        base_risk: Risk level of the day as a whole

    Returns:
        Candidates from 10:00 to 18:00, in time order
    """
    late_afternoon = RiskLevel.MEDIUM if base_risk == RiskLevel.LOW else RiskLevel.HIGH
    return [
        TimeSlot(label="10:00", risk=RiskLevel.LOW),
        TimeSlot(label="12:00", risk=base_risk),
        TimeSlot(label="14:00", risk=base_risk),
        TimeSlot(label="16:00", risk=late_afternoon),
        TimeSlot(label="18:00", risk=RiskLevel.LOW),
    ]


def generate_time_slots(reading: Reading) -> list[TimeSlot]:
    """Recommend time slots for a reading.

    Args:
        reading: Normalized weather reading

    Returns:
        Exactly three slots (10:00, 12:00, 14:00)
    """
    candidates = candidate_time_slots(classify(reading))
    # 16:00 and 18:00 are computed but not recommended
    return candidates[:MAX_RECOMMENDED_SLOTS]
