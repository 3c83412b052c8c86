"""Recommendation engine for weather-based event planning."""

from sky_planner.recommendations.risk import classify, risk_score
from sky_planner.recommendations.packing import (
    DEFAULT_PACKING_RULES,
    PackingRule,
    generate_packing_list,
)
from sky_planner.recommendations.time_slots import (
    candidate_time_slots,
    generate_time_slots,
)
from sky_planner.recommendations.assessment import assess

__all__ = [
    "classify",
    "risk_score",
    "DEFAULT_PACKING_RULES",
    "PackingRule",
    "generate_packing_list",
    "candidate_time_slots",
    "generate_time_slots",
    "assess",
]
