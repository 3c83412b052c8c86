"""Packing list recommendations.

Packing rules are evaluated independently against the same reading, in a
fixed order, and each matching rule appends its items. The resulting list
keeps rule order and is never sorted or deduplicated.

| Order | Condition              | Items                          |
|-------|------------------------|--------------------------------|
| 1     | always                 | Water bottle                   |
| 2     | precipitation > 20 %   | Umbrella, Waterproof jacket    |
| 3     | temperature < 15 °C    | Warm jacket, Blanket           |
| 4     | temperature > 25 °C    | Hat, Light clothing            |
| 5     | UV index > 5           | Sunscreen, Sunglasses          |
| 6     | wind > 15 km/h         | Windbreaker                    |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sky_planner.models.recommendation import PackingItem
from sky_planner.models.weather import Reading


@dataclass(frozen=True)
class PackingRule:
    """A rule that adds items to the packing list when it matches.

    Attributes:
        items: Items appended, in order, when the rule matches
        applies: Predicate over the reading
        description: Human-readable description of when the rule applies
    """

    items: tuple[PackingItem, ...]
    applies: Callable[[Reading], bool]
    description: str = ""

    def matches(self, reading: Reading) -> bool:
        """Check if this rule matches the given reading."""
        return self.applies(reading)


DEFAULT_PACKING_RULES: tuple[PackingRule, ...] = (
    PackingRule(
        items=(PackingItem.WATER_BOTTLE,),
        applies=lambda r: True,
        description="Always bring water",
    ),
    PackingRule(
        items=(PackingItem.UMBRELLA, PackingItem.WATERPROOF_JACKET),
        applies=lambda r: r.precipitation_pct > 20,
        description="Rain is possible",
    ),
    PackingRule(
        items=(PackingItem.WARM_JACKET, PackingItem.BLANKET),
        applies=lambda r: r.temperature_c < 15,
        description="Cool weather",
    ),
    PackingRule(
        items=(PackingItem.HAT, PackingItem.LIGHT_CLOTHING),
        applies=lambda r: r.temperature_c > 25,
        description="Warm weather",
    ),
    PackingRule(
        items=(PackingItem.SUNSCREEN, PackingItem.SUNGLASSES),
        applies=lambda r: r.uv_index > 5,
        description="High UV exposure",
    ),
    PackingRule(
        items=(PackingItem.WINDBREAKER,),
        applies=lambda r: r.wind_speed_kmh > 15,
        description="Windy conditions",
    ),
)


def generate_packing_list(
    reading: Reading,
    rules: tuple[PackingRule, ...] = DEFAULT_PACKING_RULES,
) -> list[str]:
    """Build the packing list for a reading.

    Args:
        reading: Normalized weather reading
        rules: Rules to evaluate, in order

    Returns:
        Item names in rule order
    """
    items: list[str] = []
    for rule in rules:
        if rule.matches(reading):
            items.extend(item.value for item in rule.items)
    return items
