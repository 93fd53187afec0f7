"""
District bonuses.

Each building type belongs to a district; developed buildings in a
district raise that district's multiplier.
"""

from dataclasses import dataclass
from typing import Iterable

from bullpen.core.enums import BuildingType, District
from bullpen.core.models.city import Building

BUILDING_DISTRICTS: dict[BuildingType, District] = {
    BuildingType.RESTAURANT: District.ENTERTAINMENT,
    BuildingType.BAR: District.ENTERTAINMENT,
    BuildingType.RETAIL: District.COMMERCIAL,
    BuildingType.CORPORATE: District.COMMERCIAL,
    BuildingType.HOTEL: District.PERFORMANCE,
}

# Bonus each building contributes by state; vacant and renovating give nothing
STATE_BONUS: dict[int, float] = {
    0: 0.0,
    1: 0.0,
    2: 0.01,
    3: 0.02,
    4: 0.03,
}


@dataclass(frozen=True)
class DistrictBonuses:
    """Multipliers applied to attendance, income and training."""

    fan_mult: float = 1.0
    income_mult: float = 1.0
    training_mult: float = 1.0

    def to_dict(self) -> dict:
        return {
            "fan_mult": self.fan_mult,
            "income_mult": self.income_mult,
            "training_mult": self.training_mult,
        }


NO_BONUSES = DistrictBonuses()


def calculate_district_bonuses(buildings: Iterable[Building]) -> DistrictBonuses:
    """Sum per-building bonuses into one multiplier per district."""
    totals = {district: 0.0 for district in District}
    for building in buildings:
        totals[BUILDING_DISTRICTS[building.type]] += STATE_BONUS.get(building.state, 0.0)

    return DistrictBonuses(
        fan_mult=round(1.0 + totals[District.ENTERTAINMENT], 4),
        income_mult=round(1.0 + totals[District.COMMERCIAL], 4),
        training_mult=round(1.0 + totals[District.PERFORMANCE], 4),
    )


@dataclass
class DistrictSummary:
    district: District
    building_count: int
    developed_count: int  # State 2+
    bonus: float


def get_district_summary(buildings: Iterable[Building]) -> list[DistrictSummary]:
    """Per-district counts for display."""
    buildings = list(buildings)
    summaries = []
    for district in District:
        members = [b for b in buildings if b.state > 0 and BUILDING_DISTRICTS[b.type] == district]
        summaries.append(
            DistrictSummary(
                district=district,
                building_count=len(members),
                developed_count=sum(1 for b in members if b.is_open),
                bonus=round(sum(STATE_BONUS.get(b.state, 0.0) for b in members), 4),
            )
        )
    return summaries
