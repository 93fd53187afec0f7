"""Downtown districts and city growth."""

from bullpen.core.city.districts import (
    BUILDING_DISTRICTS,
    NO_BONUSES,
    DistrictBonuses,
    DistrictSummary,
    calculate_district_bonuses,
    get_district_summary,
)
from bullpen.core.city.growth import (
    DEFAULT_CITY_CONFIG,
    BuildingUpgrade,
    CityConfig,
    CityEvent,
    CityGrowthResult,
    calculate_success_score,
    determine_building_upgrades,
    generate_initial_city,
    simulate_city_growth,
)

__all__ = [
    "BUILDING_DISTRICTS",
    "BuildingUpgrade",
    "CityConfig",
    "CityEvent",
    "CityGrowthResult",
    "DEFAULT_CITY_CONFIG",
    "DistrictBonuses",
    "DistrictSummary",
    "NO_BONUSES",
    "calculate_district_bonuses",
    "calculate_success_score",
    "determine_building_upgrades",
    "generate_initial_city",
    "get_district_summary",
    "simulate_city_growth",
]
