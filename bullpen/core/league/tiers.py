"""
Tier configuration table.

One immutable record per rung of the ladder. Engines take the table as
an argument (defaulting to TIER_CONFIGS) so balance tests can swap in
alternates.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from bullpen.core.enums import Tier


@dataclass(frozen=True)
class PromotionRequirements:
    """Everything a franchise must hold at once to move up."""

    win_pct: float
    consecutive_years: int
    reserves: int
    city_pride: int
    division_title: bool = False
    league_championship: bool = False


@dataclass(frozen=True)
class TierConfig:
    tier: Tier
    name: str
    budget: int
    stadium_capacity: int
    season_length: int
    average_opponent_strength: int
    player_age_range: tuple[int, int]
    rating_range: tuple[int, int]
    scouting_budget: int
    ticket_price_range: tuple[int, int]
    city_population: int
    unemployment_rate: float
    median_income: int
    min_salary: int
    max_salary: int
    stadium_value: int
    travel_cost: int
    promotion_requirements: Optional[PromotionRequirements]


TIER_CONFIGS: Mapping[Tier, TierConfig] = MappingProxyType({
    Tier.LOW_A: TierConfig(
        tier=Tier.LOW_A,
        name="Low-A",
        budget=500_000,
        stadium_capacity=2500,
        season_length=132,
        average_opponent_strength=42,
        player_age_range=(18, 21),
        rating_range=(30, 55),
        scouting_budget=50_000,
        ticket_price_range=(5, 12),
        city_population=15_000,
        unemployment_rate=18,
        median_income=32_000,
        min_salary=10_000,
        max_salary=50_000,
        stadium_value=5_000_000,
        travel_cost=50_000,
        promotion_requirements=PromotionRequirements(
            win_pct=0.55, consecutive_years=2, reserves=50_000, city_pride=50,
        ),
    ),
    Tier.HIGH_A: TierConfig(
        tier=Tier.HIGH_A,
        name="High-A",
        budget=2_000_000,
        stadium_capacity=5000,
        season_length=132,
        average_opponent_strength=48,
        player_age_range=(20, 23),
        rating_range=(40, 65),
        scouting_budget=150_000,
        ticket_price_range=(8, 20),
        city_population=25_000,
        unemployment_rate=12,
        median_income=38_000,
        min_salary=30_000,
        max_salary=150_000,
        stadium_value=15_000_000,
        travel_cost=100_000,
        promotion_requirements=PromotionRequirements(
            win_pct=0.575, consecutive_years=2, reserves=200_000, city_pride=60,
            division_title=True,
        ),
    ),
    Tier.DOUBLE_A: TierConfig(
        tier=Tier.DOUBLE_A,
        name="Double-A",
        budget=8_000_000,
        stadium_capacity=10_000,
        season_length=138,
        average_opponent_strength=55,
        player_age_range=(22, 25),
        rating_range=(50, 72),
        scouting_budget=300_000,
        ticket_price_range=(12, 35),
        city_population=45_000,
        unemployment_rate=7,
        median_income=48_000,
        min_salary=100_000,
        max_salary=500_000,
        stadium_value=40_000_000,
        travel_cost=200_000,
        promotion_requirements=PromotionRequirements(
            win_pct=0.6, consecutive_years=2, reserves=500_000, city_pride=70,
            division_title=True,
        ),
    ),
    Tier.TRIPLE_A: TierConfig(
        tier=Tier.TRIPLE_A,
        name="Triple-A",
        budget=25_000_000,
        stadium_capacity=18_000,
        season_length=144,
        average_opponent_strength=62,
        player_age_range=(23, 27),
        rating_range=(60, 80),
        scouting_budget=500_000,
        ticket_price_range=(18, 55),
        city_population=85_000,
        unemployment_rate=4,
        median_income=58_000,
        min_salary=300_000,
        max_salary=1_500_000,
        stadium_value=80_000_000,
        travel_cost=350_000,
        promotion_requirements=PromotionRequirements(
            win_pct=0.6, consecutive_years=2, reserves=2_000_000, city_pride=80,
            league_championship=True,
        ),
    ),
    Tier.MLB: TierConfig(
        tier=Tier.MLB,
        name="MLB",
        budget=150_000_000,
        stadium_capacity=42_000,
        season_length=162,
        average_opponent_strength=70,
        player_age_range=(24, 35),
        rating_range=(70, 85),
        scouting_budget=2_000_000,
        ticket_price_range=(25, 150),
        city_population=200_000,
        unemployment_rate=3,
        median_income=72_000,
        min_salary=750_000,
        max_salary=30_000_000,
        stadium_value=500_000_000,
        travel_cost=500_000,
        promotion_requirements=None,  # Top of the ladder
    ),
})


def get_tier_config(
    tier: Tier, tier_configs: Optional[Mapping[Tier, TierConfig]] = None
) -> TierConfig:
    """Look up a tier, optionally in an alternate table."""
    return (tier_configs or TIER_CONFIGS)[tier]
