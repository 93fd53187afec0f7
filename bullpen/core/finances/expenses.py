"""Season expenses."""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from bullpen.core.enums import Tier
from bullpen.core.finances.config import DEFAULT_FINANCIAL_CONFIG, FinancialConfig
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.franchise import Franchise
from bullpen.core.models.player import Player


@dataclass
class ExpenseBreakdown:
    player_salaries: int = 0
    coaching_salaries: int = 0
    stadium_maintenance: int = 0
    travel: int = 0
    marketing: int = 0
    debt_service: int = 0

    @property
    def total(self) -> int:
        return (
            self.player_salaries
            + self.coaching_salaries
            + self.stadium_maintenance
            + self.travel
            + self.marketing
            + self.debt_service
        )

    def to_dict(self) -> dict:
        return {
            "player_salaries": self.player_salaries,
            "coaching_salaries": self.coaching_salaries,
            "stadium_maintenance": self.stadium_maintenance,
            "travel": self.travel,
            "marketing": self.marketing,
            "debt_service": self.debt_service,
            "total": self.total,
        }


def calculate_player_salaries(players: Iterable[Player]) -> int:
    """Salaries of everyone on the organization's roster."""
    return sum(p.salary for p in players if p.is_on_roster)


def calculate_coaching_salaries(franchise: Franchise) -> int:
    return franchise.coaching_salaries


def calculate_stadium_maintenance(
    tier: Tier,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> int:
    return round(get_tier_config(tier, tier_configs).stadium_value * config.maintenance_pct)


def calculate_travel_costs(
    tier: Tier, tier_configs: Optional[Mapping[Tier, TierConfig]] = None
) -> int:
    return get_tier_config(tier, tier_configs).travel_cost


def calculate_debt_service(
    reserves: int, config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG
) -> int:
    """Interest on negative reserves; nothing when solvent."""
    if reserves >= 0:
        return 0
    return round(abs(reserves) * config.debt_interest_rate)
