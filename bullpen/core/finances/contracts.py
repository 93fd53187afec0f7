"""
Contracts and free agency.

Salary is driven by a blend of current rating and potential, scaled into
the tier's salary band. Re-signing odds come from morale, team success
and how the offer compares with market rate.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping, Optional

from bullpen.core.enums import RosterStatus, Tier
from bullpen.core.league.ai_teams import AI_TEAMS
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.player import Player
from bullpen.core.rng import RandomSource, chance, choice, default_source, randint

logger = logging.getLogger(__name__)

LUXURY_TAX_MULTIPLIER = 1.2


@dataclass(frozen=True)
class ContractLengthBand:
    min_rating: int
    min_years: int
    max_years: int


# Highest band first
CONTRACT_LENGTH_BANDS = (
    ContractLengthBand(70, 4, 6),
    ContractLengthBand(55, 2, 4),
    ContractLengthBand(40, 1, 2),
    ContractLengthBand(0, 1, 1),
)

# (morale floor, base re-sign probability), highest first
MORALE_RESIGN_PROBABILITY = (
    (80, 0.9),
    (60, 0.7),
    (40, 0.5),
    (20, 0.3),
    (0, 0.1),
)


class FreeAgentOutcome(Enum):
    RESIGNED = "resigned"
    DEPARTED = "departed"


@dataclass
class ContractOffer:
    salary: int
    years: int
    is_qualifying_offer: bool = False

    @property
    def total_value(self) -> int:
        return self.salary * self.years

    def to_dict(self) -> dict:
        return {
            "salary": self.salary,
            "years": self.years,
            "total_value": self.total_value,
            "is_qualifying_offer": self.is_qualifying_offer,
        }


@dataclass
class FreeAgentResult:
    player_id: str
    player_name: str
    outcome: FreeAgentOutcome
    new_contract: Optional[ContractOffer] = None
    destination: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "outcome": self.outcome.value,
            "new_contract": self.new_contract.to_dict() if self.new_contract else None,
            "destination": self.destination,
        }


@dataclass
class PayrollEntry:
    player_id: str
    name: str
    salary: int


@dataclass
class PayrollSummary:
    total_payroll: int
    salary_cap: int
    luxury_tax_threshold: float
    player_salaries: list[PayrollEntry] = field(default_factory=list)

    @property
    def cap_space(self) -> int:
        return self.salary_cap - self.total_payroll

    @property
    def over_cap(self) -> bool:
        return self.total_payroll > self.salary_cap

    @property
    def in_luxury_tax(self) -> bool:
        return self.total_payroll > self.luxury_tax_threshold


def _round_thousand(value: float) -> int:
    return int(math.floor(value / 1000 + 0.5)) * 1000


def salary_age_modifier(age: int) -> float:
    if 26 <= age <= 30:
        return 1.15
    if age > 32:
        return max(0.6, 0.85 - (age - 32) * 0.05)
    if age < 23:
        return 0.9
    return 1.0


def calculate_salary(
    current_rating: int,
    potential: int,
    tier: Tier,
    age: int,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> int:
    """
    Market salary for a player at a tier.

    Args:
        current_rating: Current overall rating
        potential: Ceiling rating
        tier: Tier whose salary band applies
        age: Player age

    Returns:
        Salary in the tier band, rounded to the nearest thousand
    """
    tier_config = get_tier_config(tier, tier_configs)
    min_salary, max_salary = tier_config.min_salary, tier_config.max_salary

    effective = current_rating * 0.7 + potential * 0.3
    normalized = max(0.0, min(1.0, (effective - 20) / 60))
    multiplier = normalized ** 1.8

    salary = min_salary + (max_salary - min_salary) * multiplier * salary_age_modifier(age)
    salary = max(min_salary, min(max_salary, salary))
    return _round_thousand(salary)


def calculate_contract_years(
    current_rating: int, age: int, source: Optional[RandomSource] = None
) -> int:
    source = default_source(source)
    band = next(b for b in CONTRACT_LENGTH_BANDS if current_rating >= b.min_rating)
    years = randint(source, band.min_years, band.max_years)

    if age > 32:
        years = max(1, years - 1)
    if age > 35:
        years = 1
    return years


def generate_contract_offer(
    player: Player,
    tier: Tier,
    is_renewal: bool = False,
    source: Optional[RandomSource] = None,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> ContractOffer:
    """Renewals longer than two years are cut to two half the time."""
    source = default_source(source)
    salary = calculate_salary(
        player.current_rating, player.potential, tier, player.age, tier_configs
    )
    years = calculate_contract_years(player.current_rating, player.age, source)
    if is_renewal and years > 2 and not chance(source, 0.5):
        years = 2
    return ContractOffer(salary=salary, years=years, is_qualifying_offer=is_renewal)


def generate_rookie_contract(
    current_rating: int,
    potential: int,
    tier: Tier,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> ContractOffer:
    """Near-minimum deal, longer for higher-potential draftees."""
    tier_config = get_tier_config(tier, tier_configs)
    multiplier = 0.1 + (potential / 80) * 0.3
    salary = _round_thousand(
        tier_config.min_salary + (tier_config.max_salary - tier_config.min_salary) * multiplier
    )

    if potential >= 70:
        years = 4
    elif potential >= 55:
        years = 3
    else:
        years = 2

    return ContractOffer(salary=max(tier_config.min_salary, salary), years=years)


def calculate_resign_probability(
    morale: int, team_win_pct: float, offer_vs_market: float
) -> float:
    base = next(p for floor, p in MORALE_RESIGN_PROBABILITY if morale >= floor or floor == 0)
    win_bonus = min(0.15, (team_win_pct - 0.5) * 0.5)
    salary_adjustment = (offer_vs_market - 1.0) * 0.3
    return max(0.05, min(0.95, base + win_bonus + salary_adjustment))


def player_accepts_offer(
    player: Player,
    offer: ContractOffer,
    tier: Tier,
    team_win_pct: float = 0.5,
    source: Optional[RandomSource] = None,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> bool:
    source = default_source(source)
    market_rate = calculate_salary(
        player.current_rating, player.current_rating, tier, 25, tier_configs
    )
    ratio = offer.salary / max(1, market_rate)
    probability = calculate_resign_probability(player.morale, team_win_pct, ratio)
    return chance(source, probability)


def process_contract_expiration(
    player: Player,
    tier: Tier,
    team_win_pct: float,
    offer_contract: bool = True,
    source: Optional[RandomSource] = None,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> FreeAgentResult:
    """Offer a renewal (or not) to a player whose deal has run out."""
    source = default_source(source)

    if offer_contract:
        offer = generate_contract_offer(player, tier, True, source, tier_configs)
        if player_accepts_offer(player, offer, tier, team_win_pct, source, tier_configs):
            logger.debug("%s re-signed for %d years", player.full_name, offer.years)
            return FreeAgentResult(
                player_id=player.id,
                player_name=player.full_name,
                outcome=FreeAgentOutcome.RESIGNED,
                new_contract=offer,
            )

    destination = choice(source, AI_TEAMS).full_name
    return FreeAgentResult(
        player_id=player.id,
        player_name=player.full_name,
        outcome=FreeAgentOutcome.DEPARTED,
        destination=destination,
    )


def calculate_payroll(players: Iterable[Player], salary_cap: int) -> PayrollSummary:
    """Active-roster payroll against a cap, highest salaries first."""
    entries = [
        PayrollEntry(player_id=p.id, name=p.full_name, salary=p.salary)
        for p in players
        if p.roster_status == RosterStatus.ACTIVE
    ]
    entries.sort(key=lambda e: e.salary, reverse=True)
    return PayrollSummary(
        total_payroll=sum(e.salary for e in entries),
        salary_cap=salary_cap,
        luxury_tax_threshold=salary_cap * LUXURY_TAX_MULTIPLIER,
        player_salaries=entries,
    )


def can_afford_salary(
    current_payroll: int,
    new_salary: int,
    salary_cap: int,
    allow_over_cap: bool = False,
) -> bool:
    limit = salary_cap * LUXURY_TAX_MULTIPLIER if allow_over_cap else salary_cap
    return current_payroll + new_salary <= limit


def expiring_contracts(players: Iterable[Player]) -> list[Player]:
    """Players in the final year of their deal."""
    return [p for p in players if p.contract_years <= 1]
