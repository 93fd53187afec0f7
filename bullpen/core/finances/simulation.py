"""
Season financial simulation.

Combines the revenue and expense streams into a single result, bands
solvency risk and offers budget guidance. All debt ratios use the
franchise's annual budget as the denominator.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from bullpen.core.enums import BankruptcyRisk, Tier
from bullpen.core.finances.config import DEFAULT_FINANCIAL_CONFIG, FinancialConfig
from bullpen.core.finances.expenses import (
    ExpenseBreakdown,
    calculate_coaching_salaries,
    calculate_debt_service,
    calculate_player_salaries,
    calculate_stadium_maintenance,
    calculate_travel_costs,
)
from bullpen.core.finances.revenue import (
    RevenueBreakdown,
    calculate_concession_revenue,
    calculate_merchandise_revenue,
    calculate_parking_revenue,
    calculate_sponsorship_revenue,
    calculate_ticket_revenue,
)
from bullpen.core.league.facilities import ACTIVE_ROSTER_LIMIT
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.city import CityState
from bullpen.core.models.franchise import Franchise
from bullpen.core.models.player import Player

logger = logging.getLogger(__name__)


@dataclass
class FinancialSimulationResult:
    """Outcome of one season's books."""

    revenue: RevenueBreakdown
    expenses: ExpenseBreakdown
    net_income: int
    new_reserves: int
    debt_level: int
    debt_ratio: float
    bankruptcy_risk: BankruptcyRisk

    def to_dict(self) -> dict:
        return {
            "revenue": self.revenue.to_dict(),
            "expenses": self.expenses.to_dict(),
            "net_income": self.net_income,
            "new_reserves": self.new_reserves,
            "debt_level": self.debt_level,
            "debt_ratio": self.debt_ratio,
            "bankruptcy_risk": self.bankruptcy_risk.value,
        }


@dataclass
class BankruptcyStatus:
    is_bankrupt: bool
    debt_ratio: float
    risk_level: BankruptcyRisk
    message: str
    recovery_options: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "is_bankrupt": self.is_bankrupt,
            "debt_ratio": self.debt_ratio,
            "risk_level": self.risk_level.value,
            "message": self.message,
            "recovery_options": list(self.recovery_options),
        }


@dataclass
class BudgetRecommendation:
    category: str
    current_spend: float
    recommended_spend: float
    reasoning: str

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "current_spend": self.current_spend,
            "recommended_spend": self.recommended_spend,
            "reasoning": self.reasoning,
        }


def debt_from_reserves(reserves: int) -> int:
    return -reserves if reserves < 0 else 0


def debt_ratio(reserves: int, budget: int) -> float:
    """Debt as a fraction of annual budget. A non-positive budget with debt is unbounded."""
    debt = debt_from_reserves(reserves)
    if debt == 0:
        return 0.0
    if budget <= 0:
        return float("inf")
    return debt / budget


def classify_bankruptcy_risk(
    ratio: float, config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG
) -> BankruptcyRisk:
    if ratio >= config.imminent_threshold:
        return BankruptcyRisk.IMMINENT
    if ratio >= config.critical_threshold:
        return BankruptcyRisk.CRITICAL
    if ratio >= config.warning_threshold:
        return BankruptcyRisk.WARNING
    return BankruptcyRisk.NONE


def simulate_finances(
    players: Iterable[Player],
    franchise: Franchise,
    city_state: CityState,
    attendance: int,
    won_championship: bool = False,
    marketing_spend: int = 0,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> FinancialSimulationResult:
    """
    Run one season's revenue and expenses against a franchise.

    Args:
        players: Organization players; only those on the roster are paid
        franchise: Franchise before the season's books are closed
        city_state: City the franchise plays in
        attendance: Total season attendance
        won_championship: Boosts national sponsorship
        marketing_spend: Caller-chosen marketing expense

    Returns:
        FinancialSimulationResult with integer breakdowns. Neither input
        record is modified.
    """
    attendance = max(0, int(attendance))

    revenue = RevenueBreakdown(
        tickets=calculate_ticket_revenue(attendance, franchise.ticket_price),
        concessions=calculate_concession_revenue(attendance, franchise.stadium_quality, config),
        parking=calculate_parking_revenue(attendance, config),
        merchandise=calculate_merchandise_revenue(attendance, city_state.team_pride, config),
        sponsorships=calculate_sponsorship_revenue(
            franchise.tier,
            city_state.team_pride,
            city_state.national_recognition,
            won_championship,
            config,
        ),
    )

    expenses = ExpenseBreakdown(
        player_salaries=calculate_player_salaries(players),
        coaching_salaries=calculate_coaching_salaries(franchise),
        stadium_maintenance=calculate_stadium_maintenance(franchise.tier, config, tier_configs),
        travel=calculate_travel_costs(franchise.tier, tier_configs),
        marketing=round(marketing_spend),
        debt_service=calculate_debt_service(franchise.reserves, config),
    )

    net_income = revenue.total - expenses.total
    new_reserves = franchise.reserves + net_income
    ratio = debt_ratio(new_reserves, franchise.budget)
    risk = classify_bankruptcy_risk(ratio, config)

    if risk != BankruptcyRisk.NONE:
        logger.info(
            "Season closed with reserves %d (debt ratio %.2f, risk %s)",
            new_reserves, ratio, risk.value,
        )

    return FinancialSimulationResult(
        revenue=revenue,
        expenses=expenses,
        net_income=net_income,
        new_reserves=new_reserves,
        debt_level=debt_from_reserves(new_reserves),
        debt_ratio=ratio,
        bankruptcy_risk=risk,
    )


_RECOVERY_OPTIONS = {
    BankruptcyRisk.IMMINENT: (
        "CRITICAL: City threatens seizure. One more losing season = bankruptcy.",
        [
            "Fire-sale veteran players for cash",
            "Reduce ticket prices to boost attendance",
            "Cut coaching staff to minimum",
            "Skip stadium maintenance (risky)",
        ],
    ),
    BankruptcyRisk.CRITICAL: (
        "Bank demands repayment plan. Must trade players for cash.",
        [
            "Trade valuable players for cash or picks",
            "Reduce expenses across the board",
            "Focus on developing cheap young talent",
        ],
    ),
    BankruptcyRisk.WARNING: (
        "City council concerned about team finances.",
        [
            "Review expense allocation",
            "Consider lower-cost coaching options",
            "Focus on revenue-generating wins",
        ],
    ),
    BankruptcyRisk.NONE: ("Finances are healthy.", []),
}


def check_bankruptcy_status(
    reserves: int,
    budget: int,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> BankruptcyStatus:
    """
    Describe the franchise's solvency with guidance for the owner.

    Bankruptcy is declared only when debt strictly exceeds the hard
    threshold, matching the game-over check in progression.
    """
    ratio = debt_ratio(reserves, budget)

    if ratio > config.bankrupt_threshold:
        return BankruptcyStatus(
            is_bankrupt=True,
            debt_ratio=ratio,
            risk_level=BankruptcyRisk.IMMINENT,
            message="BANKRUPTCY - Your franchise has been seized by creditors. Game Over.",
        )

    risk = classify_bankruptcy_risk(ratio, config)
    message, options = _RECOVERY_OPTIONS[risk]
    return BankruptcyStatus(
        is_bankrupt=False,
        debt_ratio=ratio,
        risk_level=risk,
        message=message,
        recovery_options=list(options),
    )


def generate_budget_recommendations(
    franchise: Franchise,
    players: Iterable[Player],
    city_state: CityState,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> list[BudgetRecommendation]:
    """Suggest coaching, ticket and payroll adjustments."""
    recommendations = []
    tier_config = get_tier_config(franchise.tier, tier_configs)
    budget = franchise.budget

    coaching = calculate_coaching_salaries(franchise)
    coaching_pct = coaching / budget if budget > 0 else 0.0
    if coaching_pct < 0.03:
        recommendations.append(BudgetRecommendation(
            category="Coaching",
            current_spend=coaching,
            recommended_spend=round(budget * 0.05),
            reasoning="Coaching budget is too low. Better coaches accelerate player development.",
        ))
    elif coaching_pct > 0.10:
        recommendations.append(BudgetRecommendation(
            category="Coaching",
            current_spend=coaching,
            recommended_spend=round(budget * 0.07),
            reasoning="Coaching budget is high. Consider reallocating to player salaries.",
        ))

    price_min, price_max = tier_config.ticket_price_range
    mid_price = (price_min + price_max) / 2
    if franchise.ticket_price < price_min:
        recommendations.append(BudgetRecommendation(
            category="Ticket Pricing",
            current_spend=franchise.ticket_price,
            recommended_spend=mid_price,
            reasoning="Ticket prices are below market rate. Consider raising prices.",
        ))
    elif city_state.unemployment_rate > 10 and franchise.ticket_price > mid_price:
        recommendations.append(BudgetRecommendation(
            category="Ticket Pricing",
            current_spend=franchise.ticket_price,
            recommended_spend=price_min + (mid_price - price_min) * 0.5,
            reasoning="High unemployment may reduce attendance. Consider lower prices.",
        ))

    salaries = calculate_player_salaries(players)
    if budget > 0 and salaries / budget > 0.7:
        recommendations.append(BudgetRecommendation(
            category="Player Salaries",
            current_spend=salaries,
            recommended_spend=round(budget * 0.6),
            reasoning="Player salaries consume too much budget. Consider trading expensive veterans.",
        ))

    return recommendations


def calculate_player_salary(
    rating: int,
    tier: Tier,
    years_in_org: int = 0,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> int:
    """Market salary: 50 rating pays the tier base, scaling with the square of rating."""
    base = config.base_salaries[tier]
    rating_multiplier = (rating / 50) ** 2
    experience_multiplier = 1 + years_in_org * 0.02
    return round(base * rating_multiplier * experience_multiplier)


def calculate_minimum_roster_cost(
    tier: Tier,
    roster_size: int = ACTIVE_ROSTER_LIMIT,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> int:
    return config.base_salaries[tier] * roster_size
