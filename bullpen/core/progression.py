"""
Tier promotion and bankruptcy.

The franchise climbs LOW_A -> HIGH_A -> DOUBLE_A -> TRIPLE_A -> MLB by
meeting every requirement of its current tier in the same season. The
game ends when debt strictly exceeds twice the annual budget.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from bullpen.core.enums import DebtWarningLevel, GameStatus, Tier
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.city import CityState
from bullpen.core.models.franchise import Franchise

logger = logging.getLogger(__name__)

BANKRUPTCY_BUDGET_MULTIPLE = 2
PROMOTION_PRIDE_BOOST = 15
PROMOTION_RECOGNITION_BOOST = 15
PROMOTION_CASH_BONUS_PCT = 0.1

STARTING_RESERVES = 50_000


# =============================================================================
# Promotion eligibility
# =============================================================================


@dataclass
class RequirementCheck:
    """One promotion criterion: what was required, what the team has."""

    required: float
    actual: float
    met: bool

    def to_dict(self) -> dict:
        return {"required": self.required, "actual": self.actual, "met": self.met}


@dataclass
class PromotionEligibility:
    is_eligible: bool
    next_tier: Optional[Tier]
    met_criteria: list[str] = field(default_factory=list)
    missing_criteria: list[str] = field(default_factory=list)
    requirements: dict[str, RequirementCheck] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "is_eligible": self.is_eligible,
            "next_tier": self.next_tier.value if self.next_tier else None,
            "met_criteria": list(self.met_criteria),
            "missing_criteria": list(self.missing_criteria),
            "requirements": {k: v.to_dict() for k, v in self.requirements.items()},
        }


def _thousands(amount: float) -> str:
    return f"${amount / 1000:.0f}K"


def check_promotion_eligibility(
    tier: Tier,
    win_pct: float,
    reserves: int,
    pride: int,
    consecutive_winning_seasons: int,
    won_division: bool = False,
    won_championship: bool = False,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> PromotionEligibility:
    """
    Check whether a franchise has earned promotion out of its tier.

    Args:
        tier: Current tier
        win_pct: Season winning percentage
        reserves: Current cash reserves
        pride: City team pride (0-100)
        consecutive_winning_seasons: Streak including this season
        won_division: Division title this season
        won_championship: League championship this season
        tier_configs: Alternate tier table

    Returns:
        PromotionEligibility listing met and missing criteria. Eligible
        only when every present requirement holds.
    """
    next_tier = tier.next_tier
    requirements = get_tier_config(tier, tier_configs).promotion_requirements

    if next_tier is None or requirements is None:
        return PromotionEligibility(
            is_eligible=False,
            next_tier=None,
            missing_criteria=["Already at top tier (MLB)"],
            requirements={
                "win_pct": RequirementCheck(0, win_pct, True),
                "reserves": RequirementCheck(0, reserves, True),
                "city_pride": RequirementCheck(0, pride, True),
                "consecutive_years": RequirementCheck(0, consecutive_winning_seasons, True),
            },
        )

    met: list[str] = []
    missing: list[str] = []

    def record(ok: bool, met_text: str, missing_text: str) -> bool:
        (met if ok else missing).append(met_text if ok else missing_text)
        return ok

    win_ok = record(
        win_pct >= requirements.win_pct,
        f"Win% {win_pct * 100:.1f}% >= {requirements.win_pct * 100:.1f}%",
        f"Win% {win_pct * 100:.1f}% < {requirements.win_pct * 100:.1f}% required",
    )
    reserves_ok = record(
        reserves >= requirements.reserves,
        f"Reserves {_thousands(reserves)} >= {_thousands(requirements.reserves)}",
        f"Reserves {_thousands(reserves)} < {_thousands(requirements.reserves)} required",
    )
    pride_ok = record(
        pride >= requirements.city_pride,
        f"City Pride {pride} >= {requirements.city_pride}",
        f"City Pride {pride} < {requirements.city_pride} required",
    )
    years_ok = record(
        consecutive_winning_seasons >= requirements.consecutive_years,
        f"{consecutive_winning_seasons} consecutive winning seasons >= "
        f"{requirements.consecutive_years}",
        f"{consecutive_winning_seasons} consecutive winning seasons < "
        f"{requirements.consecutive_years} required",
    )

    checks = {
        "win_pct": RequirementCheck(requirements.win_pct, win_pct, win_ok),
        "reserves": RequirementCheck(requirements.reserves, reserves, reserves_ok),
        "city_pride": RequirementCheck(requirements.city_pride, pride, pride_ok),
        "consecutive_years": RequirementCheck(
            requirements.consecutive_years, consecutive_winning_seasons, years_ok
        ),
    }

    division_ok = True
    if requirements.division_title:
        division_ok = record(won_division, "Won Division Title", "Division Title required")
        checks["division_title"] = RequirementCheck(True, won_division, division_ok)

    championship_ok = True
    if requirements.league_championship:
        championship_ok = record(
            won_championship, "Won League Championship", "League Championship required"
        )
        checks["league_championship"] = RequirementCheck(
            True, won_championship, championship_ok
        )

    eligible = all((win_ok, reserves_ok, pride_ok, years_ok, division_ok, championship_ok))
    if eligible:
        logger.info("Franchise eligible for promotion %s -> %s", tier.value, next_tier.value)

    return PromotionEligibility(
        is_eligible=eligible,
        next_tier=next_tier,
        met_criteria=met,
        missing_criteria=missing,
        requirements=checks,
    )


def get_progress_to_next_tier(eligibility: PromotionEligibility) -> int:
    """Percentage of promotion criteria met; 100 at the top tier."""
    if eligibility.next_tier is None:
        return 100
    total = len(eligibility.met_criteria) + len(eligibility.missing_criteria)
    if total == 0:
        return 0
    return round(len(eligibility.met_criteria) / total * 100)


def is_top_tier(tier: Tier) -> bool:
    return tier.next_tier is None


# =============================================================================
# Game status
# =============================================================================


@dataclass
class GameStatusCheck:
    status: GameStatus
    reason: Optional[str]
    total_debt: int
    debt_threshold: int
    is_in_debt: bool
    is_bankrupt: bool

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "reason": self.reason,
            "total_debt": self.total_debt,
            "debt_threshold": self.debt_threshold,
            "is_in_debt": self.is_in_debt,
            "is_bankrupt": self.is_bankrupt,
        }


def check_game_status(reserves: int, annual_budget: int, tier: Tier) -> GameStatusCheck:
    """Game over iff debt is strictly greater than twice the annual budget."""
    debt = -reserves if reserves < 0 else 0
    threshold = annual_budget * BANKRUPTCY_BUDGET_MULTIPLE
    bankrupt = debt > threshold

    if bankrupt:
        logger.info(
            "Bankruptcy at %s: debt %d exceeds threshold %d", tier.value, debt, threshold
        )
        return GameStatusCheck(
            status=GameStatus.GAME_OVER,
            reason=(
                f"Bankruptcy: Debt of {_thousands(debt)} exceeds threshold "
                f"of {_thousands(threshold)}"
            ),
            total_debt=debt,
            debt_threshold=threshold,
            is_in_debt=True,
            is_bankrupt=True,
        )

    return GameStatusCheck(
        status=GameStatus.ACTIVE,
        reason=None,
        total_debt=debt,
        debt_threshold=threshold,
        is_in_debt=reserves < 0,
        is_bankrupt=False,
    )


@dataclass
class DebtWarning:
    level: DebtWarningLevel
    message: Optional[str]
    debt_percent: float

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "message": self.message,
            "debt_percent": self.debt_percent,
        }


# (fraction of bankruptcy threshold, level, message), most severe first
_DEBT_WARNINGS = (
    (1.0, DebtWarningLevel.CRITICAL, "BANKRUPTCY IMMINENT! Debt exceeds maximum threshold."),
    (0.75, DebtWarningLevel.HIGH, "Severe debt crisis. Cut costs immediately or face bankruptcy."),
    (0.5, DebtWarningLevel.MEDIUM, "Significant debt. Financial restructuring recommended."),
    (0.25, DebtWarningLevel.LOW, "Minor debt. Monitor spending carefully."),
)


def get_debt_warning(reserves: int, annual_budget: int) -> DebtWarning:
    if reserves >= 0:
        return DebtWarning(DebtWarningLevel.NONE, None, 0.0)

    debt = -reserves
    debt_percent = debt / annual_budget * 100 if annual_budget > 0 else float("inf")
    threshold = annual_budget * BANKRUPTCY_BUDGET_MULTIPLE

    for fraction, level, message in _DEBT_WARNINGS:
        if debt >= threshold * fraction:
            return DebtWarning(level, message, debt_percent)
    return DebtWarning(
        DebtWarningLevel.LOW,
        "Operating in debt. Work to return to positive reserves.",
        debt_percent,
    )


# =============================================================================
# Promotion
# =============================================================================


@dataclass
class PromotionBonuses:
    budget_increase: int
    stadium_capacity_increase: int
    pride_boost: int = PROMOTION_PRIDE_BOOST

    def to_dict(self) -> dict:
        return {
            "budget_increase": self.budget_increase,
            "stadium_capacity_increase": self.stadium_capacity_increase,
            "pride_boost": self.pride_boost,
        }


def calculate_promotion_bonuses(
    previous_tier: Tier,
    new_tier: Tier,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> PromotionBonuses:
    previous = get_tier_config(previous_tier, tier_configs)
    new = get_tier_config(new_tier, tier_configs)
    return PromotionBonuses(
        budget_increase=new.budget - previous.budget,
        stadium_capacity_increase=new.stadium_capacity - previous.stadium_capacity,
    )


@dataclass
class PromotionResult:
    success: bool
    reason: Optional[str]
    previous_tier: Tier
    new_tier: Optional[Tier]
    status: GameStatus
    bonuses: Optional[PromotionBonuses]
    cash_bonus: int
    franchise: Franchise
    city_state: CityState

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "reason": self.reason,
            "previous_tier": self.previous_tier.value,
            "new_tier": self.new_tier.value if self.new_tier else None,
            "status": self.status.value,
            "bonuses": self.bonuses.to_dict() if self.bonuses else None,
            "cash_bonus": self.cash_bonus,
            "franchise": self.franchise.to_dict(),
            "city_state": self.city_state.to_dict(),
        }


def promote_franchise(
    franchise: Franchise,
    city_state: CityState,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> PromotionResult:
    """
    Move a franchise up one tier.

    The franchise takes the new tier's budget and stadium capacity and a
    cash bonus of 10% of the new budget. The city grows to at least the
    new tier's population and income, with pride and recognition boosts.
    Callers check eligibility first; this only refuses at the top tier.
    """
    new_tier = franchise.tier.next_tier
    if new_tier is None:
        return PromotionResult(
            success=False,
            reason="Already at top tier (MLB)",
            previous_tier=franchise.tier,
            new_tier=None,
            status=GameStatus.ACTIVE,
            bonuses=None,
            cash_bonus=0,
            franchise=franchise,
            city_state=city_state,
        )

    new_config = get_tier_config(new_tier, tier_configs)
    bonuses = calculate_promotion_bonuses(franchise.tier, new_tier, tier_configs)
    cash_bonus = round(new_config.budget * PROMOTION_CASH_BONUS_PCT)

    promoted = franchise.copy(
        tier=new_tier,
        budget=new_config.budget,
        reserves=franchise.reserves + cash_bonus,
        stadium_capacity=max(franchise.stadium_capacity, new_config.stadium_capacity),
    )
    city = city_state.copy(
        team_pride=min(100, city_state.team_pride + bonuses.pride_boost),
        national_recognition=min(
            100, city_state.national_recognition + PROMOTION_RECOGNITION_BOOST
        ),
        population=max(city_state.population, new_config.city_population),
        median_income=max(city_state.median_income, new_config.median_income),
    )

    logger.info("Promoted franchise %s -> %s", franchise.tier.value, new_tier.value)
    return PromotionResult(
        success=True,
        reason=None,
        previous_tier=franchise.tier,
        new_tier=new_tier,
        status=GameStatus.PROMOTED if is_top_tier(new_tier) else GameStatus.ACTIVE,
        bonuses=bonuses,
        cash_bonus=cash_bonus,
        franchise=promoted,
        city_state=city,
    )


def create_franchise(
    stadium_name: str = "Municipal Field",
    tier: Tier = Tier.LOW_A,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> Franchise:
    """A brand-new franchise at the bottom of the ladder."""
    config = get_tier_config(tier, tier_configs)
    return Franchise(
        tier=tier,
        budget=config.budget,
        reserves=STARTING_RESERVES,
        stadium_name=stadium_name,
        stadium_capacity=config.stadium_capacity,
        ticket_price=config.ticket_price_range[0] + 2,
    )
