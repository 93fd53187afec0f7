"""Tests for promotion and bankruptcy."""

import pytest

from bullpen.core.enums import DebtWarningLevel, GameStatus, Tier
from bullpen.core.progression import (
    check_game_status,
    check_promotion_eligibility,
    create_franchise,
    get_debt_warning,
    get_progress_to_next_tier,
    promote_franchise,
)


# =============================================================================
# Eligibility
# =============================================================================


class TestPromotionEligibility:
    def test_low_a_all_requirements_met(self):
        eligibility = check_promotion_eligibility(Tier.LOW_A, 0.60, 60_000, 55, 2)

        assert eligibility.is_eligible
        assert eligibility.next_tier == Tier.HIGH_A
        assert eligibility.missing_criteria == []
        assert len(eligibility.met_criteria) == 4
        assert get_progress_to_next_tier(eligibility) == 100

    def test_missing_win_pct(self):
        eligibility = check_promotion_eligibility(Tier.LOW_A, 0.50, 60_000, 55, 2)

        assert not eligibility.is_eligible
        assert eligibility.missing_criteria == ["Win% 50.0% < 55.0% required"]
        assert not eligibility.requirements["win_pct"].met
        assert get_progress_to_next_tier(eligibility) == 75

    def test_reserves_text(self):
        eligibility = check_promotion_eligibility(Tier.LOW_A, 0.60, 20_000, 55, 2)
        assert "Reserves $20K < $50K required" in eligibility.missing_criteria

    def test_high_a_needs_division_title(self):
        without = check_promotion_eligibility(Tier.HIGH_A, 0.60, 250_000, 65, 2)
        with_title = check_promotion_eligibility(Tier.HIGH_A, 0.60, 250_000, 65, 2, won_division=True)

        assert not without.is_eligible
        assert "Division Title required" in without.missing_criteria
        assert get_progress_to_next_tier(without) == 80
        assert with_title.is_eligible
        assert "Won Division Title" in with_title.met_criteria

    def test_triple_a_needs_championship(self):
        eligibility = check_promotion_eligibility(Tier.TRIPLE_A, 0.65, 3_000_000, 85, 3)
        assert "League Championship required" in eligibility.missing_criteria
        assert "league_championship" in eligibility.requirements

    def test_top_tier(self):
        eligibility = check_promotion_eligibility(Tier.MLB, 0.70, 0, 100, 5)

        assert not eligibility.is_eligible
        assert eligibility.next_tier is None
        assert eligibility.missing_criteria == ["Already at top tier (MLB)"]
        assert get_progress_to_next_tier(eligibility) == 100
        assert eligibility.to_dict()["next_tier"] is None


# =============================================================================
# Game status
# =============================================================================


class TestGameStatus:
    def test_game_over_beyond_double_budget(self):
        status = check_game_status(-250_000, 100_000, Tier.LOW_A)

        assert status.status == GameStatus.GAME_OVER
        assert status.is_bankrupt
        assert status.total_debt == 250_000
        assert status.debt_threshold == 200_000
        assert "Bankruptcy" in status.reason

    def test_in_debt_but_active(self):
        status = check_game_status(-150_000, 100_000, Tier.LOW_A)

        assert status.status == GameStatus.ACTIVE
        assert status.is_in_debt
        assert not status.is_bankrupt
        assert status.reason is None

    def test_exact_threshold_survives(self):
        assert check_game_status(-200_000, 100_000, Tier.LOW_A).status == GameStatus.ACTIVE

    def test_positive_reserves(self):
        status = check_game_status(5_000, 100_000, Tier.LOW_A)
        assert status.total_debt == 0
        assert not status.is_in_debt


class TestDebtWarning:
    @pytest.mark.parametrize(
        "reserves,level",
        [
            (10_000, DebtWarningLevel.NONE),
            (-10_000, DebtWarningLevel.LOW),
            (-50_000, DebtWarningLevel.LOW),
            (-100_000, DebtWarningLevel.MEDIUM),
            (-160_000, DebtWarningLevel.HIGH),
            (-210_000, DebtWarningLevel.CRITICAL),
        ],
    )
    def test_levels(self, reserves, level):
        assert get_debt_warning(reserves, 100_000).level == level

    def test_small_debt_message(self):
        warning = get_debt_warning(-10_000, 100_000)
        assert warning.message.startswith("Operating in debt")
        assert warning.debt_percent == pytest.approx(10.0)

    def test_no_debt_no_message(self):
        assert get_debt_warning(0, 100_000).message is None


# =============================================================================
# Promotion
# =============================================================================


class TestPromoteFranchise:
    def test_low_a_to_high_a(self, franchise, city):
        result = promote_franchise(franchise, city)

        assert result.success
        assert result.new_tier == Tier.HIGH_A
        assert result.status == GameStatus.ACTIVE
        assert result.cash_bonus == 200_000
        assert result.franchise.budget == 2_000_000
        assert result.franchise.reserves == franchise.reserves + 200_000
        assert result.franchise.stadium_capacity == 5000
        assert result.city_state.team_pride == city.team_pride + 15
        assert result.city_state.national_recognition == city.national_recognition + 15
        assert result.city_state.population == 25_000
        assert result.bonuses.budget_increase == 1_500_000

    def test_inputs_untouched(self, franchise, city):
        promote_franchise(franchise, city)
        assert franchise.tier == Tier.LOW_A
        assert city.team_pride == 50

    def test_pride_capped(self, franchise, city):
        result = promote_franchise(franchise, city.copy(team_pride=95))
        assert result.city_state.team_pride == 100

    def test_reaching_mlb_is_promoted(self, franchise, city):
        result = promote_franchise(franchise.copy(tier=Tier.TRIPLE_A), city)
        assert result.new_tier == Tier.MLB
        assert result.status == GameStatus.PROMOTED

    def test_fails_at_top(self, franchise, city):
        top = franchise.copy(tier=Tier.MLB)
        result = promote_franchise(top, city)

        assert not result.success
        assert result.reason == "Already at top tier (MLB)"
        assert result.franchise is top
        assert result.cash_bonus == 0


class TestCreateFranchise:
    def test_defaults(self):
        franchise = create_franchise("Riverside Park")

        assert franchise.tier == Tier.LOW_A
        assert franchise.budget == 500_000
        assert franchise.reserves == 50_000
        assert franchise.stadium_capacity == 2500
        assert franchise.ticket_price == 7
        assert franchise.stadium_name == "Riverside Park"
