"""Tests for contracts, re-signing and payroll."""

import pytest

from bullpen.core.enums import RosterStatus, Tier
from bullpen.core.finances import (
    ContractOffer,
    FreeAgentOutcome,
    calculate_contract_years,
    calculate_payroll,
    calculate_resign_probability,
    calculate_salary,
    can_afford_salary,
    expiring_contracts,
    generate_contract_offer,
    generate_rookie_contract,
    player_accepts_offer,
    process_contract_expiration,
)
from bullpen.core.finances.contracts import salary_age_modifier
from bullpen.core.league import AI_TEAMS
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource


class TestSalary:
    def test_band_limits(self):
        assert calculate_salary(80, 80, Tier.LOW_A, 28) == 50_000
        assert calculate_salary(20, 20, Tier.LOW_A, 25) == 10_000

    def test_rounded_to_thousands(self):
        for rating in range(20, 81, 7):
            assert calculate_salary(rating, rating + 5, Tier.HIGH_A, 24) % 1000 == 0

    def test_age_modifier(self):
        assert salary_age_modifier(21) == 0.9
        assert salary_age_modifier(24) == 1.0
        assert salary_age_modifier(28) == 1.15
        assert salary_age_modifier(34) == pytest.approx(0.75)
        assert salary_age_modifier(40) == 0.6


class TestContractLength:
    def test_rating_bands(self):
        assert calculate_contract_years(75, 25, SequenceRandomSource([0.0])) == 4
        assert calculate_contract_years(75, 25, SequenceRandomSource([0.99])) == 6
        assert calculate_contract_years(30, 25, SequenceRandomSource([0.99])) == 1

    def test_veterans_get_shorter_deals(self):
        assert calculate_contract_years(75, 34, SequenceRandomSource([0.99])) == 5
        assert calculate_contract_years(75, 37, SequenceRandomSource([0.99])) == 1

    def test_renewal_trimmed_to_two_years(self, hitter):
        star = hitter.copy(current_rating=75, age=26)
        trimmed = generate_contract_offer(star, Tier.LOW_A, True, SequenceRandomSource([0.99, 0.9]))
        kept = generate_contract_offer(star, Tier.LOW_A, True, SequenceRandomSource([0.99, 0.1]))
        assert trimmed.years == 2
        assert kept.years == 6
        assert trimmed.is_qualifying_offer

    def test_rookie_contracts(self):
        top = generate_rookie_contract(50, 80, Tier.LOW_A)
        mid = generate_rookie_contract(45, 60, Tier.LOW_A)
        low = generate_rookie_contract(40, 40, Tier.LOW_A)
        assert (top.salary, top.years) == (26_000, 4)
        assert mid.years == 3
        assert (low.salary, low.years) == (20_000, 2)
        assert generate_rookie_contract(45, 70, Tier.LOW_A).years == 4

    def test_offer_total_value(self):
        assert ContractOffer(salary=12_000, years=3).total_value == 36_000


class TestResigning:
    def test_probability_bounds(self):
        assert calculate_resign_probability(80, 0.5, 1.0) == pytest.approx(0.9)
        assert calculate_resign_probability(10, 0.2, 0.5) == 0.05
        assert calculate_resign_probability(90, 0.9, 2.0) == 0.95

    def test_happy_player_accepts(self, hitter):
        happy = hitter.copy(morale=95)
        offer = ContractOffer(salary=50_000, years=2)
        assert player_accepts_offer(happy, offer, Tier.LOW_A, 0.7, SequenceRandomSource([0.5]))

    def test_resigned_keeps_player(self, hitter):
        result = process_contract_expiration(hitter.copy(morale=90), Tier.LOW_A, 0.6, True, SequenceRandomSource([0.0]))
        assert result.outcome == FreeAgentOutcome.RESIGNED
        assert result.new_contract is not None
        assert result.destination is None

    def test_no_offer_means_departure(self, hitter):
        result = process_contract_expiration(hitter, Tier.LOW_A, 0.6, False, SeededRandomSource(4))
        assert result.outcome == FreeAgentOutcome.DEPARTED
        assert result.destination in {team.full_name for team in AI_TEAMS}
        assert result.to_dict()["outcome"] == "departed"


class TestPayroll:
    def test_active_roster_only(self, hitter, pitcher):
        reserve = hitter.copy(id="r", salary=99_000, roster_status=RosterStatus.RESERVE)
        summary = calculate_payroll([hitter, pitcher, reserve], 30_000)

        assert summary.total_payroll == 35_000
        assert [e.player_id for e in summary.player_salaries] == ["pitcher-1", "hitter-1"]
        assert summary.cap_space == -5_000
        assert summary.over_cap
        assert not summary.in_luxury_tax

    def test_can_afford(self):
        assert can_afford_salary(20_000, 10_000, 30_000)
        assert not can_afford_salary(25_000, 10_000, 30_000)
        assert can_afford_salary(25_000, 10_000, 30_000, allow_over_cap=True)

    def test_expiring(self, hitter, pitcher):
        last_year = pitcher.copy(contract_years=1)
        assert expiring_contracts([hitter, last_year]) == [last_year]
