"""Tests for scouting reports."""

from bullpen.core.enums import ScoutingTier
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource
from bullpen.core.scouting import (
    SCOUTING_CONFIG,
    apply_scouting_result,
    calculate_scouting_cost,
    scout_prospect,
)


class TestScoutingErrors:
    """Error bounds per accuracy tier."""

    def test_high_accuracy_within_three(self, prospect):
        for seed in range(500):
            result = scout_prospect(prospect, "high", SeededRandomSource(seed))
            assert result.success
            assert abs(result.scouted_rating - prospect.current_rating) <= 3
            assert abs(result.scouted_potential - prospect.potential) <= 3

    def test_low_accuracy_within_fifteen(self, prospect):
        for seed in range(500):
            result = scout_prospect(prospect, ScoutingTier.LOW, SeededRandomSource(seed))
            assert abs(result.scouted_rating - prospect.current_rating) <= 15
            assert abs(result.scouted_potential - prospect.potential) <= 15

    def test_extreme_draw_truncates_to_bound(self, prospect):
        # 0.0 -> uniform == -max_error exactly
        result = scout_prospect(prospect, "medium", SequenceRandomSource([0.0]))
        assert result.rating_error == 8
        assert result.scouted_rating == prospect.current_rating - 8

    def test_estimates_clamped_to_scale(self, prospect):
        weak = prospect.copy(current_rating=21, potential=25)
        result = scout_prospect(weak, "low", SequenceRandomSource([0.0]))
        assert result.scouted_rating == 20
        assert result.scouted_potential >= 20


class TestScoutingDeterminism:
    def test_same_seed_same_report(self, prospect):
        first = scout_prospect(prospect, "medium", SeededRandomSource(42))
        second = scout_prospect(prospect, "medium", SeededRandomSource(42))
        assert first.to_dict() == second.to_dict()

    def test_prospect_not_modified(self, prospect):
        before = prospect.to_dict()
        scout_prospect(prospect, "high", SeededRandomSource(1))
        assert prospect.to_dict() == before


class TestScoutingValidation:
    def test_unknown_tier(self, prospect):
        result = scout_prospect(prospect, "psychic", SeededRandomSource(1))
        assert not result.success
        assert "Unknown scouting tier" in result.reason
        assert result.cost == 0

    def test_insufficient_funds(self, prospect):
        result = scout_prospect(prospect, "high", SeededRandomSource(1), available_funds=5000)
        assert not result.success
        assert "Insufficient funds" in result.reason
        assert result.scouted_rating is None

    def test_exact_funds_are_enough(self, prospect):
        result = scout_prospect(prospect, "high", SeededRandomSource(1), available_funds=8000)
        assert result.success
        assert result.cost == 8000

    def test_tier_costs(self):
        assert calculate_scouting_cost(ScoutingTier.LOW) == 2000
        assert calculate_scouting_cost(ScoutingTier.MEDIUM) == 4000
        assert calculate_scouting_cost(ScoutingTier.HIGH) == 8000
        assert SCOUTING_CONFIG[ScoutingTier.HIGH].trait_discovery_chance == 0.9


class TestTraitReveal:
    def test_trait_roll_reveals_sure_traits(self, prospect):
        # Every draw 0.05: errors negative, discovery succeeds, every reveal succeeds
        result = scout_prospect(prospect, "high", SequenceRandomSource([0.05]))
        assert result.traits_revealed
        revealed = result.revealed_traits
        assert revealed.work_ethic == prospect.hidden_traits.work_ethic.value
        assert revealed.personality == prospect.hidden_traits.personality.value
        assert revealed.injury_prone is True
        assert revealed.coachability == 62
        assert revealed.clutch == 41

    def test_failed_trait_roll_reveals_nothing(self, prospect):
        result = scout_prospect(prospect, "low", SequenceRandomSource([0.95]))
        assert not result.traits_revealed
        assert not result.revealed_traits.any_revealed

    def test_apply_merges_reveals(self, prospect):
        first = scout_prospect(prospect, "high", SequenceRandomSource([0.05]))
        scouted = apply_scouting_result(prospect, first)
        assert scouted.scouted_rating == first.scouted_rating
        assert scouted.scouting_accuracy == ScoutingTier.HIGH
        assert scouted.traits_revealed

        # A later report that finds nothing keeps earlier reveals
        second = scout_prospect(scouted, "low", SequenceRandomSource([0.95]))
        rescouted = apply_scouting_result(scouted, second)
        assert rescouted.revealed_traits.clutch == 41
        assert rescouted.scouting_accuracy == ScoutingTier.LOW

    def test_apply_ignores_failed_report(self, prospect):
        failed = scout_prospect(prospect, "nope")
        assert apply_scouting_result(prospect, failed) is prospect
