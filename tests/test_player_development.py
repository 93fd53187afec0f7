"""Tests for winter development, ageing and injuries."""

import pytest

from bullpen.core.development import (
    InjuryResult,
    age_player,
    apply_injury,
    apply_rating_change,
    calculate_winter_development,
    simulate_injury,
)
from bullpen.core.enums import WorkEthic
from bullpen.core.models.player import HiddenTraits
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource


class TestWinterDevelopment:
    """Age bands for offseason rating changes."""

    def test_young_players_grow(self):
        result = calculate_winter_development(19, 40, 60, source=SequenceRandomSource([0.99]))
        assert result.rating_change == 3
        assert result.reason == "Young prospect development"

    def test_growth_capped_by_potential(self):
        result = calculate_winter_development(19, 59, 60, source=SequenceRandomSource([0.99]))
        assert result.rating_change == 1

    def test_work_ethic_scales_growth(self):
        result = calculate_winter_development(
            20, 40, 70, WorkEthic.EXCELLENT, SequenceRandomSource([0.99])
        )
        assert result.rating_change == 4

    def test_young_never_decline(self):
        for seed in range(100):
            result = calculate_winter_development(22, 50, 55, source=SeededRandomSource(seed))
            assert 0 <= result.rating_change <= 5

    def test_peak_refinement(self):
        refined = calculate_winter_development(27, 50, 60, source=SequenceRandomSource([0.9]))
        held = calculate_winter_development(27, 50, 60, source=SequenceRandomSource([0.3]))
        assert refined.rating_change == 1
        assert held.rating_change == 0
        assert held.reason == "Maintained peak form"

    def test_early_aging(self):
        assert calculate_winter_development(31, 60, 60, source=SequenceRandomSource([0.7])).rating_change == -1
        assert calculate_winter_development(31, 60, 60, source=SequenceRandomSource([0.5])).rating_change == 0

    def test_mid_thirties_decline(self):
        declined = calculate_winter_development(35, 60, 60, source=SequenceRandomSource([0.1]))
        spared = calculate_winter_development(35, 60, 60, source=SequenceRandomSource([0.9]))
        assert declined.rating_change == -1
        assert spared.reason == "Defying age"

    def test_late_career_always_loses(self):
        result = calculate_winter_development(38, 60, 60, source=SequenceRandomSource([0.9]))
        assert result.rating_change == -1
        assert result.reason == "Aging gracefully"


class TestApplyRatingChange:
    @pytest.mark.parametrize(
        "rating,change,expected",
        [(50, 2, 52), (79, 3, 80), (21, -3, 20), (60, 0, 60)],
    )
    def test_clamped(self, rating, change, expected):
        assert apply_rating_change(rating, change) == expected


class TestAgePlayer:
    def test_no_retirement_before_36(self, pitcher):
        for seed in range(50):
            result = age_player(pitcher.copy(age=34), SeededRandomSource(seed))
            assert result.new_age == 35
            assert not result.is_retiring

    def test_retirement_odds_past_35(self, pitcher):
        veteran = pitcher.copy(age=35)
        assert age_player(veteran, SequenceRandomSource([0.1])).is_retiring
        assert not age_player(veteran, SequenceRandomSource([0.2])).is_retiring

    def test_decline_modifier(self, pitcher):
        assert age_player(pitcher.copy(age=35), SequenceRandomSource([0.9])).decline_modifier == -2.0
        assert age_player(pitcher, SequenceRandomSource([0.9])).decline_modifier == 0.0


class TestInjuries:
    def test_sturdy_players_never_hurt(self, hitter):
        source = SequenceRandomSource([0.0])
        assert not simulate_injury(hitter, source).is_injured
        assert source.draws == 0

    def test_injury_prone_player_hurt(self, hitter):
        fragile = hitter.copy(hidden_traits=HiddenTraits(injury_prone=True))
        result = simulate_injury(fragile, SequenceRandomSource([0.1, 0.5]))
        assert result.is_injured
        assert result.games_lost == 45

    def test_injury_length_bounds(self, hitter):
        fragile = hitter.copy(hidden_traits=HiddenTraits(injury_prone=True))
        for seed in range(200):
            result = simulate_injury(fragile, SeededRandomSource(seed))
            if result.is_injured:
                assert 30 <= result.games_lost <= 60

    def test_apply_injury(self, hitter):
        injured = apply_injury(hitter, InjuryResult(is_injured=True, games_lost=40))
        assert injured.is_injured
        assert injured.injury_games_remaining == hitter.injury_games_remaining + 40
        assert apply_injury(hitter, InjuryResult(is_injured=False)) is hitter
