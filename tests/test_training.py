"""Tests for the player training engine."""

import pytest

from bullpen.core.city.districts import DistrictBonuses
from bullpen.core.enums import FacilityLevel, RosterStatus, TrainingFocus, WorkEthic
from bullpen.core.models.player import HiddenTraits, HitterTools
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource
from bullpen.core.training import (
    XP_PER_LEVEL,
    apply_training_result,
    calculate_progression_rate,
    calculate_training_summary,
    calculate_xp_multiplier,
    get_age_multiplier,
    get_morale_multiplier,
    process_batch_training,
    process_player_training,
    recommend_training_focus,
    select_attribute_to_improve,
)

NO_BONUSES = DistrictBonuses()


class TestLevelUp:
    """Tests for converting XP into tool points."""

    def test_level_up_from_95(self, hitter):
        player = hitter.copy(current_xp=95)
        for seed in range(200):
            result = process_player_training(
                player, NO_BONUSES, FacilityLevel.BASIC, 10, SeededRandomSource(seed)
            )
            assert result.xp_gained >= 5
            assert result.leveled_up
            assert 0 <= result.new_xp < XP_PER_LEVEL
            assert result.new_value == result.previous_value + 1

    def test_exactly_one_tool_moves(self, hitter):
        player = hitter.copy(current_xp=95)
        result = process_player_training(player, NO_BONUSES, FacilityLevel.BASIC, 10, SeededRandomSource(1))
        trained = apply_training_result(player, result)

        before = player.tools.to_dict()
        after = trained.tools.to_dict()
        changed = {k for k in before if before[k] != after[k]}
        assert changed == {result.attribute_improved}
        assert after[result.attribute_improved] == before[result.attribute_improved] + 1
        assert trained.current_xp == result.new_xp

    def test_tool_capped_at_80(self, hitter):
        maxed = hitter.copy(
            current_xp=95,
            potential=80,
            tools=HitterTools(hit=80, power=80, speed=80, arm=80, field=80),
        )
        result = process_player_training(maxed, NO_BONUSES, FacilityLevel.BASIC, 10, SeededRandomSource(2))
        assert result.leveled_up
        assert result.new_value == 80

    def test_surplus_capped_below_next_level(self, hitter):
        player = hitter.copy(current_xp=99)
        result = process_player_training(
            player, DistrictBonuses(training_mult=10.0), FacilityLevel.ELITE, 200, SeededRandomSource(3)
        )
        assert result.leveled_up
        assert result.new_xp == XP_PER_LEVEL - 1

    def test_small_gain_no_level_up(self, hitter):
        result = process_player_training(hitter, NO_BONUSES, FacilityLevel.BASIC, 1, SeededRandomSource(4))
        assert not result.leveled_up
        assert result.attribute_improved is None
        assert result.new_xp == result.xp_gained

    def test_xp_gain_formula(self, hitter):
        # variance draw 0.5 -> 1.0; multiplier 1.5 for a 20-year-old
        result = process_player_training(
            hitter, NO_BONUSES, FacilityLevel.BASIC, 10, SequenceRandomSource([0.5])
        )
        assert result.xp_gained == 30

    def test_mismatched_result_rejected(self, hitter, pitcher):
        result = process_player_training(hitter, NO_BONUSES, FacilityLevel.BASIC, 1, SeededRandomSource(5))
        with pytest.raises(ValueError):
            apply_training_result(pitcher, result)


class TestAttributeSelection:
    def test_overall_picks_largest_gap(self, hitter):
        assert select_attribute_to_improve(hitter) == "power"

    def test_focus_trains_named_tool(self, hitter):
        assert select_attribute_to_improve(hitter.copy(training_focus=TrainingFocus.SPEED)) == "speed"

    def test_foreign_focus_falls_back_to_overall(self, hitter):
        assert select_attribute_to_improve(hitter.copy(training_focus=TrainingFocus.STUFF)) == "power"

    def test_ties_go_to_first_tool(self, hitter):
        even = hitter.copy(tools=HitterTools(hit=50, power=50, speed=50, arm=50, field=50))
        assert select_attribute_to_improve(even) == "hit"

    def test_pitcher_focus(self, pitcher):
        assert select_attribute_to_improve(pitcher) == "control"
        focused = pitcher.copy(training_focus=TrainingFocus.MOVEMENT)
        assert select_attribute_to_improve(focused) == "movement"

    def test_recommend_focus(self, hitter):
        assert recommend_training_focus(hitter) == TrainingFocus.POWER


class TestMultipliers:
    def test_age_bands(self):
        assert get_age_multiplier(19) == 1.5
        assert get_age_multiplier(24) == 1.2
        assert get_age_multiplier(28) == 1.0
        assert get_age_multiplier(31) == 0.6

    def test_morale_bands(self):
        assert get_morale_multiplier(20) == 0.7
        assert get_morale_multiplier(50) == 1.0
        assert get_morale_multiplier(90) == 1.2

    def test_injury_and_reserve_penalties(self, hitter):
        base = calculate_xp_multiplier(hitter, NO_BONUSES, FacilityLevel.BASIC)
        injured = calculate_xp_multiplier(hitter.copy(is_injured=True), NO_BONUSES, FacilityLevel.BASIC)
        reserve = calculate_xp_multiplier(
            hitter.copy(roster_status=RosterStatus.RESERVE), NO_BONUSES, FacilityLevel.BASIC
        )
        assert injured == pytest.approx(base * 0.25)
        assert reserve == pytest.approx(base * 0.7)

    def test_work_ethic_and_facilities(self, hitter):
        poor = hitter.copy(hidden_traits=HiddenTraits(work_ethic=WorkEthic.POOR))
        assert calculate_xp_multiplier(poor, NO_BONUSES, FacilityLevel.ELITE) == pytest.approx(
            1.5 * 0.6 * 1.3
        )

    def test_city_training_bonus(self, hitter):
        boosted = calculate_xp_multiplier(hitter, DistrictBonuses(training_mult=1.06), FacilityLevel.BASIC)
        assert boosted == pytest.approx(1.5 * 1.06)


class TestProgressionRate:
    def test_clamped_high(self):
        assert calculate_progression_rate(20, 70, 50) == 2.0

    def test_clamped_low(self):
        assert calculate_progression_rate(30, 45, 44) == 0.5

    def test_middle(self):
        assert calculate_progression_rate(23, 60, 50) == pytest.approx(1.2 * 1.1 * 1.0)

    def test_apply_refreshes_rate(self, hitter):
        result = process_player_training(hitter, NO_BONUSES, FacilityLevel.BASIC, 1, SeededRandomSource(6))
        trained = apply_training_result(hitter, result)
        assert trained.progression_rate == calculate_progression_rate(20, 65, 45)


class TestBatchTraining:
    def test_results_in_roster_order(self, hitter, pitcher):
        batch = process_batch_training(
            [hitter.copy(current_xp=95), pitcher], NO_BONUSES, FacilityLevel.BASIC, 10, SeededRandomSource(7)
        )
        assert [r.player_id for r in batch.trained_players] == ["hitter-1", "pitcher-1"]
        assert batch.total_xp_gained == sum(r.xp_gained for r in batch.trained_players)
        assert batch.players_leveled_up == sum(1 for r in batch.trained_players if r.leveled_up)
        assert batch.players_leveled_up >= 1

    def test_empty_roster(self):
        batch = process_batch_training([], NO_BONUSES, FacilityLevel.BASIC, 5, SeededRandomSource(8))
        assert batch.trained_players == []
        assert batch.total_xp_gained == 0

    def test_summary(self, hitter, pitcher):
        summary = calculate_training_summary([hitter, pitcher], NO_BONUSES, FacilityLevel.IMPROVED)
        assert summary.facility_bonus == 1.15
        assert summary.estimated_xp_per_game == 2
        assert summary.estimated_games_to_level_up == 50
