"""Tests for the AI draft, the draft order and pick slot arithmetic."""

import pytest

from bullpen.core.ai import ai_draft_pick, rank_prospects, score_prospect, simulate_ai_draft_picks
from bullpen.core.draft import (
    PLAYER_TEAM_ID,
    TeamRecord,
    ai_team_index_for_slot,
    ai_teams_in_draft_order,
    generate_draft_order,
    get_player_draft_position,
    overall_pick_for_slot,
    pick_position_in_round,
    round_for_pick,
)
from bullpen.core.enums import DraftPhilosophy, Position
from bullpen.core.league import AI_TEAMS, get_ai_team
from bullpen.core.models.ai_team import AITeam
from bullpen.core.models.player import HiddenTraits
from bullpen.core.models.prospect import DraftProspect
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource


def _prospect(pid, position=Position.SS, current=45, potential=55, injury_prone=False):
    return DraftProspect(
        id=pid,
        position=position,
        player_type=position.player_type,
        current_rating=current,
        potential=potential,
        hidden_traits=HiddenTraits(injury_prone=injury_prone),
    )


@pytest.fixture
def miners() -> AITeam:
    team = get_ai_team("coaltown-miners")
    assert team is not None
    return team


class TestScoring:
    """Philosophy adjustments; a 0.5 draw makes both noise terms zero."""

    def test_best_available(self):
        team = AITeam("t", "T", "Town", "TTT", DraftPhilosophy.BEST_AVAILABLE)
        score, reason = score_prospect(team, _prospect("a", current=48), SequenceRandomSource([0.5]))
        assert score == pytest.approx(48)
        assert reason == "best available"

    def test_need_based_bonus(self, miners):
        score, reason = score_prospect(
            miners, _prospect("a", Position.SP, current=40), SequenceRandomSource([0.5])
        )
        assert score == pytest.approx(40 + 90 / 5)
        assert reason == "filling need at SP"

    def test_upside_swing(self):
        team = AITeam("t", "T", "Town", "TTT", DraftPhilosophy.UPSIDE_SWING)
        score, _ = score_prospect(team, _prospect("a", current=40, potential=60), SequenceRandomSource([0.5]))
        assert score == pytest.approx(40 + 20 * 2)

    def test_safe_floor_penalizes_gap_and_injury(self):
        team = AITeam("t", "T", "Town", "TTT", DraftPhilosophy.SAFE_FLOOR, risk_tolerance=20)
        score, reason = score_prospect(
            team, _prospect("a", current=50, potential=60, injury_prone=True), SequenceRandomSource([0.5])
        )
        assert score == pytest.approx(50 - 10 - (50 - 20) / 5)
        assert reason == "safe, low-risk pick"

    def test_two_draws_per_prospect(self):
        source = SequenceRandomSource([0.5])
        team = AITeam("t", "T", "Town", "TTT")
        rank_prospects(team, [_prospect("a"), _prospect("b"), _prospect("c")], source)
        assert source.draws == 6


class TestAIDraftPick:
    def test_need_beats_better_rating(self, miners):
        pool = [_prospect("ss", Position.SS, current=55), _prospect("sp", Position.SP, current=40)]
        result = ai_draft_pick(miners, pool, 1, SequenceRandomSource([0.5]))
        assert result.success
        assert result.prospect.id == "sp"
        assert result.selected_index == 1

    def test_first_round_takes_top_score(self):
        team = AITeam("t", "T", "Town", "TTT")
        pool = [_prospect(str(r), current=r) for r in (40, 60, 50)]
        result = ai_draft_pick(team, pool, 1, SequenceRandomSource([0.5]))
        assert result.prospect.id == "60"

    def test_later_rounds_pick_from_top_three(self):
        team = AITeam("t", "T", "Town", "TTT")
        pool = [_prospect(str(r), current=r) for r in (20, 75, 70, 65, 25)]
        for seed in range(50):
            result = ai_draft_pick(team, pool, 3, SeededRandomSource(seed))
            # Noise is at most +/-10 total, so 20 and 25 never crack the top three
            assert result.prospect.id in {"75", "70", "65"}

    def test_drafted_prospects_skipped(self):
        team = AITeam("t", "T", "Town", "TTT")
        pool = [_prospect("taken", current=70).mark_drafted("other"), _prospect("left", current=40)]
        result = ai_draft_pick(team, pool, 1, SeededRandomSource(1))
        assert result.prospect.id == "left"
        assert result.selected_index == 1

    def test_empty_pool(self):
        team = AITeam("t", "T", "Town", "TTT")
        result = ai_draft_pick(team, [], 1, SeededRandomSource(1))
        assert not result.success
        assert result.selected_index is None
        assert "No undrafted prospects" in result.reason


class TestSimulateAIDraftPicks:
    def test_stops_when_player_is_on_the_clock(self, prospects):
        teams = list(AI_TEAMS)
        result = simulate_ai_draft_picks(teams, prospects, 1, 5, 1, source=SeededRandomSource(3))

        assert [p.pick for p in result.picks] == [1, 2, 3, 4]
        assert result.next_pick == 5
        assert not result.round_complete
        assert len(result.remaining_prospects) == len(prospects) - 4
        assert all(p.prospect.is_drafted for p in result.picks)
        assert result.picks[0].team_id == teams[0].id

    def test_finishes_round_after_player_pick(self, prospects):
        teams = list(AI_TEAMS)
        result = simulate_ai_draft_picks(teams, prospects, 6, 5, 1, source=SeededRandomSource(3))

        assert len(result.picks) == 15
        assert result.next_pick == 21
        assert result.round_complete
        assert result.picks[-1].team_id == teams[18].id

    def test_snake_round_two(self, prospects):
        teams = list(AI_TEAMS)
        result = simulate_ai_draft_picks(teams, prospects, 21, 5, 2, source=SeededRandomSource(3))
        # Slot 5 picks 16th in an even round
        assert result.next_pick == 36
        assert len(result.picks) == 15
        assert result.picks[0].team_id == teams[18].id

    def test_no_prospect_drafted_twice(self, prospects):
        teams = list(AI_TEAMS)
        result = simulate_ai_draft_picks(teams, prospects, 1, 20, 1, source=SeededRandomSource(8))
        ids = [p.prospect.id for p in result.picks]
        assert len(ids) == len(set(ids)) == 19


class TestDraftOrder:
    def test_order_is_monotonic(self):
        order = generate_draft_order(TeamRecord("Player Team", 40, 92), AI_TEAMS, 2, SeededRandomSource(17))
        win_pcts = [e.win_pct for e in order]
        assert win_pcts == sorted(win_pcts)
        assert len(order) == len(AI_TEAMS) + 1
        assert [e.pick_number for e in order] == list(range(1, 21))

    def test_bad_record_picks_first(self):
        for seed in range(20):
            order = generate_draft_order(TeamRecord("Player Team", 40, 92), AI_TEAMS, 2, SeededRandomSource(seed))
            assert get_player_draft_position(order) == 1

    def test_ai_records_sum_to_player_games(self):
        order = generate_draft_order(TeamRecord("Player Team", 70, 62), AI_TEAMS, 2, SeededRandomSource(5))
        for entry in order:
            assert entry.previous_season_wins + entry.previous_season_losses == 132
            assert 0.25 <= entry.win_pct <= 0.75 or entry.team_id == PLAYER_TEAM_ID

    def test_ties_keep_player_first(self):
        # Strength 0 and a 0.5 draw give the AI exactly .350
        rival = AITeam("rival", "Rivals", "Tie Town", "TIE", base_strength=0)
        order = generate_draft_order(TeamRecord("Player Team", 35, 65), [rival], 1, SequenceRandomSource([0.5]))
        assert [e.team_id for e in order] == [PLAYER_TEAM_ID, "rival"]

    def test_year_is_logged(self, caplog):
        rival = AITeam("rival", "Rivals", "Tie Town", "TIE", base_strength=0)
        with caplog.at_level("DEBUG", logger="bullpen.core.draft.order"):
            generate_draft_order(TeamRecord("Player Team", 35, 65), [rival], 4, SequenceRandomSource([0.5]))
        assert "Draft order for year 4: 2 teams, player pick 1" in caplog.text

    def test_missing_player_defaults_to_last(self):
        assert get_player_draft_position([]) == 0

    def test_ai_teams_in_draft_order(self):
        order = generate_draft_order(TeamRecord("Player Team", 66, 66), AI_TEAMS, 1, SeededRandomSource(2))
        arranged = ai_teams_in_draft_order(order, AI_TEAMS)
        expected = [e.team_id for e in order if e.team_id != PLAYER_TEAM_ID]
        assert [t.id for t in arranged] == expected


class TestPickArithmetic:
    def test_round_for_pick(self):
        assert round_for_pick(1) == 1
        assert round_for_pick(20) == 1
        assert round_for_pick(21) == 2

    def test_snake_positions(self):
        assert pick_position_in_round(1, 1) == 1
        assert pick_position_in_round(21, 2) == 20
        assert pick_position_in_round(21, 2, snake=False) == 1

    def test_overall_pick_inverts_position(self):
        for round_number in (1, 2, 3):
            for slot in range(1, 21):
                pick = overall_pick_for_slot(slot, round_number)
                assert pick_position_in_round(pick, round_number) == slot

    def test_ai_team_index_skips_player(self):
        assert ai_team_index_for_slot(1, 5) == 0
        assert ai_team_index_for_slot(4, 5) == 3
        assert ai_team_index_for_slot(6, 5) == 4
