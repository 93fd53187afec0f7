"""Tests for the offseason rollover."""

from bullpen.core.draft import PLAYER_TEAM_ID, TeamRecord
from bullpen.core.enums import PlayerType, PlayoffResult, Tier
from bullpen.core.offseason import (
    archive_season_stats,
    determine_playoff_result,
    determine_season_mvp,
    process_contract_year,
    run_offseason_rollover,
    summarize_season_stats,
)
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource
from bullpen.core.sampling import RATING_MAX, RATING_MIN
from bullpen.core.training import calculate_progression_rate

RECORD = TeamRecord("Player Team", 70, 62)


class TestRollover:
    def test_ages_and_archives(self, hitter):
        played = hitter.copy(season_stats={"games_played": 120, "at_bats": 400, "hits": 120})
        summary = run_offseason_rollover([played], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(1))

        (survivor,) = summary.players
        assert survivor.age == 21
        assert survivor.contract_years == 2
        assert survivor.years_in_org == 1
        assert len(survivor.career_stats) == 1
        assert survivor.career_stats[0].avg == 0.3
        assert survivor.season_stats["hits"] == 0
        assert summary.new_year == 2

    def test_final_year_becomes_free_agent(self, hitter, pitcher):
        summary = run_offseason_rollover(
            [hitter, pitcher.copy(contract_years=1)], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(2)
        )
        assert [p.id for p in summary.players] == ["hitter-1"]
        assert [d.player_id for d in summary.free_agents] == ["pitcher-1"]
        assert summary.free_agents[0].reason == "free_agent"

    def test_no_contract_on_file_is_kept(self, hitter):
        summary = run_offseason_rollover(
            [hitter.copy(contract_years=0)], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(3)
        )
        assert [p.id for p in summary.players] == ["hitter-1"]
        assert summary.players[0].contract_years == 0
        assert summary.free_agents == []

    def test_veteran_retires(self, pitcher):
        summary = run_offseason_rollover(
            [pitcher.copy(age=40)], RECORD, 1, Tier.LOW_A, source=SequenceRandomSource([0.0])
        )
        assert summary.players == []
        assert [d.reason for d in summary.retirements] == ["retired"]
        assert summary.winter_development == []

    def test_development_respects_potential(self, hitter):
        for seed in range(30):
            summary = run_offseason_rollover([hitter], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(seed))
            change = summary.winter_development[0]
            assert change.new_rating <= hitter.potential
            assert change.rating_change >= 0

    def test_mvp_and_history(self, hitter, pitcher):
        slugger = hitter.copy(season_stats={"home_runs": 20, "rbi": 60, "hits": 110, "at_bats": 400})
        summary = run_offseason_rollover(
            [pitcher, slugger], RECORD, 3, Tier.HIGH_A, made_playoffs=True,
            playoff_result=PlayoffResult.LOST_FINALS, avg_attendance=2100, source=SeededRandomSource(4),
        )
        history = summary.team_history
        assert history.mvp_player_id == "hitter-1"
        assert history.wins == 70
        assert history.to_dict()["playoff_result"] == "lost_finals"
        assert history.to_dict()["tier"] == "HIGH_A"

    def test_draft_order_for_next_year(self, hitter):
        summary = run_offseason_rollover([hitter], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(5))
        assert len(summary.draft_order) == 20
        assert PLAYER_TEAM_ID in {e.team_id for e in summary.draft_order}
        assert 1 <= summary.player_draft_position <= 20

    def test_progression_rate_follows_new_age_and_rating(self, hitter):
        veteran = hitter.copy(age=28, current_rating=40, potential=70, contract_years=0, progression_rate=1.56)
        summary = run_offseason_rollover([veteran], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(8))

        (survivor,) = summary.players
        assert survivor.progression_rate == calculate_progression_rate(
            survivor.age, survivor.potential, survivor.current_rating
        )
        assert survivor.progression_rate != 1.56

    def test_ratings_and_tools_stay_on_scale(self, hitter, pitcher):
        roster = [hitter, pitcher, hitter.copy(id="old", age=33, current_rating=78, potential=80)]
        for seed in range(40):
            summary = run_offseason_rollover(roster, RECORD, 1, Tier.LOW_A, source=SeededRandomSource(seed))
            before = {p.id: p for p in roster}
            for player in summary.players:
                previous = before[player.id]
                assert RATING_MIN <= player.current_rating <= RATING_MAX
                assert player.current_rating <= max(player.potential, previous.current_rating)
                assert all(RATING_MIN <= value <= RATING_MAX for value in player.tools.to_dict().values())
                assert player.progression_rate == calculate_progression_rate(
                    player.age, player.potential, player.current_rating
                )

    def test_inputs_untouched(self, hitter):
        before = hitter.to_dict()
        run_offseason_rollover([hitter], RECORD, 1, Tier.LOW_A, source=SeededRandomSource(6))
        assert hitter.to_dict() == before


class TestSeasonHelpers:
    def test_contract_year(self):
        assert process_contract_year(3).new_contract_years == 2
        assert process_contract_year(1).became_free_agent
        assert process_contract_year(0).new_contract_years == 0

    def test_playoff_result(self):
        assert determine_playoff_result(False) == PlayoffResult.MISSED
        assert determine_playoff_result(True, champion_team_id="player") == PlayoffResult.CHAMPION
        assert determine_playoff_result(True, "rivals", "rivals") == PlayoffResult.LOST_FINALS
        assert determine_playoff_result(True) == PlayoffResult.LOST_SEMIFINALS

    def test_summarize_hitter(self):
        summary = summarize_season_stats({"at_bats": 300, "hits": 87}, 2, Tier.LOW_A, PlayerType.HITTER)
        assert summary.avg == 0.29
        assert summary.obp == summary.avg
        assert summary.wins is None

    def test_summarize_pitcher(self):
        summary = summarize_season_stats({"wins": 9, "era": 3.1}, 2, Tier.LOW_A, PlayerType.PITCHER)
        assert summary.wins == 9
        assert summary.era == 3.1
        assert summary.avg is None

    def test_archive_resets_pitcher_counters(self, pitcher):
        archived = archive_season_stats(pitcher.copy(season_stats={"wins": 4}), 1, Tier.LOW_A)
        assert archived.season_stats["wins"] == 0
        assert "at_bats" not in archived.season_stats

    def test_mvp_ties_keep_first(self, hitter):
        twin = hitter.copy(id="twin")
        assert determine_season_mvp([hitter, twin]).id == "hitter-1"
        assert determine_season_mvp([]) is None
