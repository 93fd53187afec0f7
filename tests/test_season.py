"""Tests for the season, playoff and narrative event engines."""

import pytest

from bullpen.core.draft import PLAYER_TEAM_ID
from bullpen.core.enums import PlayoffResult, PlayoffRound, Tier
from bullpen.core.league import AI_TEAMS
from bullpen.core.models.ai_team import AITeam
from bullpen.core.offseason import run_offseason_rollover
from bullpen.core.rng import SeededRandomSource, SequenceRandomSource
from bullpen.core.season import (
    NARRATIVE_EVENTS,
    EventEffects,
    LeagueStandings,
    PlayoffTeam,
    SeasonContext,
    TeamStanding,
    apply_event_effects,
    calculate_ai_team_ratings,
    calculate_expected_win_pct,
    calculate_team_ratings,
    check_for_events,
    expected_runs,
    generate_finals_series,
    generate_playoff_bracket,
    simulate_league_standings,
    simulate_next_series_game,
    simulate_playoff_game,
    simulate_playoff_series,
    simulate_playoffs,
    simulate_season,
    simulate_season_record,
)


def _table(*rows) -> list[TeamStanding]:
    return [TeamStanding(team_id, team_id.title(), wins, 132 - wins, 50) for team_id, wins in rows]


def _team(team_id: str, seed: int, win_pct: float = 0.5) -> PlayoffTeam:
    return PlayoffTeam(team_id, team_id.title(), seed, 66, 66, win_pct)


def _context(**overrides) -> SeasonContext:
    values = dict(
        year=1, tier=Tier.DOUBLE_A, wins=40, losses=92, population=15_000,
        unemployment_rate=18, team_pride=20, stadium_quality=30,
    )
    values.update(overrides)
    return SeasonContext(**values)


# =============================================================================
# Team Strength and Win Expectation
# =============================================================================


class TestTeamRatings:
    def test_hitters_score_pitchers_prevent(self, hitter, pitcher):
        ratings = calculate_team_ratings([hitter, pitcher])
        assert ratings.offense == 45
        assert ratings.defense == 52
        assert ratings.strength == 48.5

    def test_unavailable_players_ignored(self, hitter, pitcher):
        ratings = calculate_team_ratings([hitter.copy(is_injured=True), pitcher.copy(is_on_roster=False)])
        assert (ratings.offense, ratings.defense) == (40, 40)

    def test_coaching_moves_one_side(self, hitter, pitcher):
        ratings = calculate_team_ratings([hitter, pitcher], hitting_coach_skill=80)
        assert ratings.offense == pytest.approx(46.5)
        assert ratings.defense == 52

    def test_clamped_to_scale(self, hitter):
        ratings = calculate_team_ratings([hitter.copy(current_rating=80, morale=100)], hitting_coach_skill=80)
        assert ratings.offense == 80

    def test_ai_ratings_stay_in_band(self):
        for seed in range(20):
            source = SeededRandomSource(seed)
            for team in AI_TEAMS:
                ratings = calculate_ai_team_ratings(team, Tier.MLB, source)
                assert 25 <= ratings.offense <= 75
                assert 25 <= ratings.defense <= 75

    def test_ai_tier_bonus(self):
        team = AITeam("flat", "Flats", "Plainview", "FLT")
        low = calculate_ai_team_ratings(team, Tier.LOW_A, SequenceRandomSource([0.5]))
        mlb = calculate_ai_team_ratings(team, Tier.MLB, SequenceRandomSource([0.5]))
        assert mlb.offense - low.offense == pytest.approx(20)
        # A 0.5 lean draw splits nothing
        assert low.offense == pytest.approx(low.defense)


class TestWinExpectation:
    def test_even_clubs_split(self):
        assert calculate_expected_win_pct(55, 55) == pytest.approx(0.5)

    def test_better_club_favored_within_bounds(self):
        assert 0.5 < calculate_expected_win_pct(60, 45) < 0.75
        assert calculate_expected_win_pct(80, 20) == 0.75
        assert calculate_expected_win_pct(20, 80) == 0.25

    def test_league_average_runs(self):
        assert expected_runs(50, 50) == pytest.approx(4.929, abs=0.001)
        assert expected_runs(70, 50) > expected_runs(50, 50) > expected_runs(50, 70)

    def test_record_covers_schedule(self, source):
        wins, losses = simulate_season_record(0.55, 132, source)
        assert wins + losses == 132

    def test_game_probability_bounds(self):
        # Normal draws of 0.5 give a small negative wobble; the game roll is 0.5
        assert simulate_season_record(0.75, 10, SequenceRandomSource([0.5])) == (10, 0)
        assert simulate_season_record(0.25, 10, SequenceRandomSource([0.5])) == (0, 10)


# =============================================================================
# Standings
# =============================================================================


class TestLeagueStandings:
    def test_full_league(self, source):
        league = simulate_league_standings(50, Tier.LOW_A, source=source)

        assert len(league.standings) == 20
        assert all(s.wins + s.losses == 132 for s in league.standings)
        pcts = [s.win_pct for s in league.standings]
        assert pcts == sorted(pcts, reverse=True)
        assert league.player.team_id == PLAYER_TEAM_ID
        assert league.made_playoffs == (league.player_rank <= 4)
        assert league.won_division == (league.player_rank == 1)

    def test_schedule_follows_tier(self, source):
        league = simulate_league_standings(50, Tier.MLB, AI_TEAMS[:3], source=source)
        assert len(league.standings) == 4
        assert league.player.wins + league.player.losses == 162

    def test_dominant_club_contends(self):
        league = simulate_league_standings(80, Tier.LOW_A, source=SeededRandomSource(21))
        assert league.made_playoffs

    def test_to_dict(self, source):
        body = simulate_league_standings(50, Tier.LOW_A, AI_TEAMS[:5], "Miners", source).to_dict()
        assert body["tier"] == "LOW_A"
        assert len(body["standings"]) == 6
        assert "Miners" in {row["team_name"] for row in body["standings"]}


# =============================================================================
# Playoffs
# =============================================================================


class TestBracket:
    def test_one_plays_four(self):
        bracket = generate_playoff_bracket(_table(("a", 90), ("b", 80), ("c", 70), ("d", 60), ("e", 50)), 3)
        first, second = bracket.semifinals
        assert (first.team1.id, first.team2.id) == ("a", "d")
        assert (second.team1.id, second.team2.id) == ("b", "c")
        assert [t.seed for t in bracket.teams] == [1, 2, 3, 4]
        assert bracket.status == "semifinals"

    def test_needs_four_teams(self):
        with pytest.raises(ValueError):
            generate_playoff_bracket(_table(("a", 90), ("b", 80)), 1)

    def test_finals_higher_seed_first(self):
        finals = generate_finals_series(_team("c", 3), _team("a", 1))
        assert finals.round == PlayoffRound.FINALS
        assert (finals.team1.id, finals.team2.id) == ("a", "c")

    def test_result_before_playoffs_finish(self):
        bracket = generate_playoff_bracket(_table((PLAYER_TEAM_ID, 90), ("b", 80), ("c", 70), ("d", 60)), 1)
        with pytest.raises(ValueError):
            bracket.player_result()

    def test_missed_when_not_seeded(self):
        league = LeagueStandings(
            Tier.LOW_A, _table(("a", 90), ("b", 80), ("c", 70), ("d", 60), (PLAYER_TEAM_ID, 50))
        )
        bracket = simulate_playoffs(league, 1, 2500, SeededRandomSource(3))
        assert bracket.player_result() == PlayoffResult.MISSED
        assert bracket.status == "complete"


class TestPlayoffGames:
    def test_home_win(self):
        game = simulate_playoff_game(_team("a", 1), _team("b", 2), 1, 2500, SequenceRandomSource([0.1]))
        assert (game.home_score, game.away_score) == (5, 4)
        assert game.winner_id == "a"
        assert game.home_line_score[0] == 5
        assert game.attendance == 2486

    def test_games_are_consistent(self):
        for seed in range(25):
            game = simulate_playoff_game(
                _team("a", 1, 0.6), _team("b", 4, 0.45), 3, 2500, SeededRandomSource(seed)
            )
            assert game.home_score != game.away_score
            assert sum(game.home_line_score) == game.home_score
            assert sum(game.away_line_score) == game.away_score
            assert len(game.home_line_score) == 9
            assert 0 < game.attendance <= 2500

    def test_series_runs_to_three_wins(self):
        for seed in range(15):
            series = generate_finals_series(_team("a", 1, 0.6), _team("b", 2, 0.55))
            done = simulate_playoff_series(series, 2500, SeededRandomSource(seed))

            assert done.is_complete
            assert max(done.team1_wins, done.team2_wins) == 3
            assert 3 <= len(done.games) <= 5
            assert done.winner.id == done.games[-1].winner_id
            assert done.loser.id != done.winner.id
            assert series.games == []

    def test_higher_seed_hosts_one_two_five(self):
        # Home clubs win at 0.1, so the series alternates with the venue
        series = generate_finals_series(_team("a", 1), _team("b", 2))
        done = simulate_playoff_series(series, 2500, SequenceRandomSource([0.1]))
        assert [g.home_team_id for g in done.games] == ["a", "a", "b", "b", "a"]
        assert done.winner.id == "a"

    def test_decided_series_rejects_more_games(self):
        series = generate_finals_series(_team("a", 1), _team("b", 2)).copy(team1_wins=3)
        with pytest.raises(ValueError):
            simulate_next_series_game(series, 2500, SeededRandomSource(1))

    def test_full_playoffs(self):
        league = simulate_league_standings(60, Tier.LOW_A, source=SeededRandomSource(8))
        bracket = simulate_playoffs(league, 2, 2500, SeededRandomSource(9))

        top_four = {s.team_id for s in league.standings[:4]}
        assert bracket.champion.id in top_four
        assert {bracket.finals.team1.id, bracket.finals.team2.id} == {
            s.winner.id for s in bracket.semifinals
        }
        result = bracket.player_result()
        assert (result == PlayoffResult.MISSED) == (not league.made_playoffs)
        assert bracket.to_dict()["champion_team_id"] == bracket.champion.id


# =============================================================================
# Narrative Events
# =============================================================================


class TestEvents:
    def test_first_three_triggers_fire(self):
        events = check_for_events(_context(), SequenceRandomSource([0.0]))
        assert [e.key for e in events] == ["factory_closure", "losing_skid", "stadium_decay"]

    def test_quiet_season(self):
        assert check_for_events(_context(), SequenceRandomSource([0.99])) == []

    def test_low_tier_drops_events(self):
        # Four trigger rolls, then one keep-roll per event against 0.7
        source = SequenceRandomSource([0.0, 0.0, 0.0, 0.0, 0.8, 0.0, 0.8])
        events = check_for_events(_context(tier=Tier.LOW_A), source)
        assert [e.key for e in events] == ["losing_skid"]

    def test_winning_triggers(self):
        context = _context(
            wins=90, losses=42, made_playoffs=True, unemployment_rate=5, team_pride=65,
            stadium_quality=60, reserves=300_000, consecutive_winning_seasons=3,
        )
        events = check_for_events(context, SequenceRandomSource([0.0]), apply_tier_filter=False)
        assert [e.key for e in events] == ["economic_boom", "city_fever", "playoff_push"]

    def test_effects_combine(self):
        events = [NARRATIVE_EVENTS["factory_closure"], NARRATIVE_EVENTS["losing_skid"]]
        impact = apply_event_effects(_context(), events)

        assert impact.attendance_multiplier == pytest.approx(0.765)
        assert impact.new_pride == 7
        assert impact.new_population == 14_500
        assert impact.morale_change == -10
        assert impact.revenue_multiplier == 1.0

    def test_effects_clamp(self):
        events = [NARRATIVE_EVENTS["dark_days"], NARRATIVE_EVENTS["stadium_decay"]]
        impact = apply_event_effects(_context(team_pride=5, stadium_quality=15, population=1200), events)

        assert impact.new_pride == 0
        assert impact.new_stadium_quality == 10
        assert impact.maintenance_cost == 50_000

    def test_no_events_no_change(self):
        impact = apply_event_effects(_context(), [])
        assert impact.attendance_multiplier == 1.0
        assert impact.new_pride == 20

    def test_effects_dict_lists_active_effects(self):
        assert EventEffects(pride_change=3).to_dict() == {"pride_change": 3}
        assert NARRATIVE_EVENTS["stadium_decay"].to_dict()["duration_years"] == 0


# =============================================================================
# Full Season
# =============================================================================


class TestSimulateSeason:
    def test_season(self, hitter, pitcher, franchise, city):
        result = simulate_season([hitter, pitcher], franchise, city, 1, source=SeededRandomSource(12))

        assert result.record.wins + result.record.losses == 132
        assert result.record.wins == result.standings.player.wins
        assert result.bracket is not None
        assert (result.playoff_result == PlayoffResult.MISSED) == (not result.standings.made_playoffs)
        assert 0 <= result.attendance.average_attendance <= franchise.stadium_capacity
        assert result.attendance.total_attendance == result.attendance.average_attendance * 66
        assert len(result.events) <= 3
        assert [p.id for p in result.players] == ["hitter-1", "pitcher-1"]

    def test_reproducible(self, hitter, pitcher, franchise, city):
        a = simulate_season([hitter, pitcher], franchise, city, 1, source=SeededRandomSource(4))
        b = simulate_season([hitter, pitcher], franchise, city, 1, source=SeededRandomSource(4))
        assert a.to_dict() == b.to_dict()

    def test_inputs_untouched(self, hitter, franchise, city):
        before = (hitter.to_dict(), franchise.to_dict(), city.to_dict())
        simulate_season([hitter], franchise, city, 1, source=SeededRandomSource(5))
        assert (hitter.to_dict(), franchise.to_dict(), city.to_dict()) == before

    def test_morale_follows_events(self, hitter, franchise, city):
        result = simulate_season([hitter], franchise, city, 1, source=SeededRandomSource(6))
        expected = max(0, min(100, hitter.morale + result.impact.morale_change))
        assert result.players[0].morale == expected

    def test_feeds_offseason(self, hitter, pitcher, franchise, city):
        result = simulate_season([hitter, pitcher], franchise, city, 1, source=SeededRandomSource(7))
        summary = run_offseason_rollover(
            result.players, result.record, 1, Tier.LOW_A,
            made_playoffs=result.standings.made_playoffs,
            playoff_result=result.playoff_result,
            league_rank=result.standings.player_rank,
            source=SeededRandomSource(8),
        )
        assert summary.team_history.wins == result.record.wins
        assert summary.team_history.to_dict()["playoff_result"] == result.playoff_result.value
