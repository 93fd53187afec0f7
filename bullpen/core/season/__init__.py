"""Regular season, playoffs and the narrative events that follow them."""

from bullpen.core.season.events import (
    MAX_EVENTS_PER_SEASON,
    NARRATIVE_EVENTS,
    TIER_EVENT_MULTIPLIERS,
    EventEffects,
    EventImpact,
    NarrativeEvent,
    SeasonContext,
    apply_event_effects,
    check_for_events,
    combine_modifiers,
    sum_changes,
)
from bullpen.core.season.playoffs import (
    SERIES_WINS_NEEDED,
    PlayoffBracket,
    PlayoffGame,
    PlayoffSeries,
    PlayoffTeam,
    generate_finals_series,
    generate_line_score,
    generate_playoff_bracket,
    simulate_next_series_game,
    simulate_playoff_game,
    simulate_playoff_series,
    simulate_playoffs,
)
from bullpen.core.season.simulation import SeasonResult, simulate_season
from bullpen.core.season.standings import (
    PLAYOFF_TEAMS,
    LeagueStandings,
    TeamRatings,
    TeamStanding,
    calculate_ai_team_ratings,
    calculate_expected_win_pct,
    calculate_team_ratings,
    calculate_team_strength,
    expected_runs,
    pythagorean_win_pct,
    simulate_league_standings,
    simulate_season_record,
)

__all__ = [
    "EventEffects",
    "EventImpact",
    "LeagueStandings",
    "MAX_EVENTS_PER_SEASON",
    "NARRATIVE_EVENTS",
    "NarrativeEvent",
    "PLAYOFF_TEAMS",
    "PlayoffBracket",
    "PlayoffGame",
    "PlayoffSeries",
    "PlayoffTeam",
    "SERIES_WINS_NEEDED",
    "SeasonContext",
    "SeasonResult",
    "TIER_EVENT_MULTIPLIERS",
    "TeamRatings",
    "TeamStanding",
    "apply_event_effects",
    "calculate_ai_team_ratings",
    "calculate_expected_win_pct",
    "calculate_team_ratings",
    "calculate_team_strength",
    "check_for_events",
    "combine_modifiers",
    "expected_runs",
    "generate_finals_series",
    "generate_line_score",
    "generate_playoff_bracket",
    "pythagorean_win_pct",
    "simulate_league_standings",
    "simulate_next_series_game",
    "simulate_playoff_game",
    "simulate_playoff_series",
    "simulate_playoffs",
    "simulate_season",
    "simulate_season_record",
    "sum_changes",
]
