"""
Full regular season and postseason for the human franchise.

Order of play: preseason injuries, roster ratings, league standings,
playoffs, narrative events, then home attendance with the event
attendance multiplier folded into the district fan bonus. Inputs are
never mutated; the updated roster comes back on the result.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from bullpen.core.development import apply_injury, simulate_injury
from bullpen.core.draft.order import TeamRecord
from bullpen.core.enums import PlayoffResult, Tier
from bullpen.core.finances.attendance import AttendanceResult, calculate_attendance
from bullpen.core.league.ai_teams import AI_TEAMS
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.ai_team import AITeam
from bullpen.core.models.city import CityState
from bullpen.core.models.franchise import Franchise
from bullpen.core.models.player import Player
from bullpen.core.rng import RandomSource, default_source
from bullpen.core.season.events import (
    EventImpact,
    NarrativeEvent,
    SeasonContext,
    apply_event_effects,
    check_for_events,
)
from bullpen.core.season.playoffs import PlayoffBracket, simulate_playoffs
from bullpen.core.season.standings import (
    PLAYOFF_TEAMS,
    LeagueStandings,
    TeamRatings,
    calculate_team_ratings,
    simulate_league_standings,
)

logger = logging.getLogger(__name__)


@dataclass
class SeasonResult:
    year: int
    tier: Tier
    ratings: TeamRatings
    standings: LeagueStandings
    attendance: AttendanceResult
    impact: EventImpact
    players: list[Player] = field(default_factory=list)
    bracket: Optional[PlayoffBracket] = None
    events: list[NarrativeEvent] = field(default_factory=list)

    @property
    def record(self) -> TeamRecord:
        """Human club's record, in the shape the offseason and draft expect."""
        player = self.standings.player
        return TeamRecord(player.team_name, player.wins, player.losses)

    @property
    def win_pct(self) -> float:
        return self.standings.player.win_pct

    @property
    def playoff_result(self) -> PlayoffResult:
        if self.bracket is None:
            return PlayoffResult.MISSED
        return self.bracket.player_result()

    @property
    def won_championship(self) -> bool:
        return self.playoff_result == PlayoffResult.CHAMPION

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "tier": self.tier.value,
            "wins": self.record.wins,
            "losses": self.record.losses,
            "win_pct": round(self.win_pct, 3),
            "team_strength": round(self.ratings.strength, 1),
            "offense": round(self.ratings.offense, 1),
            "defense": round(self.ratings.defense, 1),
            "standings": self.standings.to_dict(),
            "playoff_result": self.playoff_result.value,
            "bracket": self.bracket.to_dict() if self.bracket else None,
            "attendance": self.attendance.to_dict(),
            "events": [e.to_dict() for e in self.events],
            "impact": self.impact.to_dict(),
            "players": [p.to_dict() for p in self.players],
        }


def simulate_season(
    players: Sequence[Player],
    franchise: Franchise,
    city: CityState,
    year: int,
    ai_teams: Sequence[AITeam] = AI_TEAMS,
    fan_mult: float = 1.0,
    player_team_name: str = "Player Team",
    source: Optional[RandomSource] = None,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> SeasonResult:
    """
    Play one season for the franchise.

    Args:
        players: Roster going into the season
        franchise: Tier, coaches, stadium and reserves
        city: Pride, unemployment and population for attendance and events
        year: Season year
        ai_teams: League opponents
        fan_mult: Entertainment district attendance bonus
        player_team_name: Display name in the standings

    Returns:
        SeasonResult; the bracket is None when the league is too small
        to seed one
    """
    source = default_source(source)
    tier = franchise.tier
    config = get_tier_config(tier, tier_configs)

    roster = [apply_injury(p, simulate_injury(p, source)) for p in players]

    ratings = calculate_team_ratings(
        roster, franchise.hitting_coach_skill, franchise.pitching_coach_skill
    )
    standings = simulate_league_standings(
        ratings.strength, tier, ai_teams, player_team_name, source, tier_configs
    )

    bracket = None
    if len(standings.standings) >= PLAYOFF_TEAMS:
        bracket = simulate_playoffs(standings, year, franchise.stadium_capacity, source)

    own = standings.player
    context = SeasonContext.from_state(
        franchise, city, year, own.wins, own.losses,
        standings.made_playoffs, standings.won_division,
    )
    events = check_for_events(context, source)
    impact = apply_event_effects(context, events)

    attendance = calculate_attendance(
        franchise.stadium_capacity,
        own.win_pct,
        city.team_pride,
        city.unemployment_rate,
        franchise.stadium_quality,
        config.season_length // 2,
        fan_mult * impact.attendance_multiplier,
        source,
    )

    if impact.morale_change:
        roster = [
            p.copy(morale=max(0, min(100, p.morale + impact.morale_change))) for p in roster
        ]

    result = SeasonResult(
        year=year,
        tier=tier,
        ratings=ratings,
        standings=standings,
        attendance=attendance,
        impact=impact,
        players=roster,
        bracket=bracket,
        events=events,
    )
    logger.info(
        "Season %d (%s): %d-%d, rank %d, %s, %d events",
        year, tier.value, own.wins, own.losses, standings.player_rank,
        result.playoff_result.value, len(events),
    )
    return result
