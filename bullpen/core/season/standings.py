"""
Regular season standings.

Team strength comes from the active roster split into offense (hitters)
and run prevention (pitchers), nudged by coaching and morale. Expected
win percentage uses the Pythagorean expectation with exponent 2, and
each game then gets its own small Gaussian wobble so records streak.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence

from bullpen.core.draft.order import PLAYER_TEAM_ID
from bullpen.core.enums import PlayerType, Tier
from bullpen.core.league.ai_teams import AI_TEAMS
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.ai_team import AITeam
from bullpen.core.models.player import Player
from bullpen.core.rng import RandomSource, chance, default_source, uniform
from bullpen.core.sampling import RatingSampler, clamp

logger = logging.getLogger(__name__)


RUNS_PER_GAME = 4.5
PYTHAGOREAN_EXPONENT = 2.0
PLAYOFF_TEAMS = 4

DEFAULT_RATING = 40
COACHING_WEIGHT = 0.15
MORALE_WEIGHT = 0.1

# Higher tiers field better AI rosters
TIER_STRENGTH_BONUS: Mapping[Tier, int] = {
    Tier.LOW_A: 0,
    Tier.HIGH_A: 5,
    Tier.DOUBLE_A: 10,
    Tier.TRIPLE_A: 15,
    Tier.MLB: 20,
}


@dataclass(frozen=True)
class TeamRatings:
    """Offense and run prevention on the 20-80 scale."""

    offense: float
    defense: float

    @property
    def strength(self) -> float:
        return (self.offense + self.defense) / 2

    @classmethod
    def balanced(cls, strength: float) -> "TeamRatings":
        return cls(offense=strength, defense=strength)


# =============================================================================
# Team Strength
# =============================================================================


def _average_rating(players: Sequence[Player]) -> float:
    if not players:
        return DEFAULT_RATING
    return sum(p.current_rating for p in players) / len(players)


def calculate_team_ratings(
    players: Iterable[Player],
    hitting_coach_skill: int = 50,
    pitching_coach_skill: int = 50,
) -> TeamRatings:
    """
    Rate the human club from its healthy rostered players.

    Each coach moves their side by up to +/-1.5 around a skill of 50;
    average morale moves both sides by up to +/-0.5. Empty rosters rate
    40/40.
    """
    active = [p for p in players if p.is_on_roster and not p.is_injured]
    if not active:
        return TeamRatings.balanced(DEFAULT_RATING)

    hitters = [p for p in active if p.player_type == PlayerType.HITTER]
    pitchers = [p for p in active if p.player_type == PlayerType.PITCHER]

    hitting_bonus = (hitting_coach_skill - 50) / 30 * COACHING_WEIGHT * 10
    pitching_bonus = (pitching_coach_skill - 50) / 30 * COACHING_WEIGHT * 10
    average_morale = sum(p.morale for p in active) / len(active)
    morale_bonus = (average_morale - 50) / 50 * MORALE_WEIGHT * 5

    return TeamRatings(
        offense=clamp(_average_rating(hitters) + hitting_bonus + morale_bonus, 20, 80),
        defense=clamp(_average_rating(pitchers) + pitching_bonus + morale_bonus, 20, 80),
    )


def calculate_team_strength(
    players: Iterable[Player],
    hitting_coach_skill: int = 50,
    pitching_coach_skill: int = 50,
) -> float:
    return calculate_team_ratings(players, hitting_coach_skill, pitching_coach_skill).strength


def calculate_ai_team_ratings(
    team: AITeam, tier: Tier, source: Optional[RandomSource] = None
) -> TeamRatings:
    """
    One season's ratings for an AI club.

    Base strength plus the tier bonus, split by a random offense/defense
    lean of up to 5 points, with Gaussian noise scaled by the team's
    volatility. Both sides land in [25, 75].
    """
    source = default_source(source)
    sampler = RatingSampler(source)
    spread = 3 * team.variance_multiplier

    offense_noise = clamp(sampler.normal(0, spread), -8, 8)
    defense_noise = clamp(sampler.normal(0, spread), -8, 8)
    lean = uniform(source, -5, 5)
    base = team.base_strength + TIER_STRENGTH_BONUS[tier]

    return TeamRatings(
        offense=clamp(base + lean + offense_noise, 25, 75),
        defense=clamp(base - lean + defense_noise, 25, 75),
    )


# =============================================================================
# Win Expectation
# =============================================================================


def expected_runs(offense: float, opposing_defense: float) -> float:
    """Runs per game; a 50 offense against a 50 defense scores about 4.9."""
    offense_mult = 0.7 + offense / 100
    defense_mult = 0.7 + opposing_defense / 100
    return RUNS_PER_GAME * offense_mult / defense_mult ** 0.5


def pythagorean_win_pct(
    team: TeamRatings,
    opponent: TeamRatings,
    exponent: float = PYTHAGOREAN_EXPONENT,
) -> float:
    """Bill James' RS^x / (RS^x + RA^x), held to [.250, .750]."""
    scored = expected_runs(team.offense, opponent.defense) ** exponent
    allowed = expected_runs(opponent.offense, team.defense) ** exponent
    return clamp(scored / (scored + allowed), 0.25, 0.75)


def calculate_expected_win_pct(team_strength: float, opponent_strength: float) -> float:
    """Pythagorean expectation for two balanced clubs."""
    return pythagorean_win_pct(
        TeamRatings.balanced(team_strength), TeamRatings.balanced(opponent_strength)
    )


def simulate_season_record(
    expected_win_pct: float,
    total_games: int,
    source: Optional[RandomSource] = None,
) -> tuple[int, int]:
    """
    Play out a season game by game.

    Every game shifts the win probability by a N(0, .03) draw bounded to
    +/-.08, and the result is held to [.15, .85].

    Returns:
        (wins, losses)
    """
    source = default_source(source)
    sampler = RatingSampler(source)

    wins = 0
    for _ in range(total_games):
        wobble = clamp(sampler.normal(0, 0.03), -0.08, 0.08)
        if chance(source, clamp(expected_win_pct + wobble, 0.15, 0.85)):
            wins += 1
    return wins, total_games - wins


# =============================================================================
# League Table
# =============================================================================


@dataclass
class TeamStanding:
    team_id: str
    team_name: str
    wins: int
    losses: int
    strength: float

    @property
    def win_pct(self) -> float:
        games = self.wins + self.losses
        return self.wins / games if games else 0.0

    @property
    def is_player(self) -> bool:
        return self.team_id == PLAYER_TEAM_ID

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "wins": self.wins,
            "losses": self.losses,
            "win_pct": round(self.win_pct, 3),
            "strength": round(self.strength, 1),
        }


@dataclass
class LeagueStandings:
    """Final table, best record first."""

    tier: Tier
    standings: list[TeamStanding] = field(default_factory=list)

    @property
    def player_rank(self) -> int:
        for rank, standing in enumerate(self.standings, start=1):
            if standing.is_player:
                return rank
        return len(self.standings)

    @property
    def player(self) -> Optional[TeamStanding]:
        for standing in self.standings:
            if standing.is_player:
                return standing
        return None

    @property
    def made_playoffs(self) -> bool:
        return self.player is not None and self.player_rank <= PLAYOFF_TEAMS

    @property
    def won_division(self) -> bool:
        return self.player is not None and self.player_rank == 1

    def playoff_teams(self, count: int = PLAYOFF_TEAMS) -> list[TeamStanding]:
        return self.standings[:count]

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "standings": [s.to_dict() for s in self.standings],
            "player_rank": self.player_rank,
            "made_playoffs": self.made_playoffs,
            "won_division": self.won_division,
        }


def simulate_league_standings(
    player_strength: float,
    tier: Tier,
    ai_teams: Sequence[AITeam] = AI_TEAMS,
    player_team_name: str = "Player Team",
    source: Optional[RandomSource] = None,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> LeagueStandings:
    """
    Simulate a full regular season for the human club and every AI club.

    Each AI club is rated once for the season. Every club then plays the
    tier's schedule against the league-average AI strength.

    Returns:
        LeagueStandings sorted by win percentage; ties keep the human
        club ahead, then AI clubs in list order
    """
    source = default_source(source)
    config = get_tier_config(tier, tier_configs)
    total_games = config.season_length

    ai_strengths = [calculate_ai_team_ratings(team, tier, source).strength for team in ai_teams]
    league_average = sum(ai_strengths) / len(ai_strengths) if ai_strengths else config.average_opponent_strength

    wins, losses = simulate_season_record(
        calculate_expected_win_pct(player_strength, league_average), total_games, source
    )
    table = [TeamStanding(PLAYER_TEAM_ID, player_team_name, wins, losses, player_strength)]

    for team, strength in zip(ai_teams, ai_strengths):
        wins, losses = simulate_season_record(
            calculate_expected_win_pct(strength, league_average), total_games, source
        )
        table.append(TeamStanding(team.id, team.full_name, wins, losses, strength))

    table.sort(key=lambda s: -s.win_pct)
    result = LeagueStandings(tier=tier, standings=table)

    logger.debug(
        "%s season: %d games, player %d-%d, rank %d of %d",
        tier.value, total_games, result.player.wins, result.player.losses,
        result.player_rank, len(table),
    )
    return result
