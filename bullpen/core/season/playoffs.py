"""
Playoff bracket and series simulation.

The top four clubs meet in best-of-five series: 1 vs 4 and 2 vs 3, then
the winners meet in the finals. The higher seed hosts games 1, 2 and 5.
Games are decided from regular-season winning percentage with a five
point home edge, so AI clubs need no rosters.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from bullpen.core.draft.order import PLAYER_TEAM_ID
from bullpen.core.enums import PlayoffResult, PlayoffRound
from bullpen.core.rng import RandomSource, chance, default_source, randint, uniform, weighted_choice
from bullpen.core.sampling import clamp
from bullpen.core.season.standings import PLAYOFF_TEAMS, LeagueStandings, TeamStanding

logger = logging.getLogger(__name__)


SERIES_WINS_NEEDED = 3
MAX_GAMES_IN_SERIES = 5
HOME_FIELD_EDGE = 5
PLAYOFF_ATTENDANCE_BOOST = 1.15
INNINGS = 9

# Late innings are slightly likelier to hold a run
_INNING_WEIGHTS = {inning: (0.85 if inning >= 6 else 0.7) for inning in range(INNINGS)}


@dataclass(frozen=True)
class PlayoffTeam:
    id: str
    name: str
    seed: int
    wins: int
    losses: int
    win_pct: float

    @property
    def is_player(self) -> bool:
        return self.id == PLAYER_TEAM_ID

    @classmethod
    def from_standing(cls, standing: TeamStanding, seed: int) -> "PlayoffTeam":
        return cls(
            id=standing.team_id,
            name=standing.team_name,
            seed=seed,
            wins=standing.wins,
            losses=standing.losses,
            win_pct=standing.win_pct,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "wins": self.wins,
            "losses": self.losses,
            "win_pct": round(self.win_pct, 3),
        }


@dataclass(frozen=True)
class PlayoffGame:
    """One playoff game. Scores never tie."""

    game_number: int
    home_team_id: str
    away_team_id: str
    home_score: int
    away_score: int
    home_line_score: tuple[int, ...] = ()
    away_line_score: tuple[int, ...] = ()
    attendance: int = 0

    @property
    def winner_id(self) -> str:
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    def __str__(self) -> str:
        return (
            f"Game {self.game_number}: {self.away_team_id} {self.away_score} "
            f"@ {self.home_team_id} {self.home_score}"
        )

    def to_dict(self) -> dict:
        return {
            "game_number": self.game_number,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "winner_id": self.winner_id,
            "home_line_score": list(self.home_line_score),
            "away_line_score": list(self.away_line_score),
            "attendance": self.attendance,
        }


def generate_line_score(total_runs: int, source: RandomSource, innings: int = INNINGS) -> tuple[int, ...]:
    """Scatter runs across innings; the line always sums to total_runs."""
    weights = _INNING_WEIGHTS if innings == INNINGS else {i: 1.0 for i in range(innings)}
    line = [0] * innings
    for _ in range(total_runs):
        line[weighted_choice(source, weights)] += 1
    return tuple(line)


def simulate_playoff_game(
    home: PlayoffTeam,
    away: PlayoffTeam,
    game_number: int,
    stadium_capacity: int,
    source: Optional[RandomSource] = None,
) -> PlayoffGame:
    """
    Play one game.

    Win probability is .5 plus the strength gap (win% x 100, home +5)
    over 100, held to [.30, .70]. The winner scores 3 + strength/25 plus
    0-3 more; the loser trails by 1-3. Crowds run 85-100% of capacity
    with a 15% playoff boost, never above capacity.
    """
    source = default_source(source)

    home_strength = home.win_pct * 100 + HOME_FIELD_EDGE
    away_strength = away.win_pct * 100
    home_wins = chance(source, clamp(0.5 + (home_strength - away_strength) / 100, 0.30, 0.70))

    if home_wins:
        home_score = 3 + math.floor(home_strength / 25) + randint(source, 0, 3)
        away_score = max(0, home_score - 1 - randint(source, 0, 2))
    else:
        away_score = 3 + math.floor(away_strength / 25) + randint(source, 0, 3)
        home_score = max(0, away_score - 1 - randint(source, 0, 2))

    home_line = generate_line_score(home_score, source)
    away_line = generate_line_score(away_score, source)

    crowd = math.floor(stadium_capacity * uniform(source, 0.85, 1.0))
    attendance = min(stadium_capacity, math.floor(crowd * PLAYOFF_ATTENDANCE_BOOST))

    return PlayoffGame(
        game_number=game_number,
        home_team_id=home.id,
        away_team_id=away.id,
        home_score=home_score,
        away_score=away_score,
        home_line_score=home_line,
        away_line_score=away_line,
        attendance=attendance,
    )


# =============================================================================
# Series
# =============================================================================


@dataclass
class PlayoffSeries:
    """Best-of-five series; team1 is the higher seed."""

    round: PlayoffRound
    series_number: int
    team1: PlayoffTeam
    team2: PlayoffTeam
    team1_wins: int = 0
    team2_wins: int = 0
    games: list[PlayoffGame] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return max(self.team1_wins, self.team2_wins) >= SERIES_WINS_NEEDED

    @property
    def winner(self) -> Optional[PlayoffTeam]:
        if self.team1_wins >= SERIES_WINS_NEEDED:
            return self.team1
        if self.team2_wins >= SERIES_WINS_NEEDED:
            return self.team2
        return None

    @property
    def loser(self) -> Optional[PlayoffTeam]:
        winner = self.winner
        if winner is None:
            return None
        return self.team2 if winner is self.team1 else self.team1

    @property
    def next_game_number(self) -> int:
        return self.team1_wins + self.team2_wins + 1

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team1.id, self.team2.id)

    def copy(self, **changes) -> "PlayoffSeries":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        winner = self.winner
        return {
            "round": self.round.value,
            "series_number": self.series_number,
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict(),
            "team1_wins": self.team1_wins,
            "team2_wins": self.team2_wins,
            "status": "complete" if self.is_complete else ("in_progress" if self.games else "pending"),
            "winner_id": winner.id if winner else None,
            "games": [g.to_dict() for g in self.games],
        }


def simulate_next_series_game(
    series: PlayoffSeries,
    stadium_capacity: int,
    source: Optional[RandomSource] = None,
) -> PlayoffSeries:
    """Play the next game of a series and return the updated series."""
    if series.is_complete:
        raise ValueError(f"Series {series.round.value} #{series.series_number} is already decided")

    game_number = series.next_game_number
    team1_home = game_number <= 2 or game_number == 5
    home, away = (series.team1, series.team2) if team1_home else (series.team2, series.team1)

    game = simulate_playoff_game(home, away, game_number, stadium_capacity, source)
    team1_won = game.winner_id == series.team1.id
    return series.copy(
        team1_wins=series.team1_wins + (1 if team1_won else 0),
        team2_wins=series.team2_wins + (0 if team1_won else 1),
        games=series.games + [game],
    )


def simulate_playoff_series(
    series: PlayoffSeries,
    stadium_capacity: int,
    source: Optional[RandomSource] = None,
) -> PlayoffSeries:
    """Play a series to its end from wherever it stands."""
    source = default_source(source)
    while not series.is_complete:
        series = simulate_next_series_game(series, stadium_capacity, source)
    return series


# =============================================================================
# Bracket
# =============================================================================


@dataclass
class PlayoffBracket:
    year: int
    semifinals: list[PlayoffSeries]
    finals: Optional[PlayoffSeries] = None

    @property
    def champion(self) -> Optional[PlayoffTeam]:
        return self.finals.winner if self.finals else None

    @property
    def status(self) -> str:
        if self.champion is not None:
            return "complete"
        return "finals" if self.finals else "semifinals"

    @property
    def teams(self) -> list[PlayoffTeam]:
        return sorted(
            (team for s in self.semifinals for team in (s.team1, s.team2)),
            key=lambda t: t.seed,
        )

    def player_result(self, player_team_id: str = PLAYER_TEAM_ID) -> PlayoffResult:
        """Where the bracket left the given club. Raises while undecided."""
        if not any(s.involves(player_team_id) for s in self.semifinals):
            return PlayoffResult.MISSED
        if self.champion is None:
            raise ValueError(f"Playoffs for year {self.year} are still in progress")
        if self.champion.id == player_team_id:
            return PlayoffResult.CHAMPION
        if self.finals.involves(player_team_id):
            return PlayoffResult.LOST_FINALS
        return PlayoffResult.LOST_SEMIFINALS

    def to_dict(self) -> dict:
        champion = self.champion
        return {
            "year": self.year,
            "status": self.status,
            "semifinals": [s.to_dict() for s in self.semifinals],
            "finals": self.finals.to_dict() if self.finals else None,
            "champion_team_id": champion.id if champion else None,
            "champion_team_name": champion.name if champion else None,
        }


def generate_playoff_bracket(standings: Sequence[TeamStanding], year: int) -> PlayoffBracket:
    """
    Seed the top four of a sorted table into semifinals.

    Raises:
        ValueError: Fewer than four clubs
    """
    if len(standings) < PLAYOFF_TEAMS:
        raise ValueError(f"Need {PLAYOFF_TEAMS} teams for a bracket, got {len(standings)}")

    seeds = [PlayoffTeam.from_standing(s, seed) for seed, s in enumerate(standings[:PLAYOFF_TEAMS], start=1)]
    return PlayoffBracket(
        year=year,
        semifinals=[
            PlayoffSeries(PlayoffRound.SEMIFINALS, 1, seeds[0], seeds[3]),
            PlayoffSeries(PlayoffRound.SEMIFINALS, 2, seeds[1], seeds[2]),
        ],
    )


def generate_finals_series(first: PlayoffTeam, second: PlayoffTeam) -> PlayoffSeries:
    """Finals pairing; the better seed becomes team1 and hosts games 1, 2 and 5."""
    team1, team2 = (first, second) if first.seed < second.seed else (second, first)
    return PlayoffSeries(PlayoffRound.FINALS, 1, team1, team2)


def simulate_playoffs(
    standings: LeagueStandings,
    year: int,
    stadium_capacity: int,
    source: Optional[RandomSource] = None,
) -> PlayoffBracket:
    """Run both rounds and return the finished bracket."""
    source = default_source(source)
    bracket = generate_playoff_bracket(standings.playoff_teams(), year)

    semifinals = [simulate_playoff_series(s, stadium_capacity, source) for s in bracket.semifinals]
    finals = generate_finals_series(semifinals[0].winner, semifinals[1].winner)
    finals = simulate_playoff_series(finals, stadium_capacity, source)

    result = PlayoffBracket(year=year, semifinals=semifinals, finals=finals)
    logger.info("Playoffs %d: %s champion", year, result.champion.name)
    return result
