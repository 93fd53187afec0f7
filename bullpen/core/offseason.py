"""
Offseason rollover.

Closes out a season: archives stats, ages the roster, applies winter
development, runs down contracts, picks a team MVP and sets the next
draft order. Nothing here mutates its inputs; updated players come back
in the summary.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from bullpen.core.development import (
    age_player,
    apply_rating_change,
    calculate_winter_development,
)
from bullpen.core.draft.order import (
    DraftOrderEntry,
    TeamRecord,
    generate_draft_order,
    get_player_draft_position,
)
from bullpen.core.enums import PlayerType, PlayoffResult, Tier
from bullpen.core.finances.simulation import FinancialSimulationResult
from bullpen.core.league.ai_teams import AI_TEAMS
from bullpen.core.models.ai_team import AITeam
from bullpen.core.models.player import Player
from bullpen.core.models.stats import (
    HITTER_COUNTING_STATS,
    PITCHER_COUNTING_STATS,
    SeasonStatsSummary,
)
from bullpen.core.rng import RandomSource, default_source
from bullpen.core.training import calculate_progression_rate

logger = logging.getLogger(__name__)


# =============================================================================
# Stats
# =============================================================================


def create_empty_season_stats(player_type: PlayerType) -> dict[str, int]:
    keys = PITCHER_COUNTING_STATS if player_type == PlayerType.PITCHER else HITTER_COUNTING_STATS
    return {key: 0 for key in keys}


def summarize_season_stats(
    season_stats: Optional[dict], year: int, tier: Tier, player_type: PlayerType
) -> SeasonStatsSummary:
    """
    Collapse a season's raw counters into a career line entry.

    Batting average is hits over at-bats to three places; OBP and SLG
    fall back to it when the season did not track them.
    """
    stats = season_stats or {}
    summary = SeasonStatsSummary(
        year=year, tier=tier.value, games_played=stats.get("games_played", 0)
    )

    if player_type == PlayerType.HITTER:
        summary.at_bats = stats.get("at_bats", 0)
        summary.hits = stats.get("hits", 0)
        summary.home_runs = stats.get("home_runs", 0)
        summary.rbi = stats.get("rbi", 0)
        summary.runs = stats.get("runs", 0)
        summary.stolen_bases = stats.get("stolen_bases", 0)
        summary.avg = round(summary.hits / (summary.at_bats or 1), 3)
        summary.obp = stats.get("obp") or summary.avg
        summary.slg = stats.get("slg") or summary.avg
    else:
        summary.wins = stats.get("wins", 0)
        summary.losses = stats.get("losses", 0)
        summary.era = stats.get("era", 0)
        summary.innings = stats.get("innings", 0)
        summary.strikeouts = stats.get("strikeouts", 0)
        summary.walks = stats.get("walks", 0)
        summary.saves = stats.get("saves", 0)
    return summary


def archive_season_stats(player: Player, year: int, tier: Tier) -> Player:
    """Append the season to the career line and start a fresh season."""
    summary = summarize_season_stats(player.season_stats, year, tier, player.player_type)
    return player.copy(
        career_stats=[*player.career_stats, summary],
        season_stats=create_empty_season_stats(player.player_type),
    )


# =============================================================================
# Contracts and results
# =============================================================================


@dataclass
class ContractYearResult:
    new_contract_years: int
    became_free_agent: bool


def process_contract_year(current_contract_years: int) -> ContractYearResult:
    remaining = max(0, current_contract_years - 1)
    return ContractYearResult(new_contract_years=remaining, became_free_agent=remaining == 0)


def determine_playoff_result(
    made_playoffs: bool,
    champion_team_id: Optional[str] = None,
    finals_winner_id: Optional[str] = None,
    semifinals_winner_id: Optional[str] = None,
    player_team_id: str = "player",
) -> PlayoffResult:
    """Bracket outcome for the franchise. Unknown playoff exits count as semifinal losses."""
    if not made_playoffs:
        return PlayoffResult.MISSED
    if champion_team_id == player_team_id:
        return PlayoffResult.CHAMPION
    if finals_winner_id and finals_winner_id != player_team_id:
        return PlayoffResult.LOST_FINALS
    return PlayoffResult.LOST_SEMIFINALS


def calculate_mvp_score(player: Player) -> float:
    stats = player.season_stats or {}
    score = float(player.current_rating)

    if player.player_type == PlayerType.HITTER:
        score += stats.get("home_runs", 0) * 2
        score += stats.get("rbi", 0) * 0.5
        score += stats.get("hits", 0) * 0.3
        score += stats.get("stolen_bases", 0) * 0.5

        avg = stats.get("hits", 0) / (stats.get("at_bats") or 1)
        if avg >= 0.300:
            score += 10
        if avg >= 0.350:
            score += 10
    else:
        score += stats.get("wins", 0) * 5
        score += stats.get("strikeouts", 0) * 0.2
        score += stats.get("saves", 0) * 3

        era = stats.get("era") or 5.0
        if era <= 3.00:
            score += 15
        if era <= 2.50:
            score += 10

    return score


def determine_season_mvp(players: Sequence[Player]) -> Optional[Player]:
    """Highest MVP score; the earlier player keeps ties."""
    best = None
    best_score = float("-inf")
    for player in players:
        score = calculate_mvp_score(player)
        if score > best_score:
            best, best_score = player, score
    return best


# =============================================================================
# Rollover
# =============================================================================


@dataclass
class TeamHistoryEntry:
    year: int
    tier: Tier
    wins: int
    losses: int
    win_pct: float
    made_playoffs: bool
    playoff_result: PlayoffResult
    total_revenue: int = 0
    total_expenses: int = 0
    net_income: int = 0
    avg_attendance: int = 0
    league_rank: Optional[int] = None
    mvp_player_id: Optional[str] = None
    mvp_player_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "tier": self.tier.value,
            "wins": self.wins,
            "losses": self.losses,
            "win_pct": round(self.win_pct, 3),
            "made_playoffs": self.made_playoffs,
            "playoff_result": self.playoff_result.value,
            "total_revenue": self.total_revenue,
            "total_expenses": self.total_expenses,
            "net_income": self.net_income,
            "avg_attendance": self.avg_attendance,
            "league_rank": self.league_rank,
            "mvp_player_id": self.mvp_player_id,
            "mvp_player_name": self.mvp_player_name,
        }


@dataclass
class PlayerDevelopmentChange:
    player_id: str
    player_name: str
    age: int
    previous_rating: int
    new_rating: int
    reason: str

    @property
    def rating_change(self) -> int:
        return self.new_rating - self.previous_rating

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "age": self.age,
            "previous_rating": self.previous_rating,
            "new_rating": self.new_rating,
            "rating_change": self.rating_change,
            "reason": self.reason,
        }


@dataclass
class RosterDeparture:
    player_id: str
    player_name: str
    position: str
    previous_rating: int
    reason: str  # "free_agent" or "retired"

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "position": self.position,
            "previous_rating": self.previous_rating,
            "reason": self.reason,
        }


@dataclass
class OffseasonSummary:
    previous_year: int
    new_year: int
    team_history: TeamHistoryEntry
    players: list[Player] = field(default_factory=list)
    winter_development: list[PlayerDevelopmentChange] = field(default_factory=list)
    free_agents: list[RosterDeparture] = field(default_factory=list)
    retirements: list[RosterDeparture] = field(default_factory=list)
    draft_order: list[DraftOrderEntry] = field(default_factory=list)
    player_draft_position: int = 0

    def to_dict(self) -> dict:
        return {
            "previous_year": self.previous_year,
            "new_year": self.new_year,
            "team_history": self.team_history.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "winter_development": [d.to_dict() for d in self.winter_development],
            "free_agents": [d.to_dict() for d in self.free_agents],
            "retirements": [d.to_dict() for d in self.retirements],
            "draft_order": [e.to_dict() for e in self.draft_order],
            "player_draft_position": self.player_draft_position,
        }


def _departure(player: Player, reason: str) -> RosterDeparture:
    return RosterDeparture(
        player_id=player.id,
        player_name=player.full_name,
        position=player.position.value,
        previous_rating=player.current_rating,
        reason=reason,
    )


def run_offseason_rollover(
    players: Iterable[Player],
    record: TeamRecord,
    year: int,
    tier: Tier,
    made_playoffs: bool = False,
    playoff_result: PlayoffResult = PlayoffResult.MISSED,
    financials: Optional[FinancialSimulationResult] = None,
    avg_attendance: int = 0,
    league_rank: Optional[int] = None,
    ai_teams: Sequence[AITeam] = AI_TEAMS,
    source: Optional[RandomSource] = None,
) -> OffseasonSummary:
    """
    Roll the organization over into the next season.

    For each player: archive the season, age a year, retire or develop,
    then count down the contract. Players whose deals run out leave as
    free agents; retirees leave too. Players without a contract on file
    are kept. The MVP is chosen from the season's
    stats before they are archived.

    Args:
        players: Organization players at season's end
        record: Franchise's season record
        year: Season just completed
        tier: Tier the season was played at
        made_playoffs: Playoff berth
        playoff_result: How the playoffs ended
        financials: Season books, copied into the team history
        avg_attendance: Average home attendance
        league_rank: Final standings position
        ai_teams: AI organizations for the next draft order
        source: Random source

    Returns:
        OffseasonSummary with the surviving players, every development
        change, departures, team history and next year's draft order.
    """
    source = default_source(source)
    players = list(players)

    mvp = determine_season_mvp(players)
    history = TeamHistoryEntry(
        year=year,
        tier=tier,
        wins=record.wins,
        losses=record.losses,
        win_pct=record.win_pct,
        made_playoffs=made_playoffs,
        playoff_result=playoff_result,
        total_revenue=financials.revenue.total if financials else 0,
        total_expenses=financials.expenses.total if financials else 0,
        net_income=financials.net_income if financials else 0,
        avg_attendance=avg_attendance,
        league_rank=league_rank,
        mvp_player_id=mvp.id if mvp else None,
        mvp_player_name=mvp.full_name if mvp else None,
    )

    survivors: list[Player] = []
    developments: list[PlayerDevelopmentChange] = []
    free_agents: list[RosterDeparture] = []
    retirements: list[RosterDeparture] = []

    for player in players:
        archived = archive_season_stats(player, year, tier)
        aging = age_player(archived, source)
        if aging.is_retiring:
            retirements.append(_departure(archived, "retired"))
            continue

        development = calculate_winter_development(
            aging.new_age,
            archived.current_rating,
            archived.potential,
            archived.hidden_traits.work_ethic,
            source,
        )
        new_rating = min(
            apply_rating_change(archived.current_rating, development.rating_change),
            max(archived.potential, archived.current_rating),
        )
        developments.append(PlayerDevelopmentChange(
            player_id=archived.id,
            player_name=archived.full_name,
            age=aging.new_age,
            previous_rating=archived.current_rating,
            new_rating=new_rating,
            reason=development.reason,
        ))

        updated = archived.copy(
            age=aging.new_age,
            current_rating=new_rating,
            years_in_org=archived.years_in_org + 1,
            progression_rate=calculate_progression_rate(aging.new_age, archived.potential, new_rating),
        )
        # Zero years means no deal on file, not an expiring one
        if archived.contract_years <= 0:
            survivors.append(updated)
            continue

        contract = process_contract_year(archived.contract_years)
        updated = updated.copy(contract_years=contract.new_contract_years)
        if contract.became_free_agent:
            free_agents.append(_departure(updated, "free_agent"))
            continue
        survivors.append(updated)

    draft_order = generate_draft_order(record, ai_teams, year + 1, source)

    logger.info(
        "Offseason %d -> %d: %d retained, %d free agents, %d retired",
        year, year + 1, len(survivors), len(free_agents), len(retirements),
    )
    return OffseasonSummary(
        previous_year=year,
        new_year=year + 1,
        team_history=history,
        players=survivors,
        winter_development=developments,
        free_agents=free_agents,
        retirements=retirements,
        draft_order=draft_order,
        player_draft_position=get_player_draft_position(draft_order),
    )
