"""
Draft order generation.

Reverse standings: the worst record picks first. AI records are simulated
from each team's base strength and volatility.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from bullpen.core.models.ai_team import AITeam
from bullpen.core.rng import RandomSource, default_source
from bullpen.core.sampling import clamp

logger = logging.getLogger(__name__)

PLAYER_TEAM_ID = "player"


@dataclass
class TeamRecord:
    """A season record for the human franchise."""

    team_name: str
    wins: int
    losses: int

    @property
    def win_pct(self) -> float:
        games = self.wins + self.losses
        return self.wins / games if games else 0.0


@dataclass
class DraftOrderEntry:
    pick_number: int
    team_id: str
    team_name: str
    previous_season_wins: int
    previous_season_losses: int
    win_pct: float

    def to_dict(self) -> dict:
        return {
            "pick_number": self.pick_number,
            "team_id": self.team_id,
            "team_name": self.team_name,
            "previous_season_wins": self.previous_season_wins,
            "previous_season_losses": self.previous_season_losses,
            "win_pct": round(self.win_pct, 3),
        }


def simulate_ai_win_pct(team: AITeam, source: RandomSource) -> float:
    """Base strength maps to .35-.70, then team-specific swing, bounded .25-.75."""
    base = 0.35 + (team.base_strength / 100) * 0.35
    swing = (source.next() - 0.5) * team.variance_multiplier * 0.15
    return clamp(base + swing, 0.25, 0.75)


def generate_draft_order(
    player_record: TeamRecord,
    ai_teams: Sequence[AITeam],
    year: int,
    source: Optional[RandomSource] = None,
) -> list[DraftOrderEntry]:
    """
    Build next year's draft order.

    Args:
        player_record: Human franchise's season record
        ai_teams: AI organizations to simulate
        year: Draft year the order applies to; only logged
        source: Random source for AI records

    Returns:
        Entries ordered by ascending win percentage; ties keep the player
        first, then AI teams in list order
    """
    source = default_source(source)
    total_games = player_record.wins + player_record.losses

    standings = [
        (player_record.win_pct, PLAYER_TEAM_ID, player_record.team_name,
         player_record.wins, player_record.losses)
    ]
    for team in ai_teams:
        win_pct = simulate_ai_win_pct(team, source)
        wins = round(win_pct * total_games)
        standings.append((win_pct, team.id, team.full_name, wins, total_games - wins))

    standings.sort(key=lambda row: row[0])
    logger.debug(
        "Draft order for year %d: %d teams, player pick %d",
        year, len(standings), 1 + [row[1] for row in standings].index(PLAYER_TEAM_ID),
    )

    return [
        DraftOrderEntry(
            pick_number=i,
            team_id=team_id,
            team_name=name,
            previous_season_wins=wins,
            previous_season_losses=losses,
            win_pct=win_pct,
        )
        for i, (win_pct, team_id, name, wins, losses) in enumerate(standings, start=1)
    ]


def get_player_draft_position(draft_order: Sequence[DraftOrderEntry]) -> int:
    """Player's slot, or last if absent."""
    for entry in draft_order:
        if entry.team_id == PLAYER_TEAM_ID:
            return entry.pick_number
    return len(draft_order)


def ai_teams_in_draft_order(
    draft_order: Sequence[DraftOrderEntry], ai_teams: Sequence[AITeam]
) -> list[AITeam]:
    """AI teams arranged by slot, player excluded, for simulate_ai_draft_picks."""
    by_id = {team.id: team for team in ai_teams}
    return [by_id[e.team_id] for e in draft_order if e.team_id in by_id]
