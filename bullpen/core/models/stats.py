"""Season statistics records."""

from dataclasses import asdict, dataclass, fields
from typing import Optional

HITTER_COUNTING_STATS = (
    "games_played",
    "at_bats",
    "hits",
    "home_runs",
    "rbi",
    "runs",
    "stolen_bases",
    "walks",
    "strikeouts",
    "doubles",
    "triples",
)

PITCHER_COUNTING_STATS = (
    "games_played",
    "games_started",
    "wins",
    "losses",
    "saves",
    "innings",
    "hits",
    "runs",
    "earned_runs",
    "walks",
    "strikeouts",
    "home_runs",
)


@dataclass
class SeasonStatsSummary:
    """One archived season on a player's career line."""

    year: int
    tier: str
    games_played: int = 0

    # Hitter
    at_bats: Optional[int] = None
    hits: Optional[int] = None
    home_runs: Optional[int] = None
    rbi: Optional[int] = None
    runs: Optional[int] = None
    stolen_bases: Optional[int] = None
    avg: Optional[float] = None
    obp: Optional[float] = None
    slg: Optional[float] = None

    # Pitcher
    wins: Optional[int] = None
    losses: Optional[int] = None
    era: Optional[float] = None
    innings: Optional[float] = None
    strikeouts: Optional[int] = None
    walks: Optional[int] = None
    saves: Optional[int] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict) -> "SeasonStatsSummary":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
