"""Player model."""

from dataclasses import dataclass, field, fields, replace
from typing import Optional, Union
from uuid import uuid4

from bullpen.core.enums import (
    Personality,
    PlayerType,
    Position,
    RosterStatus,
    TrainingFocus,
    WorkEthic,
)
from bullpen.core.models.stats import SeasonStatsSummary
from bullpen.core.sampling import clamp_rating

HITTER_TOOLS = ("hit", "power", "speed", "arm", "field")
PITCHER_TOOLS = ("stuff", "control", "movement")


@dataclass(frozen=True)
class HiddenTraits:
    """
    Traits rolled once at generation and never recomputed.

    Scouting can reveal them; nothing in the engine changes them.
    """

    work_ethic: WorkEthic = WorkEthic.AVERAGE
    injury_prone: bool = False
    personality: Personality = Personality.TEAM_PLAYER
    coachability: int = 50
    clutch: int = 50

    def to_dict(self) -> dict:
        return {
            "work_ethic": self.work_ethic.value,
            "injury_prone": self.injury_prone,
            "personality": self.personality.value,
            "coachability": self.coachability,
            "clutch": self.clutch,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HiddenTraits":
        return cls(
            work_ethic=WorkEthic(data.get("work_ethic", "average")),
            injury_prone=data.get("injury_prone", False),
            personality=Personality(data.get("personality", "team_player")),
            coachability=data.get("coachability", 50),
            clutch=data.get("clutch", 50),
        )


class _ToolBundle:
    """Shared helpers for the hitter and pitcher tool bundles."""

    NAMES: tuple = ()

    def get(self, name: str) -> int:
        if name not in self.NAMES:
            raise KeyError(f"{type(self).__name__} has no tool '{name}'")
        return getattr(self, name)

    def with_value(self, name: str, value: int):
        """Return a copy with one tool replaced (clamped to 20-80)."""
        self.get(name)
        return replace(self, **{name: clamp_rating(value)})

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.NAMES}

    def values(self) -> list[int]:
        return [getattr(self, name) for name in self.NAMES]


@dataclass(frozen=True)
class HitterTools(_ToolBundle):
    """Five-tool hitter profile on the 20-80 scale."""

    NAMES = HITTER_TOOLS

    hit: int = 50  # Contact + plate discipline
    power: int = 50
    speed: int = 50
    arm: int = 50
    field: int = 50


@dataclass(frozen=True)
class PitcherTools(_ToolBundle):
    """Three-tool pitcher profile on the 20-80 scale."""

    NAMES = PITCHER_TOOLS

    stuff: int = 50  # Velocity / pitch quality
    control: int = 50
    movement: int = 50


Tools = Union[HitterTools, PitcherTools]


def tools_from_dict(player_type: PlayerType, data: dict) -> Tools:
    if player_type == PlayerType.PITCHER:
        return PitcherTools(**{k: data[k] for k in PITCHER_TOOLS if k in data})
    return HitterTools(**{k: data[k] for k in HITTER_TOOLS if k in data})


def tool_names(player_type: PlayerType) -> tuple:
    return PITCHER_TOOLS if player_type == PlayerType.PITCHER else HITTER_TOOLS


@dataclass
class Player:
    """
    A rostered player.

    Ratings are on the 20-80 scale. XP accumulates in [0, 100) and each
    full 100 converts into a single tool increment.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    first_name: str = ""
    last_name: str = ""
    age: int = 20
    position: Position = Position.SS
    player_type: PlayerType = PlayerType.HITTER

    current_rating: int = 40
    potential: int = 55
    tools: Tools = field(default_factory=HitterTools)
    hidden_traits: HiddenTraits = field(default_factory=HiddenTraits)
    traits_revealed: bool = False

    # Development
    training_focus: TrainingFocus = TrainingFocus.OVERALL
    current_xp: int = 0
    progression_rate: float = 1.0  # Derived; refreshed by training and the offseason
    morale: int = 50
    confidence: int = 50
    years_in_org: int = 0
    games_played: int = 0

    # Status
    is_injured: bool = False
    injury_games_remaining: int = 0
    is_on_roster: bool = True
    roster_status: RosterStatus = RosterStatus.ACTIVE

    # Contract
    salary: int = 0
    contract_years: int = 0

    # Draft info
    draft_year: Optional[int] = None
    draft_round: Optional[int] = None
    draft_pick: Optional[int] = None

    season_stats: dict = field(default_factory=dict)
    career_stats: list[SeasonStatsSummary] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_pitcher(self) -> bool:
        return self.player_type == PlayerType.PITCHER

    @property
    def development_gap(self) -> int:
        """Rating points left before reaching potential."""
        return max(0, self.potential - self.current_rating)

    def copy(self, **changes) -> "Player":
        """Shallow copy with field overrides."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "age": self.age,
            "position": self.position.value,
            "player_type": self.player_type.value,
            "current_rating": self.current_rating,
            "potential": self.potential,
            "tools": self.tools.to_dict(),
            "hidden_traits": self.hidden_traits.to_dict(),
            "traits_revealed": self.traits_revealed,
            "training_focus": self.training_focus.value,
            "current_xp": self.current_xp,
            "progression_rate": self.progression_rate,
            "morale": self.morale,
            "confidence": self.confidence,
            "years_in_org": self.years_in_org,
            "games_played": self.games_played,
            "is_injured": self.is_injured,
            "injury_games_remaining": self.injury_games_remaining,
            "is_on_roster": self.is_on_roster,
            "roster_status": self.roster_status.value,
            "salary": self.salary,
            "contract_years": self.contract_years,
            "draft_year": self.draft_year,
            "draft_round": self.draft_round,
            "draft_pick": self.draft_pick,
            "season_stats": dict(self.season_stats),
            "career_stats": [s.to_dict() for s in self.career_stats],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from dictionary."""
        player_type = PlayerType(data.get("player_type", "HITTER"))
        known = {f.name for f in fields(cls)}
        simple = {
            k: v
            for k, v in data.items()
            if k in known
            and k
            not in (
                "position",
                "player_type",
                "tools",
                "hidden_traits",
                "training_focus",
                "roster_status",
                "career_stats",
            )
        }
        return cls(
            **simple,
            position=Position(data.get("position", "SS")),
            player_type=player_type,
            tools=tools_from_dict(player_type, data.get("tools", {})),
            hidden_traits=HiddenTraits.from_dict(data.get("hidden_traits", {})),
            training_focus=TrainingFocus(data.get("training_focus", "overall")),
            roster_status=RosterStatus(data.get("roster_status", "ACTIVE")),
            career_stats=[
                SeasonStatsSummary.from_dict(s) for s in data.get("career_stats", [])
            ],
        )

    def __str__(self) -> str:
        return f"{self.position.value} {self.full_name} ({self.current_rating}/{self.potential})"
