"""Draft prospect model."""

from dataclasses import dataclass, field, replace
from typing import Optional
from uuid import uuid4

from bullpen.core.enums import (
    Archetype,
    PlayerType,
    Position,
    ScoutingTier,
    TrainingFocus,
)
from bullpen.core.models.player import (
    HiddenTraits,
    HitterTools,
    Player,
    Tools,
    tools_from_dict,
)


@dataclass
class RevealedTraits:
    """
    Hidden traits a scout has uncovered.

    None means the trait is still unknown to the front office.
    """

    work_ethic: Optional[str] = None
    personality: Optional[str] = None
    injury_prone: Optional[bool] = None
    coachability: Optional[int] = None
    clutch: Optional[int] = None

    @property
    def any_revealed(self) -> bool:
        return any(
            v is not None
            for v in (
                self.work_ethic,
                self.personality,
                self.injury_prone,
                self.coachability,
                self.clutch,
            )
        )

    def merged(self, other: "RevealedTraits") -> "RevealedTraits":
        """Combine two reveals; newer known values win."""
        return RevealedTraits(
            work_ethic=other.work_ethic if other.work_ethic is not None else self.work_ethic,
            personality=other.personality if other.personality is not None else self.personality,
            injury_prone=other.injury_prone if other.injury_prone is not None else self.injury_prone,
            coachability=other.coachability if other.coachability is not None else self.coachability,
            clutch=other.clutch if other.clutch is not None else self.clutch,
        )

    def to_dict(self) -> dict:
        return {k: v for k, v in self.__dict__.items() if v is not None}


@dataclass
class DraftProspect:
    """
    An undrafted candidate.

    True ratings stay hidden from the player; scouted_* fields hold the
    front office's estimates once a scouting report has been merged.
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
    progression_rate: float = 1.0

    # Scouting
    scouted_rating: Optional[int] = None
    scouted_potential: Optional[int] = None
    scouting_accuracy: Optional[ScoutingTier] = None
    revealed_traits: RevealedTraits = field(default_factory=RevealedTraits)

    # Draft board
    media_rank: int = 0
    archetype: Archetype = Archetype.PLAYMAKER
    year: int = 0
    is_drafted: bool = False
    drafted_by_team: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def development_gap(self) -> int:
        return max(0, self.potential - self.current_rating)

    @property
    def is_scouted(self) -> bool:
        return self.scouting_accuracy is not None

    @property
    def traits_revealed(self) -> bool:
        return self.revealed_traits.any_revealed

    def copy(self, **changes) -> "DraftProspect":
        return replace(self, **changes)

    def mark_drafted(self, team_id: str) -> "DraftProspect":
        """Return a drafted copy owned by team_id."""
        return replace(self, is_drafted=True, drafted_by_team=team_id)

    def to_player(
        self,
        draft_round: int,
        draft_pick: int,
        salary: int = 0,
        contract_years: int = 0,
    ) -> Player:
        """Convert a signed prospect into a roster player."""
        return Player(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            position=self.position,
            player_type=self.player_type,
            current_rating=self.current_rating,
            potential=self.potential,
            tools=self.tools,
            hidden_traits=self.hidden_traits,
            traits_revealed=self.traits_revealed,
            training_focus=TrainingFocus.OVERALL,
            progression_rate=self.progression_rate,
            salary=salary,
            contract_years=contract_years,
            draft_year=self.year,
            draft_round=draft_round,
            draft_pick=draft_pick,
        )

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
            "progression_rate": self.progression_rate,
            "scouted_rating": self.scouted_rating,
            "scouted_potential": self.scouted_potential,
            "scouting_accuracy": self.scouting_accuracy.value if self.scouting_accuracy else None,
            "revealed_traits": self.revealed_traits.to_dict(),
            "media_rank": self.media_rank,
            "archetype": self.archetype.value,
            "year": self.year,
            "is_drafted": self.is_drafted,
            "drafted_by_team": self.drafted_by_team,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftProspect":
        """Create from dictionary."""
        player_type = PlayerType(data.get("player_type", "HITTER"))
        accuracy = data.get("scouting_accuracy")
        return cls(
            id=data.get("id") or str(uuid4()),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            age=data.get("age", 20),
            position=Position(data.get("position", "SS")),
            player_type=player_type,
            current_rating=data.get("current_rating", 40),
            potential=data.get("potential", 55),
            tools=tools_from_dict(player_type, data.get("tools", {})),
            hidden_traits=HiddenTraits.from_dict(data.get("hidden_traits", {})),
            progression_rate=data.get("progression_rate", 1.0),
            scouted_rating=data.get("scouted_rating"),
            scouted_potential=data.get("scouted_potential"),
            scouting_accuracy=ScoutingTier(accuracy) if accuracy else None,
            revealed_traits=RevealedTraits(**data.get("revealed_traits", {})),
            media_rank=data.get("media_rank", 0),
            archetype=Archetype(data.get("archetype", "Playmaker")),
            year=data.get("year", 0),
            is_drafted=data.get("is_drafted", False),
            drafted_by_team=data.get("drafted_by_team"),
        )
