"""Pydantic schemas for players and draft prospects."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.core.enums import (
    Archetype,
    Personality,
    PlayerType,
    Position,
    RosterStatus,
    ScoutingTier,
    TrainingFocus,
    WorkEthic,
)
from bullpen.core.models.player import Player
from bullpen.core.models.prospect import DraftProspect


class HiddenTraitsSchema(BaseModel):
    """Traits rolled at generation."""
    work_ethic: WorkEthic = WorkEthic.AVERAGE
    injury_prone: bool = False
    personality: Personality = Personality.TEAM_PLAYER
    coachability: int = Field(50, ge=0, le=100)
    clutch: int = Field(50, ge=0, le=100)


class RevealedTraitsSchema(BaseModel):
    """Traits uncovered by scouting; unknown ones are null."""
    work_ethic: Optional[WorkEthic] = None
    personality: Optional[Personality] = None
    injury_prone: Optional[bool] = None
    coachability: Optional[int] = None
    clutch: Optional[int] = None


class PlayerSchema(BaseModel):
    """Rostered player."""
    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    age: int = Field(20, ge=15, le=50)
    position: Position = Position.SS
    player_type: PlayerType = PlayerType.HITTER
    current_rating: int = Field(40, ge=20, le=80)
    potential: int = Field(55, ge=20, le=80)
    tools: dict[str, int] = Field(default_factory=dict, description="Tool name -> 20-80 grade")
    hidden_traits: HiddenTraitsSchema = Field(default_factory=HiddenTraitsSchema)
    training_focus: TrainingFocus = TrainingFocus.OVERALL
    current_xp: int = Field(0, ge=0, lt=100)
    progression_rate: float = 1.0
    morale: int = Field(50, ge=0, le=100)
    confidence: int = Field(50, ge=0, le=100)
    years_in_org: int = Field(0, ge=0)
    games_played: int = Field(0, ge=0)
    is_injured: bool = False
    injury_games_remaining: int = Field(0, ge=0)
    is_on_roster: bool = True
    roster_status: RosterStatus = RosterStatus.ACTIVE
    salary: int = Field(0, ge=0)
    contract_years: int = Field(0, ge=0)
    draft_year: Optional[int] = None
    draft_round: Optional[int] = None
    draft_pick: Optional[int] = None

    def to_model(self) -> Player:
        return Player.from_dict(self.model_dump(mode="json", exclude_none=True))

    @classmethod
    def from_model(cls, player: Player) -> "PlayerSchema":
        return cls.model_validate(player.to_dict())


class ProspectSchema(BaseModel):
    """Draft prospect, with scouting estimates once scouted."""
    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    age: int = Field(20, ge=15, le=30)
    position: Position = Position.SS
    player_type: PlayerType = PlayerType.HITTER
    current_rating: int = Field(40, ge=20, le=80)
    potential: int = Field(55, ge=20, le=80)
    tools: dict[str, int] = Field(default_factory=dict)
    hidden_traits: HiddenTraitsSchema = Field(default_factory=HiddenTraitsSchema)
    progression_rate: float = 1.0
    scouted_rating: Optional[int] = None
    scouted_potential: Optional[int] = None
    scouting_accuracy: Optional[ScoutingTier] = None
    revealed_traits: RevealedTraitsSchema = Field(default_factory=RevealedTraitsSchema)
    media_rank: int = Field(0, ge=0)
    archetype: Archetype = Archetype.PLAYMAKER
    year: int = 0
    is_drafted: bool = False
    drafted_by_team: Optional[str] = None

    def to_model(self) -> DraftProspect:
        data = self.model_dump(mode="json")
        data["revealed_traits"] = self.revealed_traits.model_dump(mode="json", exclude_none=True)
        return DraftProspect.from_dict(data)

    @classmethod
    def from_model(cls, prospect: DraftProspect) -> "ProspectSchema":
        return cls.model_validate(prospect.to_dict())
