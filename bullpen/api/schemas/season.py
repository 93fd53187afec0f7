"""Pydantic schemas for the season API."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.api.schemas.finances import CityStateSchema, FranchiseSchema
from bullpen.api.schemas.players import PlayerSchema


class SimulateSeasonRequest(BaseModel):
    """Request to play a full season against the AI league."""
    players: list[PlayerSchema] = Field(default_factory=list)
    franchise: FranchiseSchema = Field(default_factory=FranchiseSchema)
    city_state: CityStateSchema = Field(default_factory=CityStateSchema)
    year: int = Field(1, ge=1)
    fan_mult: float = Field(1.0, gt=0)
    team_name: str = "Player Team"
    seed: Optional[int] = None


class SimulateSeasonResponse(BaseModel):
    year: int
    tier: str
    wins: int
    losses: int
    win_pct: float
    team_strength: float
    offense: float
    defense: float
    standings: dict
    playoff_result: str
    bracket: Optional[dict] = None
    attendance: dict
    events: list[dict]
    impact: dict
    players: list[PlayerSchema]
