"""Pydantic schemas for the training API."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.api.schemas.players import PlayerSchema
from bullpen.core.city.districts import DistrictBonuses
from bullpen.core.enums import FacilityLevel


class DistrictBonusesSchema(BaseModel):
    """City district multipliers."""
    fan_mult: float = Field(1.0, ge=0)
    income_mult: float = Field(1.0, ge=0)
    training_mult: float = Field(1.0, ge=0)

    def to_model(self) -> DistrictBonuses:
        return DistrictBonuses(
            fan_mult=self.fan_mult,
            income_mult=self.income_mult,
            training_mult=self.training_mult,
        )


class _TrainingOptions(BaseModel):
    district_bonuses: DistrictBonusesSchema = Field(default_factory=DistrictBonusesSchema)
    facility_level: FacilityLevel = FacilityLevel.BASIC
    games_simulated: int = Field(1, ge=1, le=200)
    seed: Optional[int] = None


class TrainPlayerRequest(_TrainingOptions):
    """Request to train one player."""
    player: PlayerSchema


class TrainBatchRequest(_TrainingOptions):
    """Request to train a roster."""
    players: list[PlayerSchema]


class TrainingResultSchema(BaseModel):
    player_id: str
    previous_xp: int
    new_xp: int
    xp_gained: int
    leveled_up: bool
    attribute_improved: Optional[str] = None
    previous_value: Optional[int] = None
    new_value: Optional[int] = None


class TrainPlayerResponse(BaseModel):
    """Training outcome plus the updated player."""
    result: TrainingResultSchema
    player: PlayerSchema


class TrainBatchResponse(BaseModel):
    trained_players: list[TrainingResultSchema]
    total_xp_gained: int
    players_leveled_up: int
    players: list[PlayerSchema]
