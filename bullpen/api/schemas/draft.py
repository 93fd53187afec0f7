"""Pydantic schemas for the draft API."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.api.schemas.players import ProspectSchema


# === Request Schemas ===

class DraftClassRequest(BaseModel):
    """Request to generate a draft class."""
    total_players: Optional[int] = Field(
        None, ge=0, le=5000, description="Class size; defaults to BULLPEN_DRAFT_CLASS_SIZE"
    )
    year: int = Field(1, ge=1)
    seed: Optional[int] = None


class ScoutRequest(BaseModel):
    """Request to scout one prospect."""
    prospect: ProspectSchema
    accuracy: str = Field(..., description="low, medium or high")
    available_funds: Optional[int] = Field(None, description="Scouting budget left, if limited")
    seed: Optional[int] = None


class AIPickRequest(BaseModel):
    """Request for an AI team's selection from the remaining pool."""
    team_id: str = Field(..., description="AI team id, e.g. 'steel-city-hammers'")
    prospects: list[ProspectSchema]
    round_number: int = Field(1, ge=1)
    seed: Optional[int] = None


class DraftOrderRequest(BaseModel):
    """Request to build the next draft order from the franchise's record."""
    team_name: str = "Player Team"
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    year: int = Field(1, ge=1)
    seed: Optional[int] = None


# === Response Schemas ===

class DraftClassResponse(BaseModel):
    """Generated draft class in display order."""
    year: int
    count: int
    prospects: list[ProspectSchema]


class DraftOrderEntrySchema(BaseModel):
    pick_number: int
    team_id: str
    team_name: str
    previous_season_wins: int
    previous_season_losses: int
    win_pct: float


class DraftOrderResponse(BaseModel):
    """Draft order, worst record first."""
    year: int
    player_draft_position: int
    order: list[DraftOrderEntrySchema]
