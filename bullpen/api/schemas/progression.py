"""Pydantic schemas for the progression API."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.core.enums import Tier


class PromotionRequest(BaseModel):
    """Request to check tier promotion eligibility."""
    tier: Tier
    win_pct: float = Field(..., ge=0, le=1)
    reserves: int
    pride: int = Field(..., ge=0, le=100)
    consecutive_winning_seasons: int = Field(0, ge=0)
    won_division: bool = False
    won_championship: bool = False
    seed: Optional[int] = None


class RequirementCheckSchema(BaseModel):
    required: float
    actual: float
    met: bool


class PromotionResponse(BaseModel):
    is_eligible: bool
    next_tier: Optional[Tier] = None
    met_criteria: list[str]
    missing_criteria: list[str]
    requirements: dict[str, RequirementCheckSchema]
    progress: int


class GameStatusRequest(BaseModel):
    """Request to check bankruptcy / game-over status."""
    reserves: int
    annual_budget: int = Field(..., gt=0)
    tier: Tier = Tier.LOW_A
    seed: Optional[int] = None


class GameStatusResponse(BaseModel):
    status: str
    reason: Optional[str] = None
    total_debt: int
    debt_threshold: int
    is_in_debt: bool
    is_bankrupt: bool
    debt_warning: dict
