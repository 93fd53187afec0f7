"""Pydantic schemas for the finances API."""

from typing import Optional

from pydantic import BaseModel, Field

from bullpen.api.schemas.players import PlayerSchema
from bullpen.core.enums import FacilityLevel, Tier
from bullpen.core.models.city import CityState
from bullpen.core.models.franchise import Franchise


class FranchiseSchema(BaseModel):
    """Franchise state relevant to the books."""
    tier: Tier = Tier.LOW_A
    budget: int = Field(500_000, gt=0)
    reserves: int = 50_000
    stadium_name: str = "Municipal Field"
    stadium_capacity: int = Field(2500, ge=0)
    stadium_quality: int = Field(40, ge=0, le=100)
    ticket_price: float = Field(7, ge=0)
    hitting_coach_skill: int = Field(40, ge=0, le=100)
    hitting_coach_salary: int = Field(50_000, ge=0)
    pitching_coach_skill: int = Field(40, ge=0, le=100)
    pitching_coach_salary: int = Field(50_000, ge=0)
    development_coord_skill: int = Field(40, ge=0, le=100)
    development_coord_salary: int = Field(50_000, ge=0)
    facility_level: FacilityLevel = FacilityLevel.BASIC
    consecutive_winning_seasons: int = Field(0, ge=0)
    consecutive_division_titles: int = Field(0, ge=0)

    def to_model(self) -> Franchise:
        return Franchise(**self.model_dump())

    @classmethod
    def from_model(cls, franchise: Franchise) -> "FranchiseSchema":
        return cls.model_validate(franchise.to_dict())


class CityStateSchema(BaseModel):
    """City demographics; buildings are not needed for the books."""
    population: int = Field(15_000, ge=0)
    median_income: int = Field(35_000, ge=0)
    unemployment_rate: float = Field(12.0, ge=0, le=100)
    team_pride: int = Field(30, ge=0, le=100)
    national_recognition: int = Field(5, ge=0, le=100)

    def to_model(self) -> CityState:
        return CityState(**self.model_dump())


class SimulateFinancesRequest(BaseModel):
    """Request to close a season's books."""
    players: list[PlayerSchema] = Field(default_factory=list)
    franchise: FranchiseSchema = Field(default_factory=FranchiseSchema)
    city_state: CityStateSchema = Field(default_factory=CityStateSchema)
    attendance: int = Field(..., ge=0, description="Total season attendance")
    won_championship: bool = False
    marketing_spend: int = Field(0, ge=0)
    seed: Optional[int] = None


class SimulateFinancesResponse(BaseModel):
    revenue: dict[str, int]
    expenses: dict[str, int]
    net_income: int
    new_reserves: int
    debt_level: int
    debt_ratio: float
    bankruptcy_risk: str
    bankruptcy_status: dict
    recommendations: list[dict]
