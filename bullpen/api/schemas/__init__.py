"""Pydantic schemas for API request/response models."""

from bullpen.api.schemas.draft import (
    AIPickRequest,
    DraftClassRequest,
    DraftClassResponse,
    DraftOrderRequest,
    DraftOrderResponse,
    ScoutRequest,
)
from bullpen.api.schemas.finances import (
    CityStateSchema,
    FranchiseSchema,
    SimulateFinancesRequest,
    SimulateFinancesResponse,
)
from bullpen.api.schemas.players import (
    HiddenTraitsSchema,
    PlayerSchema,
    ProspectSchema,
    RevealedTraitsSchema,
)
from bullpen.api.schemas.progression import (
    GameStatusRequest,
    GameStatusResponse,
    PromotionRequest,
    PromotionResponse,
)
from bullpen.api.schemas.season import SimulateSeasonRequest, SimulateSeasonResponse
from bullpen.api.schemas.training import (
    DistrictBonusesSchema,
    TrainBatchRequest,
    TrainBatchResponse,
    TrainPlayerRequest,
    TrainPlayerResponse,
)

__all__ = [
    "AIPickRequest",
    "CityStateSchema",
    "DistrictBonusesSchema",
    "DraftClassRequest",
    "DraftClassResponse",
    "DraftOrderRequest",
    "DraftOrderResponse",
    "FranchiseSchema",
    "GameStatusRequest",
    "GameStatusResponse",
    "HiddenTraitsSchema",
    "PlayerSchema",
    "PromotionRequest",
    "PromotionResponse",
    "ProspectSchema",
    "RevealedTraitsSchema",
    "ScoutRequest",
    "SimulateFinancesRequest",
    "SimulateFinancesResponse",
    "SimulateSeasonRequest",
    "SimulateSeasonResponse",
    "TrainBatchRequest",
    "TrainBatchResponse",
    "TrainPlayerRequest",
    "TrainPlayerResponse",
]
