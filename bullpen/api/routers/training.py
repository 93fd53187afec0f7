"""API Router for player training."""

from fastapi import APIRouter

from bullpen.api.schemas.players import PlayerSchema
from bullpen.api.schemas.training import (
    TrainBatchRequest,
    TrainBatchResponse,
    TrainPlayerRequest,
    TrainPlayerResponse,
)
from bullpen.config import make_random_source
from bullpen.core.training import (
    apply_training_result,
    process_batch_training,
    process_player_training,
)

router = APIRouter(prefix="/training", tags=["training"])


@router.post("/player", response_model=TrainPlayerResponse)
async def train_player(request: TrainPlayerRequest):
    """Train one player over a batch of games."""
    player = request.player.to_model()
    result = process_player_training(
        player,
        request.district_bonuses.to_model(),
        request.facility_level,
        request.games_simulated,
        make_random_source(request.seed),
    )
    return {
        "result": result.to_dict(),
        "player": PlayerSchema.from_model(apply_training_result(player, result)),
    }


@router.post("/batch", response_model=TrainBatchResponse)
async def train_batch(request: TrainBatchRequest):
    """Train a roster in order; results line up with the request's players."""
    players = [p.to_model() for p in request.players]
    batch = process_batch_training(
        players,
        request.district_bonuses.to_model(),
        request.facility_level,
        request.games_simulated,
        make_random_source(request.seed),
    )
    updated = [
        PlayerSchema.from_model(apply_training_result(player, result))
        for player, result in zip(players, batch.trained_players)
    ]
    body = batch.to_dict()
    body["players"] = updated
    return body
