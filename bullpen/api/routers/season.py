"""API Router for season simulation."""

from fastapi import APIRouter

from bullpen.api.schemas.players import PlayerSchema
from bullpen.api.schemas.season import SimulateSeasonRequest, SimulateSeasonResponse
from bullpen.config import make_random_source
from bullpen.core.season import simulate_season

router = APIRouter(prefix="/season", tags=["season"])


@router.post("/simulate", response_model=SimulateSeasonResponse)
async def simulate(request: SimulateSeasonRequest):
    """
    Play a regular season, the playoffs and the post-season events.

    The returned roster carries injuries and event morale changes.
    """
    result = simulate_season(
        [p.to_model() for p in request.players],
        request.franchise.to_model(),
        request.city_state.to_model(),
        request.year,
        fan_mult=request.fan_mult,
        player_team_name=request.team_name,
        source=make_random_source(request.seed),
    )
    body = result.to_dict()
    body["players"] = [PlayerSchema.from_model(p) for p in result.players]
    return body
