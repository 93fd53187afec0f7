"""API Router for season finances."""

from fastapi import APIRouter

from bullpen.api.schemas.finances import SimulateFinancesRequest, SimulateFinancesResponse
from bullpen.core.finances import (
    check_bankruptcy_status,
    generate_budget_recommendations,
    simulate_finances,
)

router = APIRouter(prefix="/finances", tags=["finances"])


@router.post("/simulate", response_model=SimulateFinancesResponse)
async def simulate(request: SimulateFinancesRequest):
    """
    Close a season's books.

    Returns the revenue and expense breakdowns, new reserves, the risk
    band and owner guidance. The model is deterministic; the seed is
    accepted for a uniform request shape.
    """
    players = [p.to_model() for p in request.players]
    franchise = request.franchise.to_model()
    city = request.city_state.to_model()

    result = simulate_finances(
        players,
        franchise,
        city,
        request.attendance,
        request.won_championship,
        request.marketing_spend,
    )
    status = check_bankruptcy_status(result.new_reserves, franchise.budget)
    recommendations = generate_budget_recommendations(franchise, players, city)

    body = result.to_dict()
    body["bankruptcy_status"] = status.to_dict()
    body["recommendations"] = [r.to_dict() for r in recommendations]
    return body
