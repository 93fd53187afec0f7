"""API Router for tier promotion and game status."""

from fastapi import APIRouter

from bullpen.api.schemas.progression import (
    GameStatusRequest,
    GameStatusResponse,
    PromotionRequest,
    PromotionResponse,
)
from bullpen.core.progression import (
    check_game_status,
    check_promotion_eligibility,
    get_debt_warning,
    get_progress_to_next_tier,
)

router = APIRouter(prefix="/progression", tags=["progression"])


@router.post("/promotion", response_model=PromotionResponse)
async def promotion(request: PromotionRequest):
    """Check whether the franchise has earned promotion out of its tier."""
    eligibility = check_promotion_eligibility(
        request.tier,
        request.win_pct,
        request.reserves,
        request.pride,
        request.consecutive_winning_seasons,
        request.won_division,
        request.won_championship,
    )
    body = eligibility.to_dict()
    body["progress"] = get_progress_to_next_tier(eligibility)
    return body


@router.post("/status", response_model=GameStatusResponse)
async def game_status(request: GameStatusRequest):
    """Bankruptcy check: game over once debt exceeds twice the budget."""
    check = check_game_status(request.reserves, request.annual_budget, request.tier)
    body = check.to_dict()
    body["debt_warning"] = get_debt_warning(request.reserves, request.annual_budget).to_dict()
    return body
