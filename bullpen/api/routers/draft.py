"""
API Router for the amateur draft.

Provides endpoints for:
- Generating a draft class
- Scouting a prospect
- AI team selections
- Next season's draft order
"""

from fastapi import APIRouter, HTTPException

from bullpen.api.schemas.draft import (
    AIPickRequest,
    DraftClassRequest,
    DraftClassResponse,
    DraftOrderRequest,
    DraftOrderResponse,
    ScoutRequest,
)
from bullpen.api.schemas.players import ProspectSchema
from bullpen.config import get_config, make_random_source
from bullpen.core.ai import ai_draft_pick
from bullpen.core.draft import (
    TeamRecord,
    generate_draft_order,
    get_player_draft_position,
)
from bullpen.core.league.ai_teams import AI_TEAMS, get_ai_team
from bullpen.core.scouting import apply_scouting_result, scout_prospect
from bullpen.generators import generate_draft_class

router = APIRouter(prefix="/draft", tags=["draft"])


@router.post("/class", response_model=DraftClassResponse)
async def create_draft_class(request: DraftClassRequest):
    """
    Generate a draft class.

    Prospects come back in display order; media_rank holds the consensus
    board position.
    """
    total = request.total_players
    if total is None:
        total = get_config().draft_class_size

    prospects = generate_draft_class(total, request.year, make_random_source(request.seed))
    return {
        "year": request.year,
        "count": len(prospects),
        "prospects": [ProspectSchema.from_model(p) for p in prospects],
    }


@router.post("/scout")
async def scout(request: ScoutRequest) -> dict:
    """
    Scout a prospect.

    Unknown tiers and insufficient funds come back as success=false with
    a reason. On success the updated prospect is included.
    """
    prospect = request.prospect.to_model()
    result = scout_prospect(
        prospect,
        request.accuracy,
        make_random_source(request.seed),
        available_funds=request.available_funds,
    )

    body = result.to_dict()
    body["prospect"] = (
        apply_scouting_result(prospect, result).to_dict() if result.success else None
    )
    return body


@router.post("/ai-pick")
async def ai_pick(request: AIPickRequest) -> dict:
    """Have an AI team make its selection from the remaining pool."""
    team = get_ai_team(request.team_id)
    if team is None:
        raise HTTPException(status_code=404, detail=f"Unknown AI team: {request.team_id}")

    prospects = [p.to_model() for p in request.prospects]
    result = ai_draft_pick(team, prospects, request.round_number, make_random_source(request.seed))
    body = result.to_dict()
    body["team"] = team.to_dict()
    return body


@router.post("/order", response_model=DraftOrderResponse)
async def draft_order(request: DraftOrderRequest):
    """Reverse-standings draft order against the AI league."""
    record = TeamRecord(team_name=request.team_name, wins=request.wins, losses=request.losses)
    order = generate_draft_order(record, AI_TEAMS, request.year, make_random_source(request.seed))
    return {
        "year": request.year,
        "player_draft_position": get_player_draft_position(order),
        "order": [entry.to_dict() for entry in order],
    }
