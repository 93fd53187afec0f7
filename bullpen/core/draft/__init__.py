"""Draft order and pick slot helpers."""

from bullpen.core.draft.order import (
    PLAYER_TEAM_ID,
    DraftOrderEntry,
    TeamRecord,
    ai_teams_in_draft_order,
    generate_draft_order,
    get_player_draft_position,
    simulate_ai_win_pct,
)
from bullpen.core.draft.picks import (
    DEFAULT_ROUNDS,
    DEFAULT_TEAMS,
    ai_team_index_for_slot,
    overall_pick_for_slot,
    pick_position_in_round,
    round_for_pick,
)

__all__ = [
    "DEFAULT_ROUNDS",
    "DEFAULT_TEAMS",
    "DraftOrderEntry",
    "PLAYER_TEAM_ID",
    "TeamRecord",
    "ai_team_index_for_slot",
    "ai_teams_in_draft_order",
    "generate_draft_order",
    "get_player_draft_position",
    "overall_pick_for_slot",
    "pick_position_in_round",
    "round_for_pick",
    "simulate_ai_win_pct",
]
