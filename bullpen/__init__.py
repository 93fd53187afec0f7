"""
Bullpen - minor league franchise simulation engine.

Draft classes, scouting, the AI draft, player training, season finances,
city growth, the offseason rollover and tier promotion.
"""

from bullpen.core.ai import ai_draft_pick, simulate_ai_draft_picks
from bullpen.core.draft import generate_draft_order
from bullpen.core.finances import simulate_finances
from bullpen.core.progression import check_game_status, check_promotion_eligibility
from bullpen.core.scouting import scout_prospect
from bullpen.core.training import process_batch_training, process_player_training
from bullpen.generators import generate_draft_class

__version__ = "0.1.0"

__all__ = [
    "ai_draft_pick",
    "check_game_status",
    "check_promotion_eligibility",
    "generate_draft_class",
    "generate_draft_order",
    "process_batch_training",
    "process_player_training",
    "scout_prospect",
    "simulate_ai_draft_picks",
    "simulate_finances",
]
