"""AI decision-making for computer-run organizations."""

from bullpen.core.ai.draft_ai import (
    AIDraftPickResult,
    AIDraftSimulationResult,
    AIPick,
    DraftAIConfig,
    ProspectEvaluation,
    ai_draft_pick,
    rank_prospects,
    score_prospect,
    simulate_ai_draft_picks,
)

__all__ = [
    "AIDraftPickResult",
    "AIDraftSimulationResult",
    "AIPick",
    "DraftAIConfig",
    "ProspectEvaluation",
    "ai_draft_pick",
    "rank_prospects",
    "score_prospect",
    "simulate_ai_draft_picks",
]
