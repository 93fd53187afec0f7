"""
Draft AI System.

Autonomous draft decision-making for AI-controlled teams.

Handles:
- Imperfect prospect evaluation (two independent noise terms)
- Team philosophy adjustments (best available, needs, upside, floor)
- Round-dependent exploration (top pick in round 1, top-3 after)
- Running the board until the human team is on the clock
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from bullpen.core.draft.picks import (
    DEFAULT_TEAMS,
    ai_team_index_for_slot,
    pick_position_in_round,
)
from bullpen.core.enums import DraftPhilosophy
from bullpen.core.models.ai_team import AITeam
from bullpen.core.models.prospect import DraftProspect
from bullpen.core.rng import RandomSource, choice, default_source, uniform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftAIConfig:
    """Configuration for draft AI behavior."""

    # Scouting noise applied before and after philosophy adjustments
    evaluation_noise: float = 5.0

    need_divisor: float = 5.0  # +priority / divisor for a matching need
    upside_multiplier: float = 2.0  # + gap * multiplier
    floor_gap_penalty: float = 1.0  # - gap * penalty
    risk_threshold: int = 50  # Injury penalty applies below this tolerance
    risk_divisor: float = 5.0

    # Exploration: how many top-scored prospects are in play per round
    first_round_pool: int = 1
    later_round_pool: int = 3


DEFAULT_DRAFT_AI_CONFIG = DraftAIConfig()


@dataclass
class ProspectEvaluation:
    """AI's read on one prospect."""

    index: int
    prospect: DraftProspect
    score: float
    reason: str


@dataclass
class AIDraftPickResult:
    success: bool
    reason: str
    selected_index: Optional[int] = None
    prospect: Optional[DraftProspect] = None
    score: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "reason": self.reason,
            "selected_index": self.selected_index,
            "prospect": self.prospect.to_dict() if self.prospect else None,
            "score": self.score,
        }


def score_prospect(
    team: AITeam,
    prospect: DraftProspect,
    source: RandomSource,
    config: DraftAIConfig = DEFAULT_DRAFT_AI_CONFIG,
) -> tuple[float, str]:
    """
    Score a prospect through a team's eyes.

    Consumes exactly two uniform draws.

    Returns:
        (score, reason)
    """
    noise = config.evaluation_noise
    score = prospect.current_rating + uniform(source, -noise, noise)
    reason = "best available"
    gap = prospect.potential - prospect.current_rating

    if team.philosophy == DraftPhilosophy.NEED_BASED:
        priority = team.need_priority(prospect.position)
        if priority is not None:
            score += priority / config.need_divisor
            reason = f"filling need at {prospect.position.value}"
    elif team.philosophy == DraftPhilosophy.UPSIDE_SWING:
        score += gap * config.upside_multiplier
        reason = "high ceiling prospect"
    elif team.philosophy == DraftPhilosophy.SAFE_FLOOR:
        score -= gap * config.floor_gap_penalty
        reason = "proven floor"
        if prospect.hidden_traits.injury_prone and team.risk_tolerance < config.risk_threshold:
            score -= (config.risk_threshold - team.risk_tolerance) / config.risk_divisor
            reason = "safe, low-risk pick"

    score += uniform(source, -noise, noise)
    return score, reason


def rank_prospects(
    team: AITeam,
    prospects: Sequence[DraftProspect],
    source: RandomSource,
    config: DraftAIConfig = DEFAULT_DRAFT_AI_CONFIG,
) -> list[ProspectEvaluation]:
    """
    Evaluate every undrafted prospect, best first.

    Equal scores keep pool order.
    """
    evaluations = []
    for index, prospect in enumerate(prospects):
        if prospect.is_drafted:
            continue
        score, reason = score_prospect(team, prospect, source, config)
        evaluations.append(ProspectEvaluation(index, prospect, score, reason))
    evaluations.sort(key=lambda e: -e.score)
    return evaluations


def ai_draft_pick(
    team: AITeam,
    prospects: Sequence[DraftProspect],
    round_number: int,
    source: Optional[RandomSource] = None,
    config: DraftAIConfig = DEFAULT_DRAFT_AI_CONFIG,
) -> AIDraftPickResult:
    """
    Select a prospect for an AI team.

    Args:
        team: Team on the clock
        prospects: Remaining pool; drafted entries are skipped
        round_number: Current round (1 = no exploration)
        source: Random source for evaluation noise and exploration
        config: Scoring knobs

    Returns:
        AIDraftPickResult with selected_index into `prospects`, or
        success=False when nobody is left to pick
    """
    source = default_source(source)
    evaluations = rank_prospects(team, prospects, source, config)
    if not evaluations:
        logger.warning("%s on the clock with an empty pool", team.abbreviation)
        return AIDraftPickResult(success=False, reason="No undrafted prospects available")

    pool_size = config.first_round_pool if round_number <= 1 else config.later_round_pool
    pool = evaluations[: min(pool_size, len(evaluations))]
    selected = pool[0] if len(pool) == 1 else choice(source, pool)

    return AIDraftPickResult(
        success=True,
        reason=selected.reason,
        selected_index=selected.index,
        prospect=selected.prospect,
        score=selected.score,
    )


@dataclass
class AIPick:
    team_id: str
    pick: int
    prospect: DraftProspect
    reason: str


@dataclass
class AIDraftSimulationResult:
    picks: list[AIPick] = field(default_factory=list)
    remaining_prospects: list[DraftProspect] = field(default_factory=list)
    next_pick: int = 1
    round_complete: bool = False


def simulate_ai_draft_picks(
    ai_teams: Sequence[AITeam],
    prospects: Sequence[DraftProspect],
    current_pick: int,
    player_draft_position: int,
    round_number: int,
    teams_count: int = DEFAULT_TEAMS,
    snake: bool = True,
    source: Optional[RandomSource] = None,
    config: DraftAIConfig = DEFAULT_DRAFT_AI_CONFIG,
) -> AIDraftSimulationResult:
    """
    Run AI picks until the human team is on the clock or the round ends.

    Args:
        ai_teams: AI teams in draft-order slots, skipping the player's slot
        prospects: Remaining pool
        current_pick: Overall pick number on the clock
        player_draft_position: Player's slot in the draft order (1-based)
        round_number: Current round
        teams_count: Teams in the draft
        snake: Reverse even rounds
        source: Random source

    Returns:
        Picks made, the pool with drafted prospects removed, and the next
        overall pick number
    """
    source = default_source(source)
    remaining = [p for p in prospects if not p.is_drafted]
    result = AIDraftSimulationResult(next_pick=current_pick)
    round_end = round_number * teams_count
    pick = current_pick

    while pick <= round_end and remaining:
        slot = pick_position_in_round(pick, round_number, teams_count, snake)
        if slot == player_draft_position:
            break

        team_index = ai_team_index_for_slot(slot, player_draft_position)
        if 0 <= team_index < len(ai_teams):
            team = ai_teams[team_index]
            decision = ai_draft_pick(team, remaining, round_number, source, config)
            if decision.success:
                drafted = remaining.pop(decision.selected_index).mark_drafted(team.id)
                result.picks.append(AIPick(team.id, pick, drafted, decision.reason))
                logger.debug(
                    "Pick %d: %s takes %s (%s)",
                    pick,
                    team.abbreviation,
                    drafted.full_name,
                    decision.reason,
                )
        pick += 1

    result.remaining_prospects = remaining
    result.next_pick = pick
    result.round_complete = pick > round_end
    return result


__all__ = [
    "AIDraftPickResult",
    "AIDraftSimulationResult",
    "AIPick",
    "DEFAULT_DRAFT_AI_CONFIG",
    "DraftAIConfig",
    "ProspectEvaluation",
    "ai_draft_pick",
    "rank_prospects",
    "score_prospect",
    "simulate_ai_draft_picks",
]
