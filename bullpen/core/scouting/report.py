"""
Scouting reports.

A report is a noisy read on a prospect's true ratings plus a chance to
uncover hidden traits. Reports never touch the prospect; callers merge
them with apply_scouting_result.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from bullpen.core.enums import ScoutingTier
from bullpen.core.models.prospect import DraftProspect, RevealedTraits
from bullpen.core.rng import RandomSource, chance, default_source, uniform
from bullpen.core.scouting.config import (
    DEFAULT_TRAIT_REVEAL_CHANCES,
    SCOUTING_CONFIG,
    ScoutingTierConfig,
    TraitRevealChances,
)
from bullpen.core.sampling import clamp_rating

logger = logging.getLogger(__name__)


@dataclass
class ScoutingResult:
    """
    Outcome of one scouting request.

    success=False means nothing was scouted and nothing should be charged;
    reason explains why.
    """

    success: bool
    reason: str = ""
    accuracy: Optional[ScoutingTier] = None
    scouted_rating: Optional[int] = None
    scouted_potential: Optional[int] = None
    rating_error: int = 0  # Absolute error applied
    potential_error: int = 0
    traits_revealed: bool = False
    revealed_traits: RevealedTraits = field(default_factory=RevealedTraits)
    cost: int = 0

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "reason": self.reason,
            "accuracy": self.accuracy.value if self.accuracy else None,
            "scouted_rating": self.scouted_rating,
            "scouted_potential": self.scouted_potential,
            "rating_error": self.rating_error,
            "potential_error": self.potential_error,
            "traits_revealed": self.traits_revealed,
            "revealed_traits": self.revealed_traits.to_dict(),
            "cost": self.cost,
        }


def _parse_tier(accuracy: Union[ScoutingTier, str]) -> Optional[ScoutingTier]:
    if isinstance(accuracy, ScoutingTier):
        return accuracy
    try:
        return ScoutingTier(str(accuracy).lower())
    except ValueError:
        return None


def _scouting_error(source: RandomSource, max_error: int) -> int:
    # int() truncates toward zero so |error| never exceeds max_error
    return int(uniform(source, -max_error, max_error))


def roll_revealed_traits(
    prospect: DraftProspect,
    source: RandomSource,
    chances: TraitRevealChances = DEFAULT_TRAIT_REVEAL_CHANCES,
) -> RevealedTraits:
    """Reveal traits after a successful discovery roll."""
    traits = prospect.hidden_traits
    revealed = RevealedTraits()
    if chance(source, chances.work_ethic):
        revealed.work_ethic = traits.work_ethic.value
    if chance(source, chances.personality):
        revealed.personality = traits.personality.value
    if chance(source, chances.injury_prone):
        revealed.injury_prone = traits.injury_prone
    if chance(source, chances.coachability):
        revealed.coachability = traits.coachability
    if chance(source, chances.clutch):
        revealed.clutch = traits.clutch
    return revealed


def scout_prospect(
    prospect: DraftProspect,
    accuracy: Union[ScoutingTier, str],
    source: Optional[RandomSource] = None,
    available_funds: Optional[int] = None,
    config: Mapping[ScoutingTier, ScoutingTierConfig] = SCOUTING_CONFIG,
    reveal_chances: TraitRevealChances = DEFAULT_TRAIT_REVEAL_CHANCES,
) -> ScoutingResult:
    """
    Scout a prospect at the given accuracy tier.

    Args:
        prospect: Prospect to evaluate (not modified)
        accuracy: Tier enum or its string value ("low", "medium", "high")
        source: Random source; identical seeded sources give identical reports
        available_funds: Cash on hand; when given, the tier's cost must fit
        config: Tier cost/error table
        reveal_chances: Per-trait odds after a successful trait roll

    Returns:
        ScoutingResult. Validation problems come back as success=False
        with a human-readable reason rather than an exception.
    """
    tier = _parse_tier(accuracy)
    if tier is None or tier not in config:
        logger.warning("Rejected scouting request: unknown tier %r", accuracy)
        return ScoutingResult(success=False, reason=f"Unknown scouting tier: {accuracy}")

    tier_config = config[tier]
    if available_funds is not None and available_funds < tier_config.cost:
        logger.warning(
            "Rejected %s scouting: cost %d exceeds funds %d",
            tier.value,
            tier_config.cost,
            available_funds,
        )
        return ScoutingResult(
            success=False,
            accuracy=tier,
            reason=(
                f"Insufficient funds: {tier.value} scouting costs "
                f"${tier_config.cost:,}, available ${available_funds:,}"
            ),
        )

    source = default_source(source)
    rating_error = _scouting_error(source, tier_config.rating_error)
    potential_error = _scouting_error(source, tier_config.rating_error)

    traits_revealed = chance(source, tier_config.trait_discovery_chance)
    revealed = (
        roll_revealed_traits(prospect, source, reveal_chances)
        if traits_revealed
        else RevealedTraits()
    )

    return ScoutingResult(
        success=True,
        accuracy=tier,
        scouted_rating=clamp_rating(prospect.current_rating + rating_error),
        scouted_potential=clamp_rating(prospect.potential + potential_error),
        rating_error=abs(rating_error),
        potential_error=abs(potential_error),
        traits_revealed=traits_revealed,
        revealed_traits=revealed,
        cost=tier_config.cost,
    )


def apply_scouting_result(prospect: DraftProspect, result: ScoutingResult) -> DraftProspect:
    """
    Merge a report into a copy of the prospect.

    Newer estimates replace older ones; trait reveals accumulate.
    Failed reports leave the prospect unchanged.
    """
    if not result.success:
        return prospect
    return prospect.copy(
        scouted_rating=result.scouted_rating,
        scouted_potential=result.scouted_potential,
        scouting_accuracy=result.accuracy,
        revealed_traits=prospect.revealed_traits.merged(result.revealed_traits),
    )
