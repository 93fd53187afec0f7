"""
Scouting system.

Noisy estimates of a prospect's true ratings, priced by accuracy tier:

- low: cheap, +/-15 rating error, 30% trait discovery
- medium: +/-8, 60%
- high: expensive, +/-3, 90%
"""

from bullpen.core.scouting.config import (
    DEFAULT_TRAIT_REVEAL_CHANCES,
    SCOUTING_CONFIG,
    ScoutingTierConfig,
    TraitRevealChances,
    calculate_scouting_cost,
)
from bullpen.core.scouting.report import (
    ScoutingResult,
    apply_scouting_result,
    roll_revealed_traits,
    scout_prospect,
)

__all__ = [
    "DEFAULT_TRAIT_REVEAL_CHANCES",
    "SCOUTING_CONFIG",
    "ScoutingResult",
    "ScoutingTierConfig",
    "TraitRevealChances",
    "apply_scouting_result",
    "calculate_scouting_cost",
    "roll_revealed_traits",
    "scout_prospect",
]
