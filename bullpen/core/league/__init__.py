"""
Static league data.

Immutable lookup tables: tiers, facilities and the AI organizations.
"""

from bullpen.core.league.ai_teams import AI_TEAMS, get_ai_team
from bullpen.core.league.facilities import (
    ACTIVE_ROSTER_LIMIT,
    FACILITY_CONFIGS,
    FacilityConfig,
    FacilityUpgradeResult,
    RosterCapacity,
    get_roster_capacity,
    next_facility_level,
    upgrade_facilities,
)
from bullpen.core.league.tiers import (
    TIER_CONFIGS,
    PromotionRequirements,
    TierConfig,
    get_tier_config,
)

__all__ = [
    "ACTIVE_ROSTER_LIMIT",
    "AI_TEAMS",
    "FACILITY_CONFIGS",
    "FacilityConfig",
    "FacilityUpgradeResult",
    "PromotionRequirements",
    "RosterCapacity",
    "TIER_CONFIGS",
    "TierConfig",
    "get_ai_team",
    "get_roster_capacity",
    "get_tier_config",
    "next_facility_level",
    "upgrade_facilities",
]
