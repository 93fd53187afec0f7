"""Core data models."""

from bullpen.core.models.ai_team import AITeam, TeamNeed
from bullpen.core.models.city import Building, CityState, TOTAL_BUILDINGS
from bullpen.core.models.franchise import Franchise
from bullpen.core.models.player import (
    HITTER_TOOLS,
    PITCHER_TOOLS,
    HiddenTraits,
    HitterTools,
    PitcherTools,
    Player,
    Tools,
    tool_names,
)
from bullpen.core.models.prospect import DraftProspect, RevealedTraits
from bullpen.core.models.stats import SeasonStatsSummary

__all__ = [
    "AITeam",
    "Building",
    "CityState",
    "DraftProspect",
    "Franchise",
    "HITTER_TOOLS",
    "HiddenTraits",
    "HitterTools",
    "PITCHER_TOOLS",
    "PitcherTools",
    "Player",
    "RevealedTraits",
    "SeasonStatsSummary",
    "TOTAL_BUILDINGS",
    "TeamNeed",
    "Tools",
    "tool_names",
]
