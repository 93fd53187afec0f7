"""Simulation enumerations."""

from bullpen.core.enums.franchise import (
    BankruptcyRisk,
    BuildingType,
    DebtWarningLevel,
    District,
    DraftPhilosophy,
    FacilityLevel,
    GameStatus,
    NarrativeEventType,
    PlayoffResult,
    PlayoffRound,
    ScoutingTier,
    Tier,
)
from bullpen.core.enums.players import (
    Archetype,
    Personality,
    RosterStatus,
    TrainingFocus,
    WorkEthic,
)
from bullpen.core.enums.positions import PlayerType, Position

__all__ = [
    "Archetype",
    "BankruptcyRisk",
    "BuildingType",
    "DebtWarningLevel",
    "District",
    "DraftPhilosophy",
    "FacilityLevel",
    "GameStatus",
    "NarrativeEventType",
    "Personality",
    "PlayerType",
    "PlayoffResult",
    "PlayoffRound",
    "Position",
    "RosterStatus",
    "ScoutingTier",
    "Tier",
    "TrainingFocus",
    "WorkEthic",
]
