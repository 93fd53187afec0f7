"""Scouting accuracy tiers."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from bullpen.core.enums import ScoutingTier


@dataclass(frozen=True)
class ScoutingTierConfig:
    cost: int
    rating_error: int  # Max absolute error on rating and potential
    trait_discovery_chance: float


@dataclass(frozen=True)
class TraitRevealChances:
    """Per-trait odds once a trait roll succeeds."""

    work_ethic: float = 1.0
    personality: float = 1.0
    injury_prone: float = 0.5
    coachability: float = 0.7
    clutch: float = 0.5


SCOUTING_CONFIG: Mapping[ScoutingTier, ScoutingTierConfig] = MappingProxyType({
    ScoutingTier.LOW: ScoutingTierConfig(cost=2000, rating_error=15, trait_discovery_chance=0.30),
    ScoutingTier.MEDIUM: ScoutingTierConfig(cost=4000, rating_error=8, trait_discovery_chance=0.60),
    ScoutingTier.HIGH: ScoutingTierConfig(cost=8000, rating_error=3, trait_discovery_chance=0.90),
})

DEFAULT_TRAIT_REVEAL_CHANCES = TraitRevealChances()


def calculate_scouting_cost(
    accuracy: ScoutingTier,
    config: Mapping[ScoutingTier, ScoutingTierConfig] = SCOUTING_CONFIG,
) -> int:
    return config[accuracy].cost
