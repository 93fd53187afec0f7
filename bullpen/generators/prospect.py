"""
Draft class generation.

Produces a full class of prospects: bounded-normal ratings, decorrelated
tools, hidden traits, a noisy media consensus rank and an archetype label.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from bullpen.core.enums import Personality, PlayerType, Position, WorkEthic
from bullpen.core.models.player import HiddenTraits, HitterTools, PitcherTools, Tools
from bullpen.core.models.prospect import DraftProspect
from bullpen.core.rng import (
    RandomSource,
    chance,
    default_source,
    randint,
    random_id,
    shuffle,
    uniform,
    weighted_choice,
)
from bullpen.core.sampling import RatingSampler, clamp_rating
from bullpen.core.training import calculate_progression_rate
from bullpen.generators.archetypes import determine_archetype
from bullpen.generators.names import generate_name

logger = logging.getLogger(__name__)


POSITION_WEIGHTS: dict[Position, float] = {
    Position.SP: 0.25,
    Position.RP: 0.15,
    Position.C: 0.05,
    Position.FIRST_BASE: 0.07,
    Position.SECOND_BASE: 0.07,
    Position.THIRD_BASE: 0.07,
    Position.SS: 0.07,
    Position.LF: 0.09,
    Position.CF: 0.09,
    Position.RF: 0.09,
}

AGE_WEIGHTS: dict[int, float] = {
    18: 0.15,
    19: 0.25,
    20: 0.30,
    21: 0.20,
    22: 0.10,
}

WORK_ETHIC_WEIGHTS: dict[WorkEthic, float] = {
    WorkEthic.POOR: 0.20,
    WorkEthic.AVERAGE: 0.60,
    WorkEthic.EXCELLENT: 0.20,
}

PERSONALITY_WEIGHTS: dict[Personality, float] = {
    Personality.TEAM_PLAYER: 0.70,
    Personality.PRIMA_DONNA: 0.15,
    Personality.LEADER: 0.15,
}


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunable knobs for draft class generation."""

    total_players: int = 800

    potential_mean: float = 50.0
    potential_std: float = 15.0
    gap_range: tuple[int, int] = (5, 20)
    tool_std: float = 8.0

    position_weights: Mapping[Position, float] = field(
        default_factory=lambda: dict(POSITION_WEIGHTS)
    )
    age_weights: Mapping[int, float] = field(default_factory=lambda: dict(AGE_WEIGHTS))
    work_ethic_weights: Mapping[WorkEthic, float] = field(
        default_factory=lambda: dict(WORK_ETHIC_WEIGHTS)
    )
    personality_weights: Mapping[Personality, float] = field(
        default_factory=lambda: dict(PERSONALITY_WEIGHTS)
    )
    injury_prone_chance: float = 0.20
    trait_range: tuple[int, int] = (30, 70)

    # Media rank
    potential_weight: float = 0.75
    current_weight: float = 0.25
    base_noise: float = 8.0
    age_noise: float = 8.0  # Extra noise for an 18-year-old, tapering to 0 at 22


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()


def generate_tools(
    player_type: PlayerType,
    current_rating: int,
    sampler: RatingSampler,
    tool_std: float = 8.0,
) -> Tools:
    """Sample each tool independently around the overall rating."""
    if player_type == PlayerType.PITCHER:
        return PitcherTools(
            stuff=sampler.sample(current_rating, tool_std),
            control=sampler.sample(current_rating, tool_std),
            movement=sampler.sample(current_rating, tool_std),
        )
    return HitterTools(
        hit=sampler.sample(current_rating, tool_std),
        power=sampler.sample(current_rating, tool_std),
        speed=sampler.sample(current_rating, tool_std),
        arm=sampler.sample(current_rating, tool_std),
        field=sampler.sample(current_rating, tool_std),
    )


def generate_hidden_traits(
    source: RandomSource, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG
) -> HiddenTraits:
    low, high = config.trait_range
    return HiddenTraits(
        work_ethic=weighted_choice(source, config.work_ethic_weights),
        injury_prone=chance(source, config.injury_prone_chance),
        personality=weighted_choice(source, config.personality_weights),
        coachability=randint(source, low, high),
        clutch=randint(source, low, high),
    )


def generate_prospect(
    year: int,
    source: Optional[RandomSource] = None,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> DraftProspect:
    """
    Generate one unranked prospect.

    media_rank is left at 0; ranks only make sense across a whole class.
    """
    source = default_source(source)
    sampler = RatingSampler(source)

    first_name, last_name = generate_name(source)

    potential = sampler.sample(config.potential_mean, config.potential_std)
    gap = randint(source, *config.gap_range)
    # Clamping can pull current up to 20 even when potential sits at 20
    current_rating = min(potential, clamp_rating(potential - gap))

    position = weighted_choice(source, config.position_weights)
    player_type = position.player_type
    tools = generate_tools(player_type, current_rating, sampler, config.tool_std)
    traits = generate_hidden_traits(source, config)
    age = weighted_choice(source, config.age_weights)

    return DraftProspect(
        id=random_id(source),
        first_name=first_name,
        last_name=last_name,
        age=age,
        position=position,
        player_type=player_type,
        current_rating=current_rating,
        potential=potential,
        tools=tools,
        hidden_traits=traits,
        progression_rate=calculate_progression_rate(age, potential, current_rating),
        archetype=determine_archetype(player_type, tools, current_rating, potential),
        year=year,
    )


def media_rank_noise(
    age: int, source: RandomSource, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG
) -> float:
    """Consensus error: flat +/- base_noise plus more for younger players."""
    age_factor = max(0.0, min(1.0, (22 - age) / 4))
    extra = config.age_noise * age_factor
    return uniform(source, -config.base_noise, config.base_noise) + uniform(source, -1.0, 1.0) * extra


def assign_media_ranks(
    prospects: list[DraftProspect],
    source: Optional[RandomSource] = None,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> list[DraftProspect]:
    """
    Rank a class by noisy consensus score.

    Returns copies in the input order with media_rank set to a dense
    1..N permutation. Equal scores keep their input order.
    """
    source = default_source(source)
    scored = []
    for index, prospect in enumerate(prospects):
        score = (
            config.potential_weight * prospect.potential
            + config.current_weight * prospect.current_rating
            + media_rank_noise(prospect.age, source, config)
        )
        scored.append((score, index))

    # sorted() is stable, so ties fall back to generation order
    ordering = sorted(scored, key=lambda pair: -pair[0])
    ranks = {index: rank for rank, (_, index) in enumerate(ordering, start=1)}
    return [p.copy(media_rank=ranks[i]) for i, p in enumerate(prospects)]


def generate_draft_class(
    total_players: Optional[int] = None,
    year: int = 1,
    source: Optional[RandomSource] = None,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> list[DraftProspect]:
    """
    Generate a complete draft class.

    Args:
        total_players: Class size (defaults to config.total_players)
        year: Draft year stamped on each prospect
        source: Uniform random source; seeded sources reproduce a class
        config: Generation tuning

    Returns:
        Prospects in shuffled display order; media_rank holds the
        consensus order independently of list position
    """
    source = default_source(source)
    if total_players is None:
        total_players = config.total_players
    if total_players <= 0:
        return []

    prospects = [generate_prospect(year, source, config) for _ in range(total_players)]
    ranked = assign_media_ranks(prospects, source, config)
    display = shuffle(source, ranked)

    logger.debug("Generated %d-player draft class for year %d", len(display), year)
    return display


__all__ = [
    "AGE_WEIGHTS",
    "DEFAULT_GENERATOR_CONFIG",
    "GeneratorConfig",
    "POSITION_WEIGHTS",
    "assign_media_ranks",
    "generate_draft_class",
    "generate_hidden_traits",
    "generate_prospect",
    "generate_tools",
    "media_rank_noise",
]
