"""
Player training system.

Converts simulated games into XP and XP into tool improvements.

Key concepts:
- Base XP per game, scaled by age, morale, work ethic, facilities,
  injury, roster status, city training bonus and progression rate
- Every 100 XP buys exactly one +1 on one tool
- Progression rate is derived from age, potential and remaining headroom,
  computed once and stored on the player
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Mapping, Optional

from bullpen.core.city.districts import NO_BONUSES, DistrictBonuses
from bullpen.core.enums import FacilityLevel, RosterStatus, TrainingFocus, WorkEthic
from bullpen.core.models.player import Player, tool_names
from bullpen.core.rng import RandomSource, default_source, uniform
from bullpen.core.sampling import RATING_MAX, clamp

logger = logging.getLogger(__name__)


XP_PER_LEVEL = 100


@dataclass(frozen=True)
class TrainingConfig:
    """Multiplier tables for the training engine."""

    base_xp_per_game: float = 2.0

    # (max_age inclusive, multiplier), checked in order
    age_multipliers: tuple[tuple[int, float], ...] = ((21, 1.5), (25, 1.2), (28, 1.0))
    age_multiplier_floor: float = 0.6

    # (max_morale inclusive, multiplier)
    morale_multipliers: tuple[tuple[int, float], ...] = ((30, 0.7), (60, 1.0))
    morale_multiplier_ceiling: float = 1.2

    work_ethic_multipliers: Mapping[WorkEthic, float] = field(
        default_factory=lambda: {
            WorkEthic.POOR: 0.6,
            WorkEthic.AVERAGE: 1.0,
            WorkEthic.EXCELLENT: 1.4,
        }
    )
    facility_multipliers: Mapping[FacilityLevel, float] = field(
        default_factory=lambda: {
            FacilityLevel.BASIC: 1.0,
            FacilityLevel.IMPROVED: 1.15,
            FacilityLevel.ELITE: 1.30,
        }
    )

    injured_multiplier: float = 0.25
    reserve_multiplier: float = 0.7
    variance_range: tuple[float, float] = (0.8, 1.2)


DEFAULT_TRAINING_CONFIG = TrainingConfig()


# =============================================================================
# Progression Rate
# =============================================================================


def get_progression_age_factor(age: int) -> float:
    if age <= 21:
        return 1.5
    if age <= 25:
        return 1.2
    if age <= 28:
        return 1.0
    return 0.7


def get_potential_factor(potential: int) -> float:
    if potential >= 70:
        return 1.3
    if potential >= 60:
        return 1.1
    if potential >= 50:
        return 1.0
    return 0.8


def get_ceiling_factor(gap: int) -> float:
    """Growth slows as the player closes in on potential."""
    if gap >= 15:
        return 1.2
    if gap >= 10:
        return 1.0
    if gap >= 5:
        return 0.8
    return 0.5


def calculate_progression_rate(age: int, potential: int, current_rating: int) -> float:
    """
    Hidden development speed multiplier.

    Young, high-ceiling players far from their potential develop fastest.

    Returns:
        Product of age, potential and ceiling factors, clamped to [0.5, 2.0]
    """
    rate = (
        get_progression_age_factor(age)
        * get_potential_factor(potential)
        * get_ceiling_factor(potential - current_rating)
    )
    return clamp(rate, 0.5, 2.0)


# =============================================================================
# XP Multipliers
# =============================================================================


def get_age_multiplier(age: int, config: TrainingConfig = DEFAULT_TRAINING_CONFIG) -> float:
    for max_age, multiplier in config.age_multipliers:
        if age <= max_age:
            return multiplier
    return config.age_multiplier_floor


def get_morale_multiplier(morale: float, config: TrainingConfig = DEFAULT_TRAINING_CONFIG) -> float:
    for max_morale, multiplier in config.morale_multipliers:
        if morale <= max_morale:
            return multiplier
    return config.morale_multiplier_ceiling


def calculate_xp_multiplier(
    player: Player,
    district_bonuses: DistrictBonuses,
    facility_level: FacilityLevel,
    config: TrainingConfig = DEFAULT_TRAINING_CONFIG,
) -> float:
    """Product of every deterministic XP factor for this player."""
    multiplier = (
        player.progression_rate
        * get_age_multiplier(player.age, config)
        * get_morale_multiplier(player.morale, config)
        * config.work_ethic_multipliers[player.hidden_traits.work_ethic]
        * config.facility_multipliers[facility_level]
        * district_bonuses.training_mult
    )
    if player.is_injured:
        multiplier *= config.injured_multiplier
    if player.roster_status == RosterStatus.RESERVE:
        multiplier *= config.reserve_multiplier
    return multiplier


# =============================================================================
# Attribute Selection
# =============================================================================


def select_attribute_to_improve(player: Player) -> str:
    """
    Pick the tool a level-up lands on.

    A focus naming one of the player's tools trains that tool. OVERALL, or a
    focus from the other player type, trains the tool with the largest
    potential - value gap (first tool wins ties).
    """
    names = tool_names(player.player_type)
    focus = player.training_focus
    if focus is not TrainingFocus.OVERALL and focus.tool in names:
        return focus.tool

    best = names[0]
    best_room = player.potential - player.tools.get(best)
    for name in names[1:]:
        room = player.potential - player.tools.get(name)
        if room > best_room:
            best, best_room = name, room
    return best


# =============================================================================
# Training
# =============================================================================


@dataclass
class TrainingResult:
    player_id: str
    previous_xp: int
    new_xp: int
    xp_gained: int
    leveled_up: bool = False
    attribute_improved: Optional[str] = None
    previous_value: Optional[int] = None
    new_value: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "previous_xp": self.previous_xp,
            "new_xp": self.new_xp,
            "xp_gained": self.xp_gained,
            "leveled_up": self.leveled_up,
            "attribute_improved": self.attribute_improved,
            "previous_value": self.previous_value,
            "new_value": self.new_value,
        }


@dataclass
class BatchTrainingResult:
    trained_players: list[TrainingResult] = field(default_factory=list)
    total_xp_gained: int = 0
    players_leveled_up: int = 0

    def to_dict(self) -> dict:
        return {
            "trained_players": [r.to_dict() for r in self.trained_players],
            "total_xp_gained": self.total_xp_gained,
            "players_leveled_up": self.players_leveled_up,
        }


def process_player_training(
    player: Player,
    district_bonuses: DistrictBonuses = NO_BONUSES,
    facility_level: FacilityLevel = FacilityLevel.BASIC,
    games_simulated: int = 1,
    source: Optional[RandomSource] = None,
    config: TrainingConfig = DEFAULT_TRAINING_CONFIG,
) -> TrainingResult:
    """
    Run training for one player over a batch of games.

    Args:
        player: Player to train (not modified)
        district_bonuses: City multipliers; only training_mult is used
        facility_level: Franchise facility tier
        games_simulated: Games in the batch, one training day each
        source: Random source for the final jitter
        config: Multiplier tables

    Returns:
        TrainingResult describing the XP change and at most one level-up.
        Apply it with apply_training_result.
    """
    source = default_source(source)

    base_xp = config.base_xp_per_game * max(0, games_simulated)
    multiplier = calculate_xp_multiplier(player, district_bonuses, facility_level, config)
    variance = uniform(source, *config.variance_range)
    xp_gained = max(0, round(base_xp * multiplier * variance))

    result = TrainingResult(
        player_id=player.id,
        previous_xp=player.current_xp,
        new_xp=player.current_xp + xp_gained,
        xp_gained=xp_gained,
    )

    if result.new_xp >= XP_PER_LEVEL:
        result.leveled_up = True
        # One level per call; any surplus beyond a second level is dropped
        result.new_xp = min(result.new_xp - XP_PER_LEVEL, XP_PER_LEVEL - 1)

        attribute = select_attribute_to_improve(player)
        previous = player.tools.get(attribute)
        result.attribute_improved = attribute
        result.previous_value = previous
        result.new_value = min(RATING_MAX, previous + 1)

    return result


def process_batch_training(
    players: list[Player],
    district_bonuses: DistrictBonuses = NO_BONUSES,
    facility_level: FacilityLevel = FacilityLevel.BASIC,
    games_simulated: int = 1,
    source: Optional[RandomSource] = None,
    config: TrainingConfig = DEFAULT_TRAINING_CONFIG,
) -> BatchTrainingResult:
    """Train every player in roster order."""
    source = default_source(source)
    batch = BatchTrainingResult()

    for player in players:
        result = process_player_training(
            player, district_bonuses, facility_level, games_simulated, source, config
        )
        batch.trained_players.append(result)
        batch.total_xp_gained += result.xp_gained
        if result.leveled_up:
            batch.players_leveled_up += 1

    logger.debug(
        "Trained %d players over %d games: %d XP, %d level-ups",
        len(players),
        games_simulated,
        batch.total_xp_gained,
        batch.players_leveled_up,
    )
    return batch


def apply_training_result(player: Player, result: TrainingResult) -> Player:
    """Return a copy of the player with the training result merged in."""
    if result.player_id != player.id:
        raise ValueError(f"Result for {result.player_id} applied to {player.id}")

    tools = player.tools
    if result.leveled_up and result.attribute_improved is not None:
        tools = tools.with_value(result.attribute_improved, result.new_value)

    return player.copy(
        current_xp=result.new_xp,
        tools=tools,
        progression_rate=calculate_progression_rate(
            player.age, player.potential, player.current_rating
        ),
    )


# =============================================================================
# Recommendations & Summary
# =============================================================================


def recommend_training_focus(player: Player) -> TrainingFocus:
    """
    Suggest the weakest tool still well short of potential.

    Scores each tool by room * (100 - value) / 100, considering only tools
    with more than 5 points of room. Falls back to the first tool.
    """
    names = tool_names(player.player_type)
    best = names[0]
    best_score = -math.inf
    for name in names:
        value = player.tools.get(name)
        room = player.potential - value
        score = room * (100 - value) / 100
        if room > 5 and score > best_score:
            best, best_score = name, score
    return TrainingFocus(best)


@dataclass
class TrainingSummary:
    training_mult: float
    facility_bonus: float
    total_bonus: float
    avg_progression_rate: float
    estimated_xp_per_game: int
    estimated_games_to_level_up: int


def calculate_training_summary(
    players: list[Player],
    district_bonuses: DistrictBonuses = NO_BONUSES,
    facility_level: FacilityLevel = FacilityLevel.BASIC,
    config: TrainingConfig = DEFAULT_TRAINING_CONFIG,
) -> TrainingSummary:
    """Roster-wide training outlook for display."""
    facility_bonus = config.facility_multipliers[facility_level]
    total_bonus = district_bonuses.training_mult * facility_bonus

    if players:
        avg_rate = sum(p.progression_rate for p in players) / len(players)
        avg_morale = sum(p.morale for p in players) / len(players)
    else:
        avg_rate, avg_morale = 1.0, 50

    xp_per_game = round(
        config.base_xp_per_game
        * avg_rate
        * total_bonus
        * get_morale_multiplier(avg_morale, config)
    )
    games_to_level = math.ceil(XP_PER_LEVEL / xp_per_game) if xp_per_game > 0 else 999

    return TrainingSummary(
        training_mult=district_bonuses.training_mult,
        facility_bonus=facility_bonus,
        total_bonus=total_bonus,
        avg_progression_rate=avg_rate,
        estimated_xp_per_game=xp_per_game,
        estimated_games_to_level_up=games_to_level,
    )


__all__ = [
    "BatchTrainingResult",
    "DEFAULT_TRAINING_CONFIG",
    "TrainingConfig",
    "TrainingResult",
    "TrainingSummary",
    "XP_PER_LEVEL",
    "apply_training_result",
    "calculate_progression_rate",
    "calculate_training_summary",
    "calculate_xp_multiplier",
    "get_age_multiplier",
    "get_ceiling_factor",
    "get_morale_multiplier",
    "get_potential_factor",
    "process_batch_training",
    "process_player_training",
    "recommend_training_focus",
    "select_attribute_to_improve",
]
