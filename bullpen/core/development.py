"""
Winter development, ageing and injuries.

Young players grow over the winter, players in their prime hold steady
and veterans decline. Ratings stay on the 20-80 scale.
"""

from dataclasses import dataclass
from typing import Optional

from bullpen.core.enums import WorkEthic
from bullpen.core.models.player import Player
from bullpen.core.rng import RandomSource, chance, default_source, randint
from bullpen.core.sampling import RATING_MAX, RATING_MIN

RETIREMENT_AGE = 35
RETIREMENT_CHANCE_PER_YEAR = 0.15
DECLINE_AGE = 32
INJURY_CHANCE = 0.20
INJURY_GAMES = (30, 60)

WORK_ETHIC_MODIFIERS = {
    WorkEthic.POOR: 0.7,
    WorkEthic.AVERAGE: 1.0,
    WorkEthic.EXCELLENT: 1.3,
}


@dataclass
class WinterDevelopment:
    rating_change: int
    reason: str


def calculate_winter_development(
    age: int,
    current_rating: int,
    potential: int,
    work_ethic: WorkEthic = WorkEthic.AVERAGE,
    source: Optional[RandomSource] = None,
) -> WinterDevelopment:
    """
    Offseason rating change by age band.

    18-21 gain 1-3 and 22-24 gain 1-2, both scaled by work ethic and
    capped at the room left under potential. 25-29 may refine by a
    point. 30 and up start losing points, faster with every year.
    """
    source = default_source(source)
    ethic = WORK_ETHIC_MODIFIERS[work_ethic]
    room = max(0, potential - current_rating)

    if age <= 21:
        growth = randint(source, 1, 3)
        return WinterDevelopment(min(room, round(growth * ethic)), "Young prospect development")

    if age <= 24:
        growth = randint(source, 1, 2)
        return WinterDevelopment(min(room, round(growth * ethic)), "Continued development")

    if age <= 29:
        if current_rating < potential and source.next() > 0.5:
            return WinterDevelopment(round(ethic), "Peak years refinement")
        return WinterDevelopment(0, "Maintained peak form")

    if age <= 33:
        if source.next() > 0.6:
            return WinterDevelopment(-1, "Early aging effects")
        return WinterDevelopment(0, "Maintained form")

    if age <= 36:
        if chance(source, 0.4 + (age - 34) * 0.1):
            return WinterDevelopment(-randint(source, 1, 2), "Age-related decline")
        return WinterDevelopment(0, "Defying age")

    if chance(source, 0.6 + (age - 37) * 0.1):
        return WinterDevelopment(-randint(source, 1, 3), "Late career decline")
    return WinterDevelopment(-1, "Aging gracefully")


def apply_rating_change(
    current_rating: int,
    change: int,
    min_rating: int = RATING_MIN,
    max_rating: int = RATING_MAX,
) -> int:
    return max(min_rating, min(max_rating, current_rating + change))


@dataclass
class AgingResult:
    new_age: int
    is_retiring: bool
    decline_modifier: float


def age_player(player: Player, source: Optional[RandomSource] = None) -> AgingResult:
    """One more birthday. Past 35 every year adds 15% to the retirement odds."""
    source = default_source(source)
    new_age = player.age + 1

    is_retiring = False
    if new_age > RETIREMENT_AGE:
        is_retiring = chance(source, (new_age - RETIREMENT_AGE) * RETIREMENT_CHANCE_PER_YEAR)

    decline = -(new_age - DECLINE_AGE) * 0.5 if new_age > DECLINE_AGE else 0.0
    return AgingResult(new_age=new_age, is_retiring=is_retiring, decline_modifier=decline)


@dataclass
class InjuryResult:
    is_injured: bool
    games_lost: int = 0


def simulate_injury(player: Player, source: Optional[RandomSource] = None) -> InjuryResult:
    """Only injury-prone players get hurt: 20% chance of a 30-60 game absence."""
    if not player.hidden_traits.injury_prone:
        return InjuryResult(is_injured=False)

    source = default_source(source)
    if not chance(source, INJURY_CHANCE):
        return InjuryResult(is_injured=False)
    return InjuryResult(is_injured=True, games_lost=randint(source, *INJURY_GAMES))


def apply_injury(player: Player, injury: InjuryResult) -> Player:
    if not injury.is_injured:
        return player
    return player.copy(
        is_injured=True,
        injury_games_remaining=player.injury_games_remaining + injury.games_lost,
    )
