"""
City growth.

A successful season revitalizes downtown: buildings move from vacant
through renovation to open, expanded and landmark, while population,
income, unemployment, pride and recognition follow the team's fortunes.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from bullpen.core.city.districts import calculate_district_bonuses
from bullpen.core.enums import BuildingType, Tier
from bullpen.core.league.tiers import TierConfig, get_tier_config
from bullpen.core.models.city import (
    EXPANDED,
    LANDMARK,
    OPEN,
    RENOVATING,
    TOTAL_BUILDINGS,
    VACANT,
    Building,
    CityState,
)
from bullpen.core.rng import RandomSource, choice, default_source, weighted_choice

logger = logging.getLogger(__name__)

STARTING_PRIDE = 30
STARTING_RECOGNITION = 5


@dataclass(frozen=True)
class PopulationGrowth:
    base: int
    per_win_pct: int
    per_pride: int


@dataclass(frozen=True)
class IncomeGrowth:
    base: int
    per_occupancy: int


@dataclass(frozen=True)
class CityConfig:
    """Balance knobs for downtown growth."""

    success_score_divisor: int = 20

    building_type_weights: Mapping[BuildingType, float] = field(
        default_factory=lambda: MappingProxyType({
            BuildingType.RESTAURANT: 0.30,
            BuildingType.BAR: 0.20,
            BuildingType.RETAIL: 0.25,
            BuildingType.HOTEL: 0.15,
            BuildingType.CORPORATE: 0.10,
        })
    )
    building_min_tier: Mapping[BuildingType, Tier] = field(
        default_factory=lambda: MappingProxyType({
            BuildingType.RESTAURANT: Tier.LOW_A,
            BuildingType.BAR: Tier.LOW_A,
            BuildingType.RETAIL: Tier.LOW_A,
            BuildingType.HOTEL: Tier.HIGH_A,
            BuildingType.CORPORATE: Tier.DOUBLE_A,
        })
    )
    population_growth: Mapping[Tier, PopulationGrowth] = field(
        default_factory=lambda: MappingProxyType({
            Tier.LOW_A: PopulationGrowth(500, 200, 100),
            Tier.HIGH_A: PopulationGrowth(1000, 400, 200),
            Tier.DOUBLE_A: PopulationGrowth(2000, 800, 400),
            Tier.TRIPLE_A: PopulationGrowth(4000, 1500, 750),
            Tier.MLB: PopulationGrowth(8000, 3000, 1500),
        })
    )
    income_growth: Mapping[Tier, IncomeGrowth] = field(
        default_factory=lambda: MappingProxyType({
            Tier.LOW_A: IncomeGrowth(500, 20),
            Tier.HIGH_A: IncomeGrowth(800, 30),
            Tier.DOUBLE_A: IncomeGrowth(1200, 50),
            Tier.TRIPLE_A: IncomeGrowth(2000, 80),
            Tier.MLB: IncomeGrowth(3000, 120),
        })
    )

    unemployment_per_upgrade: float = 0.3
    unemployment_per_success_point: float = 0.01
    unemployment_floor: float = 3.0

    winning_season_pride: int = 5
    losing_season_pride: int = -3
    playoff_pride: int = 8
    championship_pride: int = 15
    world_series_pride: int = 25
    upgrade_pride: int = 1

    playoff_recognition: int = 3
    championship_recognition: int = 8
    world_series_recognition: int = 20


DEFAULT_CITY_CONFIG = CityConfig()


BUILDING_NAMES: Mapping[BuildingType, tuple[str, ...]] = MappingProxyType({
    BuildingType.RESTAURANT: (
        "The Dugout Grill", "Home Plate Diner", "Seventh Inning Stretch Cafe",
        "The Grand Slam", "Bullpen BBQ", "The Batting Cage Bistro",
        "Curveball Kitchen", "The Fastball Grill", "Diamond Diner",
        "The Rookie's Table", "Bases Loaded Burgers", "Extra Innings Eatery",
    ),
    BuildingType.BAR: (
        "The Closer's Pub", "Rally Cap Tavern", "The Press Box Bar",
        "Bleacher Bums", "The Ninth Inning", "Southpaw Saloon",
        "The Bullpen", "Slider's Sports Bar", "The Pinch Hit",
        "Changeup Brewing Co.", "The Double Play", "Foul Line Taphouse",
    ),
    BuildingType.RETAIL: (
        "Team Spirit Shop", "Champions Corner", "The Ballpark Store",
        "Hat Trick Sports", "Jersey Junction", "The Fan Zone",
        "Pennant Plaza", "Trophy Case Collectibles", "Diamond District",
        "Clubhouse Gear", "MVP Memorabilia", "Batting Practice Pro Shop",
    ),
    BuildingType.HOTEL: (
        "The Grand Slam Inn", "Championship Suites", "Ballpark Plaza Hotel",
        "The Diamond Hotel", "Stadium View Inn", "The Pennant Hotel",
        "Victory Suites", "The Champions Lodge", "Clubhouse Hotel",
    ),
    BuildingType.CORPORATE: (
        "Stadium Square Offices", "Diamond Business Center", "Championship Tower",
        "Victory Corporate Park", "Pennant Plaza Offices", "The Press Box Building",
        "Grand Slam Business Center", "Ballpark Professional Center",
    ),
})


# =============================================================================
# Building helpers
# =============================================================================


def generate_building_name(
    building_type: BuildingType, existing_names: list[str], source: RandomSource
) -> str:
    """Pick an unused name, falling back to "Type #n" once the list runs out."""
    available = [n for n in BUILDING_NAMES[building_type] if n not in existing_names]
    if available:
        return choice(source, available)

    label = building_type.value.capitalize()
    count = sum(1 for n in existing_names if n.startswith(label + " #"))
    return f"{label} #{count + 1}"


def select_building_type(
    tier: Tier,
    source: RandomSource,
    config: CityConfig = DEFAULT_CITY_CONFIG,
) -> BuildingType:
    """Weighted pick among the building types the tier has unlocked."""
    weights = {
        building_type: weight
        for building_type, weight in config.building_type_weights.items()
        if tier >= config.building_min_tier[building_type]
    }
    if not weights:
        return BuildingType.RETAIL
    return weighted_choice(source, weights)


# =============================================================================
# Season success and upgrades
# =============================================================================


def calculate_success_score(win_pct: float, attendance_rate: float, made_playoffs: bool) -> float:
    """(win% - .5) x 100 + attendance rate x 30 + 20 for a playoff berth."""
    return (win_pct - 0.5) * 100 + attendance_rate * 30 + (20 if made_playoffs else 0)


@dataclass
class BuildingUpgrade:
    building_id: int
    previous_state: int
    new_state: int
    new_name: Optional[str] = None
    new_type: Optional[BuildingType] = None

    def to_dict(self) -> dict:
        return {
            "building_id": self.building_id,
            "previous_state": self.previous_state,
            "new_state": self.new_state,
            "new_name": self.new_name,
            "new_type": self.new_type.value if self.new_type else None,
        }


def determine_building_upgrades(
    buildings: list[Building],
    upgrade_count: int,
    tier: Tier,
    source: Optional[RandomSource] = None,
    config: CityConfig = DEFAULT_CITY_CONFIG,
) -> list[BuildingUpgrade]:
    """
    Choose which buildings move up a state.

    Vacant lots start renovating first, then renovations open, then open
    buildings expand, then expanded buildings become landmarks. Each
    building moves at most one state per season.
    """
    source = default_source(source)
    upgrades: list[BuildingUpgrade] = []
    remaining = max(0, upgrade_count)
    existing_names = [b.name for b in buildings if b.name]

    for from_state in (VACANT, RENOVATING, OPEN, EXPANDED):
        if remaining <= 0:
            break
        candidates = [b for b in buildings if b.state == from_state][:remaining]
        for building in candidates:
            upgrade = BuildingUpgrade(
                building_id=building.id,
                previous_state=from_state,
                new_state=from_state + 1,
            )
            if from_state == VACANT:
                upgrade.new_type = select_building_type(tier, source, config)
            elif from_state == RENOVATING:
                upgrade.new_name = generate_building_name(building.type, existing_names, source)
                existing_names.append(upgrade.new_name)
            upgrades.append(upgrade)
        remaining -= len(candidates)

    return upgrades


def apply_building_upgrades(
    buildings: list[Building], upgrades: list[BuildingUpgrade], year: int
) -> list[Building]:
    """New building list with upgrades applied; openings record the year."""
    by_id = {u.building_id: u for u in upgrades}
    result = []
    for building in buildings:
        upgrade = by_id.get(building.id)
        if upgrade is None:
            result.append(building)
            continue
        result.append(Building(
            id=building.id,
            type=upgrade.new_type or building.type,
            state=upgrade.new_state,
            name=upgrade.new_name or building.name,
            year_opened=year if upgrade.new_state == OPEN else building.year_opened,
        ))
    return result


# =============================================================================
# Metrics and events
# =============================================================================


@dataclass
class CityMetricsUpdate:
    population: int
    median_income: int
    unemployment_rate: float
    team_pride: int
    national_recognition: int
    occupancy_rate: float


def calculate_city_metrics(
    city_state: CityState,
    new_buildings: list[Building],
    success_score: float,
    buildings_upgraded: int,
    tier: Tier,
    win_pct: float,
    made_playoffs: bool = False,
    won_championship: bool = False,
    won_world_series: bool = False,
    config: CityConfig = DEFAULT_CITY_CONFIG,
) -> CityMetricsUpdate:
    """
    Next season's demographics.

    Income growth is scaled by the commercial district multiplier of the
    upgraded downtown.
    """
    population = config.population_growth[tier]
    income = config.income_growth[tier]

    population_growth = (
        population.base
        + (win_pct - 0.5) * population.per_win_pct * 2
        + (city_state.team_pride / 100) * population.per_pride
    )
    new_population = max(0, round(city_state.population + population_growth))

    occupancy = sum(1 for b in new_buildings if b.is_open) / TOTAL_BUILDINGS
    income_mult = calculate_district_bonuses(new_buildings).income_mult
    income_growth = (income.base + occupancy * income.per_occupancy) * income_mult
    new_income = round(city_state.median_income + income_growth)

    reduction = (
        buildings_upgraded * config.unemployment_per_upgrade
        + max(0.0, success_score) * config.unemployment_per_success_point
    )
    new_unemployment = max(config.unemployment_floor, city_state.unemployment_rate - reduction)

    pride_change = config.winning_season_pride if win_pct >= 0.5 else config.losing_season_pride
    if made_playoffs:
        pride_change += config.playoff_pride
    if won_championship:
        pride_change += config.championship_pride
    if won_world_series:
        pride_change += config.world_series_pride
    pride_change += buildings_upgraded * config.upgrade_pride

    recognition_change = 0
    if made_playoffs:
        recognition_change += config.playoff_recognition
    if won_championship:
        recognition_change += config.championship_recognition
    if won_world_series:
        recognition_change += config.world_series_recognition

    return CityMetricsUpdate(
        population=new_population,
        median_income=new_income,
        unemployment_rate=round(new_unemployment, 2),
        team_pride=max(0, min(100, city_state.team_pride + pride_change)),
        national_recognition=max(0, min(100, city_state.national_recognition + recognition_change)),
        occupancy_rate=occupancy,
    )


@dataclass
class CityEvent:
    year: int
    type: str
    title: str
    description: str
    effects: dict = field(default_factory=dict)
    building_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "effects": dict(self.effects),
            "building_id": self.building_id,
        }


_OCCUPANCY_MILESTONES = (
    (50, "Downtown Revival!",
     "Half of the downtown buildings are now occupied. The city is showing clear signs of recovery.",
     {"pride_change": 5}),
    (75, "Economic Boom",
     "The downtown district is thriving! New businesses are eager to open locations near the stadium.",
     {"pride_change": 8, "recognition_change": 5}),
    (90, "City Transformed",
     "What was once a struggling town is now a vibrant community. Your team has changed everything.",
     {"pride_change": 15, "recognition_change": 10}),
)

_POPULATION_MILESTONES = (
    (50_000, "Population Milestone",
     "The city has grown to 50,000 residents! Regional companies are taking notice.",
     {}),
    (100_000, "Major City Status",
     "With 100,000 residents, the city is now considered a major regional hub.",
     {"recognition_change": 10}),
)


def generate_city_events(
    upgrades: list[BuildingUpgrade],
    new_buildings: list[Building],
    metrics: CityMetricsUpdate,
    city_state: CityState,
    year: int,
    won_championship: bool = False,
    won_world_series: bool = False,
) -> list[CityEvent]:
    events = []
    by_id = {b.id: b for b in new_buildings}

    openings = [u for u in upgrades if u.previous_state == RENOVATING and u.new_state == OPEN]
    for opening in openings[:2]:
        building_type = by_id[opening.building_id].type.value
        events.append(CityEvent(
            year=year,
            type="city_growth",
            title=f"{opening.new_name} Opens!",
            description=(
                f"A new {building_type} has opened near the stadium, "
                "citing gameday foot traffic as a major factor."
            ),
            effects={"pride_change": 1},
            building_id=opening.building_id,
        ))

    for landmark in (u for u in upgrades if u.new_state == LANDMARK):
        events.append(CityEvent(
            year=year,
            type="city_growth",
            title="Historic Landmark Designation",
            description=(
                "A local business has achieved landmark status, "
                "becoming a permanent fixture of the community."
            ),
            effects={"pride_change": 3, "recognition_change": 2},
            building_id=landmark.building_id,
        ))

    old_occupancy = city_state.occupancy_rate * 100
    new_occupancy = metrics.occupancy_rate * 100
    for threshold, title, description, effects in _OCCUPANCY_MILESTONES:
        if old_occupancy < threshold <= new_occupancy:
            events.append(CityEvent(year, "economic_milestone", title, description, dict(effects)))

    for threshold, title, description, effects in _POPULATION_MILESTONES:
        if city_state.population < threshold <= metrics.population:
            events.append(CityEvent(year, "economic_milestone", title, description, dict(effects)))

    if won_world_series:
        events.append(CityEvent(
            year, "stadium_moment", "World Champions!",
            "The city erupts in celebration! Championship parade draws fans from across the region.",
            {"pride_change": 25, "recognition_change": 20},
        ))
    elif won_championship:
        events.append(CityEvent(
            year, "stadium_moment", "League Champions!",
            "Championship celebration rocks the city! Momentum building for the next level.",
            {"pride_change": 15, "recognition_change": 8},
        ))

    return events


# =============================================================================
# Full season
# =============================================================================


@dataclass
class CityGrowthResult:
    success_score: float
    buildings_upgraded: int
    city_state: CityState
    building_changes: list[BuildingUpgrade] = field(default_factory=list)
    events: list[CityEvent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "success_score": self.success_score,
            "buildings_upgraded": self.buildings_upgraded,
            "city_state": self.city_state.to_dict(),
            "building_changes": [u.to_dict() for u in self.building_changes],
            "events": [e.to_dict() for e in self.events],
        }


def simulate_city_growth(
    city_state: CityState,
    tier: Tier,
    year: int,
    win_pct: float,
    attendance_rate: float,
    made_playoffs: bool = False,
    won_championship: bool = False,
    won_world_series: bool = False,
    source: Optional[RandomSource] = None,
    config: CityConfig = DEFAULT_CITY_CONFIG,
) -> CityGrowthResult:
    """
    Grow the city after a season.

    Args:
        city_state: City before the offseason
        tier: Franchise tier, which gates building types and growth rates
        year: Season year, stamped on openings and events
        win_pct: Season winning percentage
        attendance_rate: Average attendance / capacity
        made_playoffs: Playoff berth
        won_championship: League title
        won_world_series: MLB title

    Returns:
        CityGrowthResult holding the new CityState; the input is untouched.
    """
    source = default_source(source)

    score = calculate_success_score(win_pct, attendance_rate, made_playoffs)
    upgrade_count = max(0, math.floor(score / config.success_score_divisor))
    upgrades = determine_building_upgrades(
        city_state.buildings, upgrade_count, tier, source, config
    )
    buildings = apply_building_upgrades(city_state.buildings, upgrades, year)

    metrics = calculate_city_metrics(
        city_state,
        buildings,
        score,
        len(upgrades),
        tier,
        win_pct,
        made_playoffs,
        won_championship,
        won_world_series,
        config,
    )
    events = generate_city_events(
        upgrades, buildings, metrics, city_state, year, won_championship, won_world_series
    )

    new_state = city_state.copy(
        population=metrics.population,
        median_income=metrics.median_income,
        unemployment_rate=metrics.unemployment_rate,
        team_pride=metrics.team_pride,
        national_recognition=metrics.national_recognition,
        buildings=buildings,
    )

    logger.debug(
        "City growth year %d: score %.1f, %d upgrades, %d events",
        year, score, len(upgrades), len(events),
    )
    return CityGrowthResult(
        success_score=score,
        buildings_upgraded=len(upgrades),
        city_state=new_state,
        building_changes=upgrades,
        events=events,
    )


# =============================================================================
# New game
# =============================================================================


def generate_initial_buildings(
    source: Optional[RandomSource] = None, config: CityConfig = DEFAULT_CITY_CONFIG
) -> list[Building]:
    """Fifty lots: roughly 60% vacant, 25% renovating, 10% open, 5% expanded."""
    source = default_source(source)
    buildings = []
    for i in range(TOTAL_BUILDINGS):
        roll = source.next()
        if roll < 0.60:
            state = VACANT
        elif roll < 0.85:
            state = RENOVATING
        elif roll < 0.95:
            state = OPEN
        else:
            state = EXPANDED

        building_type = (
            select_building_type(Tier.LOW_A, source, config) if state > VACANT
            else BuildingType.RETAIL
        )
        buildings.append(Building(id=i, type=building_type, state=state))
    return buildings


def generate_initial_city(
    tier: Tier = Tier.LOW_A,
    source: Optional[RandomSource] = None,
    config: CityConfig = DEFAULT_CITY_CONFIG,
    tier_configs: Optional[Mapping[Tier, TierConfig]] = None,
) -> CityState:
    """Starting city for a new game, demographics taken from the tier."""
    tier_config = get_tier_config(tier, tier_configs)
    return CityState(
        population=tier_config.city_population,
        median_income=tier_config.median_income,
        unemployment_rate=tier_config.unemployment_rate,
        team_pride=STARTING_PRIDE,
        national_recognition=STARTING_RECOGNITION,
        buildings=generate_initial_buildings(source, config),
    )
