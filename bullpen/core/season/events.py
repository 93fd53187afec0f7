"""
Narrative season events.

After each season the franchise's situation can trigger story events:
factory closures, pennant fever, a crumbling stadium. Each event carries
multipliers (attendance, revenue, merchandise) and additive changes
(pride, population, stadium quality, morale, one-off maintenance).
At most three fire per season, and lower tiers see fewer of them.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional

from bullpen.core.enums import NarrativeEventType, Tier
from bullpen.core.models.city import CityState
from bullpen.core.models.franchise import Franchise
from bullpen.core.rng import RandomSource, chance, default_source

logger = logging.getLogger(__name__)


MAX_EVENTS_PER_SEASON = 3

TIER_EVENT_MULTIPLIERS: Mapping[Tier, float] = {
    Tier.LOW_A: 0.7,
    Tier.HIGH_A: 0.85,
    Tier.DOUBLE_A: 1.0,
    Tier.TRIPLE_A: 1.15,
    Tier.MLB: 1.5,
}


@dataclass(frozen=True)
class EventEffects:
    attendance_modifier: float = 1.0
    revenue_modifier: float = 1.0
    merchandise_modifier: float = 1.0
    pride_change: int = 0
    population_change: int = 0
    stadium_quality_change: int = 0
    morale_change: int = 0
    maintenance_cost: int = 0

    def to_dict(self) -> dict:
        """Only the effects that do something."""
        neutral = EventEffects()
        return {
            name: value
            for name, value in vars(self).items()
            if value != getattr(neutral, name)
        }


@dataclass(frozen=True)
class NarrativeEvent:
    key: str
    type: NarrativeEventType
    title: str
    description: str
    effects: EventEffects
    duration_years: int = 1

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "effects": self.effects.to_dict(),
            "duration_years": self.duration_years,
        }


def _event(key, event_type, title, description, duration_years=1, **effects) -> NarrativeEvent:
    return NarrativeEvent(key, event_type, title, description, EventEffects(**effects), duration_years)


_ECONOMIC = NarrativeEventType.ECONOMIC
_TEAM = NarrativeEventType.TEAM
_CITY = NarrativeEventType.CITY
_STORY = NarrativeEventType.STORY

NARRATIVE_EVENTS: Mapping[str, NarrativeEvent] = {e.key: e for e in (
    _event(
        "factory_closure", _ECONOMIC, "Factory Closure Rocks City",
        "The largest employer in town has announced layoffs. Fans are tightening their belts.",
        2, attendance_modifier=0.85, pride_change=-5, population_change=-500,
    ),
    _event(
        "economic_boom", _ECONOMIC, "New Business Opens Downtown",
        "A major company has chosen the city for its new headquarters. Jobs are flowing in.",
        3, attendance_modifier=1.10, revenue_modifier=1.05, pride_change=5, population_change=1000,
    ),
    _event(
        "recession_warning", _ECONOMIC, "Economic Uncertainty Looms",
        "Local economists warn of a downturn and discretionary spending is already slipping.",
        1, attendance_modifier=0.95, merchandise_modifier=0.90,
    ),
    _event(
        "city_fever", _TEAM, "City Catches Baseball Fever!",
        "The winning run has captured the city's imagination. Merchandise is flying off the shelves.",
        1, attendance_modifier=1.15, merchandise_modifier=1.25, pride_change=10,
    ),
    _event(
        "playoff_push", _TEAM, "Playoff Push Ignites Fanbase",
        "With a playoff berth on the line the city rallied behind the club.",
        1, attendance_modifier=1.20, merchandise_modifier=1.15, pride_change=8,
    ),
    _event(
        "losing_skid", _TEAM, "Fans Growing Restless",
        "A disappointing season has fans questioning the direction of the franchise.",
        1, attendance_modifier=0.90, pride_change=-8, morale_change=-10,
    ),
    _event(
        "star_breakout", _TEAM, "Homegrown Star Emerges",
        "A product of the farm system has broken out, and the whole city is talking about it.",
        1, merchandise_modifier=1.20, pride_change=12, morale_change=15,
    ),
    _event(
        "stadium_decay", _CITY, "Stadium Shows Its Age",
        "Maintenance crews report significant wear. Repairs are needed to keep the park safe.",
        0, attendance_modifier=0.95, stadium_quality_change=-8, maintenance_cost=50_000,
    ),
    _event(
        "stadium_renovation", _CITY, "Stadium Renovation Complete",
        "New amenities and better sightlines have fans buzzing.",
        2, attendance_modifier=1.10, stadium_quality_change=15, pride_change=5,
    ),
    _event(
        "community_day", _CITY, "Community Appreciation Day Success",
        "Outreach work has strengthened ties with local residents.",
        1, attendance_modifier=1.05, pride_change=8,
    ),
    _event(
        "dynasty_building", _STORY, "A Dynasty in the Making",
        "Several winning seasons in a row have put the franchise on the national radar.",
        2, attendance_modifier=1.15, merchandise_modifier=1.30, pride_change=15,
    ),
    _event(
        "dark_days", _STORY, "Dark Days for the Franchise",
        "Years of losing have taken their toll on the few loyal fans left.",
        1, attendance_modifier=0.80, pride_change=-15, morale_change=-15,
    ),
    _event(
        "turnaround_begins", _STORY, "The Turnaround Begins",
        "After years of struggle a winning season has renewed faith in the future.",
        1, attendance_modifier=1.10, pride_change=12, morale_change=20,
    ),
)}


@dataclass
class SeasonContext:
    """Everything event triggers look at once a season is over."""

    year: int
    tier: Tier
    wins: int
    losses: int
    made_playoffs: bool = False
    won_division: bool = False
    population: int = 15_000
    unemployment_rate: float = 12.0
    team_pride: int = 30
    stadium_quality: int = 40
    reserves: int = 0
    consecutive_winning_seasons: int = 0

    @property
    def win_pct(self) -> float:
        games = self.wins + self.losses
        return self.wins / games if games else 0.0

    @classmethod
    def from_state(
        cls,
        franchise: Franchise,
        city: CityState,
        year: int,
        wins: int,
        losses: int,
        made_playoffs: bool = False,
        won_division: bool = False,
    ) -> "SeasonContext":
        return cls(
            year=year,
            tier=franchise.tier,
            wins=wins,
            losses=losses,
            made_playoffs=made_playoffs,
            won_division=won_division,
            population=city.population,
            unemployment_rate=city.unemployment_rate,
            team_pride=city.team_pride,
            stadium_quality=franchise.stadium_quality,
            reserves=franchise.reserves,
            consecutive_winning_seasons=franchise.consecutive_winning_seasons,
        )


# (event key, trigger condition, probability) checked in order; one draw per met condition
_TRIGGERS: tuple[tuple[str, Callable[[SeasonContext], bool], Callable[[SeasonContext], float]], ...] = (
    ("factory_closure", lambda c: c.unemployment_rate > 12, lambda c: 0.40),
    ("economic_boom", lambda c: c.unemployment_rate < 6 and c.team_pride > 60, lambda c: 0.25),
    ("recession_warning", lambda c: 8 < c.unemployment_rate <= 12, lambda c: 0.20),
    ("city_fever", lambda c: c.win_pct > 0.6, lambda c: 0.30 + (c.win_pct - 0.6) * 2),
    ("playoff_push", lambda c: c.made_playoffs and c.win_pct > 0.55, lambda c: 0.50),
    ("losing_skid", lambda c: c.win_pct < 0.4, lambda c: 0.35),
    ("star_breakout", lambda c: c.win_pct > 0.55 and c.team_pride > 50, lambda c: 0.15),
    ("stadium_decay", lambda c: True, lambda c: 0.15 if c.stadium_quality < 40 else 0.05),
    ("stadium_renovation", lambda c: c.reserves > 200_000 and 40 <= c.stadium_quality < 70, lambda c: 0.10),
    ("community_day", lambda c: 45 < c.team_pride < 75, lambda c: 0.20),
    ("dynasty_building", lambda c: c.consecutive_winning_seasons >= 3, lambda c: 0.40),
    ("dark_days", lambda c: c.win_pct < 0.35 and c.team_pride < 30, lambda c: 0.30),
    ("turnaround_begins", lambda c: c.win_pct > 0.5 and c.team_pride < 40, lambda c: 0.35),
)


def check_for_events(
    context: SeasonContext,
    source: Optional[RandomSource] = None,
    apply_tier_filter: bool = True,
) -> list[NarrativeEvent]:
    """
    Roll every trigger whose condition holds and keep the first three hits.

    With the tier filter on, each surviving event is kept with probability
    equal to the tier multiplier, so Low-A loses 30% and Double-A and up
    keep all of them.
    """
    source = default_source(source)

    events = [
        NARRATIVE_EVENTS[key]
        for key, condition, probability in _TRIGGERS
        if condition(context) and chance(source, probability(context))
    ][:MAX_EVENTS_PER_SEASON]

    if apply_tier_filter:
        multiplier = TIER_EVENT_MULTIPLIERS[context.tier]
        events = [e for e in events if chance(source, multiplier)]

    logger.debug("Season %d events: %s", context.year, [e.key for e in events])
    return events


@dataclass
class EventImpact:
    new_pride: int
    new_population: int
    new_stadium_quality: int
    attendance_multiplier: float = 1.0
    revenue_multiplier: float = 1.0
    merchandise_multiplier: float = 1.0
    maintenance_cost: int = 0
    morale_change: int = 0

    def to_dict(self) -> dict:
        return {
            "new_pride": self.new_pride,
            "new_population": self.new_population,
            "new_stadium_quality": self.new_stadium_quality,
            "attendance_multiplier": round(self.attendance_multiplier, 4),
            "revenue_multiplier": round(self.revenue_multiplier, 4),
            "merchandise_multiplier": round(self.merchandise_multiplier, 4),
            "maintenance_cost": self.maintenance_cost,
            "morale_change": self.morale_change,
        }


def combine_modifiers(events: Iterable[NarrativeEvent], name: str) -> float:
    """Product of one multiplier across events."""
    combined = 1.0
    for event in events:
        combined *= getattr(event.effects, name)
    return combined


def sum_changes(events: Iterable[NarrativeEvent], name: str) -> int:
    return sum(getattr(event.effects, name) for event in events)


def apply_event_effects(context: SeasonContext, events: list[NarrativeEvent]) -> EventImpact:
    """
    Fold events into new city and franchise values.

    Pride stays in [0, 100], stadium quality in [10, 100] and population
    never drops below 1,000.
    """
    return EventImpact(
        new_pride=max(0, min(100, context.team_pride + sum_changes(events, "pride_change"))),
        new_population=max(1000, context.population + sum_changes(events, "population_change")),
        new_stadium_quality=max(
            10, min(100, context.stadium_quality + sum_changes(events, "stadium_quality_change"))
        ),
        attendance_multiplier=combine_modifiers(events, "attendance_modifier"),
        revenue_multiplier=combine_modifiers(events, "revenue_modifier"),
        merchandise_multiplier=combine_modifiers(events, "merchandise_modifier"),
        maintenance_cost=sum_changes(events, "maintenance_cost"),
        morale_change=sum_changes(events, "morale_change"),
    )
