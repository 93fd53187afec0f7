"""Franchise model."""

from dataclasses import dataclass, replace

from bullpen.core.enums import FacilityLevel, Tier


@dataclass
class Franchise:
    """
    The player's organization at a point in time.

    Reserves are a signed cash balance; a negative value is debt.
    Budget is fixed by tier and only changes on promotion.
    """

    tier: Tier = Tier.LOW_A
    budget: int = 500_000
    reserves: int = 50_000

    # Stadium
    stadium_name: str = "Municipal Field"
    stadium_capacity: int = 2500
    stadium_quality: int = 40  # 0-100
    ticket_price: int = 7

    # Coaching staff (skill on 20-80)
    hitting_coach_skill: int = 40
    hitting_coach_salary: int = 50_000
    pitching_coach_skill: int = 40
    pitching_coach_salary: int = 50_000
    development_coord_skill: int = 40
    development_coord_salary: int = 50_000

    facility_level: FacilityLevel = FacilityLevel.BASIC

    # Promotion tracking
    consecutive_winning_seasons: int = 0
    consecutive_division_titles: int = 0

    @property
    def coaching_salaries(self) -> int:
        return (
            self.hitting_coach_salary
            + self.pitching_coach_salary
            + self.development_coord_salary
        )

    @property
    def debt(self) -> int:
        """Outstanding debt, zero when reserves are non-negative."""
        return max(0, -self.reserves)

    def copy(self, **changes) -> "Franchise":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "budget": self.budget,
            "reserves": self.reserves,
            "stadium_name": self.stadium_name,
            "stadium_capacity": self.stadium_capacity,
            "stadium_quality": self.stadium_quality,
            "ticket_price": self.ticket_price,
            "hitting_coach_skill": self.hitting_coach_skill,
            "hitting_coach_salary": self.hitting_coach_salary,
            "pitching_coach_skill": self.pitching_coach_skill,
            "pitching_coach_salary": self.pitching_coach_salary,
            "development_coord_skill": self.development_coord_skill,
            "development_coord_salary": self.development_coord_salary,
            "facility_level": self.facility_level.value,
            "consecutive_winning_seasons": self.consecutive_winning_seasons,
            "consecutive_division_titles": self.consecutive_division_titles,
        }
