"""City state model."""

from dataclasses import dataclass, field, replace
from typing import Optional

from bullpen.core.enums import BuildingType

TOTAL_BUILDINGS = 50

# Building states
VACANT = 0
RENOVATING = 1
OPEN = 2
EXPANDED = 3
LANDMARK = 4


@dataclass(frozen=True)
class Building:
    """One downtown lot. Named once it opens (state >= 2)."""

    id: int
    type: BuildingType = BuildingType.RETAIL
    state: int = VACANT
    name: Optional[str] = None
    year_opened: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.state >= OPEN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "state": self.state,
            "name": self.name,
            "year_opened": self.year_opened,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Building":
        return cls(
            id=data["id"],
            type=BuildingType(data.get("type", "retail")),
            state=data.get("state", VACANT),
            name=data.get("name"),
            year_opened=data.get("year_opened"),
        )


@dataclass
class CityState:
    """Demographics, fan sentiment and the downtown building grid."""

    population: int = 15_000
    median_income: int = 35_000
    unemployment_rate: float = 12.0  # Percent
    team_pride: int = 30  # 0-100
    national_recognition: int = 5  # 0-100
    buildings: list[Building] = field(default_factory=list)

    @property
    def occupancy_rate(self) -> float:
        """Share of buildings open for business."""
        if not self.buildings:
            return 0.0
        return sum(1 for b in self.buildings if b.is_open) / TOTAL_BUILDINGS

    def copy(self, **changes) -> "CityState":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "population": self.population,
            "median_income": self.median_income,
            "unemployment_rate": self.unemployment_rate,
            "team_pride": self.team_pride,
            "national_recognition": self.national_recognition,
            "occupancy_rate": round(self.occupancy_rate, 3),
            "buildings": [b.to_dict() for b in self.buildings],
        }
