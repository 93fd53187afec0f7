"""Training facility levels and roster capacities."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from bullpen.core.enums import FacilityLevel

if TYPE_CHECKING:
    from bullpen.core.models.franchise import Franchise

ACTIVE_ROSTER_LIMIT = 25


@dataclass(frozen=True)
class FacilityConfig:
    level: FacilityLevel
    name: str
    description: str
    reserve_slots: int
    upgrade_cost: Optional[int]  # None at max level
    training_multiplier: float


FACILITY_CONFIGS: Mapping[FacilityLevel, FacilityConfig] = MappingProxyType({
    FacilityLevel.BASIC: FacilityConfig(
        level=FacilityLevel.BASIC,
        name="Basic Dugout",
        description="Standard facilities with minimal farm system capacity.",
        reserve_slots=5,
        upgrade_cost=150_000,
        training_multiplier=1.0,
    ),
    FacilityLevel.IMPROVED: FacilityConfig(
        level=FacilityLevel.IMPROVED,
        name="Minor League Complex",
        description="Dedicated training facility with expanded reserve capacity.",
        reserve_slots=20,
        upgrade_cost=500_000,
        training_multiplier=1.15,
    ),
    FacilityLevel.ELITE: FacilityConfig(
        level=FacilityLevel.ELITE,
        name="Player Development Lab",
        description="State-of-the-art development center with maximum farm system support.",
        reserve_slots=40,
        upgrade_cost=None,
        training_multiplier=1.30,
    ),
})


@dataclass(frozen=True)
class RosterCapacity:
    active_max: int
    reserve_max: int

    @property
    def total_max(self) -> int:
        return self.active_max + self.reserve_max


def get_roster_capacity(level: FacilityLevel) -> RosterCapacity:
    """Active roster is fixed; reserve slots scale with facilities."""
    return RosterCapacity(
        active_max=ACTIVE_ROSTER_LIMIT,
        reserve_max=FACILITY_CONFIGS[level].reserve_slots,
    )


def next_facility_level(level: FacilityLevel) -> Optional[FacilityLevel]:
    if level == FacilityLevel.ELITE:
        return None
    return FacilityLevel(level.value + 1)


@dataclass
class FacilityUpgradeResult:
    success: bool
    reason: str = ""
    cost: int = 0
    franchise: Optional["Franchise"] = None


def upgrade_facilities(franchise: "Franchise") -> FacilityUpgradeResult:
    """
    Buy the next facility level out of reserves.

    Returns an updated franchise copy; the input is left untouched.
    """
    config = FACILITY_CONFIGS[franchise.facility_level]
    target = next_facility_level(franchise.facility_level)
    if target is None or config.upgrade_cost is None:
        return FacilityUpgradeResult(success=False, reason="Facilities are already at max level")
    if franchise.reserves < config.upgrade_cost:
        return FacilityUpgradeResult(
            success=False,
            reason=(
                f"Insufficient funds: upgrade costs ${config.upgrade_cost:,}, "
                f"reserves are ${franchise.reserves:,}"
            ),
        )
    return FacilityUpgradeResult(
        success=True,
        reason=f"Upgraded to {FACILITY_CONFIGS[target].name}",
        cost=config.upgrade_cost,
        franchise=franchise.copy(
            facility_level=target,
            reserves=franchise.reserves - config.upgrade_cost,
        ),
    )
