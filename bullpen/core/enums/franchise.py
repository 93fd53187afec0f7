"""Franchise, league and city enumerations."""

from enum import Enum


class Tier(Enum):
    """
    Competitive level, ordered from LOW_A up to MLB.

    Members compare by ladder position, not by name.
    """

    LOW_A = "LOW_A"
    HIGH_A = "HIGH_A"
    DOUBLE_A = "DOUBLE_A"
    TRIPLE_A = "TRIPLE_A"
    MLB = "MLB"

    @property
    def index(self) -> int:
        return _TIER_ORDER.index(self)

    @property
    def next_tier(self) -> "Tier | None":
        """The tier above this one, None at the top."""
        i = self.index
        return _TIER_ORDER[i + 1] if i + 1 < len(_TIER_ORDER) else None

    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.index >= other.index


_TIER_ORDER = list(Tier)


class FacilityLevel(Enum):
    BASIC = 0
    IMPROVED = 1
    ELITE = 2


class ScoutingTier(Enum):
    """Scouting accuracy, trading cost for precision."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DraftPhilosophy(Enum):
    BEST_AVAILABLE = "best_available"
    NEED_BASED = "need_based"
    UPSIDE_SWING = "upside_swing"
    SAFE_FLOOR = "safe_floor"


class BankruptcyRisk(Enum):
    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"
    IMMINENT = "imminent"


class GameStatus(Enum):
    """Franchise state machine. PROMOTED and CHAMPION are transitional."""

    ACTIVE = "active"
    GAME_OVER = "game_over"
    PROMOTED = "promoted"
    CHAMPION = "champion"


class DebtWarningLevel(Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PlayoffResult(Enum):
    MISSED = "missed"
    LOST_SEMIFINALS = "lost_semifinals"
    LOST_FINALS = "lost_finals"
    CHAMPION = "champion"


class BuildingType(Enum):
    RESTAURANT = "restaurant"
    BAR = "bar"
    RETAIL = "retail"
    HOTEL = "hotel"
    CORPORATE = "corporate"


class District(Enum):
    """Building groupings that feed multiplicative bonuses."""

    ENTERTAINMENT = "ENTERTAINMENT"  # Attendance
    COMMERCIAL = "COMMERCIAL"  # Income
    PERFORMANCE = "PERFORMANCE"  # Player development


class PlayoffRound(Enum):
    SEMIFINALS = "semifinals"
    FINALS = "finals"


class NarrativeEventType(Enum):
    """Category of a post-season story event."""

    ECONOMIC = "economic"
    TEAM = "team"
    CITY = "city"
    STORY = "story"
