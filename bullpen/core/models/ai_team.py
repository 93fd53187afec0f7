"""AI-controlled organization configuration."""

from dataclasses import dataclass, field

from bullpen.core.enums import DraftPhilosophy, Position


@dataclass(frozen=True)
class TeamNeed:
    position: Position
    priority: int  # 0-100, higher = more need


@dataclass(frozen=True)
class AITeam:
    """
    Static configuration for a computer-run rival.

    Read-only input to the draft AI and the draft-order simulation.
    """

    id: str
    name: str
    city: str
    abbreviation: str
    philosophy: DraftPhilosophy = DraftPhilosophy.BEST_AVAILABLE
    risk_tolerance: int = 50  # 0-100
    needs: tuple[TeamNeed, ...] = field(default_factory=tuple)
    base_strength: int = 50  # 40-60
    variance_multiplier: float = 1.0

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}"

    def need_priority(self, position: Position) -> int | None:
        """Priority for a position, None if not a declared need."""
        for need in self.needs:
            if need.position == position:
                return need.priority
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "city": self.city,
            "abbreviation": self.abbreviation,
            "philosophy": self.philosophy.value,
            "risk_tolerance": self.risk_tolerance,
            "needs": [
                {"position": n.position.value, "priority": n.priority} for n in self.needs
            ],
            "base_strength": self.base_strength,
            "variance_multiplier": self.variance_multiplier,
        }
