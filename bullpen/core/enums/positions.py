"""Position definitions for baseball players."""

from enum import Enum


class PlayerType(Enum):
    """Hitters carry five tools, pitchers three."""

    HITTER = "HITTER"
    PITCHER = "PITCHER"


class Position(Enum):
    """Individual player positions."""

    # Pitching staff
    SP = "SP"  # Starting Pitcher
    RP = "RP"  # Relief Pitcher

    # Battery / infield
    C = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SS = "SS"

    # Outfield
    LF = "LF"
    CF = "CF"
    RF = "RF"

    DH = "DH"  # Never generated in a draft class

    @property
    def is_pitcher(self) -> bool:
        return self in (Position.SP, Position.RP)

    @property
    def player_type(self) -> PlayerType:
        """Get the player type implied by this position."""
        return PlayerType.PITCHER if self.is_pitcher else PlayerType.HITTER
