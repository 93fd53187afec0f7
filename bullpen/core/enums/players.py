"""Player-level enumerations: traits, training focus, archetypes."""

from enum import Enum

from bullpen.core.enums.positions import PlayerType


class WorkEthic(Enum):
    POOR = "poor"
    AVERAGE = "average"
    EXCELLENT = "excellent"


class Personality(Enum):
    TEAM_PLAYER = "team_player"
    PRIMA_DONNA = "prima_donna"
    LEADER = "leader"


class RosterStatus(Enum):
    ACTIVE = "ACTIVE"
    RESERVE = "RESERVE"


class TrainingFocus(Enum):
    """
    What a player works on between games.

    OVERALL lets the engine pick the tool with the most room to grow.
    """

    OVERALL = "overall"

    # Hitter tools
    HIT = "hit"
    POWER = "power"
    SPEED = "speed"
    ARM = "arm"
    FIELD = "field"

    # Pitcher tools
    STUFF = "stuff"
    CONTROL = "control"
    MOVEMENT = "movement"

    @property
    def tool(self) -> str | None:
        """Attribute name this focus trains, None for OVERALL."""
        return None if self is TrainingFocus.OVERALL else self.value

    def applies_to(self, player_type: PlayerType) -> bool:
        """Whether this focus names a tool the given player type has."""
        if self is TrainingFocus.OVERALL:
            return True
        if player_type == PlayerType.PITCHER:
            return self in (TrainingFocus.STUFF, TrainingFocus.CONTROL, TrainingFocus.MOVEMENT)
        return self in (
            TrainingFocus.HIT,
            TrainingFocus.POWER,
            TrainingFocus.SPEED,
            TrainingFocus.ARM,
            TrainingFocus.FIELD,
        )


class Archetype(Enum):
    """Human-readable label summarizing a tool profile."""

    SLUGGER = "Slugger"
    SPEEDSTER = "Speedster"
    CONTACT_KING = "Contact King"
    GLOVE_WIZARD = "Glove Wizard"
    CANNON_ARM = "Cannon Arm"
    FLAMETHROWER = "Flamethrower"
    COMMAND_ACE = "Command Ace"
    MOVEMENT_MASTER = "Movement Master"
    PLAYMAKER = "Playmaker"  # Balanced profile
    RAW_TALENT = "Raw Talent"  # High upside, unrefined
