"""Archetype labelling from tool profiles."""

from bullpen.core.enums import Archetype, PlayerType
from bullpen.core.models.player import Tools

# Dominant tool -> label
TOOL_ARCHETYPES = {
    "hit": Archetype.CONTACT_KING,
    "power": Archetype.SLUGGER,
    "speed": Archetype.SPEEDSTER,
    "arm": Archetype.CANNON_ARM,
    "field": Archetype.GLOVE_WIZARD,
    "stuff": Archetype.FLAMETHROWER,
    "control": Archetype.COMMAND_ACE,
    "movement": Archetype.MOVEMENT_MASTER,
}

# Top-to-bottom spread at or under which a profile reads as balanced
BALANCED_SPREAD = {
    PlayerType.HITTER: 12,
    PlayerType.PITCHER: 8,
}

STRONG_TOOL_FLOOR = 55
RAW_TALENT_GAP = 15


def determine_archetype(
    player_type: PlayerType,
    tools: Tools,
    current_rating: int,
    potential: int,
) -> Archetype:
    """
    Label a player by their tool profile.

    Args:
        player_type: Hitter or pitcher, selects the spread threshold
        tools: Tool bundle matching the player type
        current_rating: Present overall rating
        potential: Ceiling rating

    Returns:
        RAW_TALENT when the development gap is wide, otherwise the
        dominant tool's label (or PLAYMAKER for balanced/weak profiles)
    """
    if potential - current_rating >= RAW_TALENT_GAP:
        return Archetype.RAW_TALENT

    profile = tools.to_dict()
    values = list(profile.values())
    if max(values) - min(values) <= BALANCED_SPREAD[player_type]:
        return Archetype.PLAYMAKER

    # First tool in declaration order wins ties
    dominant = max(profile, key=lambda name: profile[name])
    if profile[dominant] >= STRONG_TOOL_FLOOR:
        return TOOL_ARCHETYPES[dominant]
    return Archetype.PLAYMAKER
