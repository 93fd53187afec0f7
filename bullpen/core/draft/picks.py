"""
Draft slot arithmetic.

Picks are numbered overall from 1. In a snake draft even rounds run in
reverse, so the team choosing last in round 1 chooses first in round 2.
"""

DEFAULT_TEAMS = 20
DEFAULT_ROUNDS = 40


def round_for_pick(pick: int, teams_count: int = DEFAULT_TEAMS) -> int:
    """Round (1-based) containing an overall pick number."""
    return (pick - 1) // teams_count + 1


def pick_position_in_round(
    pick: int, round_number: int, teams_count: int = DEFAULT_TEAMS, snake: bool = True
) -> int:
    """
    Draft-order slot choosing at an overall pick.

    Args:
        pick: Overall pick number (1-based)
        round_number: Round the pick belongs to
        teams_count: Teams in the draft
        snake: Reverse the order in even rounds

    Returns:
        Slot 1..teams_count from the season's draft order
    """
    position = ((pick - 1) % teams_count) + 1
    if snake and round_number % 2 == 0:
        return teams_count + 1 - position
    return position


def overall_pick_for_slot(
    slot: int, round_number: int, teams_count: int = DEFAULT_TEAMS, snake: bool = True
) -> int:
    """Inverse of pick_position_in_round."""
    offset = teams_count + 1 - slot if snake and round_number % 2 == 0 else slot
    return (round_number - 1) * teams_count + offset


def ai_team_index_for_slot(slot: int, player_slot: int) -> int:
    """
    Index into the AI team list for a non-player slot.

    AI teams fill every slot except the player's, in order.
    """
    return slot - 1 if slot < player_slot else slot - 2
