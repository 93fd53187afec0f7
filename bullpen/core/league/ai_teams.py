"""The nineteen computer-run organizations sharing the player's league."""

from bullpen.core.enums import DraftPhilosophy, Position
from bullpen.core.models.ai_team import AITeam, TeamNeed

_BA = DraftPhilosophy.BEST_AVAILABLE
_NB = DraftPhilosophy.NEED_BASED
_UP = DraftPhilosophy.UPSIDE_SWING
_SF = DraftPhilosophy.SAFE_FLOOR


def _needs(*pairs: tuple[str, int]) -> tuple[TeamNeed, ...]:
    return tuple(TeamNeed(Position(pos), priority) for pos, priority in pairs)


AI_TEAMS: tuple[AITeam, ...] = (
    # Aggressive competitors
    AITeam("steel-city-hammers", "Hammers", "Steel City", "SCH", _BA, 70, (), 52, 1.0),
    AITeam("river-city-rapids", "Rapids", "River City", "RCR", _UP, 80, (), 48, 1.3),
    AITeam("canyon-town-coyotes", "Coyotes", "Canyon Town", "CTC", _UP, 85, (), 45, 1.4),
    # Conservative builders
    AITeam("port-city-sailors", "Sailors", "Port City", "PCS", _SF, 30, (), 50, 0.8),
    AITeam("forest-city-foresters", "Foresters", "Forest City", "FCF", _SF, 25, (), 51, 0.7),
    AITeam("valley-town-vultures", "Vultures", "Valley Town", "VTV", _SF, 20, (), 49, 0.75),
    # Need-based
    AITeam(
        "coaltown-miners", "Miners", "Coaltown", "CTM", _NB, 50,
        _needs(("SP", 90), ("RP", 70)), 47, 1.0,
    ),
    AITeam(
        "mountain-town-mountaineers", "Mountaineers", "Mountain Town", "MTM", _NB, 50,
        _needs(("C", 85), ("1B", 60)), 48, 1.0,
    ),
    AITeam(
        "desert-springs-scorpions", "Scorpions", "Desert Springs", "DSS", _NB, 55,
        _needs(("CF", 80), ("LF", 65), ("RF", 65)), 46, 1.0,
    ),
    # Wildcards
    AITeam("lakeside-lakers", "Lakers", "Lakeside", "LSL", _UP, 60, (), 50, 1.2),
    AITeam("bay-city-buccaneers", "Buccaneers", "Bay City", "BCB", _BA, 45, (), 53, 0.9),
    AITeam("prairie-plains-pioneers", "Pioneers", "Prairie Plains", "PPP", _BA, 55, (), 49, 1.0),
    AITeam("summit-heights-hawks", "Hawks", "Summit Heights", "SHH", _UP, 65, (), 47, 1.1),
    AITeam("riverside-royals", "Royals", "Riverside", "RSR", _SF, 35, (), 52, 0.85),
    AITeam(
        "crossroads-cardinals", "Cardinals", "Crossroads", "CRC", _NB, 50,
        _needs(("SS", 75), ("2B", 70)), 50, 1.0,
    ),
    AITeam("ironworks-ironmen", "Ironmen", "Ironworks", "IWI", _BA, 60, (), 51, 1.0),
    AITeam("harbor-town-hurricanes", "Hurricanes", "Harbor Town", "HTH", _UP, 75, (), 46, 1.25),
    AITeam("metro-city-meteors", "Meteors", "Metro City", "MCM", _SF, 40, (), 54, 0.8),
    AITeam(
        "central-valley-condors", "Condors", "Central Valley", "CVC", _NB, 45,
        _needs(("3B", 80), ("DH", 50)), 48, 1.0,
    ),
)


def get_ai_team(team_id: str) -> AITeam | None:
    for team in AI_TEAMS:
        if team.id == team_id:
            return team
    return None
