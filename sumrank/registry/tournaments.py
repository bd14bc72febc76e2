"""
International Tournament Data

Curated classification of international competitions, keyed by the fixtures
provider's league id. Adding a competition is a data change here only.

Tiers:
    1 = Global, 2 = Continental Finals, 3 = Qualifiers, 4 = Nations League,
    5 = Sub-Regional, 6 = Youth, 7 = Friendlies
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Confederation(str, Enum):
    FIFA = "FIFA"
    UEFA = "UEFA"
    CONMEBOL = "CONMEBOL"
    CONCACAF = "CONCACAF"
    CAF = "CAF"
    AFC = "AFC"
    OFC = "OFC"
    ALL = "ALL"  # International / applies to every confederation


class Tier(IntEnum):
    GLOBAL = 1
    CONTINENTAL_FINALS = 2
    QUALIFIERS = 3
    NATIONS_LEAGUE = 4
    SUB_REGIONAL = 5
    YOUTH = 6
    FRIENDLIES = 7


@dataclass(frozen=True)
class TournamentEntry:
    """Static metadata for one competition."""

    league_id: int
    name: str
    confederation: Confederation
    tier: Tier
    base_importance: float
    logo_url: str | None = None


def _entry(league_id, name, confederation, tier, base_importance, logo_url=None):
    return TournamentEntry(
        league_id=league_id,
        name=name,
        confederation=Confederation(confederation),
        tier=Tier(tier),
        base_importance=base_importance,
        logo_url=logo_url,
    )


_WIKI = "https://upload.wikimedia.org/wikipedia/en/thumb"

TOURNAMENTS = (
    # --- FIFA global tournaments ---
    _entry(1, "FIFA World Cup", "FIFA", 1, 50,
           f"{_WIKI}/6/67/2022_FIFA_World_Cup.svg/200px-2022_FIFA_World_Cup.svg.png"),
    _entry(21, "FIFA Confederations Cup", "FIFA", 1, 40),
    _entry(480, "Olympic Football Tournament", "FIFA", 1, 25),
    _entry(20, "FIFA U-20 World Cup", "FIFA", 6, 25),
    _entry(23, "FIFA U-17 World Cup", "FIFA", 6, 25),
    _entry(486, "FIFA Arab Cup", "FIFA", 5, 15),

    # --- World Cup qualifiers ---
    _entry(29, "World Cup Qualification - Africa", "CAF", 3, 25),
    _entry(30, "World Cup Qualification - Asia", "AFC", 3, 25),
    _entry(31, "World Cup Qualification - CONCACAF", "CONCACAF", 3, 25),
    _entry(32, "World Cup Qualification - Europe", "UEFA", 3, 25),
    _entry(33, "World Cup Qualification - Oceania", "OFC", 3, 25),
    _entry(34, "World Cup Qualification - South America", "CONMEBOL", 3, 25),
    _entry(37, "World Cup Intercontinental Play-offs", "FIFA", 3, 25),

    # --- UEFA ---
    _entry(4, "UEFA European Championship", "UEFA", 2, 35,
           f"{_WIKI}/9/96/UEFA_Euro_2020_Logo.svg/200px-UEFA_Euro_2020_Logo.svg.png"),
    _entry(960, "UEFA Euro Qualification", "UEFA", 3, 25),
    _entry(5, "UEFA Nations League", "UEFA", 4, 15),
    _entry(577, "UEFA U-21 Championship", "UEFA", 6, 20),
    _entry(578, "UEFA U-19 Championship", "UEFA", 6, 15),
    _entry(579, "UEFA U-17 Championship", "UEFA", 6, 15),

    # --- CAF ---
    _entry(6, "Africa Cup of Nations", "CAF", 2, 35,
           f"{_WIKI}/0/0e/2023_Africa_Cup_of_Nations_logo.svg/200px-2023_Africa_Cup_of_Nations_logo.svg.png"),
    _entry(36, "Africa Cup of Nations Qualification", "CAF", 3, 25),
    _entry(19, "African Nations Championship", "CAF", 5, 20),
    _entry(1163, "CHAN Qualification", "CAF", 5, 15),
    _entry(39, "Africa U-20 Cup of Nations", "CAF", 6, 20),
    _entry(40, "Africa U-17 Cup of Nations", "CAF", 6, 15),

    # --- AFC ---
    _entry(7, "AFC Asian Cup", "AFC", 2, 35),
    _entry(35, "AFC Asian Cup Qualification", "AFC", 3, 25),
    _entry(803, "Asian Games Football", "AFC", 5, 25),
    _entry(25, "Gulf Cup of Nations", "AFC", 5, 15),
    _entry(28, "SAFF Championship", "AFC", 5, 15),
    _entry(24, "ASEAN Championship", "AFC", 5, 15),
    _entry(1008, "CAFA Nations Cup", "AFC", 5, 15),
    _entry(26, "WAFF Championship", "AFC", 5, 15),
    _entry(27, "EAFF E-1 Championship", "AFC", 5, 15),
    _entry(38, "AFC U-20 Asian Cup", "AFC", 6, 20),

    # --- CONCACAF ---
    _entry(22, "CONCACAF Gold Cup", "CONCACAF", 2, 35),
    _entry(858, "CONCACAF Gold Cup Qualification", "CONCACAF", 3, 25),
    _entry(536, "CONCACAF Nations League", "CONCACAF", 4, 15),
    _entry(808, "CONCACAF Nations League Qualification", "CONCACAF", 4, 15),
    _entry(804, "Caribbean Cup", "CONCACAF", 5, 15),
    _entry(805, "Copa Centroamericana", "CONCACAF", 5, 15),
    _entry(881, "CONCACAF Olympic Qualification", "CONCACAF", 3, 25),

    # --- CONMEBOL ---
    _entry(9, "Copa América", "CONMEBOL", 2, 35,
           f"{_WIKI}/1/1a/Copa_Am%C3%A9rica_logo.svg/200px-Copa_Am%C3%A9rica_logo.svg.png"),
    _entry(11, "CONMEBOL Pre-Olympic Tournament", "CONMEBOL", 3, 25),
    _entry(885, "CONMEBOL Olympic Qualification", "CONMEBOL", 3, 25),

    # --- OFC ---
    _entry(806, "OFC Nations Cup", "OFC", 2, 35),
    _entry(807, "Pacific Games Football", "OFC", 5, 15),
    _entry(884, "OFC Olympic Qualification", "OFC", 3, 25),

    # --- Olympic qualifiers ---
    _entry(882, "CAF Olympic Qualification", "CAF", 3, 25),
    _entry(883, "AFC Olympic Qualification", "AFC", 3, 25),

    # --- Invitational ---
    _entry(669, "Kirin Cup", "ALL", 7, 10),
    _entry(670, "China Cup", "ALL", 7, 10),
    _entry(671, "King's Cup", "ALL", 7, 10),

    # --- Friendlies ---
    _entry(10, "International Friendlies", "ALL", 7, 10),
)

# Returned for any competition not listed above
FALLBACK_TOURNAMENT = TournamentEntry(
    league_id=0,
    name="International Match",
    confederation=Confederation.ALL,
    tier=Tier.FRIENDLIES,
    base_importance=10,
)

TIER_LABELS = {
    Tier.GLOBAL: "Global",
    Tier.CONTINENTAL_FINALS: "Continental Finals",
    Tier.QUALIFIERS: "Qualifiers",
    Tier.NATIONS_LEAGUE: "Nations League",
    Tier.SUB_REGIONAL: "Sub-Regional",
    Tier.YOUTH: "Youth",
    Tier.FRIENDLIES: "Friendlies",
}

# code -> (display name, short name)
CONFEDERATION_NAMES = {
    Confederation.FIFA: ("FIFA Global", "FIFA"),
    Confederation.UEFA: ("UEFA (Europe)", "UEFA"),
    Confederation.CONMEBOL: ("CONMEBOL (South America)", "CONMEBOL"),
    Confederation.CONCACAF: ("CONCACAF (North/Central America)", "CONCACAF"),
    Confederation.CAF: ("CAF (Africa)", "CAF"),
    Confederation.AFC: ("AFC (Asia)", "AFC"),
    Confederation.OFC: ("OFC (Oceania)", "OFC"),
    Confederation.ALL: ("International", "INT"),
}
