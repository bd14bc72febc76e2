"""
Match Importance (I)

Official FIFA values:
- 0.5: Friendlies outside calendar windows
- 10: Friendlies during calendar windows
- 15: Nations League group phase
- 25: Nations League play-offs/finals, World Cup/confederation qualifiers
- 35: Confederation finals up to QF
- 40: Confederation finals from QF onwards, Confederations Cup
- 50: World Cup finals up to QF
- 60: World Cup finals from QF onwards

The value comes from an ordered rule cascade; the first rule that matches
wins. A rule looks at the competition's registry tier when the competition
is registered and at its name otherwise, because fixture feeds label the
same tournament in several ways ("World Cup", "FIFA World Cup").
"""

import re
from dataclasses import dataclass

from sumrank.config import (
    IMPORTANCE_CONFEDERATIONS_CUP,
    IMPORTANCE_CONTINENTAL,
    IMPORTANCE_CONTINENTAL_LATE,
    IMPORTANCE_DEFAULT,
    IMPORTANCE_FRIENDLY_WINDOW,
    IMPORTANCE_NATIONS_LEAGUE,
    IMPORTANCE_NATIONS_LEAGUE_LATE,
    IMPORTANCE_QUALIFIER,
    IMPORTANCE_WORLD_CUP,
    IMPORTANCE_WORLD_CUP_LATE,
    NON_WINDOW_FRIENDLY_IMPORTANCE,
)
from sumrank.elo.calendar import is_in_match_calendar_window
from sumrank.elo.stages import (
    LATE_STAGES,
    NATIONS_LEAGUE_LATE_STAGES,
    Stage,
    normalize_stage,
)
from sumrank.registry import REGISTRY, Tier

QUALIFIER_KEYWORDS = ("qualification", "qualifier", "qualifying", "pre-olympic")
CONTINENTAL_KEYWORDS = (
    "euro",
    "copa america",
    "copa américa",
    "african cup",
    "africa cup of nations",
    "afcon",
    "asian cup",
    "gold cup",
    "ofc nations cup",
)
FRIENDLY_KEYWORDS = ("friendl", "international")

# U-17, U20, U-23 ...
_YOUTH_RE = re.compile(r"\bu-?\d{2}\b")


@dataclass(frozen=True)
class CompetitionFacts:
    """What the cascade knows about a competition."""

    name: str
    tier: Tier | None  # None when the registry does not know it

    @property
    def is_qualifying(self) -> bool:
        return self.tier == Tier.QUALIFIERS or _contains(self.name, QUALIFIER_KEYWORDS)

    @property
    def is_youth(self) -> bool:
        return self.tier == Tier.YOUTH or bool(_YOUTH_RE.search(self.name))


def _contains(text, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def describe_competition(competition, registry=REGISTRY) -> CompetitionFacts:
    """Resolve an id or name through the registry into cascade inputs."""
    entry = registry.find(competition)
    if entry is not None:
        return CompetitionFacts(name=entry.name.lower(), tier=entry.tier)
    name = competition if isinstance(competition, str) else ""
    return CompetitionFacts(name=name.lower(), tier=None)


def match_importance(
    competition,
    stage=None,
    is_knockout=False,
    match_time=None,
    *,
    in_calendar_window=None,
    non_window_importance=NON_WINDOW_FRIENDLY_IMPORTANCE,
    registry=REGISTRY,
) -> float:
    """
    Importance multiplier for a match.

    Args:
        competition: League id or competition name
        stage: Free-text round label or Stage
        is_knockout: Knockout asserted by the caller; only consulted for
            Nations League matches whose stage label is missing
        match_time: Kick-off timestamp, used for the calendar window check
        in_calendar_window: Explicit window flag; derived from match_time if None
        non_window_importance: Weight of a friendly outside a window
        registry: Tournament registry used to classify the competition

    Returns:
        Positive importance value
    """
    facts = describe_competition(competition, registry)
    name = facts.name
    normalized = normalize_stage(stage)
    late = normalized in LATE_STAGES

    # 1. World Cup final tournament
    if "world cup" in name and not facts.is_qualifying and not facts.is_youth:
        return IMPORTANCE_WORLD_CUP_LATE if late else IMPORTANCE_WORLD_CUP

    # 2. World Cup qualifiers
    if "world cup" in name and facts.is_qualifying:
        return IMPORTANCE_QUALIFIER

    # 3. Confederation final tournaments
    if not facts.is_qualifying and not facts.is_youth and (
        facts.tier == Tier.CONTINENTAL_FINALS or _contains(name, CONTINENTAL_KEYWORDS)
    ):
        return IMPORTANCE_CONTINENTAL_LATE if late else IMPORTANCE_CONTINENTAL

    # 4. Confederations Cup
    if "confederations cup" in name:
        return IMPORTANCE_CONFEDERATIONS_CUP

    # 5. Nations League
    if facts.tier == Tier.NATIONS_LEAGUE or "nations league" in name:
        if normalized in NATIONS_LEAGUE_LATE_STAGES:
            return IMPORTANCE_NATIONS_LEAGUE_LATE
        if normalized is Stage.UNSPECIFIED and is_knockout:
            return IMPORTANCE_NATIONS_LEAGUE_LATE
        return IMPORTANCE_NATIONS_LEAGUE

    # 6. Other qualifiers, including olympic qualification
    if facts.is_qualifying:
        return IMPORTANCE_QUALIFIER

    # 7. Friendlies
    if facts.tier == Tier.FRIENDLIES or _contains(name, FRIENDLY_KEYWORDS):
        if in_calendar_window is None:
            in_calendar_window = is_in_match_calendar_window(match_time)
        return IMPORTANCE_FRIENDLY_WINDOW if in_calendar_window else non_window_importance

    # 8. Anything else counts as a friendly inside a window
    return IMPORTANCE_DEFAULT


def importance_for(context, **kwargs) -> float:
    """match_importance() for a MatchContext."""
    kwargs.setdefault("in_calendar_window", context.in_calendar_window)
    return match_importance(
        context.competition,
        context.stage,
        context.knockout,
        context.match_time,
        **kwargs,
    )
