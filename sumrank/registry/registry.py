"""
Tournament Registry

Read-only lookup over the curated tournament table. Competitions are
identified either by league id (int or numeric string) or by display name
(case-insensitive). Unknown identifiers never fail: lookup() returns the
fallback entry, which classifies the match as an ordinary friendly.
"""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType

from sumrank.registry.tournaments import (
    CONFEDERATION_NAMES,
    FALLBACK_TOURNAMENT,
    TIER_LABELS,
    TOURNAMENTS,
    Confederation,
    TournamentEntry,
)


@dataclass(frozen=True)
class ConfederationInfo:
    code: str
    name: str
    short_name: str


def _league_id(identifier) -> int | None:
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, int):
        return identifier
    if isinstance(identifier, str) and identifier.strip().isdigit():
        return int(identifier.strip())
    return None


class TournamentRegistry:
    """Immutable index over a sequence of tournament entries."""

    def __init__(self, entries=TOURNAMENTS, fallback: TournamentEntry = FALLBACK_TOURNAMENT):
        self._entries = tuple(entries)
        self._fallback = fallback
        self._by_id = MappingProxyType({e.league_id: e for e in self._entries})
        self._by_name = MappingProxyType({e.name.casefold(): e for e in self._entries})

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, identifier):
        return self.find(identifier) is not None

    @property
    def fallback(self) -> TournamentEntry:
        return self._fallback

    def find(self, identifier) -> TournamentEntry | None:
        """Return the entry for a league id or display name, or None."""
        if isinstance(identifier, TournamentEntry):
            return identifier
        league_id = _league_id(identifier)
        if league_id is not None:
            return self._by_id.get(league_id)
        if isinstance(identifier, str):
            return self._by_name.get(identifier.strip().casefold())
        return None

    def lookup(self, identifier) -> TournamentEntry:
        """Return the entry for identifier, or the fallback entry if unknown."""
        entry = self.find(identifier)
        return entry if entry is not None else self._fallback

    def by_confederation(self, code) -> tuple[TournamentEntry, ...]:
        """Entries of one confederation plus the ones open to all confederations."""
        code = str(getattr(code, "value", code)).upper()
        return tuple(
            e for e in self._entries
            if e.confederation.value == code or e.confederation is Confederation.ALL
        )

    def by_tier(self, tier) -> tuple[TournamentEntry, ...]:
        return tuple(e for e in self._entries if e.tier == tier)

    def coverage_stats(self) -> dict:
        """Count entries per confederation and per tier label."""
        confederations = Counter(e.confederation.value for e in self._entries)
        tiers = Counter(e.tier for e in self._entries)
        return {
            "total": len(self._entries),
            "by_confederation": {c.value: confederations.get(c.value, 0) for c in Confederation},
            "by_tier": {label: tiers.get(tier, 0) for tier, label in TIER_LABELS.items()},
        }


def tier_label(tier) -> str:
    """Display label for a tier number; "Other" outside 1-7."""
    try:
        return TIER_LABELS.get(tier, "Other")
    except TypeError:
        return "Other"


def confederation_info(code=None) -> ConfederationInfo:
    """Display names for a confederation code; unknown codes map to International."""
    try:
        confederation = Confederation(str(getattr(code, "value", code)).upper())
    except ValueError:
        confederation = Confederation.ALL
    name, short_name = CONFEDERATION_NAMES[confederation]
    return ConfederationInfo(code=confederation.value, name=name, short_name=short_name)


# --- Process-wide default registry ---
REGISTRY = TournamentRegistry()


def lookup_tournament(identifier) -> TournamentEntry:
    return REGISTRY.lookup(identifier)


def find_tournament(identifier) -> TournamentEntry | None:
    return REGISTRY.find(identifier)


def tournaments_by_confederation(code) -> tuple[TournamentEntry, ...]:
    return REGISTRY.by_confederation(code)


def tournaments_by_tier(tier) -> tuple[TournamentEntry, ...]:
    return REGISTRY.by_tier(tier)


def coverage_stats() -> dict:
    return REGISTRY.coverage_stats()
