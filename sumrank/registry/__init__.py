"""
Tournament Registry

Modules:
- tournaments: Curated competition data (confederation, tier, base importance)
- registry: Lookup and filter operations over that data
"""

from sumrank.registry.tournaments import (
    Confederation,
    Tier,
    TournamentEntry,
    FALLBACK_TOURNAMENT,
)
from sumrank.registry.registry import (
    ConfederationInfo,
    TournamentRegistry,
    REGISTRY,
    lookup_tournament,
    find_tournament,
    tournaments_by_confederation,
    tournaments_by_tier,
    coverage_stats,
    tier_label,
    confederation_info,
)

__all__ = [
    "Confederation",
    "Tier",
    "TournamentEntry",
    "FALLBACK_TOURNAMENT",
    "ConfederationInfo",
    "TournamentRegistry",
    "REGISTRY",
    "lookup_tournament",
    "find_tournament",
    "tournaments_by_confederation",
    "tournaments_by_tier",
    "coverage_stats",
    "tier_label",
    "confederation_info",
]
