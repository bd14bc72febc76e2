"""
Rankings

Modules:
- repository: Ratings repository seam (get/put with per-team locking)
- processor: Apply fixtures to a repository and build the match history
- snapshot: Ranking snapshots by date
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "InMemoryRatingsRepository":
        from sumrank.rankings.repository import InMemoryRatingsRepository
        return InMemoryRatingsRepository
    if name == "MatchProcessor":
        from sumrank.rankings.processor import MatchProcessor
        return MatchProcessor
    if name == "build_ranking_snapshot":
        from sumrank.rankings.snapshot import build_ranking_snapshot
        return build_ranking_snapshot
    if name == "run_rankings":
        from sumrank.rankings.processor import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
