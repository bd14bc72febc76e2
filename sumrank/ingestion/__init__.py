"""
Data Ingestion

Modules:
- matches: Assemble engine inputs from parsed fixture facts
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "FixtureFacts":
        from sumrank.ingestion.matches import FixtureFacts
        return FixtureFacts
    if name == "fixture_from_record":
        from sumrank.ingestion.matches import fixture_from_record
        return fixture_from_record
    if name == "load_matches":
        from sumrank.ingestion.matches import load_matches
        return load_matches
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
