"""
SUM Elo Rating Engine

Modules:
- stages: Round label normalization and knockout detection
- calendar: International Match Calendar windows
- importance: Match importance rule cascade
- engine: Expected/actual results, points change and full calculation
"""

from sumrank.elo.calendar import is_in_match_calendar_window
from sumrank.elo.engine import (
    CalculationRecord,
    MatchContext,
    PointsChange,
    actual_result,
    calculate_complete,
    calculate_match,
    calculate_seeding_points,
    expected_result,
    points_change,
    preview_outcomes,
)
from sumrank.elo.importance import match_importance
from sumrank.elo.stages import Stage, is_knockout_stage, normalize_stage

__all__ = [
    "CalculationRecord",
    "MatchContext",
    "PointsChange",
    "Stage",
    "actual_result",
    "calculate_complete",
    "calculate_match",
    "calculate_seeding_points",
    "expected_result",
    "is_in_match_calendar_window",
    "is_knockout_stage",
    "match_importance",
    "normalize_stage",
    "points_change",
    "preview_outcomes",
]
