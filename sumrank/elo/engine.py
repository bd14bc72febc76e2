"""
SUM Elo Rating Engine

Official FIFA "SUM" formula:

    P = Pbefore + I * (W - We)

Where:
- Pbefore = Points before the match
- I = Match importance (see sumrank.elo.importance)
- W = Actual result (1 win, 0.5 draw, 0 loss, 0.75 shootout win, 0.5 shootout loss)
- We = Expected result = 1 / (10^(-dr/600) + 1), dr = Pbefore - opponent Pbefore

Special conditions:
- Knockout protection: in a knockout match a negative I * (W - We) becomes 0.
  Both sides are calculated independently, so a match where protection
  fires for one side only is not zero-sum.
- The delta is rounded to one decimal, half away from zero, after weighting
  and protection.

Everything here is pure: no I/O, no shared state, no domain exceptions.
Call calculate_complete() once per team with the inputs swapped, or use
calculate_match() to get both sides.

Usage:
    from sumrank.elo import calculate_complete, MatchContext
"""

from dataclasses import asdict, dataclass, replace
from typing import NamedTuple

from sumrank.config import (
    RATING_SCALE,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_SHOOTOUT_LOSS,
    RESULT_SHOOTOUT_WIN,
    RESULT_WIN,
    SEEDING_RANK_STEP,
    SEEDING_TOP_POINTS,
)
from sumrank.elo.importance import importance_for
from sumrank.elo.stages import Stage, is_knockout_stage, normalize_stage
from sumrank.utils import round_half_away


@dataclass(frozen=True)
class MatchContext:
    """
    Everything about a fixture except the teams' points and the score.

    Attributes:
        competition: League id or competition name, resolved via the registry
        stage: Free-text round label ("Quarter-finals", "Group B - 3", ...)
        is_knockout: Knockout asserted by the caller; the stage label can
            also make a match knockout (see knockout)
        is_penalty_shootout: Match was level after extra time and decided
            on penalties
        match_time: Kick-off timestamp (datetime, date or ISO string)
        in_calendar_window: Overrides the calendar window derived from
            match_time when not None
    """

    competition: object = None
    stage: str | None = None
    is_knockout: bool = False
    is_penalty_shootout: bool = False
    match_time: object = None
    in_calendar_window: bool | None = None

    @property
    def normalized_stage(self) -> Stage:
        return normalize_stage(self.stage)

    @property
    def knockout(self) -> bool:
        return bool(self.is_knockout) or is_knockout_stage(self.stage)


class PointsChange(NamedTuple):
    delta: float
    protection_applied: bool
    raw: float


@dataclass(frozen=True)
class CalculationRecord:
    """Result of one team's calculation for one match."""

    points_before: float
    points_change: float
    points_after: float
    expected_result: float
    actual_result: float
    importance: float
    raw_change: float
    is_knockout: bool
    applied_knockout_protection: bool

    def to_dict(self) -> dict:
        return asdict(self)


def expected_result(team_points, opponent_points, scale=RATING_SCALE) -> float:
    """
    We = 1 / (10^(-dr/600) + 1)

    Points are unbounded; a gap too large for a float power gives 0.0
    (the other side then gets 1.0).
    """
    dr = team_points - opponent_points
    try:
        return 1 / (10 ** (-dr / scale) + 1)
    except OverflowError:
        return 0.0


def actual_result(team_score, opponent_score, is_penalty_shootout=False) -> float:
    """
    Actual result value (W).

    When the match went to penalties the scores passed in must be the
    shootout tally, since regulation ended level. Building that pair is the
    caller's job (see sumrank.ingestion).
    """
    if team_score > opponent_score:
        return RESULT_SHOOTOUT_WIN if is_penalty_shootout else RESULT_WIN
    if team_score < opponent_score:
        return RESULT_SHOOTOUT_LOSS if is_penalty_shootout else RESULT_LOSS
    return RESULT_DRAW


def points_change(team_points, opponent_points, actual, importance, is_knockout=False) -> PointsChange:
    """
    Rounded points delta for one team.

    Returns:
        PointsChange(delta, protection_applied, raw) where raw is the
        unrounded I * (W - We) before protection
    """
    expected = expected_result(team_points, opponent_points)
    raw = importance * (actual - expected)

    protected = bool(is_knockout) and raw < 0
    delta = 0.0 if protected else raw

    return PointsChange(round_half_away(delta), protected, raw)


def calculate_complete(team_points, opponent_points, team_score, opponent_score, context: MatchContext,
                       **importance_options) -> CalculationRecord:
    """
    Complete calculation for one team with all SUM rules applied.

    Args:
        team_points: Team's points before the match
        opponent_points: Opponent's points before the match
        team_score: Team's goals, or shootout goals if decided on penalties
        opponent_score: Opponent's goals, or shootout goals
        context: Match context
        **importance_options: Passed to match_importance (e.g.
            non_window_importance)

    Returns:
        CalculationRecord for the team
    """
    importance = importance_for(context, **importance_options)
    actual = actual_result(team_score, opponent_score, context.is_penalty_shootout)
    expected = expected_result(team_points, opponent_points)
    knockout = context.knockout

    change = points_change(team_points, opponent_points, actual, importance, knockout)

    return CalculationRecord(
        points_before=team_points,
        points_change=change.delta,
        points_after=team_points + change.delta,
        expected_result=expected,
        actual_result=actual,
        importance=importance,
        raw_change=change.raw,
        is_knockout=knockout,
        applied_knockout_protection=change.protection_applied,
    )


def calculate_match(home_points, away_points, home_score, away_score, context: MatchContext,
                    **importance_options) -> tuple[CalculationRecord, CalculationRecord]:
    """Both sides of one match as (home, away)."""
    home = calculate_complete(home_points, away_points, home_score, away_score, context, **importance_options)
    away = calculate_complete(away_points, home_points, away_score, home_score, context, **importance_options)
    return home, away


def preview_outcomes(team_points, opponent_points, context: MatchContext,
                     **importance_options) -> dict[str, CalculationRecord]:
    """
    What a team stands to gain or lose before a match is played.

    Returns:
        {"win": ..., "draw": ..., "loss": ...} calculation records for the team
    """
    regular = replace(context, is_penalty_shootout=False)
    outcomes = {"win": (1, 0), "draw": (0, 0), "loss": (0, 1)}
    return {
        outcome: calculate_complete(team_points, opponent_points, scores[0], scores[1], regular,
                                    **importance_options)
        for outcome, scores in outcomes.items()
    }


def calculate_seeding_points(initial_rank) -> float:
    """
    Initial seeding points: P = 1600 - (rank - 1) * 4

    Rank 1 -> 1600, rank 100 -> 1204, rank 200 -> 804
    """
    return SEEDING_TOP_POINTS - (initial_rank - 1) * SEEDING_RANK_STEP
