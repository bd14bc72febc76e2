"""
Match Fixture Assembly

Turns already-parsed fixture facts (CSV rows or plain dicts) into the inputs
the rating engine expects: a score pair and a MatchContext.

Penalty shootouts: regulation ends level, so the engine is fed the shootout
tally instead of the goals. A shootout also marks the match as knockout.

Expected CSV columns:
    fixture_id, home_team, away_team, home_goals, away_goals, competition, status
Optional:
    round, kickoff, home_penalties, away_penalties, is_knockout

Usage:
    from sumrank.ingestion import load_matches
"""

from dataclasses import dataclass
from numbers import Integral, Real
from pathlib import Path

import pandas as pd

from sumrank.config import (
    COMPLETED_STATUSES,
    INPUT_FOLDER,
    MATCHES_PATTERN,
    PENALTY_STATUS,
    REQUIRED_MATCH_COLUMNS,
)
from sumrank.elo.engine import MatchContext
from sumrank.utils import coerce_datetime, setup_logging, validate_columns

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass(frozen=True)
class FixtureFacts:
    """One completed fixture as reported by the fixtures feed."""

    fixture_id: object
    home_team: str
    away_team: str
    home_goals: int
    away_goals: int
    competition: object
    status: str = "FT"
    round_label: str | None = None
    kickoff: object = None
    home_penalties: int | None = None
    away_penalties: int | None = None
    is_knockout: bool = False

    @property
    def went_to_penalties(self) -> bool:
        return self.status == PENALTY_STATUS

    def score_pair(self) -> tuple[int, int]:
        """(home, away) scores to feed the engine: shootout tally after penalties."""
        if self.went_to_penalties and self.home_penalties is not None and self.away_penalties is not None:
            return self.home_penalties, self.away_penalties
        return self.home_goals, self.away_goals

    def context(self) -> MatchContext:
        return MatchContext(
            competition=self.competition,
            stage=self.round_label,
            is_knockout=self.is_knockout or self.went_to_penalties,
            is_penalty_shootout=self.went_to_penalties,
            match_time=self.kickoff,
        )


def _missing(value) -> bool:
    return value is None or (not isinstance(value, str) and pd.isna(value))


def _as_int(value) -> int | None:
    if _missing(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _as_competition(value):
    """League ids become ints, names stay stripped strings."""
    if _missing(value):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    text = str(value).strip()
    return int(text) if text.isdigit() else text


def _as_flag(value) -> bool:
    if _missing(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "t"}
    return bool(value)


def fixture_from_record(record: dict) -> FixtureFacts | None:
    """
    Build FixtureFacts from one row.

    Returns:
        FixtureFacts, or None when the fixture is not completed or lacks a score
    """
    fixture_id = record.get("fixture_id")
    status = str(record.get("status") or "").strip().upper()

    if status not in COMPLETED_STATUSES:
        logger.warning(f"Skipping fixture {fixture_id}: status '{status}' is not a final result")
        return None

    home_goals = _as_int(record.get("home_goals"))
    away_goals = _as_int(record.get("away_goals"))
    if home_goals is None or away_goals is None:
        logger.warning(f"Skipping fixture {fixture_id}: missing score")
        return None

    home_penalties = _as_int(record.get("home_penalties"))
    away_penalties = _as_int(record.get("away_penalties"))
    if status == PENALTY_STATUS and (home_penalties is None or away_penalties is None):
        logger.warning(f"Fixture {fixture_id} went to penalties but has no shootout tally; scoring as a draw")

    round_label = record.get("round")
    round_label = None if _missing(round_label) else str(round_label).strip() or None

    return FixtureFacts(
        fixture_id=fixture_id,
        home_team=str(record.get("home_team")).strip(),
        away_team=str(record.get("away_team")).strip(),
        home_goals=home_goals,
        away_goals=away_goals,
        competition=_as_competition(record.get("competition")),
        status=status,
        round_label=round_label,
        kickoff=coerce_datetime(record.get("kickoff")),
        home_penalties=home_penalties,
        away_penalties=away_penalties,
        is_knockout=_as_flag(record.get("is_knockout")),
    )


def _kickoff_key(facts: FixtureFacts) -> pd.Timestamp:
    # Compare aware and naive kick-offs on naive UTC
    ts = pd.Timestamp(facts.kickoff)
    return ts.tz_convert(None) if ts.tzinfo is not None else ts


def fixtures_from_frame(df: pd.DataFrame) -> list[FixtureFacts]:
    """Convert a matches DataFrame into completed fixtures, oldest kick-off first."""
    validate_columns(df.columns, REQUIRED_MATCH_COLUMNS)

    fixtures = []
    for record in df.to_dict('records'):
        facts = fixture_from_record(record)
        if facts is not None:
            fixtures.append(facts)

    # Undated fixtures keep file order after the dated ones
    dated = [f for f in fixtures if f.kickoff is not None]
    undated = [f for f in fixtures if f.kickoff is None]
    dated.sort(key=_kickoff_key)

    logger.info(f"Loaded {len(fixtures)} completed fixtures ({len(df) - len(fixtures)} skipped)")
    return dated + undated


def load_matches(path: Path) -> list[FixtureFacts]:
    """Read a matches CSV file."""
    logger.info(f"Loading matches from {path}")
    df = pd.read_csv(path, dtype={"competition": str, "home_team": str, "away_team": str, "round": str})
    return fixtures_from_frame(df)


def latest_matches_file(folder: Path = INPUT_FOLDER, pattern: str = MATCHES_PATTERN) -> Path | None:
    """Newest file matching pattern (by name), or None."""
    files = sorted(folder.glob(pattern))
    if not files:
        logger.error(f"No files matching {pattern} found in {folder}")
        return None
    return files[-1]
