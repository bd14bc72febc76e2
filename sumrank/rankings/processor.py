"""
Match Processor

Applies completed fixtures to a ratings repository: read both teams' points,
run the engine once per side, write both new totals back. Each fixture also
yields an audit row for the match history table.

Usage:
    python -m sumrank.rankings.processor
    OR
    from sumrank.rankings import MatchProcessor
"""

from dataclasses import dataclass
from datetime import date

import pandas as pd

from sumrank.config import HISTORY_PREFIX, INPUT_FOLDER, OUTPUT_FOLDER
from sumrank.elo.engine import CalculationRecord, calculate_match
from sumrank.ingestion.matches import FixtureFacts, latest_matches_file, load_matches
from sumrank.rankings.repository import InMemoryRatingsRepository
from sumrank.rankings.snapshot import (
    build_ranking_snapshot,
    load_latest_snapshot,
    save_ranking_snapshot,
)
from sumrank.utils import atomic_write_csv, cleanup_old_files, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

HISTORY_COLUMNS = [
    'fixture_id', 'kickoff', 'competition', 'round', 'status',
    'home_team', 'away_team', 'home_score', 'away_score',
    'home_points_before', 'away_points_before', 'home_points_after', 'away_points_after',
    'home_change', 'away_change', 'home_expected', 'away_expected',
    'importance', 'is_knockout', 'went_to_penalty',
    'home_protected', 'away_protected',
]


@dataclass(frozen=True)
class MatchOutcome:
    fixture: FixtureFacts
    home: CalculationRecord
    away: CalculationRecord

    @property
    def net_change(self) -> float:
        """Points created (positive) or removed by the match; non-zero under knockout protection."""
        return self.home.points_change + self.away.points_change

    def to_row(self) -> dict:
        f = self.fixture
        return {
            'fixture_id': f.fixture_id,
            'kickoff': f.kickoff,
            'competition': f.competition,
            'round': f.round_label,
            'status': f.status,
            'home_team': f.home_team,
            'away_team': f.away_team,
            'home_score': f.home_goals,
            'away_score': f.away_goals,
            'home_points_before': self.home.points_before,
            'away_points_before': self.away.points_before,
            'home_points_after': self.home.points_after,
            'away_points_after': self.away.points_after,
            'home_change': self.home.points_change,
            'away_change': self.away.points_change,
            'home_expected': round(self.home.expected_result, 4),
            'away_expected': round(self.away.expected_result, 4),
            'importance': self.home.importance,
            'is_knockout': self.home.is_knockout,
            'went_to_penalty': f.went_to_penalties,
            'home_protected': self.home.applied_knockout_protection,
            'away_protected': self.away.applied_knockout_protection,
        }


class MatchProcessor:
    """Runs fixtures through the engine against a ratings repository."""

    def __init__(self, repository=None, **importance_options):
        self.repository = repository if repository is not None else InMemoryRatingsRepository()
        self.importance_options = importance_options

    def process(self, fixture: FixtureFacts) -> MatchOutcome:
        """Calculate and store the rating changes for one fixture."""
        home_score, away_score = fixture.score_pair()
        context = fixture.context()

        with self.repository.locked(fixture.home_team, fixture.away_team):
            home_points = self.repository.get(fixture.home_team)
            away_points = self.repository.get(fixture.away_team)

            home, away = calculate_match(
                home_points, away_points, home_score, away_score, context, **self.importance_options
            )

            self.repository.put(fixture.home_team, home.points_after)
            self.repository.put(fixture.away_team, away.points_after)

        logger.debug(
            f"{fixture.home_team} {fixture.home_goals}-{fixture.away_goals} {fixture.away_team}: "
            f"{home.points_change:+.1f} / {away.points_change:+.1f} (I={home.importance})"
        )
        return MatchOutcome(fixture, home, away)

    def process_all(self, fixtures) -> pd.DataFrame:
        """
        Process fixtures in order and return the match history table.

        A fixture that fails is logged and skipped; the rest still run.
        """
        rows = []
        failed = 0
        protected = 0

        for fixture in fixtures:
            try:
                outcome = self.process(fixture)
            except Exception:
                failed += 1
                logger.exception(f"Error processing fixture {fixture.fixture_id}")
                continue
            if outcome.home.applied_knockout_protection or outcome.away.applied_knockout_protection:
                protected += 1
            rows.append(outcome.to_row())

        logger.info(f"Processed {len(rows)} fixtures ({failed} failed, {protected} with knockout protection)")
        return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def process_dataset(matches_path, output_folder=OUTPUT_FOLDER, snapshot_date=None):
    """
    Apply a matches file on top of the latest ranking snapshot.

    Returns:
        Tuple of (history_df, snapshot_df)
    """
    snapshot_date = snapshot_date or date.today()
    previous = load_latest_snapshot(output_folder, before=snapshot_date)

    if previous is not None:
        repository = InMemoryRatingsRepository(dict(zip(previous['team'], previous['points'])))
        previous_ranks = dict(zip(previous['team'], previous['rank']))
        logger.info(f"Continuing from snapshot with {len(previous)} teams")
    else:
        repository = InMemoryRatingsRepository()
        previous_ranks = {}
        logger.info("No previous snapshot found, all teams start at the initial rating")

    fixtures = load_matches(matches_path)
    processor = MatchProcessor(repository)
    history = processor.process_all(fixtures)

    snapshot = build_ranking_snapshot(repository.snapshot(), previous_ranks, snapshot_date)

    logger.info("Top 20 teams:")
    logger.info("\n" + snapshot.head(20).to_string(index=False))

    stamp = pd.Timestamp(snapshot_date).strftime('%Y%m%d')
    history_csv = output_folder / f"{HISTORY_PREFIX}_{stamp}.csv"
    atomic_write_csv(history, history_csv, index=False)
    cleanup_old_files(f"{HISTORY_PREFIX}_*.csv", keep_file=history_csv, folder=output_folder)
    snapshot_csv = save_ranking_snapshot(snapshot, output_folder, snapshot_date)

    logger.info("Exported CSV files:")
    logger.info(f"  Match history: {history_csv}")
    logger.info(f"  Ranking snapshot: {snapshot_csv}")

    return history, snapshot


def main():
    matches_path = latest_matches_file(INPUT_FOLDER)
    if matches_path is None:
        return None
    return process_dataset(matches_path)


if __name__ == "__main__":
    results = main()
