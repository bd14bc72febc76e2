"""
Tests for fixture assembly.
"""

from datetime import datetime

import pandas as pd
import pytest

from sumrank.elo.stages import Stage
from sumrank.ingestion.matches import (
    FixtureFacts,
    fixture_from_record,
    fixtures_from_frame,
    latest_matches_file,
    load_matches,
)


def _record(**overrides):
    record = {
        "fixture_id": 101,
        "home_team": "Spain",
        "away_team": "England",
        "home_goals": 2,
        "away_goals": 1,
        "competition": "4",
        "status": "FT",
        "round": "Final",
        "kickoff": "2024-07-14T19:00:00+00:00",
    }
    record.update(overrides)
    return record


class TestFixtureFromRecord:
    """Tests for fixture_from_record function."""

    def test_completed_fixture(self):
        facts = fixture_from_record(_record())

        assert facts.home_team == "Spain"
        assert facts.away_team == "England"
        assert facts.competition == 4
        assert facts.kickoff.month == 7
        assert facts.score_pair() == (2, 1)

    def test_context(self):
        context = fixture_from_record(_record()).context()

        assert context.competition == 4
        assert context.normalized_stage is Stage.FINAL
        assert context.knockout is True
        assert context.is_penalty_shootout is False

    def test_competition_name_kept(self):
        facts = fixture_from_record(_record(competition=" Friendlies "))
        assert facts.competition == "Friendlies"

    def test_numeric_competition(self):
        assert fixture_from_record(_record(competition=5.0)).competition == 5

    @pytest.mark.parametrize("status", ["NS", "1H", "PST", "", None])
    def test_unfinished_fixture_skipped(self, status):
        assert fixture_from_record(_record(status=status)) is None

    @pytest.mark.parametrize("goals", [None, float("nan"), ""])
    def test_missing_score_skipped(self, goals):
        assert fixture_from_record(_record(home_goals=goals)) is None

    def test_status_case_insensitive(self):
        assert fixture_from_record(_record(status="aet")).status == "AET"

    def test_missing_round(self):
        facts = fixture_from_record(_record(round=float("nan")))
        assert facts.round_label is None
        assert facts.context().knockout is False

    def test_explicit_knockout_flag(self):
        facts = fixture_from_record(_record(round="", is_knockout="true"))
        assert facts.context().knockout is True


class TestPenaltyShootouts:
    """Shootouts feed the tally to the engine and imply knockout."""

    def test_shootout_tally_used(self):
        facts = fixture_from_record(_record(
            home_goals=1, away_goals=1, status="PEN", round="Round of 16",
            home_penalties=3, away_penalties=5,
        ))

        assert facts.went_to_penalties is True
        assert facts.score_pair() == (3, 5)
        assert facts.context().is_penalty_shootout is True

    def test_shootout_implies_knockout(self):
        facts = fixture_from_record(_record(
            home_goals=0, away_goals=0, status="PEN", round=None,
            home_penalties=4, away_penalties=2,
        ))
        assert facts.context().is_knockout is True

    def test_shootout_without_tally_scores_level(self):
        facts = fixture_from_record(_record(home_goals=1, away_goals=1, status="PEN"))
        assert facts.score_pair() == (1, 1)

    def test_regular_result_ignores_penalty_columns(self):
        facts = fixture_from_record(_record(home_penalties=4, away_penalties=5))
        assert facts.score_pair() == (2, 1)


class TestLoadMatches:
    """Tests for CSV loading."""

    def test_missing_columns_raise(self):
        df = pd.DataFrame({"fixture_id": [1], "home_team": ["Spain"]})
        with pytest.raises(ValueError, match="away_team"):
            fixtures_from_frame(df)

    def test_sorted_by_kickoff_and_skips_unfinished(self, tmp_path):
        path = tmp_path / "matches_20241020.csv"
        pd.DataFrame([
            _record(fixture_id=1, kickoff="2024-10-15T18:00:00Z", competition="10", round=""),
            _record(fixture_id=2, kickoff="2024-10-12T18:00:00Z", competition="32", round="Group C - 5"),
            _record(fixture_id=3, kickoff="2024-10-19T18:00:00Z", status="NS"),
            _record(fixture_id=4, kickoff=None, competition="Friendlies"),
        ]).to_csv(path, index=False)

        fixtures = load_matches(path)

        assert [f.fixture_id for f in fixtures] == [2, 1, 4]
        assert fixtures[0].competition == 32
        assert fixtures[1].round_label is None
        assert fixtures[2].kickoff is None
        assert all(isinstance(f, FixtureFacts) for f in fixtures)

    def test_mixed_timezones_sort(self):
        df = pd.DataFrame([
            _record(fixture_id=1, kickoff="2024-10-15T18:00:00+02:00"),
            _record(fixture_id=2, kickoff="2024-10-15T17:00:00"),
        ])
        fixtures = fixtures_from_frame(df)
        assert [f.fixture_id for f in fixtures] == [1, 2]
        assert isinstance(fixtures[0].kickoff, datetime)

    def test_latest_matches_file(self, tmp_path):
        for name in ("matches_20240101.csv", "matches_20240301.csv", "other.csv"):
            (tmp_path / name).write_text("x\n")
        assert latest_matches_file(tmp_path).name == "matches_20240301.csv"

    def test_latest_matches_file_none(self, tmp_path):
        assert latest_matches_file(tmp_path) is None
