"""
Tests for the SUM rating engine.
"""

from datetime import date

import pytest

from sumrank.elo.engine import (
    MatchContext,
    actual_result,
    calculate_complete,
    calculate_match,
    calculate_seeding_points,
    expected_result,
    points_change,
    preview_outcomes,
)


class TestExpectedResult:
    """Tests for expected_result function."""

    def test_equal_points_is_half(self):
        assert expected_result(1600, 1600) == 0.5

    def test_stronger_team_favored(self):
        assert expected_result(2200, 1600) > 0.5

    def test_weaker_team_underdog(self):
        assert expected_result(1600, 2200) < 0.5

    def test_known_value(self):
        # 10^(-100/600) = 0.68129...
        assert expected_result(1800, 1700) == pytest.approx(0.59478, abs=1e-5)

    @pytest.mark.parametrize("a,b", [(1600, 1600), (1800, 1700), (1204, 1600), (2012.4, 888.8), (0, 0)])
    def test_symmetry(self, a, b):
        assert expected_result(a, b) + expected_result(b, a) == pytest.approx(1.0, abs=1e-9)

    def test_monotonic_in_gap(self):
        values = [expected_result(1600 + gap, 1600) for gap in range(0, 1000, 50)]
        for i in range(len(values) - 1):
            assert values[i] < values[i + 1]

    def test_bounds(self):
        for gap in range(-1500, 1501, 100):
            assert 0.0 < expected_result(1600 + gap, 1600) < 1.0

    def test_huge_gap_saturates(self):
        assert expected_result(100, 250000) == 0.0
        assert expected_result(250000, 100) == 1.0

    def test_huge_gap_full_calculation(self):
        record = calculate_complete(100, 250000, 1, 0, MatchContext(competition=1))
        assert record.expected_result == 0.0
        assert record.points_change == 50.0


class TestActualResult:
    """Tests for actual_result function."""

    def test_win(self):
        assert actual_result(3, 1, False) == 1.0

    def test_loss(self):
        assert actual_result(1, 3, False) == 0.0

    def test_draw(self):
        assert actual_result(1, 1, False) == 0.5

    def test_shootout_winner(self):
        # Scores are the shootout tally
        assert actual_result(5, 4, True) == 0.75

    def test_shootout_loser_gets_half(self):
        assert actual_result(4, 5, True) == 0.5

    def test_default_is_no_shootout(self):
        assert actual_result(2, 0) == 1.0


class TestPointsChange:
    """Tests for points_change function."""

    def test_knockout_protection_applied(self):
        # Equal points, loss, I=10 -> raw -5
        change = points_change(1600, 1600, 0.0, 10, is_knockout=True)
        assert change.delta == 0
        assert change.protection_applied is True
        assert change.raw == pytest.approx(-5.0)

    def test_no_protection_outside_knockout(self):
        change = points_change(1600, 1600, 0.0, 10, is_knockout=False)
        assert change.delta == -5.0
        assert change.protection_applied is False

    def test_positive_delta_not_protected(self):
        change = points_change(1600, 1600, 1.0, 10, is_knockout=True)
        assert change.delta == 5.0
        assert change.protection_applied is False

    def test_rounds_half_up(self):
        # I * (1 - 0.5) = 3.47
        change = points_change(1600, 1600, 1.0, 6.94)
        assert change.delta == 3.5

    def test_rounds_negative_toward_zero_below_half(self):
        # I * (0 - 0.5) = -3.44
        change = points_change(1600, 1600, 0.0, 6.88)
        assert change.delta == -3.4

    def test_rounds_negative_half_away_from_zero(self):
        # I * (0 - 0.5) = -0.25
        change = points_change(1600, 1600, 0.0, 0.5)
        assert change.delta == -0.3

    def test_magnitude_bounded_by_importance(self):
        for gap in range(-1000, 1001, 250):
            for actual in (0.0, 0.5, 0.75, 1.0):
                change = points_change(1600 + gap, 1600, actual, 25)
                assert abs(change.delta) <= 25


class TestCalculateComplete:
    """Tests for calculate_complete function."""

    def test_world_cup_group_win(self):
        context = MatchContext(competition=1, stage="Group A - 1")
        record = calculate_complete(1800, 1700, 2, 0, context)

        assert record.importance == 50
        assert record.actual_result == 1.0
        assert record.expected_result == pytest.approx(0.59478, abs=1e-5)
        assert record.raw_change == pytest.approx(20.261, abs=1e-3)
        assert record.points_change == 20.3
        assert record.points_after == pytest.approx(1820.3)
        assert record.is_knockout is False
        assert record.applied_knockout_protection is False

    def test_friendly_outside_window_draw_between_equals(self):
        context = MatchContext(competition=10, match_time=date(2024, 1, 15))
        record = calculate_complete(1600, 1600, 1, 1, context)

        assert record.importance == 0.5
        assert record.points_change == 0
        assert record.points_after == 1600

    def test_stage_makes_match_knockout(self):
        context = MatchContext(competition=4, stage="Quarter-finals")
        record = calculate_complete(1700, 1800, 0, 1, context)

        assert record.is_knockout is True
        assert record.applied_knockout_protection is True
        assert record.points_change == 0
        assert record.points_after == 1700

    def test_explicit_knockout_flag(self):
        context = MatchContext(competition=10, is_knockout=True, in_calendar_window=True)
        record = calculate_complete(1600, 1600, 0, 2, context)

        assert record.applied_knockout_protection is True
        assert record.points_change == 0

    def test_shootout_uses_penalty_tally(self):
        context = MatchContext(competition=9, stage="Final", is_penalty_shootout=True)
        winner = calculate_complete(1600, 1600, 4, 2, context)
        loser = calculate_complete(1600, 1600, 2, 4, context)

        assert winner.actual_result == 0.75
        assert loser.actual_result == 0.5
        # I=40: 40 * (0.75 - 0.5) = 10
        assert winner.points_change == 10.0
        # 40 * (0.5 - 0.5) = 0, nothing to protect
        assert loser.points_change == 0
        assert loser.applied_knockout_protection is False

    def test_importance_option_passed_through(self):
        context = MatchContext(competition="Friendlies", match_time=date(2024, 7, 1))
        record = calculate_complete(1600, 1600, 1, 0, context, non_window_importance=5)
        assert record.importance == 5
        assert record.points_change == 2.5

    def test_record_to_dict(self):
        record = calculate_complete(1600, 1600, 1, 0, MatchContext(competition=1))
        row = record.to_dict()
        assert row["points_change"] == record.points_change
        assert set(row) >= {"points_after", "expected_result", "actual_result", "importance",
                            "applied_knockout_protection"}


class TestSymmetricCalculation:
    """Both sides of a match are calculated independently."""

    def test_regular_match_is_zero_sum(self):
        context = MatchContext(competition=32, stage="Group C - 5")
        home, away = calculate_match(1750, 1650, 2, 1, context)
        assert home.points_change + away.points_change == pytest.approx(0.0, abs=0.1)

    def test_knockout_upset_creates_points(self):
        # Favorite loses a World Cup final: protection zeroes the favorite's
        # loss while the underdog keeps its full gain, so the match is not zero-sum.
        context = MatchContext(competition=1, stage="Final")
        favorite, underdog = calculate_match(1900, 1500, 0, 1, context)

        assert favorite.applied_knockout_protection is True
        assert favorite.points_change == 0
        assert underdog.applied_knockout_protection is False
        assert underdog.points_change == 49.4
        assert favorite.points_change + underdog.points_change > 0

    def test_third_place_protection_depends_on_label(self):
        favorite, _ = calculate_match(1900, 1500, 0, 1, MatchContext(competition=1, stage="3rd Place Final"))
        assert favorite.is_knockout is True
        assert favorite.points_change == 0

        favorite, _ = calculate_match(1900, 1500, 0, 1, MatchContext(competition=1, stage="Third place"))
        assert favorite.is_knockout is False
        assert favorite.points_change == -49.4

    def test_order_insensitive(self):
        context = MatchContext(competition=5, stage="League A - 2")
        first = calculate_complete(1650, 1700, 1, 1, context)
        calculate_complete(1700, 1650, 1, 1, context)
        again = calculate_complete(1650, 1700, 1, 1, context)
        assert first == again


class TestPreviewOutcomes:
    """Tests for preview_outcomes function."""

    def test_win_draw_loss_ordering(self):
        context = MatchContext(competition=4, stage="Group B - 1")
        preview = preview_outcomes(1700, 1650, context)

        assert set(preview) == {"win", "draw", "loss"}
        assert preview["win"].points_change > preview["draw"].points_change > preview["loss"].points_change

    def test_preview_ignores_shootout_flag(self):
        context = MatchContext(competition=4, stage="Final", is_penalty_shootout=True)
        preview = preview_outcomes(1600, 1600, context)
        assert preview["win"].actual_result == 1.0


class TestSeedingPoints:
    """Tests for calculate_seeding_points function."""

    def test_top_rank(self):
        assert calculate_seeding_points(1) == 1600

    def test_rank_100(self):
        assert calculate_seeding_points(100) == 1204

    def test_rank_200(self):
        assert calculate_seeding_points(200) == 804
