"""Tests for current and longest streak calculation.

Covers Strict and ToleranceWindow continuity, including:
- Consecutive days and gaps
- Streaks ending today vs in the past
- Absorbed misses and tolerance exhaustion
- Disabled habits and empty histories
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from habitpulse.domain.habits import ContinuityMode, DailyRecord, HabitPolicy, HabitType
from habitpulse.exceptions import InvalidPolicy
from habitpulse.services.streaks import StreakResult, compute_streak, current_streak, longest_streak
from tests.conftest import span

TODAY = date(2024, 3, 15)


class TestCurrentStreak:
    """Backward scan from today."""

    def test_no_entries_returns_zero_streak(self, strict_policy):
        assert current_streak([], strict_policy, TODAY) == 0

    def test_single_entry_today_returns_one(self, strict_policy):
        assert current_streak([DailyRecord(date=TODAY)], strict_policy, TODAY) == 1

    def test_consecutive_days_returns_correct_streak(self, strict_policy):
        records = span(TODAY - timedelta(days=6), TODAY)
        assert current_streak(records, strict_policy, TODAY) == 7

    def test_gap_breaks_streak(self, strict_policy):
        records = span(TODAY - timedelta(days=4), TODAY, skip=[TODAY - timedelta(days=2)])
        assert current_streak(records, strict_policy, TODAY) == 2

    def test_missing_today_returns_zero_for_strict(self, strict_policy):
        yesterday = TODAY - timedelta(days=1)
        records = span(yesterday - timedelta(days=4), yesterday)
        assert current_streak(records, strict_policy, TODAY) == 0

    def test_explicit_absence_breaks_streak(self, strict_policy):
        records = [
            DailyRecord(date=TODAY),
            DailyRecord(date=TODAY - timedelta(days=1), present=False),
            DailyRecord(date=TODAY - timedelta(days=2)),
        ]
        assert current_streak(records, strict_policy, TODAY) == 1

    def test_zero_quantity_does_not_qualify(self, strict_policy):
        records = [
            DailyRecord(date=TODAY, quantity=2),
            DailyRecord(date=TODAY - timedelta(days=1), present=True, quantity=0),
            DailyRecord(date=TODAY - timedelta(days=2), quantity=1),
        ]
        assert current_streak(records, strict_policy, TODAY) == 1

    def test_records_after_today_are_ignored(self, strict_policy):
        records = span(TODAY - timedelta(days=2), TODAY + timedelta(days=3))
        assert current_streak(records, strict_policy, TODAY) == 3

    def test_unsorted_input_is_accepted(self, strict_policy):
        records = list(reversed(span(TODAY - timedelta(days=3), TODAY)))
        assert current_streak(records, strict_policy, TODAY) == 4

    def test_tolerance_starts_from_most_recent_qualifying_day(self, tolerance_policy):
        # Two trailing misses are within a tolerance of 2 and are not counted.
        last = TODAY - timedelta(days=2)
        records = span(last - timedelta(days=4), last)
        assert current_streak(records, tolerance_policy(2), TODAY) == 5

    def test_trailing_misses_beyond_tolerance_end_streak(self, tolerance_policy):
        last = TODAY - timedelta(days=3)
        records = span(last - timedelta(days=4), last)
        assert current_streak(records, tolerance_policy(2), TODAY) == 0

    def test_absent_and_false_records_are_both_misses(self, tolerance_policy):
        absent = TODAY - timedelta(days=5)
        explicit_miss = TODAY - timedelta(days=4)
        records = span(TODAY - timedelta(days=9), TODAY, skip=[absent, explicit_miss])
        records.append(DailyRecord(date=explicit_miss, present=False))
        # One missing row and one present=False row form a run of two misses.
        assert current_streak(records, tolerance_policy(1), TODAY) == 4
        assert current_streak(records, tolerance_policy(2), TODAY) == 10


class TestLongestStreak:
    """Forward pass over the full history."""

    def test_no_entries_returns_zero(self, strict_policy):
        assert longest_streak([], strict_policy, TODAY) == 0

    def test_single_entry_returns_one(self, strict_policy):
        assert longest_streak([DailyRecord(date=TODAY)], strict_policy, TODAY) == 1

    def test_multiple_streaks_returns_longest(self, strict_policy):
        records = (
            span(date(2024, 1, 1), date(2024, 1, 3))
            + span(date(2024, 1, 10), date(2024, 1, 16))
            + span(date(2024, 1, 20), date(2024, 1, 23))
        )
        assert longest_streak(records, strict_policy, TODAY) == 7

    def test_zero_value_entries_ignored(self, strict_policy):
        records = [
            DailyRecord(date=date(2024, 1, 1) + timedelta(days=i), quantity=0 if i == 2 else 1)
            for i in range(5)
        ]
        assert longest_streak(records, strict_policy, TODAY) == 2

    def test_tolerance_absorbs_interior_misses(self, tolerance_policy):
        records = span(date(2024, 1, 1), date(2024, 1, 10), skip=[date(2024, 1, 4), date(2024, 1, 5)])
        assert longest_streak(records, tolerance_policy(2), TODAY) == 10
        assert longest_streak(records, tolerance_policy(1), TODAY) == 5

    def test_tolerance_counter_resets_after_qualifying_day(self, tolerance_policy):
        # Single misses separated by present days never accumulate.
        skip = [date(2024, 1, d) for d in (3, 5, 7, 9)]
        records = span(date(2024, 1, 1), date(2024, 1, 10), skip=skip)
        assert longest_streak(records, tolerance_policy(1), TODAY) == 10

    def test_all_absent_returns_zero(self, tolerance_policy):
        records = [DailyRecord(date=date(2024, 1, d), present=False) for d in range(1, 6)]
        assert longest_streak(records, tolerance_policy(3), TODAY) == 0

    def test_strict_ignores_configured_tolerance(self):
        policy = HabitPolicy(
            habit_type=HabitType.CLASS, continuity_mode=ContinuityMode.STRICT, miss_tolerance=5
        )
        records = span(date(2024, 1, 1), date(2024, 1, 6), skip=[date(2024, 1, 3)])
        assert longest_streak(records, policy, TODAY) == 3


class TestComputeStreak:
    """Combined results and documented scenarios."""

    def test_strict_scenario(self, strict_policy):
        records = span(date(2024, 1, 1), date(2024, 1, 9), skip=[date(2024, 1, 6)])
        result = compute_streak(records, strict_policy, date(2024, 1, 9))
        assert result == StreakResult(current=3, longest=5)

    def test_tolerance_scenario_absorbs_lone_miss(self, tolerance_policy):
        records = span(date(2024, 2, 1), date(2024, 2, 20), skip=[date(2024, 2, 10)])
        result = compute_streak(records, tolerance_policy(1), date(2024, 2, 20))
        assert result.current == 20
        assert result.longest == 20

    def test_tolerance_scenario_second_consecutive_miss_breaks(self, tolerance_policy):
        records = span(
            date(2024, 2, 1), date(2024, 2, 20), skip=[date(2024, 2, 10), date(2024, 2, 11)]
        )
        result = compute_streak(records, tolerance_policy(1), date(2024, 2, 20))
        assert result.current == 9
        assert result.longest == 9

    def test_disabled_policy_returns_zero(self, tolerance_policy):
        records = span(date(2024, 2, 1), date(2024, 2, 20))
        assert compute_streak(records, tolerance_policy(1, enabled=False), date(2024, 2, 20)) == StreakResult(0, 0)

    def test_single_day_today(self, strict_policy):
        assert compute_streak([DailyRecord(date=TODAY)], strict_policy, TODAY) == StreakResult(1, 1)

    def test_all_non_qualifying(self, strict_policy):
        records = [DailyRecord(date=TODAY - timedelta(days=i), present=False) for i in range(4)]
        assert compute_streak(records, strict_policy, TODAY) == StreakResult(0, 0)

    def test_idempotent(self, tolerance_policy):
        records = span(date(2024, 3, 1), TODAY, skip=[date(2024, 3, 5), date(2024, 3, 9)])
        policy = tolerance_policy(1)
        assert compute_streak(records, policy, TODAY) == compute_streak(records, policy, TODAY)

    def test_accepts_generators(self, strict_policy):
        records = (r for r in span(TODAY - timedelta(days=2), TODAY))
        assert compute_streak(records, strict_policy, TODAY) == StreakResult(3, 3)

    @pytest.mark.parametrize("tolerance", [0, 1, 2, 3])
    def test_longest_never_below_current(self, tolerance_policy, tolerance):
        skip = [date(2024, 1, d) for d in (4, 8, 9, 15, 16, 17)] + [date(2024, 3, 10)]
        records = span(date(2024, 1, 1), TODAY, skip=skip)
        result = compute_streak(records, tolerance_policy(tolerance), TODAY)
        assert result.longest >= result.current

    def test_current_streak_can_be_longest(self, strict_policy):
        records = span(date(2024, 1, 1), date(2024, 1, 2)) + span(TODAY - timedelta(days=13), TODAY)
        result = compute_streak(records, strict_policy, TODAY)
        assert result == StreakResult(14, 14)


class TestPolicyValidation:
    def test_negative_tolerance_rejected(self):
        with pytest.raises(InvalidPolicy):
            HabitPolicy(
                habit_type=HabitType.GYM,
                continuity_mode=ContinuityMode.TOLERANCE_WINDOW,
                miss_tolerance=-1,
            )

    def test_negative_tolerance_ignored_under_strict(self):
        policy = HabitPolicy(
            habit_type=HabitType.PRACTICE, continuity_mode=ContinuityMode.STRICT, miss_tolerance=-1
        )
        assert policy.allowed_misses == 0
