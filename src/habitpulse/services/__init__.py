"""Streak engine services: dates, streaks, aggregation, scoring and goals."""

from .aggregation import DayAggregate, WindowStats, aggregate_window, window_stats
from .contributions import ContributionScore, heatmap_grid, score_day, score_window, yearly_heatmap
from .dates import days_between, enumerate_range, normalize, rolling_window
from .goals import (
    AttendanceSummary,
    GoalStatus,
    attendance_summary,
    goal_status,
    percentage,
    units_can_miss,
    units_to_reach_target,
)
from .policies import default_policies, policies_from_settings
from .streaks import StreakResult, compute_streak, current_streak, longest_streak

__all__ = [
    "AttendanceSummary",
    "ContributionScore",
    "DayAggregate",
    "GoalStatus",
    "StreakResult",
    "WindowStats",
    "aggregate_window",
    "attendance_summary",
    "compute_streak",
    "current_streak",
    "days_between",
    "default_policies",
    "enumerate_range",
    "goal_status",
    "heatmap_grid",
    "longest_streak",
    "normalize",
    "percentage",
    "policies_from_settings",
    "rolling_window",
    "score_day",
    "score_window",
    "units_can_miss",
    "units_to_reach_target",
    "window_stats",
    "yearly_heatmap",
]
