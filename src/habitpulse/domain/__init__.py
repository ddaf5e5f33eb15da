"""Domain value types and repository protocols."""

from .habits import ContinuityMode, DailyRecord, HabitPolicy, HabitType

__all__ = ["ContinuityMode", "DailyRecord", "HabitPolicy", "HabitType"]
