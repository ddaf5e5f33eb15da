"""Concrete repository implementations using SQLModel."""

from .habit_log import SQLModelHabitLogRepository

__all__ = ["SQLModelHabitLogRepository"]
