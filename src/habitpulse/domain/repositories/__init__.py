"""Repository protocol definitions for domain layer."""

from .habit_log import HabitLogRepository

__all__ = ["HabitLogRepository"]
