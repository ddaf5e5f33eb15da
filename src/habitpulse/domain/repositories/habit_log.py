"""Habit log repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..habits import DailyRecord, HabitType


class HabitLogRepository(Protocol):
    """Source of daily records and settings for one user."""

    def get_records(
        self,
        habit_type: HabitType,
        *,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[DailyRecord]:
        """Records for a habit in ascending date order, optionally bounded."""
        ...

    def upsert_record(self, habit_type: HabitType, record: DailyRecord, *, user_id: str) -> DailyRecord:
        """Insert or replace the record for (habit, date)."""
        ...

    def delete_record(self, habit_type: HabitType, occurred_on: date, *, user_id: str) -> None:
        """Remove the record for (habit, date) if present."""
        ...

    def get_settings(self, *, user_id: str) -> dict[str, str]:
        """All settings rows for a user as a plain mapping."""
        ...

    def set_setting(self, key: str, value: str, *, user_id: str) -> None:
        """Insert or update one settings row."""
        ...
