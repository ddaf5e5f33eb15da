"""SQLModel implementation of the habit log repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.habits import DailyRecord, HabitType
from ...models.habit import HabitLog
from ...models.settings import UserSetting


class SQLModelHabitLogRepository:
    """SQLModel-based habit log repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_records(
        self,
        habit_type: HabitType,
        *,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[DailyRecord]:
        """Records for a habit in ascending date order, optionally bounded."""
        with self.session_factory() as session:
            statement = (
                select(HabitLog)
                .where(HabitLog.user_id == user_id)
                .where(HabitLog.habit_type == habit_type.value)
            )
            if start_date is not None:
                statement = statement.where(HabitLog.occurred_on >= start_date)
            if end_date is not None:
                statement = statement.where(HabitLog.occurred_on <= end_date)
            rows = session.exec(statement.order_by(HabitLog.occurred_on)).all()  # type: ignore
            return [row.to_record() for row in rows]

    def upsert_record(self, habit_type: HabitType, record: DailyRecord, *, user_id: str) -> DailyRecord:
        """Insert or replace the record for (habit, date)."""
        with self.session_factory() as session:
            existing = session.exec(
                select(HabitLog)
                .where(HabitLog.user_id == user_id)
                .where(HabitLog.habit_type == habit_type.value)
                .where(HabitLog.occurred_on == record.date)
            ).first()

            if existing:
                existing.present = record.present
                existing.quantity = record.quantity
                row = existing
            else:
                row = HabitLog(
                    user_id=user_id,
                    habit_type=habit_type.value,
                    occurred_on=record.date,
                    present=record.present,
                    quantity=record.quantity,
                )
            session.add(row)
            session.commit()
            session.refresh(row)
            return row.to_record()

    def delete_record(self, habit_type: HabitType, occurred_on: date, *, user_id: str) -> None:
        """Remove the record for (habit, date) if present."""
        with self.session_factory() as session:
            row = session.exec(
                select(HabitLog)
                .where(HabitLog.user_id == user_id)
                .where(HabitLog.habit_type == habit_type.value)
                .where(HabitLog.occurred_on == occurred_on)
            ).first()
            if row:
                session.delete(row)
                session.commit()

    def get_settings(self, *, user_id: str) -> dict[str, str]:
        with self.session_factory() as session:
            rows = session.exec(select(UserSetting).where(UserSetting.user_id == user_id)).all()
            return {row.key: row.value for row in rows}

    def set_setting(self, key: str, value: str, *, user_id: str) -> None:
        with self.session_factory() as session:
            setting = session.exec(
                select(UserSetting)
                .where(UserSetting.user_id == user_id)
                .where(UserSetting.key == key)
            ).first()
            if setting:
                setting.value = value
            else:
                setting = UserSetting(user_id=user_id, key=key, value=value)
            session.add(setting)
            session.commit()


__all__ = ["SQLModelHabitLogRepository"]
