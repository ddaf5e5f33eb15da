"""Habit log rows as kept by the storage layer."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.habits import DailyRecord


class HabitLog(SQLModel, table=True):
    """One user's fact for one habit on one calendar day."""

    __tablename__: ClassVar[str] = "habit_log"

    user_id: str = Field(primary_key=True, max_length=64)
    habit_type: str = Field(primary_key=True, max_length=16)
    occurred_on: date = Field(primary_key=True, index=True)
    present: bool = Field(default=True, nullable=False)
    quantity: Optional[int] = Field(default=None, ge=0)

    def to_record(self) -> DailyRecord:
        return DailyRecord(date=self.occurred_on, present=self.present, quantity=self.quantity)
