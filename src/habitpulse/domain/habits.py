"""Habit records and per-habit continuity policies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ..exceptions import InvalidPolicy


class HabitType(str, Enum):
    """The three tracked habit categories."""

    PRACTICE = "practice"
    GYM = "gym"
    CLASS = "class"


class ContinuityMode(str, Enum):
    """How missed days affect a running streak."""

    STRICT = "strict"
    TOLERANCE_WINDOW = "tolerance_window"


@dataclass(frozen=True, slots=True)
class DailyRecord:
    """One externally produced fact for a habit on a calendar day.

    ``quantity`` is optional; when present it is the qualifying signal
    (problems solved, sets logged) and ``present`` is informational.
    """

    date: date
    present: bool = True
    quantity: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quantity is not None and self.quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {self.quantity}")

    @property
    def qualifies(self) -> bool:
        if self.quantity is not None:
            return self.quantity >= 1
        return self.present

    @property
    def count(self) -> int:
        """Units done on the day; a bare presence flag counts as one."""
        if self.quantity is not None:
            return self.quantity
        return 1 if self.present else 0


@dataclass(frozen=True, slots=True)
class HabitPolicy:
    """Immutable continuity rules for one habit of one user."""

    habit_type: HabitType
    continuity_mode: ContinuityMode = ContinuityMode.STRICT
    miss_tolerance: int = 0
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.continuity_mode is ContinuityMode.TOLERANCE_WINDOW and self.miss_tolerance < 0:
            raise InvalidPolicy(
                f"miss_tolerance must be >= 0 for {self.habit_type.value}, got {self.miss_tolerance}"
            )

    @property
    def allowed_misses(self) -> int:
        """Consecutive missed days a run may absorb; Strict absorbs none."""
        if self.continuity_mode is ContinuityMode.STRICT:
            return 0
        return self.miss_tolerance


__all__ = ["ContinuityMode", "DailyRecord", "HabitPolicy", "HabitType"]
