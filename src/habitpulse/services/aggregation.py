"""Merge per-habit records into a dense day-by-day series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Mapping

from ..domain.habits import DailyRecord
from .dates import enumerate_range
from .goals import percentage


@dataclass(frozen=True, slots=True)
class DayAggregate:
    """Combined habit facts for one calendar day."""

    date: date
    practice_count: int = 0
    gym_present: bool = False
    class_present: bool = False


@dataclass(frozen=True, slots=True)
class WindowStats:
    """Attendance totals for one habit over a date window."""

    total_days: int
    attended_days: int
    percentage: float
    this_week: int


def _index(records: Iterable[DailyRecord]) -> Mapping[date, DailyRecord]:
    return {r.date: r for r in records}


def aggregate_window(
    practice: Iterable[DailyRecord],
    gym: Iterable[DailyRecord],
    klass: Iterable[DailyRecord],
    start: date,
    end: date,
) -> list[DayAggregate]:
    """Return one DayAggregate per day in [start, end], ascending.

    Days with no record in a category fall back to zero/False. The input
    lists are read, never modified.
    """

    days = enumerate_range(start, end)
    practice_by_day = _index(practice)
    gym_by_day = _index(gym)
    class_by_day = _index(klass)

    series: list[DayAggregate] = []
    for day in days:
        p = practice_by_day.get(day)
        g = gym_by_day.get(day)
        c = class_by_day.get(day)
        series.append(
            DayAggregate(
                date=day,
                practice_count=p.count if p else 0,
                gym_present=g.qualifies if g else False,
                class_present=c.qualifies if c else False,
            )
        )
    return series


def attendance_counts(records: Iterable[DailyRecord], start: date, end: date) -> tuple[int, int]:
    """Return (attended_days, total_days) for a habit over [start, end]."""

    by_day = _index(records)
    total = 0
    attended = 0
    for day in enumerate_range(start, end):
        total += 1
        record = by_day.get(day)
        if record is not None and record.qualifies:
            attended += 1
    return attended, total


def window_stats(
    records: Iterable[DailyRecord], start: date, end: date, *, today: date
) -> WindowStats:
    """Summarise attendance over a window plus the last seven days up to today."""

    history = list(records)
    attended, total = attendance_counts(history, start, end)
    week_start = today - timedelta(days=6)
    this_week = sum(
        1 for r in _index(history).values() if week_start <= r.date <= today and r.qualifies
    )
    return WindowStats(
        total_days=total,
        attended_days=attended,
        percentage=percentage(attended, total),
        this_week=this_week,
    )


__all__ = ["DayAggregate", "WindowStats", "aggregate_window", "attendance_counts", "window_stats"]
