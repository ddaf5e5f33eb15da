"""Daily contribution scores and the yearly heatmap layout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..domain.habits import DailyRecord
from .aggregation import DayAggregate, aggregate_window
from .dates import rolling_window

MAX_SCORE = 3
HEATMAP_DAYS = 365


@dataclass(frozen=True, slots=True)
class ContributionScore:
    """Heat level for a single day."""

    date: date
    score: int


def score_day(agg: DayAggregate) -> int:
    """Map a day's combined activity onto the 0-3 heat scale.

    Doing some practice and doing a lot are rewarded separately; gym and
    class add one each. The sum is clamped so the top bucket means a full day.
    """

    total = 0
    if agg.practice_count >= 1:
        total += 1
    if agg.practice_count > 1:
        total += 1
    if agg.gym_present:
        total += 1
    if agg.class_present:
        total += 1
    return min(total, MAX_SCORE)


def score_window(aggregates: Iterable[DayAggregate]) -> list[ContributionScore]:
    """Score each day independently, preserving order and length."""

    return [ContributionScore(date=agg.date, score=score_day(agg)) for agg in aggregates]


def yearly_heatmap(
    practice: Iterable[DailyRecord],
    gym: Iterable[DailyRecord],
    klass: Iterable[DailyRecord],
    *,
    today: date,
    days: int = HEATMAP_DAYS,
) -> list[ContributionScore]:
    """Score the rolling window of ``days`` days ending at ``today``."""

    start, end = rolling_window(today, days)
    return score_window(aggregate_window(practice, gym, klass, start, end))


def heatmap_grid(scores: list[ContributionScore]) -> list[list[Optional[ContributionScore]]]:
    """Lay scores out as Sunday-first week columns.

    Cells before the first day and after the last day are ``None`` so every
    column holds exactly seven entries.
    """

    if not scores:
        return []

    # date.weekday(): Monday == 0; shift so Sunday is row 0.
    lead = (scores[0].date.weekday() + 1) % 7
    cells: list[Optional[ContributionScore]] = [None] * lead + list(scores)
    trail = (-len(cells)) % 7
    cells.extend([None] * trail)
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


__all__ = [
    "ContributionScore",
    "HEATMAP_DAYS",
    "MAX_SCORE",
    "heatmap_grid",
    "score_day",
    "score_window",
    "yearly_heatmap",
]
