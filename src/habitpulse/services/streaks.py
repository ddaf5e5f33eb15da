"""Current and longest streak calculation under per-habit continuity rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..domain.habits import ContinuityMode, DailyRecord, HabitPolicy
from .dates import ONE_DAY, days_between

logger = logging.getLogger("habitpulse.streaks")


@dataclass(frozen=True, slots=True)
class StreakResult:
    """Current and best run lengths for one habit."""

    current: int = 0
    longest: int = 0


def _qualifying_days(records: Iterable[DailyRecord], today: date) -> set[date]:
    # Later records for the same day replace earlier ones.
    by_day = {r.date: r for r in records if r.date <= today}
    return {day for day, record in by_day.items() if record.qualifies}


def current_streak(records: Iterable[DailyRecord], policy: HabitPolicy, today: date) -> int:
    """Length of the run that is still alive at ``today``.

    Under ToleranceWindow the scan starts at the most recent qualifying day,
    provided the misses since then have not exhausted the tolerance.
    Absorbed interior misses are part of the run; trailing ones are not.
    """

    if not policy.enabled:
        return 0

    days = _qualifying_days(records, today)
    if not days:
        return 0
    if policy.continuity_mode is ContinuityMode.STRICT and today not in days:
        return 0

    allowed = policy.allowed_misses

    # Walk back over trailing misses to the most recent qualifying day.
    anchor = today
    misses = 0
    while anchor not in days:
        misses += 1
        if misses > allowed:
            return 0
        anchor -= ONE_DAY

    earliest = min(days)
    run_start = anchor
    cursor = anchor - ONE_DAY
    misses = 0
    while cursor >= earliest:
        if cursor in days:
            run_start = cursor
            misses = 0
        else:
            misses += 1
            if misses > allowed:
                break
        cursor -= ONE_DAY

    return days_between(run_start, anchor) + 1


def longest_streak(records: Iterable[DailyRecord], policy: HabitPolicy, today: date) -> int:
    """Best run anywhere in the history up to and including ``today``."""

    if not policy.enabled:
        return 0

    allowed = policy.allowed_misses
    longest = 0
    run = 0
    last_day: date | None = None
    for day in sorted(_qualifying_days(records, today)):
        if last_day is None:
            run = 1
        else:
            gap = days_between(last_day, day)
            if gap - 1 <= allowed:
                run += gap
            else:
                longest = max(longest, run)
                run = 1
        last_day = day
    return max(longest, run)


def compute_streak(records: Iterable[DailyRecord], policy: HabitPolicy, today: date) -> StreakResult:
    """Return current and longest streaks computed over the same full history."""

    if not policy.enabled:
        return StreakResult()

    history = list(records)
    result = StreakResult(
        current=current_streak(history, policy, today),
        longest=longest_streak(history, policy, today),
    )
    logger.debug(
        "Computed %s streak",
        policy.habit_type.value,
        extra={"current": result.current, "longest": result.longest, "today": today.isoformat()},
    )
    return result


__all__ = ["StreakResult", "compute_streak", "current_streak", "longest_streak"]
