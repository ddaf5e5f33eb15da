"""Attendance percentages and target arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Iterable

from ..exceptions import InvalidTarget

DEFAULT_TARGET_PERCENT = 75.0


@dataclass(frozen=True, slots=True)
class GoalStatus:
    """Where a counter stands against its attendance target."""

    percentage: float
    units_needed_for_target: int | None
    units_can_miss: int


@dataclass(frozen=True, slots=True)
class AttendanceSummary:
    """Roll-up of several subject counters against one target."""

    lowest_percentage: float
    subjects_at_risk: int


def _check_counts(attended: int, total: int) -> None:
    if attended < 0 or total < 0:
        raise ValueError(f"counts must be >= 0, got attended={attended} total={total}")


def _fraction(target_percent: float) -> Decimal:
    if not 0 <= target_percent <= 100:
        raise InvalidTarget(f"target must be within [0, 100], got {target_percent}")
    # Exact decimal so ceil/floor see 10, not 10.000000000000002.
    return Decimal(str(target_percent)) / Decimal(100)


def percentage(attended: int, total: int) -> float:
    """Return attended/total as a percentage; 0 when nothing was held."""

    _check_counts(attended, total)
    if total == 0:
        return 0.0
    return attended / total * 100


def units_to_reach_target(attended: int, total: int, target_percent: float) -> int:
    """Consecutive present units needed before attended/total meets the target.

    Solves (attended + n) / (total + n) >= t for the smallest whole n, rounding
    up. Already meeting the target yields 0.
    """

    _check_counts(attended, total)
    t = _fraction(target_percent)
    shortfall = t * total - attended
    if shortfall <= 0:
        return 0
    if t == 1:
        raise InvalidTarget("a 100% target cannot be reached once a unit has been missed")
    needed = (shortfall / (1 - t)).to_integral_value(rounding=ROUND_CEILING)
    return max(int(needed), 0)


def units_can_miss(attended: int, total: int, target_percent: float) -> int:
    """Largest number of further absences that keeps attended/total at the target."""

    _check_counts(attended, total)
    t = _fraction(target_percent)
    if t == 0:
        raise InvalidTarget("every absence satisfies a 0% target")
    spare = (Decimal(attended) / t - total).to_integral_value(rounding=ROUND_FLOOR)
    return max(int(spare), 0)


def goal_status(attended: int, total: int, target_percent: float = DEFAULT_TARGET_PERCENT) -> GoalStatus:
    """Bundle the percentage with both directions of the target math.

    ``units_needed_for_target`` is ``None`` when no run of attendance can reach
    the target, which happens for a 100% target after a miss. ``units_can_miss``
    is 0 for a 0% target.
    """

    can_miss = units_can_miss(attended, total, target_percent) if target_percent > 0 else 0
    needed: int | None
    if target_percent == 100 and attended < total:
        needed = None
    else:
        needed = units_to_reach_target(attended, total, target_percent)
    return GoalStatus(
        percentage=percentage(attended, total),
        units_needed_for_target=needed,
        units_can_miss=can_miss,
    )


def attendance_summary(
    subjects: Iterable[tuple[int, int]], target_percent: float = DEFAULT_TARGET_PERCENT
) -> AttendanceSummary:
    """Lowest percentage and count of subjects below target.

    Subjects with no classes held yet count as 100% and are never at risk.
    """

    _fraction(target_percent)
    lowest = 100.0
    at_risk = 0
    for attended, total in subjects:
        if total == 0:
            continue
        value = percentage(attended, total)
        lowest = min(lowest, value)
        if value < target_percent:
            at_risk += 1
    return AttendanceSummary(lowest_percentage=lowest, subjects_at_risk=at_risk)


__all__ = [
    "AttendanceSummary",
    "DEFAULT_TARGET_PERCENT",
    "GoalStatus",
    "attendance_summary",
    "goal_status",
    "percentage",
    "units_can_miss",
    "units_to_reach_target",
]
