"""Per-user habit reports and batch streak computation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Sequence

from ..config import BaseConfig
from ..domain.habits import DailyRecord, HabitPolicy, HabitType
from ..domain.repositories import HabitLogRepository
from ..logging_config import get_logger
from .aggregation import WindowStats, window_stats
from .contributions import ContributionScore, yearly_heatmap
from .dates import rolling_window
from .goals import GoalStatus, goal_status
from .policies import policies_from_settings
from .streaks import StreakResult, compute_streak

logger = get_logger("reports")


@dataclass(frozen=True)
class HabitReport:
    """Everything the dashboard needs about one user's consistency."""

    user_id: str
    today: date
    streaks: dict[HabitType, StreakResult]
    heatmap: list[ContributionScore]
    window_stats: dict[HabitType, WindowStats]
    class_goal: GoalStatus


@dataclass(frozen=True)
class StreakJob:
    """One independent unit of batch work: a single habit of a single user."""

    user_id: str
    policy: HabitPolicy
    today: date
    records: Sequence[DailyRecord] = field(default_factory=tuple)


def _class_counts(records: Iterable[DailyRecord], today: date) -> tuple[int, int]:
    # Only days with a class record were days a class was held.
    by_day = {r.date: r for r in records if r.date <= today}
    attended = sum(1 for r in by_day.values() if r.qualifies)
    return attended, len(by_day)


def build_report(
    records_by_habit: Mapping[HabitType, Iterable[DailyRecord]],
    policies: Mapping[HabitType, HabitPolicy],
    *,
    today: date,
    user_id: str = "",
    config: BaseConfig | None = None,
) -> HabitReport:
    """Compute streaks, the yearly heatmap, window stats and the class goal."""

    cfg = config or BaseConfig()
    history = {habit: list(records_by_habit.get(habit, ())) for habit in HabitType}

    streaks = {habit: compute_streak(history[habit], policies[habit], today) for habit in HabitType}
    heatmap = yearly_heatmap(
        history[HabitType.PRACTICE],
        history[HabitType.GYM],
        history[HabitType.CLASS],
        today=today,
        days=cfg.HEATMAP_DAYS,
    )
    start, end = rolling_window(today, cfg.STATS_DAYS)
    stats = {habit: window_stats(history[habit], start, end, today=today) for habit in HabitType}
    attended, total = _class_counts(history[HabitType.CLASS], today)

    report = HabitReport(
        user_id=user_id,
        today=today,
        streaks=streaks,
        heatmap=heatmap,
        window_stats=stats,
        class_goal=goal_status(attended, total, cfg.ATTENDANCE_TARGET),
    )
    logger.info(
        "Built habit report",
        extra={
            "user_id": user_id,
            "today": today.isoformat(),
            "streaks": {habit.value: result.current for habit, result in streaks.items()},
        },
    )
    return report


def load_report(
    repository: HabitLogRepository,
    user_id: str,
    *,
    today: date,
    config: BaseConfig | None = None,
) -> HabitReport:
    """Fetch a user's records and settings through the repository and report on them."""

    cfg = config or BaseConfig()
    policies = policies_from_settings(repository.get_settings(user_id=user_id), cfg)
    records = {
        habit: repository.get_records(habit, user_id=user_id, end_date=today) for habit in HabitType
    }
    return build_report(records, policies, today=today, user_id=user_id, config=cfg)


def _run(job: StreakJob) -> StreakResult:
    return compute_streak(job.records, job.policy, job.today)


def compute_batch(jobs: Iterable[StreakJob], *, max_workers: int | None = None) -> list[StreakResult]:
    """Compute streaks for many (user, habit) pairs on a thread pool.

    Results come back in job order. The first failing job cancels the jobs
    that have not started yet and its error is re-raised.
    """

    pending = list(jobs)
    if not pending:
        return []

    workers = max_workers or BaseConfig().MAX_WORKERS
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="habitpulse") as pool:
        futures = [pool.submit(_run, job) for job in pending]
        try:
            results = [future.result() for future in futures]
        except Exception:
            for future in futures:
                future.cancel()
            logger.exception("Batch streak computation failed", extra={"jobs": len(pending)})
            raise

    logger.info("Computed batch streaks", extra={"jobs": len(pending), "workers": workers})
    return results


__all__ = ["HabitReport", "StreakJob", "build_report", "compute_batch", "load_report"]
