"""Calendar-day helpers shared by the streak, aggregation and scoring services."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Union

from ..exceptions import InvalidRange

Timestamp = Union[datetime, date, int, float]
Offset = Union[timedelta, int]

ONE_DAY = timedelta(days=1)


def _as_offset(timezone_offset: Offset) -> timedelta:
    if isinstance(timezone_offset, timedelta):
        return timezone_offset
    return timedelta(minutes=timezone_offset)


def normalize(timestamp: Timestamp, timezone_offset: Offset = 0) -> date:
    """Return the local calendar day a timestamp falls on.

    ``timezone_offset`` is the caller's UTC offset, as a ``timedelta`` or in
    whole minutes east of UTC. Naive datetimes and POSIX seconds are read as
    UTC. A plain ``date`` is already a calendar day and is returned as-is.
    """

    if isinstance(timestamp, datetime):
        instant = timestamp if timestamp.tzinfo else timestamp.replace(tzinfo=timezone.utc)
    elif isinstance(timestamp, date):
        return timestamp
    else:
        instant = datetime.fromtimestamp(timestamp, tz=timezone.utc)

    local = instant.astimezone(timezone(_as_offset(timezone_offset)))
    return local.date()


def days_between(a: date, b: date) -> int:
    """Signed number of calendar days from ``a`` to ``b``."""

    return (b - a).days


def enumerate_range(start: date, end: date) -> Iterator[date]:
    """Lazily yield every day from ``start`` to ``end`` inclusive.

    Raises InvalidRange immediately (not on first iteration) when start > end.
    """

    if start > end:
        raise InvalidRange(start, end)
    return _walk(start, end)


def _walk(start: date, end: date) -> Iterator[date]:
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += ONE_DAY


def rolling_window(today: date, days: int) -> tuple[date, date]:
    """Return the inclusive (start, end) window of ``days`` days ending today."""

    if days < 1:
        raise ValueError(f"window must cover at least one day, got {days}")
    return today - timedelta(days=days - 1), today


__all__ = ["ONE_DAY", "days_between", "enumerate_range", "normalize", "rolling_window"]
