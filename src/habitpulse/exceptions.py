"""Errors raised by the streak engine."""

from __future__ import annotations


class HabitPulseError(ValueError):
    """Base class for invalid engine input."""


class InvalidRange(HabitPulseError):
    """A date window whose start falls after its end."""

    def __init__(self, start, end) -> None:
        super().__init__(f"Invalid date range: start {start} is after end {end}")
        self.start = start
        self.end = end


class InvalidPolicy(HabitPulseError):
    """A habit policy that cannot be evaluated."""


class InvalidTarget(HabitPulseError):
    """An attendance target that is out of range or cannot be reached."""


__all__ = ["HabitPulseError", "InvalidPolicy", "InvalidRange", "InvalidTarget"]
