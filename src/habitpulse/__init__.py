"""HabitPulse habit consistency and streak engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, TestConfig
from .domain.habits import ContinuityMode, DailyRecord, HabitPolicy, HabitType
from .exceptions import HabitPulseError, InvalidPolicy, InvalidRange, InvalidTarget

__version__ = "0.1.0"

__all__ = [
    "BaseConfig",
    "ContinuityMode",
    "DailyRecord",
    "DevConfig",
    "HabitPolicy",
    "HabitPulseError",
    "HabitType",
    "InvalidPolicy",
    "InvalidRange",
    "InvalidTarget",
    "TestConfig",
]
