"""Turn per-user settings rows into immutable habit policies."""

from __future__ import annotations

from typing import Mapping

from ..config import BaseConfig
from ..domain.habits import ContinuityMode, HabitPolicy, HabitType
from ..exceptions import InvalidPolicy

PRACTICE_ENABLED_KEY = "dsa_streak_enabled"
GYM_ENABLED_KEY = "gym_streak_enabled"
GYM_THRESHOLD_KEY = "gym_miss_threshold"
CLASS_ENABLED_KEY = "college_streak_enabled"

_TRUE = {"1", "true", "yes", "on"}


def _flag(settings: Mapping[str, str], key: str, default: bool) -> bool:
    value = settings.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE


def _tolerance(settings: Mapping[str, str], default: int) -> int:
    raw = settings.get(GYM_THRESHOLD_KEY)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidPolicy(f"{GYM_THRESHOLD_KEY} must be a whole number, got {raw!r}") from exc


def default_policies(config: BaseConfig | None = None) -> dict[HabitType, HabitPolicy]:
    """Policies for a user who has never touched their settings."""

    return policies_from_settings({}, config)


def policies_from_settings(
    settings: Mapping[str, str], config: BaseConfig | None = None
) -> dict[HabitType, HabitPolicy]:
    """Build one policy per habit from key/value settings.

    Practice and class streaks are Strict, gym uses a tolerance window whose
    size comes from ``gym_miss_threshold`` (falling back to the configured
    default). Practice and class tracking are opt-in; gym tracking is on
    unless switched off. Unknown keys are ignored.
    """

    cfg = config or BaseConfig()
    return {
        HabitType.PRACTICE: HabitPolicy(
            habit_type=HabitType.PRACTICE,
            continuity_mode=ContinuityMode.STRICT,
            enabled=_flag(settings, PRACTICE_ENABLED_KEY, False),
        ),
        HabitType.GYM: HabitPolicy(
            habit_type=HabitType.GYM,
            continuity_mode=ContinuityMode.TOLERANCE_WINDOW,
            miss_tolerance=_tolerance(settings, cfg.GYM_MISS_THRESHOLD),
            enabled=_flag(settings, GYM_ENABLED_KEY, True),
        ),
        HabitType.CLASS: HabitPolicy(
            habit_type=HabitType.CLASS,
            continuity_mode=ContinuityMode.STRICT,
            enabled=_flag(settings, CLASS_ENABLED_KEY, False),
        ),
    }


__all__ = [
    "CLASS_ENABLED_KEY",
    "GYM_ENABLED_KEY",
    "GYM_THRESHOLD_KEY",
    "PRACTICE_ENABLED_KEY",
    "default_policies",
    "policies_from_settings",
]
