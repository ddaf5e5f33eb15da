"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: float, *, minimum: float = 0, cast=int) -> Any:
    """Read a numeric environment variable, rejecting junk and values below ``minimum``."""

    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return cast(default)
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_level(name: str, default: str) -> int:
    """Read a logging level name such as ``DEBUG`` or ``warning``."""

    raw = (os.getenv(name) or default).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


def _env_levels(name: str) -> dict[str, int]:
    """Parse per-logger overrides written as ``streaks=DEBUG,reports=WARNING``."""

    levels: dict[str, int] = {}
    raw = os.getenv(name, "")
    for item in raw.split(","):
        if not item.strip():
            continue
        logger_name, sep, level_name = item.partition("=")
        level = logging.getLevelName(level_name.strip().upper())
        if not sep or not logger_name.strip() or not isinstance(level, int):
            raise ValueError(f"{name} entries must look like 'streaks=DEBUG', got {item.strip()!r}")
        levels[logger_name.strip()] = level
    return levels


class BaseConfig:
    """Base configuration shared across environments.

    Building a config only reads the environment. Directories are created by
    :meth:`ensure_data_dir`, which the logging and database setup call.
    """

    APP_NAME = "HabitPulse"
    DB_FILENAME = "habitpulse.db"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITPULSE_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("HABITPULSE_DATABASE_URL", self._build_sqlite_url())
        self.LOG_LEVEL = _env_level("HABITPULSE_LOG_LEVEL", "INFO")
        self.LOG_LEVELS = _env_levels("HABITPULSE_LOG_LEVELS")
        self.GYM_MISS_THRESHOLD = _env_number("HABITPULSE_GYM_MISS_THRESHOLD", 3)
        self.ATTENDANCE_TARGET = _env_number(
            "HABITPULSE_ATTENDANCE_TARGET", 75.0, cast=float
        )
        if self.ATTENDANCE_TARGET > 100:
            raise ValueError("HABITPULSE_ATTENDANCE_TARGET must be <= 100.")
        self.HEATMAP_DAYS = _env_number("HABITPULSE_HEATMAP_DAYS", 365, minimum=1)
        self.STATS_DAYS = _env_number("HABITPULSE_STATS_DAYS", 30, minimum=1)
        self.MAX_WORKERS = _env_number("HABITPULSE_MAX_WORKERS", 4, minimum=1)

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and the SQLite file live."""

        data_root = os.getenv("HABITPULSE_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        """Create the data directory, falling back to ``~/.habitpulse``.

        When the fallback is taken, a default SQLite URL follows the data
        directory; an explicit ``HABITPULSE_DATABASE_URL`` is left alone.
        """

        path = Path(self.DATA_DIR)
        try:
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            default_url = self._build_sqlite_url()
            fallback = Path.home() / ".habitpulse"
            fallback.mkdir(parents=True, exist_ok=True)
            self.DATA_DIR = fallback
            if self.DATABASE_URL == default_url:
                self.DATABASE_URL = self._build_sqlite_url()
            return fallback

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{Path(self.DATA_DIR) / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        return {"connect_args": {"check_same_thread": False}}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration for the test-suite: in-memory database, quiet console."""

    __test__ = False

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = "sqlite://"
        self.DEV_MODE = False

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        from sqlalchemy.pool import StaticPool

        options = super().sqlalchemy_engine_options()
        options["poolclass"] = StaticPool
        return options


__all__ = ["BaseConfig", "DevConfig", "TestConfig"]
