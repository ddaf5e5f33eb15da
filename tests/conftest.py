"""Pytest configuration and shared fixtures for HabitPulse tests.

Provides an isolated SQLite database per test, a session factory matching
the repository constructor, and builders for daily record histories.
"""

from __future__ import annotations

import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from habitpulse.domain.habits import ContinuityMode, DailyRecord, HabitPolicy, HabitType
from habitpulse.infra.repositories import SQLModelHabitLogRepository
from habitpulse.models import HabitLog, UserSetting  # noqa: F401

@pytest.fixture(autouse=True)
def _data_dir(monkeypatch, tmp_path):
    """Point logging and database files at the test's tmp_path."""
    monkeypatch.setenv("HABITPULSE_DATA_DIR", str(tmp_path))


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Factory returning Session context managers, as repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def habit_log_repo(session_factory) -> SQLModelHabitLogRepository:
    return SQLModelHabitLogRepository(session_factory)


# =============================================================================
# Record builders
# =============================================================================


def span(start: date, end: date, *, skip: Iterable[date] = (), quantity: int | None = None) -> list[DailyRecord]:
    """Present records for every day from start to end inclusive, minus ``skip``."""

    skipped = set(skip)
    records = []
    day = start
    while day <= end:
        if day not in skipped:
            records.append(DailyRecord(date=day, present=True, quantity=quantity))
        day += timedelta(days=1)
    return records


@pytest.fixture
def strict_policy() -> HabitPolicy:
    return HabitPolicy(habit_type=HabitType.PRACTICE, continuity_mode=ContinuityMode.STRICT)


@pytest.fixture
def tolerance_policy():
    """Factory for gym policies with a given miss tolerance."""

    def _create(miss_tolerance: int = 1, enabled: bool = True) -> HabitPolicy:
        return HabitPolicy(
            habit_type=HabitType.GYM,
            continuity_mode=ContinuityMode.TOLERANCE_WINDOW,
            miss_tolerance=miss_tolerance,
            enabled=enabled,
        )

    return _create
