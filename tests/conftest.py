"""Root conftest for all tests.

Provides an in-memory SQLite record store and an in-memory fake record
source shared across test modules.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from readiness.db.models import Base
from readiness.records.models import (
    WellnessSample,
    WorkoutSessionRecord,
    calculate_hrv_ratio,
    calculate_training_load,
)

TEST_TENANT = "tenant-test"
TEST_USER = "user-1"


class FakeRecordSource:
    """In-memory load record source with the same filtering rules as the SQL one."""

    def __init__(self) -> None:
        self.sessions: list[WorkoutSessionRecord] = []
        self.wellness: list[WellnessSample] = []
        self.calls: list[tuple] = []
        self.error: Exception | None = None

    def add_session(
        self,
        session_date: date,
        *,
        duration_minutes: int = 60,
        srpe: int = 7,
        tenant_id: str = TEST_TENANT,
        user_id: str = TEST_USER,
    ) -> WorkoutSessionRecord:
        record = WorkoutSessionRecord(
            id=f"s-{len(self.sessions) + 1}",
            tenant_id=tenant_id,
            user_id=user_id,
            date=session_date,
            modality="strength",
            duration_minutes=duration_minutes,
            srpe=srpe,
            training_load=calculate_training_load(duration_minutes, srpe),
        )
        self.sessions.append(record)
        return record

    def add_wellness(
        self,
        sample_date: date,
        *,
        rhr: float = 55,
        hrv_rmssd: float = 45,
        tenant_id: str = TEST_TENANT,
        user_id: str = TEST_USER,
    ) -> WellnessSample:
        sample = WellnessSample(
            id=f"w-{len(self.wellness) + 1}",
            tenant_id=tenant_id,
            user_id=user_id,
            date=sample_date,
            rhr=rhr,
            hrv_rmssd=hrv_rmssd,
            hrv_ratio=calculate_hrv_ratio(hrv_rmssd, rhr),
        )
        self.wellness.append(sample)
        return sample

    def list_wellness_samples(self, tenant_id, user_id, start_date, end_date):
        self.calls.append(("wellness", tenant_id, user_id, start_date, end_date))
        if self.error:
            raise self.error
        return [
            w
            for w in self.wellness
            if w.tenant_id == tenant_id and w.user_id == user_id and start_date <= w.date <= end_date
        ]

    def list_workout_sessions(self, tenant_id, start_date, end_date, user_id=None):
        self.calls.append(("sessions", tenant_id, user_id, start_date, end_date))
        if self.error:
            raise self.error
        return [
            s
            for s in self.sessions
            if s.tenant_id == tenant_id
            and (user_id is None or s.user_id == user_id)
            and start_date <= s.date <= end_date
        ]


@pytest.fixture
def fake_source() -> FakeRecordSource:
    return FakeRecordSource()


@pytest.fixture
def today() -> date:
    return date(2026, 2, 21)


@pytest.fixture
def days_before(today):
    """Return a helper mapping an offset in days to a calendar date before today."""

    def _days_before(n: int) -> date:
        return today - timedelta(days=n)

    return _days_before


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared across threads, schema created."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Context-manager session factory bound to the test engine."""
    test_session_local = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)

    @contextmanager
    def _factory():
        session = test_session_local()
        try:
            yield session
            session.commit()
        finally:
            session.close()

    return _factory
