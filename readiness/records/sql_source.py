"""SQLAlchemy-backed load record source."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from readiness.core.logger import get_logger
from readiness.db.models import DailyWellness, WorkoutSession
from readiness.db.session import get_session
from readiness.records.errors import SourceUnavailableError
from readiness.records.models import (
    Modality,
    WellnessSample,
    WorkoutSessionRecord,
    calculate_hrv_ratio,
    calculate_training_load,
)

logger = get_logger("RECORDS")

SessionFactory = Callable[[], AbstractContextManager[Session]]


def _to_wellness_sample(row: DailyWellness) -> WellnessSample:
    return WellnessSample(
        id=row.id,
        tenant_id=row.tenant_id,
        user_id=row.user_id,
        date=row.date,
        rhr=row.rhr,
        hrv_rmssd=row.hrv_rmssd,
        hrv_ratio=calculate_hrv_ratio(row.hrv_rmssd, row.rhr),
        sleep_score=row.sleep_score,
        fatigue_score=row.fatigue_score,
        muscle_soreness_score=row.muscle_soreness_score,
        stress_score=row.stress_score,
        mood_score=row.mood_score,
        diet_score=row.diet_score,
    )


def _to_session_record(row: WorkoutSession) -> WorkoutSessionRecord:
    return WorkoutSessionRecord(
        id=row.id,
        tenant_id=row.tenant_id,
        user_id=row.user_id,
        date=row.date,
        modality=row.modality,  # type: ignore[arg-type]
        duration_minutes=row.duration_minutes,
        srpe=row.srpe,
        training_load=row.training_load,
    )


def new_workout_session(
    *,
    tenant_id: str,
    user_id: str,
    session_date: date,
    duration_minutes: int,
    srpe: int,
    modality: Modality = "other",
) -> WorkoutSession:
    """Build a WorkoutSession row with its training load fixed at creation time."""
    return WorkoutSession(
        tenant_id=tenant_id,
        user_id=user_id,
        date=session_date,
        modality=modality,
        duration_minutes=duration_minutes,
        srpe=srpe,
        training_load=calculate_training_load(duration_minutes, srpe),
    )


class SqlLoadRecordSource:
    """Reads wellness samples and workout sessions from the relational store.

    Every call opens its own session from ``session_factory``, so concurrent
    reads never share a connection.
    """

    def __init__(self, session_factory: SessionFactory = get_session) -> None:
        self._session_factory = session_factory

    def list_wellness_samples(
        self,
        tenant_id: str,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[WellnessSample]:
        logger.debug(f"Wellness samples: tenant_id={tenant_id}, user_id={user_id}, range={start_date}..{end_date}")
        stmt = (
            select(DailyWellness)
            .where(
                DailyWellness.tenant_id == tenant_id,
                DailyWellness.user_id == user_id,
                DailyWellness.date >= start_date,
                DailyWellness.date <= end_date,
            )
            .order_by(DailyWellness.date)
        )
        try:
            with self._session_factory() as session:
                rows = session.execute(stmt).scalars().all()
                return [_to_wellness_sample(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Failed to read wellness samples for tenant_id={tenant_id}: {e}")
            raise SourceUnavailableError(f"Wellness samples unavailable: {e}") from e

    def list_workout_sessions(
        self,
        tenant_id: str,
        start_date: date,
        end_date: date,
        user_id: str | None = None,
    ) -> list[WorkoutSessionRecord]:
        logger.debug(f"Workout sessions: tenant_id={tenant_id}, user_id={user_id}, range={start_date}..{end_date}")
        stmt = select(WorkoutSession).where(
            WorkoutSession.tenant_id == tenant_id,
            WorkoutSession.date >= start_date,
            WorkoutSession.date <= end_date,
        )
        if user_id:
            stmt = stmt.where(WorkoutSession.user_id == user_id)
        stmt = stmt.order_by(WorkoutSession.date)
        try:
            with self._session_factory() as session:
                rows = session.execute(stmt).scalars().all()
                return [_to_session_record(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Failed to read workout sessions for tenant_id={tenant_id}: {e}")
            raise SourceUnavailableError(f"Workout sessions unavailable: {e}") from e
