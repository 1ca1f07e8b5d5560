from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class WorkoutSession(Base):
    """Logged workout sessions stored as immutable facts.

    Schema:
    - id: UUID primary key
    - tenant_id / user_id: Ownership scope
    - date: Calendar day of the session (no time of day)
    - modality: strength | rowing | running | cycling | swimming | other
    - duration_minutes: Session duration
    - srpe: Session rating of perceived exertion (1-10)
    - training_load: duration_minutes * srpe, fixed at creation time
    - created_at / updated_at: Record timestamps (UTC)

    training_load is written once when the row is created and is never
    recomputed from duration/srpe on read.
    """

    __tablename__ = "workout_session"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    modality: Mapped[str] = mapped_column(String, nullable=False, default="other")
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    srpe: Mapped[int] = mapped_column(Integer, nullable=False)
    training_load: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False, default=lambda: dt.datetime.now(dt.UTC))
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: dt.datetime.now(dt.UTC),
        onupdate=lambda: dt.datetime.now(dt.UTC),
    )

    __table_args__ = (Index("idx_workout_session_tenant_user_date", "tenant_id", "user_id", "date"),)


class DailyWellness(Base):
    """One wellness sample per athlete per day.

    Schema:
    - rhr: Resting heart rate (bpm)
    - hrv_rmssd: Heart rate variability (RMSSD, ms)
    - *_score: Optional subjective scores (1-5)

    Constraints:
    - Unique constraint: (tenant_id, user_id, date)
    - hrv_ratio is derived on read, not stored
    """

    __tablename__ = "daily_wellness"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    rhr: Mapped[float] = mapped_column(Float, nullable=False)
    hrv_rmssd: Mapped[float] = mapped_column(Float, nullable=False)

    sleep_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fatigue_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    muscle_soreness_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stress_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mood_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    diet_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False, default=lambda: dt.datetime.now(dt.UTC))
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: dt.datetime.now(dt.UTC),
        onupdate=lambda: dt.datetime.now(dt.UTC),
    )

    __table_args__ = (UniqueConstraint("tenant_id", "user_id", "date", name="uq_daily_wellness_tenant_user_date"),)
