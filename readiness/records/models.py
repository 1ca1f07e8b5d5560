"""Record types returned by the load record source."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

Modality = Literal["strength", "rowing", "running", "cycling", "swimming", "other"]


def calculate_training_load(duration_minutes: int, srpe: int) -> float:
    """Session training load (sRPE method): duration in minutes times perceived exertion."""
    return float(duration_minutes * srpe)


def calculate_hrv_ratio(hrv_rmssd: float, rhr: float) -> float:
    """HRV to resting heart rate ratio. Zero when rhr is zero."""
    if rhr == 0:
        return 0.0
    return hrv_rmssd / rhr


@dataclass(frozen=True)
class WorkoutSessionRecord:
    """A logged workout session.

    Attributes:
        id: Session identifier
        tenant_id: Owning tenant
        user_id: Owning athlete
        date: Calendar day of the session
        modality: Sport/modality of the session
        duration_minutes: Duration in minutes
        srpe: Perceived exertion (1-10)
        training_load: Load stored at creation time
    """

    id: str
    tenant_id: str
    user_id: str
    date: date
    modality: Modality
    duration_minutes: int
    srpe: int
    training_load: float


@dataclass(frozen=True)
class WellnessSample:
    """A daily wellness sample with its derived HRV ratio."""

    id: str
    tenant_id: str
    user_id: str
    date: date
    rhr: float
    hrv_rmssd: float
    hrv_ratio: float
    sleep_score: int | None = None
    fatigue_score: int | None = None
    muscle_soreness_score: int | None = None
    stress_score: int | None = None
    mood_score: int | None = None
    diet_score: int | None = None
