"""Load record source protocol.

The readiness composer depends only on this protocol. Implementations
return rows filtered by tenant, user and an inclusive date range.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from readiness.records.models import WellnessSample, WorkoutSessionRecord


class LoadRecordSource(Protocol):
    def list_wellness_samples(
        self,
        tenant_id: str,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[WellnessSample]: ...

    def list_workout_sessions(
        self,
        tenant_id: str,
        start_date: date,
        end_date: date,
        user_id: str | None = None,
    ) -> list[WorkoutSessionRecord]:
        """List sessions in range. A None user_id aggregates the whole tenant."""
        ...
