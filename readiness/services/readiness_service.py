"""Readiness view composition.

Joins workout load and wellness history into one readiness view:

1. Fetch wellness samples for the history window and workout sessions for a
   chronic window wide enough to give every history day its full 28 trailing
   days. Both reads run concurrently.
2. Compute one ACWR point per wellness day from the same fetched sessions.
3. The current ACWR is the most recent point (zero result when there is none).
4. Project the assembled view through the requested selection.

The record source is injected per composer; nothing is shared between requests.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any

from readiness.core.logger import get_logger
from readiness.metrics.acwr import (
    ACUTE_WINDOW_DAYS,
    CHRONIC_WINDOW_DAYS,
    ZERO_ACWR,
    ACWRResult,
    compute_acwr,
    to_calendar_date,
)
from readiness.records.models import WellnessSample, WorkoutSessionRecord
from readiness.records.source import LoadRecordSource
from readiness.views import generate_select_paths, resolve
from readiness.views.readiness import READINESS_VIEW

logger = get_logger("READINESS")


@dataclass(frozen=True)
class ACWRHistoryPoint:
    date: date
    acwr: ACWRResult

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, **self.acwr.to_dict()}


@dataclass(frozen=True)
class ReadinessWindows:
    """Inclusive fetch windows for one readiness request."""

    wellness_start: date
    sessions_start: date
    end: date


def readiness_windows(as_of: date, history_days: int) -> ReadinessWindows:
    """Compute the wellness and session fetch windows ending at as_of.

    The session window reaches back 27 days before the first wellness day,
    i.e. 27 + max(history_days - 1, 0) days before as_of.
    """
    span = max(history_days - 1, 0)
    return ReadinessWindows(
        wellness_start=as_of - timedelta(days=span),
        sessions_start=as_of - timedelta(days=CHRONIC_WINDOW_DAYS - 1 + span),
        end=as_of,
    )


def build_acwr_history(
    wellness_samples: Sequence[WellnessSample],
    sessions: Sequence[WorkoutSessionRecord],
) -> list[ACWRHistoryPoint]:
    """One ACWR point per wellness day, oldest first, all from the same session list."""
    days = sorted({sample.date for sample in wellness_samples})
    return [ACWRHistoryPoint(date=day, acwr=compute_acwr(sessions, sessions, day)) for day in days]


def build_readiness_data(
    wellness_samples: Sequence[WellnessSample],
    sessions: Sequence[WorkoutSessionRecord],
) -> dict[str, Any]:
    """Assemble the unprojected readiness view.

    Returns:
        Dictionary with keys:
        - "acwr": Current ACWR (latest history point, or all zeros)
        - "acwr_history": ACWR per wellness day, oldest first
        - "wellness_history": Wellness samples, oldest first
    """
    history = build_acwr_history(wellness_samples, sessions)
    current = history[-1].acwr if history else ZERO_ACWR
    return {
        "acwr": current.to_dict(),
        "acwr_history": [point.to_dict() for point in history],
        "wellness_history": [asdict(sample) for sample in sorted(wellness_samples, key=lambda s: s.date)],
    }


class ReadinessComposer:
    """Builds readiness views and ACWR status from an injected record source."""

    def __init__(self, source: LoadRecordSource) -> None:
        self._source = source

    async def get_readiness_view(
        self,
        tenant_id: str,
        user_id: str,
        as_of: date | str,
        history_days: int,
        select: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Compose and project the readiness view for one athlete.

        Args:
            tenant_id: Tenant scope, passed through to the record source
            user_id: Athlete, passed through to the record source
            as_of: Last day of the history
            history_days: Number of wellness days to include (validated upstream)
            select: Selection paths; None selects every field

        Returns:
            Projected view. List fields are connections.

        Raises:
            Whatever the record source raises, unchanged.
        """
        end = to_calendar_date(as_of)
        windows = readiness_windows(end, history_days)
        logger.info(
            f"Building readiness view: tenant_id={tenant_id}, user_id={user_id}, "
            f"as_of={end}, history_days={history_days}"
        )

        wellness_samples, sessions = await asyncio.gather(
            asyncio.to_thread(self._source.list_wellness_samples, tenant_id, user_id, windows.wellness_start, end),
            asyncio.to_thread(self._source.list_workout_sessions, tenant_id, windows.sessions_start, end, user_id=user_id),
        )
        logger.debug(f"Fetched {len(wellness_samples)} wellness samples and {len(sessions)} sessions")

        data = build_readiness_data(wellness_samples, sessions)
        selection = list(select) if select is not None else generate_select_paths(READINESS_VIEW)
        return resolve(data, READINESS_VIEW, selection)

    async def get_acwr_status(
        self,
        tenant_id: str,
        user_id: str | None,
        as_of: date | str,
    ) -> ACWRResult:
        """ACWR for a single day. A None user_id aggregates the whole tenant."""
        end = to_calendar_date(as_of)
        logger.info(f"Computing ACWR status: tenant_id={tenant_id}, user_id={user_id}, as_of={end}")

        acute_sessions, chronic_sessions = await asyncio.gather(
            asyncio.to_thread(
                self._source.list_workout_sessions,
                tenant_id,
                end - timedelta(days=ACUTE_WINDOW_DAYS - 1),
                end,
                user_id=user_id,
            ),
            asyncio.to_thread(
                self._source.list_workout_sessions,
                tenant_id,
                end - timedelta(days=CHRONIC_WINDOW_DAYS - 1),
                end,
                user_id=user_id,
            ),
        )
        return compute_acwr(acute_sessions, chronic_sessions, end)
