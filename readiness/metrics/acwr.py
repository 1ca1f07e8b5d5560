"""Acute:Chronic Workload Ratio (ACWR) computation.

Pure functions over sessions that expose ``date`` and ``training_load``.
Windows are closed intervals of calendar days ending at the reference date:

- Acute load: sum over [ref - 6, ref] (7 days)
- Chronic load: sum over [ref - 27, ref] (28 days) divided by 4
- Ratio: acute / chronic, 0 when chronic is 0
- Danger zone: ratio strictly above 1.5

Chronic load always divides by 4, however many days actually carry data.
Inputs may be over-fetched; every function re-filters to its own window.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
CHRONIC_WEEKS = 4
DANGER_RATIO = 1.5


class SessionLoad(Protocol):
    @property
    def date(self) -> date | str: ...

    @property
    def training_load(self) -> float: ...


@dataclass(frozen=True)
class ACWRResult:
    acute_load: float
    chronic_load: float
    ratio: float
    is_danger: bool

    def to_dict(self) -> dict[str, float | bool]:
        return {
            "acute_load": self.acute_load,
            "chronic_load": self.chronic_load,
            "ratio": self.ratio,
            "is_danger": self.is_danger,
        }


ZERO_ACWR = ACWRResult(acute_load=0.0, chronic_load=0.0, ratio=0.0, is_danger=False)


def to_calendar_date(value: date | str) -> date:
    """Coerce an ISO ``YYYY-MM-DD`` string (or date) to a calendar date.

    Datetimes and timestamps are cut to their date part so comparisons
    never involve time of day.
    """
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    if isinstance(value, datetime):
        return value.date()
    return value


def _window_load(sessions: Iterable[SessionLoad], reference_date: date | str, days: int) -> float:
    end = to_calendar_date(reference_date)
    start = end - timedelta(days=days - 1)
    return sum(
        (s.training_load for s in sessions if start <= to_calendar_date(s.date) <= end),
        0.0,
    )


def calculate_acute_load(sessions: Iterable[SessionLoad], reference_date: date | str) -> float:
    """Sum of training load over the 7 calendar days ending at reference_date."""
    return _window_load(sessions, reference_date, ACUTE_WINDOW_DAYS)


def calculate_chronic_load(sessions: Iterable[SessionLoad], reference_date: date | str) -> float:
    """Weekly average load over the 28 calendar days ending at reference_date.

    Example:
        A single 2800-load session on the reference day gives 700, the same
        as 28 consecutive days of 100.
    """
    return _window_load(sessions, reference_date, CHRONIC_WINDOW_DAYS) / CHRONIC_WEEKS


def is_danger_zone(ratio: float) -> bool:
    return ratio > DANGER_RATIO


def compute_acwr(
    acute_sessions: Iterable[SessionLoad],
    chronic_sessions: Iterable[SessionLoad],
    reference_date: date | str,
) -> ACWRResult:
    """Compute acute load, chronic load, ratio and danger flag for one day.

    Args:
        acute_sessions: Sessions covering at least the 7-day acute window
        chronic_sessions: Sessions covering at least the 28-day chronic window
        reference_date: Last day of both windows

    Returns:
        ACWRResult. A zero chronic load yields ratio 0 and no danger flag.
    """
    acute_load = calculate_acute_load(acute_sessions, reference_date)
    chronic_load = calculate_chronic_load(chronic_sessions, reference_date)
    ratio = 0.0 if chronic_load == 0 else acute_load / chronic_load
    return ACWRResult(
        acute_load=acute_load,
        chronic_load=chronic_load,
        ratio=ratio,
        is_danger=is_danger_zone(ratio),
    )
