import datetime as dt
from typing import NamedTuple

from readiness.metrics.acwr import (
    ZERO_ACWR,
    calculate_acute_load,
    calculate_chronic_load,
    compute_acwr,
    is_danger_zone,
    to_calendar_date,
)


class Load(NamedTuple):
    date: str
    training_load: float


REF = "2026-02-21"


def test_danger_zone_is_strictly_above_threshold():
    assert is_danger_zone(1.6) is True
    assert is_danger_zone(1.50001) is True
    assert is_danger_zone(1.5) is False
    assert is_danger_zone(1.2) is False


def test_acute_load_sums_seven_day_window():
    sessions = [
        Load("2026-02-21", 100),
        Load("2026-02-20", 150),
        Load("2026-02-19", 200),
        Load("2026-02-18", 100),
        Load("2026-02-17", 50),
        Load("2026-02-16", 100),
        Load("2026-02-15", 200),
    ]

    assert calculate_acute_load(sessions, REF) == 900


def test_acute_load_excludes_sessions_seven_days_back():
    sessions = [Load("2026-02-21", 100), Load("2026-02-14", 500)]

    assert calculate_acute_load(sessions, REF) == 100


def test_acute_load_ignores_sessions_after_reference_date():
    sessions = [Load("2026-02-21", 100), Load("2026-02-22", 400)]

    assert calculate_acute_load(sessions, REF) == 100


def test_chronic_load_averages_over_four_weeks():
    ref = dt.date(2026, 2, 21)
    sessions = [Load((ref - dt.timedelta(days=i)).isoformat(), 100) for i in range(28)]

    assert calculate_chronic_load(sessions, REF) == 700


def test_chronic_load_is_not_renormalized_for_sparse_data():
    assert calculate_chronic_load([Load("2026-02-21", 2800)], REF) == 700


def test_chronic_load_window_is_28_days_inclusive():
    sessions = [Load("2026-01-25", 400), Load("2026-01-24", 1000)]

    # 2026-01-25 is 27 days before the reference date, 2026-01-24 is 28
    assert calculate_chronic_load(sessions, REF) == 100


def test_windows_are_calendar_days_across_month_boundary():
    sessions = [Load("2026-02-25", 100), Load("2026-02-23", 100)]

    assert calculate_acute_load(sessions, "2026-03-01") == 200


def test_acwr_ratio_and_danger_flag():
    sessions = [Load("2026-02-21", 700), Load("2026-02-01", 2800)]

    result = compute_acwr(sessions, sessions, REF)

    assert result.acute_load == 700
    assert result.chronic_load == (2800 + 700) / 4
    assert result.ratio == 700 / 875
    assert result.is_danger is False


def test_acwr_flags_spike_as_danger():
    sessions = [Load("2026-02-21", 2000), Load("2026-02-01", 800)]

    result = compute_acwr(sessions, sessions, REF)

    assert result.ratio == 2000 / 700
    assert result.is_danger is True


def test_acwr_with_zero_chronic_load_has_zero_ratio():
    result = compute_acwr([], [], REF)

    assert result == ZERO_ACWR
    assert result.ratio == 0
    assert result.is_danger is False


def test_acwr_accepts_date_objects():
    sessions = [Load(dt.date(2026, 2, 20), 100)]

    result = compute_acwr(sessions, sessions, dt.date(2026, 2, 21))

    assert result.acute_load == 100
    assert result.chronic_load == 25
    assert result.ratio == 4.0


def test_to_calendar_date_drops_time_of_day():
    assert to_calendar_date("2026-02-21T23:30:00") == dt.date(2026, 2, 21)
    assert to_calendar_date(dt.datetime(2026, 2, 21, 23, 30)) == dt.date(2026, 2, 21)
    assert to_calendar_date(dt.date(2026, 2, 21)) == dt.date(2026, 2, 21)


def test_acwr_keeps_acute_load_when_chronic_input_is_empty():
    result = compute_acwr([Load(REF, 300)], [], REF)

    assert result.acute_load == 300
    assert result.chronic_load == 0
    assert result.ratio == 0
    assert result.is_danger is False
