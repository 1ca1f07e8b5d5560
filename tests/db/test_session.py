import datetime as dt

import pytest

import readiness.db.session as session_module
from readiness.db.models import DailyWellness
from readiness.records.sql_source import SqlLoadRecordSource


@pytest.fixture
def patched_engine(monkeypatch, db_engine):
    monkeypatch.setattr(session_module, "_get_engine", lambda: db_engine)
    monkeypatch.setattr(session_module, "_SessionLocal", None)
    return db_engine


def test_get_session_commits_on_clean_exit(patched_engine):
    with session_module.get_session() as session:
        session.add(DailyWellness(tenant_id="t", user_id="u", date=dt.date(2026, 2, 21), rhr=50, hrv_rmssd=40))

    samples = SqlLoadRecordSource().list_wellness_samples("t", "u", dt.date(2026, 2, 21), dt.date(2026, 2, 21))

    assert len(samples) == 1


def test_get_session_rolls_back_on_error(patched_engine):
    with pytest.raises(ValueError), session_module.get_session() as session:
        session.add(DailyWellness(tenant_id="t", user_id="u", date=dt.date(2026, 2, 21), rhr=50, hrv_rmssd=40))
        session.flush()
        raise ValueError("boom")

    assert SqlLoadRecordSource().list_wellness_samples("t", "u", dt.date(2026, 2, 1), dt.date(2026, 2, 28)) == []
