from readiness.config.settings import Settings


def test_log_level_is_normalized():
    assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_invalid_log_level_defaults_to_info():
    assert Settings(LOG_LEVEL="verbose").log_level == "INFO"


def test_default_history_days_out_of_range_falls_back():
    assert Settings(DEFAULT_HISTORY_DAYS=120).default_history_days == 28
    assert Settings(DEFAULT_HISTORY_DAYS=14).default_history_days == 14


def test_database_url_defaults_to_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert Settings().database_url.startswith("sqlite:///")
