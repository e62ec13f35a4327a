import pytest

from cinecatalog.common import settings as s


@pytest.fixture()
def fresh_settings():
    # ensure a clean cache per test
    s.get_settings.cache_clear()
    yield s.get_settings
    s.get_settings.cache_clear()


def test_settings_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("APP_ENV", "production")

    cfg = fresh_settings()
    assert cfg.app_env == "production"
    assert cfg.is_development is False
    assert cfg.api.prefix == "/api/v1"
    assert cfg.database_url.startswith("postgresql+psycopg://")


def test_database_url_env_wins(fresh_settings, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///./catalog.db")

    cfg = fresh_settings()
    assert cfg.database_url == "sqlite+pysqlite:///./catalog.db"


def test_cors_lists_accept_csv():
    api = s.APIConfig(cors_allow_origins="http://a.test, http://b.test")
    assert api.cors_allow_origins == ["http://a.test", "http://b.test"]
