import pytest

from videocatalog.common import settings as s
from videocatalog.common.settings import APIConfig, DBConfig, get_settings


@pytest.fixture()
def fresh_settings():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_settings_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    cfg = get_settings()
    assert cfg.app_name == "videocatalog"
    assert cfg.api.prefix == "/api/v1"
    assert cfg.db_schema == "catalog"
    assert cfg.database_url.startswith("postgresql+psycopg://")


def test_settings_env_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("DB__NAME", "films")
    monkeypatch.setenv("DB__HOST", "db.internal")

    cfg = get_settings()
    assert cfg.app_env == "test"
    assert cfg.db.name == "films"
    assert cfg.database_url.endswith("@db.internal:5432/films")


def test_db_url_override_takes_precedence():
    db = DBConfig(DATABASE_URL="postgresql+psycopg://u:p@h:1/x")
    assert db.effective_url == "postgresql+psycopg://u:p@h:1/x"


def test_api_cors_lists_accept_csv():
    api = APIConfig(cors_allow_origins="http://a.test, http://b.test", cors_allow_methods="GET,POST")
    assert api.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert api.cors_allow_methods == ["GET", "POST"]
