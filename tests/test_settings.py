import logging

from config.database import build_engine
from config.logging_setup import configure_logging
from config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///recipes.db"
    assert settings.log_level == "INFO"
    assert settings.app_title == "Recipe Catalog"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/recipes")
    monkeypatch.setenv("DATABASE_ECHO", "true")
    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql://localhost/recipes"
    assert settings.database_echo


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_sqlite_engine_enforces_foreign_keys():
    engine = build_engine("sqlite:///:memory:")
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    engine.dispose()


def test_configure_logging_accepts_level_name(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")

    assert calls[0]["level"] == logging.DEBUG
