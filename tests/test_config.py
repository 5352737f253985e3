"""Tests for configuration and database factories."""

import pytest

from invoicedash.config import DEFAULT_REVENUE_DELAY_SECONDS, get_config
from invoicedash.database.factories import create_database


def test_defaults(monkeypatch):
    """Test configuration defaults with an empty environment."""
    for name in (
        "INVOICEDASH_DATABASE_URL",
        "INVOICEDASH_DB_PATH",
        "INVOICEDASH_REVENUE_DELAY",
        "INVOICEDASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = get_config()

    assert config.database_url is None
    assert config.db_path is None
    assert config.revenue_delay == DEFAULT_REVENUE_DELAY_SECONDS
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    """Test values are read from the environment."""
    monkeypatch.setenv("INVOICEDASH_DATABASE_URL", "postgresql://u:p@host/db")
    monkeypatch.setenv("INVOICEDASH_DB_PATH", "/tmp/x.db")
    monkeypatch.setenv("INVOICEDASH_REVENUE_DELAY", "0.5")
    monkeypatch.setenv("INVOICEDASH_LOG_LEVEL", "info")

    config = get_config()

    assert config.database_url == "postgresql://u:p@host/db"
    assert config.db_path == "/tmp/x.db"
    assert config.revenue_delay == 0.5
    assert config.log_level == "INFO"


def test_blank_values_are_unset(monkeypatch):
    """Test blank environment values are treated as missing."""
    monkeypatch.setenv("INVOICEDASH_DATABASE_URL", "  ")
    assert get_config().database_url is None


def test_negative_delay_is_clamped(monkeypatch):
    """Test a negative delay disables the latency."""
    monkeypatch.setenv("INVOICEDASH_REVENUE_DELAY", "-2")
    assert get_config().revenue_delay == 0.0


def test_invalid_delay(monkeypatch):
    """Test a non-numeric delay is rejected."""
    monkeypatch.setenv("INVOICEDASH_REVENUE_DELAY", "soon")
    with pytest.raises(ValueError, match="INVOICEDASH_REVENUE_DELAY"):
        get_config()


def test_create_database_prefers_url(tmp_path):
    """Test an explicit URL wins over a SQLite path."""
    url = f"sqlite:///{tmp_path / 'url.db'}"
    db = create_database(database_url=url, database_path=str(tmp_path / "path.db"))
    assert db.database_url == url


def test_create_database_falls_back_to_path(tmp_path, monkeypatch):
    """Test the SQLite path is used when no URL is configured."""
    monkeypatch.delenv("INVOICEDASH_DATABASE_URL", raising=False)
    db = create_database(database_path=str(tmp_path / "path.db"))
    assert db.database_url == f"sqlite:///{tmp_path / 'path.db'}"
