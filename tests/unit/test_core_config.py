"""Unit tests for the core configuration module."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


def test_settings_defaults(monkeypatch):
    """Settings fall back to documented defaults without environment overrides."""
    for name in ("LEDGER_BACKEND", "LEDGER_PATH", "LEDGER_RETRY_BACKOFF_MS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ledger_backend == "sqlite"
    assert settings.ledger_path == "data/dnascan/ledger.sqlite"
    assert settings.ledger_timeout == 5.0
    assert settings.ledger_max_retries == 3
    assert settings.ledger_retry_backoff_ms == 20
    assert settings.log_level == "INFO"


def test_settings_with_env_vars(monkeypatch):
    monkeypatch.setenv("LEDGER_BACKEND", "memory")
    monkeypatch.setenv("LEDGER_TIMEOUT", "0.5")
    monkeypatch.setenv("LEDGER_MAX_RETRIES", "7")

    settings = Settings()

    assert settings.ledger_backend == "memory"
    assert settings.ledger_timeout == 0.5
    assert settings.ledger_max_retries == 7


def test_settings_validation(monkeypatch):
    monkeypatch.setenv("LEDGER_BACKEND", "redis")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
