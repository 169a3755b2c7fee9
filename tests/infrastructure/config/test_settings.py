"""Test application settings"""

import pytest
from pydantic import ValidationError

from src.infrastructure.config.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RATE_LIMIT_ENABLED", raising=False)

    settings = Settings(database_url="sqlite+aiosqlite:///blog.db", _env_file=None)

    assert settings.app_name == "Blog"
    assert settings.rate_limit_enabled is True
    assert settings.rate_limit_create_post == "10/minute"


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None)


def test_unknown_exporter_is_rejected():
    with pytest.raises(ValidationError, match="Invalid telemetry_exporter"):
        Settings(database_url="sqlite+aiosqlite://", telemetry_exporter="zipkin", _env_file=None)


def test_sample_rate_must_be_a_fraction():
    with pytest.raises(ValidationError, match="telemetry_sample_rate"):
        Settings(database_url="sqlite+aiosqlite://", telemetry_sample_rate=1.5, _env_file=None)


def test_cors_origins_are_split_and_trimmed():
    settings = Settings(
        database_url="sqlite+aiosqlite://",
        allowed_origins="http://a.test, http://b.test,",
        _env_file=None,
    )

    assert settings.cors_origins == ["http://a.test", "http://b.test"]
