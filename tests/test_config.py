"""Tests de la configuration."""

import pytest

from config import Config, ConfigError


def test_missing_jwt_secret_is_fatal(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(ConfigError):
        Config()


def test_defaults(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    for name in ("JWT_EXPIRE_MINUTES", "JWT_ALGORITHM", "CORS_ORIGINS", "SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)

    config = Config()

    assert config.jwt_secret_key == "s3cret"
    assert config.jwt_algorithm == "HS256"
    assert config.jwt_expire_minutes == 24 * 60
    assert config.cors_origins == ["*"]
    assert config.seed_demo_data is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("JWT_EXPIRE_MINUTES", "5")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("SEED_DEMO_DATA", "true")

    config = Config()

    assert config.jwt_expire_minutes == 5
    assert config.cors_origins == ["http://a.test", "http://b.test"]
    assert config.seed_demo_data is True
