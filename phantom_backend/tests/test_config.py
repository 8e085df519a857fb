from __future__ import annotations

import pytest

from phantom_backend.shared.config import AppConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_ENV",
        "HOST",
        "PORT",
        "DEBUG_LOGGING",
        "LOG_LEVEL",
        "LOG_FILE",
        "CORS_ALLOWED_ORIGINS",
        "CORS_ALLOWED_METHODS",
        "CORS_ALLOWED_HEADERS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig(_env_file=None)

    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.debug_logging is False
    assert config.log_file is None
    assert config.cors.allowed_origins == ["*"]
    assert config.cors.allowed_methods == ["GET", "HEAD", "POST", "PUT", "OPTIONS"]
    assert config.cors.allowed_headers == ["X-Requested-With", "Content-Type", "Authorization"]


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("CORS_ALLOWED_METHODS", "get,post")

    config = AppConfig(_env_file=None)

    assert config.port == 9090
    assert config.debug_logging is True
    assert config.log_level == "DEBUG"
    assert config.cors.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.cors.allowed_methods == ["GET", "POST"]


def test_rejects_out_of_range_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValueError):
        AppConfig(_env_file=None)


def test_production_wildcard_origin_warns(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    config = AppConfig(_env_file=None)

    assert config.is_production() is True
    assert "wildcard" in capsys.readouterr().err
