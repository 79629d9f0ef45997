"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from src.adapters.driven.config.settings import Settings, load_settings
from src.ports.settings import SettingsPort

__all__ = []


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Start every test without client configuration in the environment."""
    monkeypatch.delenv("HTTP_CLIENT_VERIFY_TLS", raising=False)
    monkeypatch.delenv("HTTP_CLIENT_TIMEOUT_SECONDS", raising=False)


def test_settings_defaults() -> None:
    """Settings should verify TLS and have no timeout by default."""
    settings = Settings()

    assert settings.verify_tls is True
    assert settings.timeout_sec is None


def test_settings_rejects_non_positive_timeout() -> None:
    """Settings should reject a zero or negative timeout."""
    with pytest.raises(ValidationError):
        Settings(timeout_sec=0)


def test_settings_to_port() -> None:
    """Settings should convert into the core settings port."""
    port = Settings(verify_tls=False, timeout_sec=2.5).to_port()

    assert port == SettingsPort(verify_tls=False, timeout_sec=2.5)


def test_load_settings_without_env() -> None:
    """Missing variables should fall back to defaults."""
    settings = load_settings()

    assert settings.verify_tls is True
    assert settings.timeout_sec is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("false", False), ("0", False), ("No", False), ("true", True), ("1", True)],
)
def test_load_settings_verify_tls(monkeypatch, raw: str, expected: bool) -> None:
    """HTTP_CLIENT_VERIFY_TLS should accept common boolean spellings."""
    monkeypatch.setenv("HTTP_CLIENT_VERIFY_TLS", raw)

    assert load_settings().verify_tls is expected


def test_load_settings_timeout(monkeypatch) -> None:
    """HTTP_CLIENT_TIMEOUT_SECONDS should be parsed as seconds."""
    monkeypatch.setenv("HTTP_CLIENT_TIMEOUT_SECONDS", "7.5")

    assert load_settings().timeout_sec == 7.5


def test_load_settings_empty_values_use_defaults(monkeypatch) -> None:
    """Empty variables should be treated as unset."""
    monkeypatch.setenv("HTTP_CLIENT_VERIFY_TLS", "")
    monkeypatch.setenv("HTTP_CLIENT_TIMEOUT_SECONDS", " ")

    settings = load_settings()

    assert settings.verify_tls is True
    assert settings.timeout_sec is None


def test_load_settings_invalid_bool(monkeypatch) -> None:
    """An unparsable boolean should raise RuntimeError."""
    monkeypatch.setenv("HTTP_CLIENT_VERIFY_TLS", "maybe")

    with pytest.raises(RuntimeError, match="HTTP_CLIENT_VERIFY_TLS must be a boolean"):
        load_settings()


@pytest.mark.parametrize("raw", ["-1", "0", "soon"])
def test_load_settings_invalid_timeout(monkeypatch, raw: str) -> None:
    """A non-positive or non-numeric timeout should raise RuntimeError."""
    monkeypatch.setenv("HTTP_CLIENT_TIMEOUT_SECONDS", raw)

    with pytest.raises(
        RuntimeError, match="HTTP_CLIENT_TIMEOUT_SECONDS must be a positive number"
    ):
        load_settings()
