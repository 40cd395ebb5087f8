"""
Unit tests for configuration module.
"""
import pytest
from pydantic import ValidationError

from core.config import get_settings, reset_settings


def test_settings_defaults():
    """Test default configuration values."""
    settings = get_settings()
    assert settings.app_name == "Family Finance Quick Input Service"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.default_transaction_type == "EXPENSE"
    assert settings.max_input_length == 500


def test_settings_from_environment(monkeypatch):
    """Test values are read from environment variables."""
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_TRANSACTION_TYPE", "income")

    settings = get_settings()
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.default_transaction_type == "INCOME"


def test_settings_validation_port(monkeypatch):
    """Test port validation."""
    monkeypatch.setenv("PORT", "99999")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_log_level(monkeypatch):
    """Test log level validation."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_default_type(monkeypatch):
    """UNKNOWN cannot be stored, so it is not a valid default."""
    monkeypatch.setenv("DEFAULT_TRANSACTION_TYPE", "UNKNOWN")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_max_input_length(monkeypatch):
    monkeypatch.setenv("MAX_INPUT_LENGTH", "0")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_singleton():
    """Test settings singleton behavior."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2

    reset_settings()
    assert get_settings() is not settings1
