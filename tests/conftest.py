"""
Shared pytest fixtures.
"""
import pytest

from core.config import reset_settings

SETTINGS_ENV_VARS = (
    "APP_NAME",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "DEFAULT_TRANSACTION_TYPE",
    "MAX_INPUT_LENGTH",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
