"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Family Finance Quick Input Service", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Quick input
    default_transaction_type: str = Field(default="EXPENSE", alias="DEFAULT_TRANSACTION_TYPE")
    max_input_length: int = Field(default=500, alias="MAX_INPUT_LENGTH")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("default_transaction_type")
    @classmethod
    def validate_default_type(cls, v):
        """Unclassified input must fall back to a storable type."""
        v_upper = v.strip().upper()
        if v_upper not in ("INCOME", "EXPENSE"):
            raise ValueError("Default transaction type must be INCOME or EXPENSE")
        return v_upper

    @field_validator("max_input_length")
    @classmethod
    def validate_max_input_length(cls, v):
        if v < 1:
            raise ValueError("Max input length must be at least 1")
        if v > 10000:
            raise ValueError("Max input length should not exceed 10000")
        return v


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
