"""
Configuration settings for the ComplyCube compliance client.

Loads configuration from environment variables using Pydantic Settings.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.complycube.com/v1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # ComplyCube API
    # -------------------------------------------------------------------------
    complycube_api_key: Optional[str] = Field(
        default=None,
        description="ComplyCube API key, forwarded verbatim in the Authorization header",
    )
    complycube_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the ComplyCube REST API",
    )

    # Timeouts are in milliseconds. Screening checks take longer server-side.
    lookup_timeout_ms: int = Field(
        default=10000,
        ge=1,
        description="Company lookup request timeout in milliseconds",
    )
    screening_timeout_ms: int = Field(
        default=30000,
        ge=1,
        description="Screening check request timeout in milliseconds",
    )

    lookup_user_agent: str = Field(
        default="Design-Studio/1.0",
        description="User agent sent by the company lookup client",
    )
    screening_user_agent: str = Field(
        default="Design-Studio-AML/1.0",
        description="User agent sent by the screening client",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARN, ERROR)",
    )
    log_format: str = Field(
        default="json",
        description="Log format (json or text)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "text"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v_lower

    @field_validator("complycube_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def has_api_key(self) -> bool:
        """
        Check whether an API key is configured.

        Returns:
            True if a non-empty API key is available, False otherwise
        """
        return bool(self.complycube_api_key)


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get singleton settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
