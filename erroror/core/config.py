"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables prefixed with ``ERROROR_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from erroror.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Dev-specific behavior

    # Map custom error kinds to HTTP status codes
    # ERROROR_CUSTOM_KIND_STATUS_CODES='{"42": 402}'
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from erroror.core.enums import Environment


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (ERROROR_ prefix)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    problem_type_base_url: str = Field(
        default="",
        description="Base URL for problem type URIs (e.g., https://api.example.com). "
        "Problem types are 'about:blank' when empty.",
    )
    custom_kind_status_codes: dict[int, int] = Field(
        default_factory=dict,
        description="HTTP status code per custom numeric error kind",
    )

    model_config = SettingsConfigDict(
        env_prefix="ERROROR_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard level name.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator("problem_type_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("custom_kind_status_codes")
    @classmethod
    def validate_status_codes(cls, v: dict[int, int]) -> dict[int, int]:
        """
        Validate mapped status codes are HTTP error statuses.

        Raises:
            ValueError: If a status is outside 400-599.
        """
        for kind, status_code in v.items():
            if not 400 <= status_code <= 599:
                raise ValueError(
                    f"Status for custom kind {kind} must be between 400 and 599"
                )
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Tests call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
