"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Only non-sensitive defaults are hard-coded

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    if settings.address_service_url:
        # Talk to the real address verification service
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import REMOTE_SERVICE_TIMEOUT_DEFAULT
from src.core.enums import Environment

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Order Taking",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Address verification service
    address_service_name: str = Field(
        default="AddressVerification",
        description="Service name reported in remote service errors",
    )
    address_service_url: str | None = Field(
        default=None,
        description="Address verification base URL. The stub checker is used when unset.",
    )
    address_service_timeout: float = Field(
        default=REMOTE_SERVICE_TIMEOUT_DEFAULT,
        description="Address verification request timeout in seconds",
    )

    # Acknowledgement letters
    acknowledgement_company_name: str = Field(
        default="Widgets & Gizmos Ltd",
        description="Company name printed on order acknowledgement letters",
    )

    model_config = SettingsConfigDict(
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
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.upper().strip()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    @field_validator("address_service_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str | None: URL without trailing slash, or None when unset.
        """
        if v is None or not v.strip():
            return None
        return v.strip().rstrip("/")

    @field_validator("address_service_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate the remote service timeout is positive.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If timeout is not greater than zero.
        """
        if v <= 0:
            raise ValueError("address_service_timeout must be greater than 0")
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI, False otherwise.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the process lifetime.
    Call ``get_settings.cache_clear()`` in tests that change the environment.

    Returns:
        Settings: Application configuration.
    """
    return Settings()
