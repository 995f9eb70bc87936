"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Settings loading from environment variables
- Environment detection
- Validation (log level, URL normalization, timeout)
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings defaults with an empty environment."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.address_service_url is None
        assert settings.address_service_timeout == 10.0
        assert settings.acknowledgement_company_name == "Widgets & Gizmos Ltd"
        assert settings.is_development is True


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level must be one of" in str(exc_info.value)

    def test_service_url_trailing_slash_removed(self):
        env = {"ADDRESS_SERVICE_URL": "https://addresses.test/api/"}
        with patch.dict(os.environ, env, clear=True):
            assert Settings().address_service_url == "https://addresses.test/api"

    def test_blank_service_url_is_unset(self):
        with patch.dict(os.environ, {"ADDRESS_SERVICE_URL": "  "}, clear=True):
            assert Settings().address_service_url is None

    @pytest.mark.parametrize("timeout", ["0", "-1"])
    def test_non_positive_timeout_rejected(self, timeout):
        with patch.dict(os.environ, {"ADDRESS_SERVICE_TIMEOUT": timeout}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestEnvironmentDetection:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("value", "is_testing", "is_production"),
        [
            ("development", False, False),
            ("testing", True, False),
            ("ci", True, False),
            ("production", False, True),
        ],
    )
    def test_properties(self, value, is_testing, is_production):
        with patch.dict(os.environ, {"ENVIRONMENT": value}, clear=True):
            settings = Settings()

        assert settings.is_testing is is_testing
        assert settings.is_production is is_production


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
