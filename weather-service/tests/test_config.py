"""
Tests for the configuration module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cwa_weather.config import Settings, get_settings


class TestConfig:
    """Test suite for application configuration management.

    Validates settings loading from environment variables,
    default values, immutability and the cached accessor.
    """

    @patch.dict(os.environ, {}, clear=True)
    def test_default_settings(self):
        """Test default configuration values."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "CWA Weather Proxy API"
        assert settings.app_version == "1.0.0"
        assert settings.environment == "development"
        assert settings.port == 3000
        assert settings.cwa_api_key is None
        assert settings.cwa_dataset_id == "F-C0032-001"
        assert settings.collapse_error_status is False

    @patch.dict(
        os.environ,
        {"CWA_API_KEY": "CWA-123", "PORT": "8080", "ENVIRONMENT": "production"},
    )
    def test_settings_from_env(self):
        """Test environment variable override functionality."""
        settings = Settings(_env_file=None)

        assert settings.cwa_api_key == "CWA-123"
        assert settings.port == 8080
        assert settings.environment == "production"

    def test_forecast_url(self):
        """Test the dataset endpoint is built from base URL and dataset id."""
        settings = Settings(
            _env_file=None, cwa_api_base_url="https://example.test/api/"
        )

        assert (
            settings.forecast_url
            == "https://example.test/api/v1/rest/datastore/F-C0032-001"
        )

    def test_settings_are_frozen(self):
        """Test settings cannot be mutated after loading."""
        settings = Settings(_env_file=None, cwa_api_key="key")

        with pytest.raises(ValidationError):
            settings.cwa_api_key = "other"

    def test_get_settings_singleton(self):
        """Test that get_settings() returns a cached instance."""
        assert get_settings() is get_settings()

    @patch.dict(
        os.environ, {"CORS_ORIGINS": '["https://example.com","https://app.com"]'}
    )
    def test_cors_origins_parsing(self):
        """Test JSON-encoded list values are parsed from the environment."""
        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["https://example.com", "https://app.com"]
