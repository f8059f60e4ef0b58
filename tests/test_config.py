"""Tests for application configuration management."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from payoff_planner.config import (
    Settings,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_settings_loads_from_env_file(self, tmp_path):
        """Test that settings can load from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "SECRET_KEY=test-secret-key-from-file\n"
            "APP_ENV=testing\n"
            "STORAGE_TYPE=memory\n"
            "DEFAULT_MONTHS_CAP=360\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings(str(env_file))

        assert settings.secret_key == "test-secret-key-from-file"
        assert settings.app_env == "testing"
        assert settings.storage_type == "memory"
        assert settings.default_months_cap == 360

    def test_secret_key_required(self):
        """Test that SECRET_KEY is required."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY" in str(exc_info.value)

    def test_secret_key_placeholder_rejected(self):
        """Test that placeholder SECRET_KEY is rejected."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "your-secret-key-here-change-in-production"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY must be set to a secure value" in str(exc_info.value)

    def test_app_env_validation(self):
        """Test APP_ENV validation."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "APP_ENV": "staging"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "APP_ENV must be one of" in str(exc_info.value)

    def test_log_level_validation(self):
        """Test LOG_LEVEL validation."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "INVALID_LEVEL"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "LOG_LEVEL must be one of" in str(exc_info.value)

    def test_log_level_case_insensitive(self):
        """Test that LOG_LEVEL is case insensitive."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "debug"},
            clear=True,
        ):
            settings = Settings(_env_file=None)
            assert settings.log_level == "DEBUG"

    def test_storage_type_validation(self):
        """Test STORAGE_TYPE validation."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "STORAGE_TYPE": "s3"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "STORAGE_TYPE must be one of" in str(exc_info.value)

    def test_months_cap_bounds(self):
        """Test that the default month cap must be positive."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "DEFAULT_MONTHS_CAP": "0"},
            clear=True,
        ):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_default_values(self):
        """Test default values when environment variables are not set."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.storage_type == "local"
            assert settings.storage_base_path == "storage"
            assert settings.default_months_cap == 600
            assert settings.default_months_to_record == 24
            assert settings.projection_months == 18
            assert settings.log_level == "INFO"

    def test_environment_variable_aliases(self):
        """Test that environment variable aliases work correctly."""
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "valid-secret-key-123",
                "APP_ENV": "production",
                "STORAGE_TYPE": "memory",
                "STORAGE_BASE_PATH": "/var/lib/payoff",
                "DEFAULT_MONTHS_TO_RECORD": "12",
                "LOG_LEVEL": "ERROR",
            },
            clear=True,
        ):
            settings = Settings(_env_file=None)

            assert settings.app_env == "production"
            assert settings.storage_type == "memory"
            assert settings.storage_base_path == "/var/lib/payoff"
            assert settings.default_months_to_record == 12
            assert settings.log_level == "ERROR"


class TestGlobalSettings:
    """Test cases for the cached global settings."""

    def test_global_settings_cached_until_reset(self):
        """Test that the global settings are created once and can be reset."""
        reset_global_settings()

        with patch.dict(
            os.environ,
            {"SECRET_KEY": "first-secret-key", "STORAGE_TYPE": "memory"},
            clear=True,
        ):
            first = get_global_settings()
            assert get_global_settings() is first

        reset_global_settings()
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "second-secret-key", "STORAGE_TYPE": "memory"},
            clear=True,
        ):
            second = get_global_settings()

        assert second is not first
        assert second.secret_key == "second-secret-key"
        reset_global_settings()
