"""
Tests for filterset/core/config.py
"""

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for the Settings class."""

    def test_settings_singleton(self):
        """Test that get_settings returns the same instance."""
        from filterset.core.config import get_settings

        assert get_settings() is get_settings()

    def test_settings_default_values(self):
        """Test default configuration values."""
        from filterset.core.config import Settings

        settings = Settings(_env_file=None)
        assert settings.FILTERSET_ENV == "development"
        assert settings.FILTER_CAMELIZE_FIELD_NAMES is True
        assert settings.FILTER_LOG_PREDICATES is False

    def test_settings_env_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        from filterset.core.config import Settings

        monkeypatch.setenv("FILTER_CAMELIZE_FIELD_NAMES", "false")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)
        assert settings.FILTER_CAMELIZE_FIELD_NAMES is False
        assert settings.DEBUG is True

    def test_log_level_is_normalised(self):
        """Test that the log level is upper-cased."""
        from filterset.core.config import Settings

        settings = Settings(_env_file=None, LOG_LEVEL="debug")
        assert settings.LOG_LEVEL == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test that an unknown log level fails validation."""
        from filterset.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")
