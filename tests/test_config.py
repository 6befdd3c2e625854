"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from openweathermap_lib.core.config import Settings


class TestSettings:
    """Test configuration settings."""

    def test_default_values(self):
        """Test that default values are loaded correctly."""
        settings = Settings()

        assert settings.GEOCODING_URL == "https://api.openweathermap.org/geo/1.0/zip"
        assert settings.WEATHER_URL == "https://api.openweathermap.org/data/2.5/weather"
        assert settings.UPSTREAM_TIMEOUT == 10.0
        assert settings.DEFAULT_UNITS == "metric"
        assert settings.PORT == 8000
        assert settings.LOG_LEVEL == "INFO"

    def test_log_level_validation(self):
        """Test that log level is validated and normalized."""
        assert Settings(LOG_LEVEL="DEBUG").LOG_LEVEL == "DEBUG"
        assert Settings(LOG_LEVEL="warning").LOG_LEVEL == "WARNING"

        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(LOG_LEVEL="LOUD")

    def test_url_validation(self):
        """Test that endpoint URLs are validated and normalized."""
        settings = Settings(GEOCODING_URL="http://localhost:8080/geo/")
        assert settings.GEOCODING_URL == "http://localhost:8080/geo"

        with pytest.raises(ValidationError, match="must start with http"):
            Settings(WEATHER_URL="api.openweathermap.org/data/2.5/weather")

    def test_units_validation(self):
        """Test that the default unit system must be supported."""
        assert Settings(DEFAULT_UNITS="Imperial").DEFAULT_UNITS == "imperial"

        with pytest.raises(ValidationError, match="DEFAULT_UNITS must be one of"):
            Settings(DEFAULT_UNITS="kelvin")

    def test_numeric_constraints(self):
        """Test that numeric constraints are enforced."""
        Settings(UPSTREAM_TIMEOUT=0.5)
        Settings(PORT=3000)

        with pytest.raises(ValidationError):
            Settings(UPSTREAM_TIMEOUT=0.01)

        with pytest.raises(ValidationError):
            Settings(PORT=70000)

    def test_reads_environment(self, monkeypatch):
        """Test that values are picked up from environment variables."""
        monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_LEVEL", "error")

        settings = Settings()

        assert settings.UPSTREAM_TIMEOUT == 2.5
        assert settings.LOG_LEVEL == "ERROR"
