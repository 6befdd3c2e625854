"""Library configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UNIT_SYSTEMS = ("metric", "imperial", "standard")


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Only transport and logging behaviour is configurable here. The API key is
    always supplied by the caller and is never read from the environment.

    Example:
        >>> settings = Settings()
        >>> settings.UPSTREAM_TIMEOUT >= 0.1
        True
        >>> settings.DEFAULT_UNITS
        'metric'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Upstream API Configuration
    GEOCODING_URL: str = Field(
        default="https://api.openweathermap.org/geo/1.0/zip",
        description="OpenWeatherMap postal code lookup endpoint",
    )
    WEATHER_URL: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current conditions endpoint",
    )
    UPSTREAM_TIMEOUT: float = Field(
        default=10.0,
        description="Timeout for OpenWeatherMap requests in seconds",
        ge=0.1,
        le=60.0,
    )
    DEFAULT_UNITS: str = Field(
        default="metric",
        description="Unit system used when a caller does not choose one",
    )

    # Server Configuration
    PORT: int = Field(
        default=8000,
        description="Port of the bridge HTTP host",
        ge=1,
        le=65535,
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Environment Configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that LOG_LEVEL is a valid logging level.

        Example:
            >>> Settings(LOG_LEVEL="info").LOG_LEVEL
            'INFO'
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}, got {v}")
        return v_upper

    @field_validator("GEOCODING_URL", "WEATHER_URL")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that an endpoint URL is absolute and strip the trailing slash.

        Example:
            >>> Settings(WEATHER_URL="https://api.example.com/").WEATHER_URL
            'https://api.example.com'
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint URLs must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("DEFAULT_UNITS")
    @classmethod
    def validate_units(cls, v: str) -> str:
        """Validate that DEFAULT_UNITS names a supported unit system."""
        v_lower = v.lower()
        if v_lower not in UNIT_SYSTEMS:
            raise ValueError(f"DEFAULT_UNITS must be one of {UNIT_SYSTEMS}, got {v}")
        return v_lower


# Global settings instance
settings = Settings()
