"""Request and response envelopes exchanged with the host bridge."""

from typing import Literal

from pydantic import Field

from .base import ValidatedModel
from .location import Location


class BridgeRequest(ValidatedModel):
    """Serialized lookup request sent by the host runtime.

    Example:
        >>> req = BridgeRequest.model_validate_json(
        ...     '{"zip": "N7L", "country": "CA", "units": "metric", "api_key": "K"}'
        ... )
        >>> req.units
        'metric'
    """

    zip: str = Field(..., description="ZIP or postal code")
    country: str = Field(..., description="Two-letter country code")
    units: Literal["metric", "imperial", "standard"] = Field(
        ...,
        description="Unit system for the weather lookup",
    )
    api_key: str = Field(..., description="OpenWeatherMap API key")


class BridgeResponse(ValidatedModel):
    """Serialized outcome returned to the host runtime.

    ``weather`` holds the weather envelope as JSON text, not as a nested
    object. It is empty whenever ``error`` is set.
    """

    location: Location
    weather: str = Field("", description="Weather envelope serialized as JSON text")
    error: str | None = Field(None, description="Failure message, null on success")

    @classmethod
    def failure(cls, message: str, location: Location | None = None) -> "BridgeResponse":
        """Build an error envelope, defaulting to the all-empty location.

        Example:
            >>> BridgeResponse.failure("Location error: timeout").location.name
            ''
        """
        return cls(
            location=location if location is not None else Location.placeholder(),
            weather="",
            error=message,
        )
