"""Current conditions lookup against the OpenWeatherMap weather API."""

from decimal import Decimal

import httpx
from loguru import logger

from ..core.config import UNIT_SYSTEMS, settings
from ..core.errors import FieldIssue, ValidationFailedError
from ..models.location import Location
from ..models.weather import WeatherResponse
from .http import OpenWeatherMapClient


def _check_units(units: str) -> str:
    if units not in UNIT_SYSTEMS:
        raise ValidationFailedError(
            "WeatherClient",
            (FieldIssue(field="units", value=units, message=f"must be one of {UNIT_SYSTEMS}"),),
        )
    return units


def format_coordinate(value: float) -> str:
    """Render a coordinate as plain decimal text, never in exponent form.

    Example:
        >>> format_coordinate(43.6532)
        '43.6532'
        >>> format_coordinate(0.00005)
        '0.00005'
    """
    return format(Decimal(repr(value)), "f")


class WeatherClient(OpenWeatherMapClient):
    """Fetch current weather conditions for a resolved ``Location``.

    The unit system only changes the ``units`` query parameter (and therefore
    the values OpenWeatherMap returns); validation is unit independent.
    ``WeatherResponse.detailed_display`` reads temperatures as Celsius, so
    render responses fetched with ``metric`` units.

    Example:
        >>> async def example(location):
        ...     async with WeatherClient(location, "metric", "my-api-key") as client:
        ...         response = await client.get_current_weather()
        ...         return response.detailed_display("metric")
    """

    def __init__(
        self,
        location: Location,
        units: str | None = None,
        api_key: str = "",
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(http_client)
        self._location = location
        self._units = _check_units(units or settings.DEFAULT_UNITS)
        self._api_key = api_key
        self._base_url = settings.WEATHER_URL

    @property
    def location(self) -> Location:
        return self._location

    @location.setter
    def location(self, value: Location) -> None:
        self._location = value

    @property
    def units(self) -> str:
        return self._units

    @units.setter
    def units(self, value: str) -> None:
        self._units = _check_units(value)

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value

    async def get_current_weather(self) -> WeatherResponse:
        """Fetch current weather for the configured location.

        Latitude and longitude are sent as stored on the location, as decimal text.

        Returns:
            The parsed weather envelope

        Raises:
            RequestFailedError: If the API returns a non-success status
            DecodeFailedError: If the body is not a valid weather envelope
            TransportFailedError: If the request did not complete
        """
        params = {
            "lat": format_coordinate(self._location.lat),
            "lon": format_coordinate(self._location.lon),
            "units": self._units,
            "appid": self._api_key,
        }
        response = await self._fetch(self._base_url, params, WeatherResponse)

        # cod is informational; the HTTP status already decided success
        if response.cod != 200:
            logger.warning("Weather envelope carries unexpected cod", cod=response.cod)

        logger.debug("Weather fetched", name=response.name, units=self._units)
        return response
