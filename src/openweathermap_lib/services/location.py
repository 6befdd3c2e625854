"""Postal code lookup against the OpenWeatherMap geocoding API."""

import httpx
from loguru import logger

from ..core.config import settings
from ..models.location import Location
from .http import OpenWeatherMapClient


class LocationClient(OpenWeatherMapClient):
    """Resolve a postal code and country code to a ``Location``.

    Query parameters may be changed between calls; nothing from a previous
    lookup is kept.

    Example:
        >>> async def example():
        ...     async with LocationClient("N7L", "CA", "my-api-key") as client:
        ...         location = await client.get_location()
        ...         return location.name
    """

    def __init__(
        self,
        zip_code: str,
        country: str,
        api_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(http_client)
        self._zip = zip_code
        self._country = country
        self._api_key = api_key
        self._base_url = settings.GEOCODING_URL

    @property
    def zip_code(self) -> str:
        return self._zip

    @zip_code.setter
    def zip_code(self, value: str) -> None:
        self._zip = value

    @property
    def country(self) -> str:
        return self._country

    @country.setter
    def country(self, value: str) -> None:
        self._country = value

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value

    async def get_location(self) -> Location:
        """Fetch the location for the configured postal code.

        Returns:
            The resolved location

        Raises:
            RequestFailedError: If the API returns a non-success status
            DecodeFailedError: If the body is not a valid location
            TransportFailedError: If the request did not complete
        """
        params = {
            "zip": f"{self._zip},{self._country}",
            "appid": self._api_key,
        }
        location = await self._fetch(self._base_url, params, Location)

        logger.debug("Location resolved", name=location.name, country=location.country)
        return location

    def detailed_display(self) -> str:
        """Describe the configured query.

        Example:
            >>> LocationClient("N7L", "CA", "key").detailed_display()
            'country: [CA] - zip: [N7L]'
        """
        return f"country: [{self._country}] - zip: [{self._zip}]"
