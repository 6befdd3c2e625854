"""Host bridge: JSON request text in, JSON response text out."""

from collections.abc import Awaitable, Callable

from loguru import logger
from opentelemetry import metrics
from pydantic import ValidationError

from ..core.errors import RequestParseFailedError
from ..models.bridge import BridgeRequest, BridgeResponse
from ..models.location import Location
from ..models.weather import WeatherResponse
from .location import LocationClient
from .weather import WeatherClient

LocationResolver = Callable[[str, str, str], Awaitable[Location]]
WeatherResolver = Callable[[Location, str, str], Awaitable[WeatherResponse]]

meter = metrics.get_meter(__name__)
error_envelopes = meter.create_counter(
    "bridge_error_envelopes",
    description="Error envelopes returned by the bridge, by failing stage",
)


async def resolve_location(zip_code: str, country: str, api_key: str) -> Location:
    """Default location resolver backed by ``LocationClient``."""
    async with LocationClient(zip_code, country, api_key) as client:
        return await client.get_location()


async def resolve_weather(location: Location, units: str, api_key: str) -> WeatherResponse:
    """Default weather resolver backed by ``WeatherClient``."""
    async with WeatherClient(location, units, api_key) as client:
        return await client.get_current_weather()


def parse_request(request_json: str | bytes) -> BridgeRequest:
    """Decode the host request.

    Raises:
        RequestParseFailedError: If the text is not JSON or misses a field

    Example:
        >>> parse_request('{"zip": "N7L", "country": "CA", "units": "metric", "api_key": "K"}').zip
        'N7L'
    """
    try:
        return BridgeRequest.model_validate_json(request_json)
    except ValidationError as e:
        raise RequestParseFailedError(str(e)) from e


async def get_weather_data(
    request_json: str | bytes,
    *,
    location_resolver: LocationResolver = resolve_location,
    weather_resolver: WeatherResolver = resolve_weather,
) -> str:
    """Run one location lookup then one weather lookup and serialize the outcome.

    This is the boundary towards the host runtime and never raises: every
    failure becomes an error envelope ``{"location": ..., "weather": "",
    "error": "..."}``. On success ``weather`` holds the weather envelope as
    JSON text and ``error`` is null.

    Args:
        request_json: ``{"zip", "country", "units", "api_key"}`` as JSON text
        location_resolver: Coroutine resolving (zip, country, api_key) to a Location
        weather_resolver: Coroutine resolving (location, units, api_key) to a WeatherResponse

    Returns:
        The response envelope as JSON text
    """
    logger.debug("Bridge called")

    try:
        request = parse_request(request_json)
    except RequestParseFailedError as e:
        logger.warning("Bridge request could not be parsed", error=str(e))
        error_envelopes.add(1, {"stage": "request"})
        return BridgeResponse.failure(f"Invalid request: {e}").model_dump_json()

    try:
        location = await location_resolver(request.zip, request.country, request.api_key)
    except Exception as e:
        logger.warning("Location lookup failed", error=str(e), error_type=type(e).__name__)
        error_envelopes.add(1, {"stage": "location"})
        return BridgeResponse.failure(f"Location error: {e}").model_dump_json()

    logger.debug("Location found", name=location.name, country=location.country)

    try:
        weather = await weather_resolver(location, request.units, request.api_key)
    except Exception as e:
        logger.warning("Weather lookup failed", error=str(e), error_type=type(e).__name__)
        error_envelopes.add(1, {"stage": "weather"})
        return BridgeResponse.failure(f"Weather error: {e}", location=location).model_dump_json()

    logger.debug("Weather fetch complete", name=weather.name)

    try:
        return BridgeResponse(
            location=location,
            weather=weather.model_dump_json(by_alias=True),
            error=None,
        ).model_dump_json()
    except Exception as e:
        logger.exception("Bridge response serialization failed")
        error_envelopes.add(1, {"stage": "serialization"})
        return BridgeResponse.failure(
            f"Weather serialization error: {e}", location=location
        ).model_dump_json()
