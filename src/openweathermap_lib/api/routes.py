"""API routes exposing the host bridge over HTTP."""

from fastapi import APIRouter, Request, Response
from loguru import logger

from ..services.bridge import get_weather_data

router = APIRouter()


@router.post(
    "/v1/weather",
    summary="Resolve a postal code and fetch current weather",
    description=(
        "Accepts the bridge request JSON and returns the bridge response JSON. "
        "Failures are reported in the `error` field; the status code is always 200."
    ),
    responses={
        200: {
            "description": "Bridge response envelope",
            "content": {
                "application/json": {
                    "example": {
                        "location": {
                            "zip": "N7L",
                            "name": "Chatham",
                            "lat": 42.4048,
                            "lon": -82.191,
                            "country": "CA",
                        },
                        "weather": '{"coord": {"lon": -82.191, "lat": 42.4048}, "...": "..."}',
                        "error": None,
                    }
                }
            },
        },
    },
)
async def weather_bridge(request: Request) -> Response:
    """Hand the raw request body to the bridge and return its output verbatim.

    Example:
        >>> # POST /v1/weather {"zip": "N7L", "country": "CA", "units": "metric", "api_key": "..."}
        >>> # Returns: {"location": {...}, "weather": "{...}", "error": null}
    """
    body = await request.body()

    # The body carries the API key and is not logged
    logger.info("Bridge request received", size=len(body))

    payload = await get_weather_data(body)
    return Response(content=payload, media_type="application/json")
