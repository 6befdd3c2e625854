"""Shared HTTP plumbing for the OpenWeatherMap resolvers."""

from typing import Any

import httpx
from loguru import logger

from ..core.config import settings
from ..core.errors import (
    DecodeFailedError,
    RequestFailedError,
    TransportFailedError,
    ValidationFailedError,
)
from ..models.base import ValidatedModel


class OpenWeatherMapClient:
    """Base for resolvers that perform one GET against OpenWeatherMap.

    Uses httpx for async HTTP requests. Owns its ``httpx.AsyncClient`` when
    used as an async context manager; a client passed in by the caller is
    used as-is and left open on exit. No retries are attempted.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = settings.UPSTREAM_TIMEOUT

    async def __aenter__(self):
        """Async context manager entry."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _fetch(
        self,
        url: str,
        params: dict[str, str],
        model: type[ValidatedModel],
    ) -> Any:
        """Issue the GET request and decode the body into ``model``.

        Raises:
            RequestFailedError: If the API answers with a non-2xx status
            DecodeFailedError: If the body is not JSON or does not fit ``model``
            TransportFailedError: If the request did not complete
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            # params carry appid and are never logged
            logger.debug("Requesting OpenWeatherMap", url=url, model=model.__name__)
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.warning("OpenWeatherMap request timed out", url=url)
            raise TransportFailedError("Upstream API request timed out") from e
        except httpx.TransportError as e:
            logger.warning("OpenWeatherMap request failed", url=url, error=str(e))
            raise TransportFailedError(f"Network error: {e}") from e
        except httpx.DecodingError as e:
            logger.warning("OpenWeatherMap body could not be decoded", url=url, error=str(e))
            raise DecodeFailedError(f"Response body could not be decoded: {e}") from e
        except httpx.HTTPError as e:
            logger.error("HTTP error occurred", url=url, error=str(e))
            raise TransportFailedError(f"Network error: {e}") from e

        if not response.is_success:
            logger.warning(
                "OpenWeatherMap returned error status",
                url=url,
                status_code=response.status_code,
            )
            raise RequestFailedError(response.status_code, url=url)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("OpenWeatherMap returned a non-JSON body", url=url)
            raise DecodeFailedError(f"Response body is not valid JSON: {e}") from e

        try:
            return model.parse(payload)
        except ValidationFailedError as e:
            logger.warning(
                "OpenWeatherMap response did not match schema",
                url=url,
                model=model.__name__,
                fields=[issue.field for issue in e.issues],
            )
            raise DecodeFailedError(
                f"Response body does not match {model.__name__}: {e}",
                errors=e.issues,
            ) from e
