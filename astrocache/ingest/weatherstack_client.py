"""Weatherstack forecast API client."""

import logging
from dataclasses import dataclass

import httpx

from astrocache.errors import TransportError

logger = logging.getLogger(__name__)

WEATHERSTACK_BASE_URL = "http://api.weatherstack.com"


@dataclass(frozen=True)
class ProviderResponse:
    status_code: int
    body: bytes


class WeatherstackClient:
    def __init__(
        self,
        access_key: str = "",
        base_url: str = WEATHERSTACK_BASE_URL,
        timeout: float = 30.0,
    ):
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_forecast(self, location: str) -> ProviderResponse:
        """Fetch the raw forecast response for a location.

        Status codes are returned as-is; only transport failures raise.
        """
        url = f"{self.base_url}/forecast"
        params = {"access_key": self.access_key, "query": location}
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Weatherstack request failed for %r: %s", location, e)
            raise TransportError(
                f"failed to send request to Weather API: {e}"
            ) from e
        logger.debug("Weatherstack %s -> %d", url, resp.status_code)
        return ProviderResponse(status_code=resp.status_code, body=resp.content)
