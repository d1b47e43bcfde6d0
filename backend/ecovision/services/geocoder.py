"""Nominatim geocoder — resolves free-text place names to coordinates."""

import logging

import httpx

from ecovision.config import Settings, settings as default_settings
from ecovision.models.route import Coordinate

logger = logging.getLogger(__name__)


class Geocoder:
    """Adapter for the OpenStreetMap Nominatim search API.

    Any provider problem (network error, non-2xx, empty or malformed payload)
    is reported as "not found". One round trip per call, no retries.
    """

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = config or default_settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._settings.nominatim_base_url,
                timeout=self._settings.http_timeout_seconds,
                headers={"User-Agent": self._settings.nominatim_user_agent},
                transport=self._transport,
            )
        return self._client

    async def geocode(self, place: str) -> Coordinate | None:
        """Return the best match for a place name, or None."""
        try:
            client = await self._get_client()
            resp = await client.get(
                "/search",
                params={"q": place, "format": "json", "limit": 1},
            )
            resp.raise_for_status()
            data = resp.json()
            if not data:
                logger.warning(f"Geocoding found no match for '{place}'")
                return None
            return Coordinate(lon=float(data[0]["lon"]), lat=float(data[0]["lat"]))
        except httpx.HTTPStatusError as e:
            logger.warning(f"Geocoding failed for '{place}': HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.warning(f"Geocoding request error for '{place}': {e}")
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected geocoding payload for '{place}': {e}")
        return None

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


geocoder = Geocoder()
