"""OpenRouteService directions client — distance/duration per travel profile."""

import logging

import httpx

from ecovision.config import Settings, settings as default_settings
from ecovision.models.route import Coordinate, DirectionsResult

logger = logging.getLogger(__name__)

PROFILE_DRIVING = "driving-car"
PROFILE_CYCLING = "cycling-regular"
PROFILE_WALKING = "foot-walking"

_AUTH_STATUS_CODES = (401, 403)


class DirectionsClient:
    """Adapter for the OpenRouteService v2 directions API.

    Never raises for provider problems: every call returns a DirectionsResult
    whose status tells the caller whether to continue or abort.
    """

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = config or default_settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return self._settings.routing_configured

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._settings.openroute_base_url,
                timeout=self._settings.http_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def get_directions(
        self, start: Coordinate, end: Coordinate, profile: str
    ) -> DirectionsResult:
        if not self.configured:
            return DirectionsResult.fatal_auth_failure(profile, "API key not configured")

        try:
            client = await self._get_client()
            resp = await client.get(
                f"/v2/directions/{profile}",
                params={
                    "start": f"{start.lon},{start.lat}",
                    "end": f"{end.lon},{end.lat}",
                },
                headers={
                    "Accept": "application/json",
                    "Authorization": self._settings.openroute_api_key,
                },
            )
        except httpx.TimeoutException as e:
            return DirectionsResult.local_failure(profile, f"timeout: {e}")
        except httpx.RequestError as e:
            return DirectionsResult.local_failure(profile, f"request error: {e}")

        if resp.status_code in _AUTH_STATUS_CODES:
            logger.error(f"OpenRouteService rejected credentials for {profile}: HTTP {resp.status_code}")
            return DirectionsResult.fatal_auth_failure(profile, f"HTTP {resp.status_code}")
        if resp.status_code >= 400:
            return DirectionsResult.local_failure(profile, f"HTTP {resp.status_code}")

        try:
            features = resp.json().get("features") or []
            if not features:
                return DirectionsResult.local_failure(profile, "no route found")
            summary = features[0]["properties"]["summary"]
            # ORS omits distance/duration when origin and destination coincide
            return DirectionsResult.success(
                profile,
                distance_m=float(summary.get("distance", 0.0)),
                duration_s=float(summary.get("duration", 0.0)),
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            return DirectionsResult.local_failure(profile, f"malformed response: {e}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


directions_client = DirectionsClient()
