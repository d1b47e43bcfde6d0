import httpx
import pytest

from ecovision.config import Settings
from ecovision.models.route import Coordinate, DirectionsResult
from ecovision.services.directions_client import (
    PROFILE_CYCLING,
    PROFILE_DRIVING,
    PROFILE_WALKING,
    DirectionsClient,
)
from ecovision.services.geocoder import Geocoder
from ecovision.services.route_synthesizer import RouteSynthesizer

NEW_YORK = Coordinate(lon=-74.006, lat=40.7128)
BOSTON = Coordinate(lon=-71.0589, lat=42.3601)


class StubGeocoder:
    """Resolves names from a fixed table; unknown names are 'not found'."""

    def __init__(self, places: dict[str, Coordinate] | None = None):
        self.places = places if places is not None else {"New York": NEW_YORK, "Boston": BOSTON}
        self.calls: list[str] = []

    async def geocode(self, place: str) -> Coordinate | None:
        self.calls.append(place)
        return self.places.get(place)


class StubDirections:
    """Returns canned results per profile; missing profiles fail locally."""

    def __init__(self, results: dict[str, DirectionsResult] | None = None, configured: bool = True):
        self.results = results or {}
        self.configured = configured
        self.calls: list[str] = []

    async def get_directions(self, start, end, profile: str) -> DirectionsResult:
        self.calls.append(profile)
        return self.results.get(profile, DirectionsResult.local_failure(profile, "no route found"))


def ok(profile: str, km: float, minutes: float) -> DirectionsResult:
    return DirectionsResult.success(profile, distance_m=km * 1000, duration_s=minutes * 60)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        openroute_api_key="test-key",
        openroute_base_url="https://ors.test",
        nominatim_base_url="https://nominatim.test",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def make_synthesizer():
    """Build a RouteSynthesizer over stub providers.

    Usage: make_synthesizer(driving=(km, min), cycling=..., walking=..., overrides={...})
    """

    def _make(
        driving: tuple[float, float] | None = None,
        cycling: tuple[float, float] | None = None,
        walking: tuple[float, float] | None = None,
        overrides: dict[str, DirectionsResult] | None = None,
        places: dict[str, Coordinate] | None = None,
        configured: bool = True,
    ):
        results: dict[str, DirectionsResult] = {}
        for profile, value in (
            (PROFILE_DRIVING, driving),
            (PROFILE_CYCLING, cycling),
            (PROFILE_WALKING, walking),
        ):
            if value is not None:
                results[profile] = ok(profile, *value)
        results.update(overrides or {})
        geo = StubGeocoder(places)
        directions = StubDirections(results, configured=configured)
        return RouteSynthesizer(geocoder=geo, directions=directions), geo, directions

    return _make


@pytest.fixture
def new_york() -> Coordinate:
    return NEW_YORK


@pytest.fixture
def boston() -> Coordinate:
    return BOSTON


@pytest.fixture
async def directions_for(test_settings):
    """DirectionsClient over a MockTransport handler; closed after the test."""
    created: list[DirectionsClient] = []

    def _make(handler, config: Settings | None = None) -> DirectionsClient:
        client = DirectionsClient(config=config or test_settings, transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    yield _make
    for client in created:
        await client.close()


@pytest.fixture
async def geocoder_for(test_settings):
    """Geocoder over a MockTransport handler; closed after the test."""
    created: list[Geocoder] = []

    def _make(handler) -> Geocoder:
        geocoder = Geocoder(config=test_settings, transport=httpx.MockTransport(handler))
        created.append(geocoder)
        return geocoder

    yield _make
    for geocoder in created:
        await geocoder.close()
