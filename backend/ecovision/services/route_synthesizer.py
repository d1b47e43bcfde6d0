"""Route synthesizer — builds comparable eco-route options for an origin/destination pair.

Pipeline:
    validate → geocode origin + destination (concurrent)
    → directions for driving / cycling / walking (concurrent)
    → car options, bike, walk, derived transit
    → recommendation fixup

Per-profile provider failures never abort siblings. Only a rejected or missing
directions credential on the driving profile fails the whole request.
"""

import asyncio
import logging
from dataclasses import replace

from ecovision.models.route import (
    Coordinate,
    DirectionsResult,
    ProfileStatus,
    RouteError,
    RouteErrorKind,
    RouteOption,
    TransportMode,
)
from ecovision.services.directions_client import (
    PROFILE_CYCLING,
    PROFILE_DRIVING,
    PROFILE_WALKING,
    DirectionsClient,
    directions_client as default_directions_client,
)
from ecovision.services.emission_model import co2_kg, round_distance, round_duration
from ecovision.services.geocoder import Geocoder, geocoder as default_geocoder

logger = logging.getLogger(__name__)

BIKE_RECOMMEND_MAX_KM = 15
WALK_INCLUDE_MAX_KM = 8
WALK_RECOMMEND_MAX_KM = 3
TRANSIT_RECOMMEND_MIN_KM = 5
TRANSIT_DURATION_FACTOR = 1.3


# ─── Pure option builders ───


def car_options(driving: DirectionsResult) -> list[RouteOption]:
    """Gas and EV options share one driving result; only emissions differ."""
    distance_km = driving.distance_km
    shared = {
        "distance_km": round_distance(distance_km),
        "duration_min": round_duration(driving.duration_min),
        "mode": TransportMode.CAR,
    }
    return [
        RouteOption(
            name="Drive (Gas Car)",
            co2_kg=co2_kg(distance_km, "car_gas"),
            recommended=False,
            **shared,
        ),
        RouteOption(
            name="Drive (Electric Vehicle)",
            co2_kg=co2_kg(distance_km, "car_ev"),
            recommended=True,
            **shared,
        ),
    ]


def bike_option(cycling: DirectionsResult) -> RouteOption:
    distance_km = cycling.distance_km
    shown_km = round_distance(distance_km)
    return RouteOption(
        name="Bicycle",
        distance_km=shown_km,
        duration_min=round_duration(cycling.duration_min),
        co2_kg=co2_kg(distance_km, "bike"),
        mode=TransportMode.BIKE,
        recommended=shown_km < BIKE_RECOMMEND_MAX_KM,
    )


def walk_option(walking: DirectionsResult) -> RouteOption | None:
    """None when the walk is too long to be a meaningful alternative.

    Thresholds compare the displayed (rounded) distance.
    """
    distance_km = walking.distance_km
    shown_km = round_distance(distance_km)
    if shown_km >= WALK_INCLUDE_MAX_KM:
        return None
    return RouteOption(
        name="Walk",
        distance_km=shown_km,
        duration_min=round_duration(walking.duration_min),
        co2_kg=co2_kg(distance_km, "walk"),
        mode=TransportMode.WALK,
        recommended=shown_km < WALK_RECOMMEND_MAX_KM,
    )


def derive_transit_option(options: list[RouteOption]) -> RouteOption | None:
    """Estimate public transit from the first car option, if there is one."""
    car = next((o for o in options if o.mode == TransportMode.CAR), None)
    if car is None:
        return None
    return RouteOption(
        name="Public Transit",
        distance_km=car.distance_km,
        duration_min=round_duration(car.duration_min * TRANSIT_DURATION_FACTOR),
        co2_kg=co2_kg(car.distance_km, "public_transit"),
        mode=TransportMode.PUBLIC_TRANSIT,
        recommended=car.distance_km > TRANSIT_RECOMMEND_MIN_KM,
    )


def reconcile_recommendation(options: list[RouteOption]) -> list[RouteOption]:
    """Guarantee at least one recommended option.

    If none is flagged, the lowest-CO₂ option wins (first one on ties).
    Several independently flagged options are left as they are.
    """
    if not options or any(o.recommended for o in options):
        return list(options)
    greenest = min(range(len(options)), key=lambda i: options[i].co2_kg)
    return [
        replace(o, recommended=True) if i == greenest else o
        for i, o in enumerate(options)
    ]


def assemble_options(
    driving: DirectionsResult,
    cycling: DirectionsResult,
    walking: DirectionsResult,
) -> list[RouteOption]:
    """Build the option list, in construction order: car, bike, walk, transit."""
    options: list[RouteOption] = []

    if driving.ok:
        options.extend(car_options(driving))
    if cycling.ok:
        options.append(bike_option(cycling))
    if walking.ok:
        walk = walk_option(walking)
        if walk is not None:
            options.append(walk)

    transit = derive_transit_option(options)
    if transit is not None:
        options.append(transit)

    return reconcile_recommendation(options)


# ─── Orchestration ───


class RouteSynthesizer:
    """Coordinates geocoding and per-profile directions into route options."""

    def __init__(
        self,
        geocoder: Geocoder | None = None,
        directions: DirectionsClient | None = None,
    ):
        self._geocoder = geocoder or default_geocoder
        self._directions = directions or default_directions_client

    async def compute_routes(self, origin: str, destination: str) -> list[RouteOption]:
        """Return comparable route options or raise RouteError."""
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        if not origin or not destination:
            raise RouteError(
                RouteErrorKind.VALIDATION_ERROR,
                "Both origin and destination are required.",
            )

        if not self._directions.configured:
            raise RouteError(
                RouteErrorKind.SERVICE_UNAUTHORIZED,
                "OpenRouteService API key not configured. Please add OPENROUTE_API_KEY "
                "to the environment or use demo mode.",
            )

        start, end = await self._resolve(origin, destination)

        driving, cycling, walking = await asyncio.gather(
            self._directions.get_directions(start, end, PROFILE_DRIVING),
            self._directions.get_directions(start, end, PROFILE_CYCLING),
            self._directions.get_directions(start, end, PROFILE_WALKING),
        )

        if driving.status == ProfileStatus.FATAL_AUTH_FAILURE:
            logger.error(f"Directions credential rejected ({driving.reason}); aborting route request")
            raise RouteError(
                RouteErrorKind.SERVICE_UNAUTHORIZED,
                "OpenRouteService rejected the API key. Please verify OPENROUTE_API_KEY is valid.",
            )

        for result in (driving, cycling, walking):
            if not result.ok:
                logger.warning(f"Could not get {result.profile} route: {result.reason}")

        options = assemble_options(driving, cycling, walking)
        if not options:
            raise RouteError(
                RouteErrorKind.NO_ROUTE_AVAILABLE,
                f"No route could be calculated between '{origin}' and '{destination}'. "
                "The routing service may be unavailable.",
            )

        logger.info(
            f"Eco routes {origin} -> {destination}: "
            f"{', '.join(o.name for o in options)}"
        )
        return options

    async def _resolve(self, origin: str, destination: str) -> tuple[Coordinate, Coordinate]:
        start, end = await asyncio.gather(
            self._geocoder.geocode(origin),
            self._geocoder.geocode(destination),
        )
        missing = [place for place, coord in ((origin, start), (destination, end)) if coord is None]
        if missing:
            names = " and ".join(f"'{m}'" for m in missing)
            raise RouteError(
                RouteErrorKind.LOCATION_NOT_FOUND,
                f"Unable to find {names}. Please check the location names and try again.",
            )
        return start, end


route_synthesizer = RouteSynthesizer()
