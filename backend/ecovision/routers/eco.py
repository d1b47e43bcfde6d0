"""Eco-route router — compare transport options by distance, time and CO₂."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from ecovision.dependencies import get_route_synthesizer
from ecovision.models.route import RouteError, RouteErrorKind, RouteOption
from ecovision.schemas.route import EcoRouteResponse, RouteOptionResponse, RouteRequest
from ecovision.services.demo_routes import demo_routes
from ecovision.services.route_synthesizer import RouteSynthesizer

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_STATUS = {
    RouteErrorKind.VALIDATION_ERROR: 400,
    RouteErrorKind.LOCATION_NOT_FOUND: 400,
    RouteErrorKind.SERVICE_UNAUTHORIZED: 503,
    RouteErrorKind.NO_ROUTE_AVAILABLE: 502,
}


def _to_http(error: RouteError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS.get(error.kind, 502),
        detail=error.message,
        headers={"X-Error-Kind": error.kind.value},
    )


def _response(
    origin: str, destination: str, routes: list[RouteOption], is_demo: bool
) -> EcoRouteResponse:
    return EcoRouteResponse(
        origin=origin,
        destination=destination,
        routes=[RouteOptionResponse.model_validate(r) for r in routes],
        is_demo=is_demo,
        timestamp=datetime.now(timezone.utc),
    )


@router.post("/route", response_model=EcoRouteResponse)
async def find_eco_routes(
    request: RouteRequest,
    synthesizer: RouteSynthesizer = Depends(get_route_synthesizer),
):
    """Compute comparable transport options between two places."""
    try:
        routes = await synthesizer.compute_routes(request.origin, request.destination)
    except RouteError as e:
        if e.kind == RouteErrorKind.SERVICE_UNAUTHORIZED:
            logger.error(f"Eco route unavailable: {e.message}")
        else:
            logger.warning(f"Eco route failed ({e.kind.value}): {e.message}")
        raise _to_http(e)

    return _response(request.origin, request.destination, routes, is_demo=False)


@router.post("/route/demo", response_model=EcoRouteResponse)
async def find_demo_routes(request: RouteRequest):
    """Illustrative route comparison that needs no routing credentials."""
    if not (request.origin or "").strip() or not (request.destination or "").strip():
        raise _to_http(RouteError(
            RouteErrorKind.VALIDATION_ERROR,
            "Both origin and destination are required.",
        ))
    return _response(
        request.origin,
        request.destination,
        demo_routes(request.origin, request.destination),
        is_demo=True,
    )
