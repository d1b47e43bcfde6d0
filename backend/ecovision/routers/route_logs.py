"""Route history router — record and list the routes a user picked."""

from fastapi import APIRouter, Depends

from ecovision.dependencies import get_route_log_store
from ecovision.schemas.route import RouteLogCreate, RouteLogResponse
from ecovision.services.route_log_store import RouteLogStore

router = APIRouter()


@router.get("/history/{uid}", response_model=list[RouteLogResponse])
async def get_route_history(
    uid: str,
    store: RouteLogStore = Depends(get_route_log_store),
):
    return await store.get_route_logs(uid)


@router.post("/log", response_model=RouteLogResponse)
async def log_route(
    body: RouteLogCreate,
    store: RouteLogStore = Depends(get_route_log_store),
):
    """Save the option a user chose from an eco-route comparison."""
    return await store.add_route_log(body)
