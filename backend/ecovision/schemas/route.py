from datetime import datetime

from pydantic import BaseModel, Field

from ecovision.models.route import TransportMode


class RouteRequest(BaseModel):
    # Emptiness is checked by the synthesizer so it maps to a 400, not a 422
    origin: str | None = None
    destination: str | None = None


class RouteOptionResponse(BaseModel):
    name: str
    distance_km: float
    duration_min: int
    co2_kg: float
    mode: TransportMode
    recommended: bool

    model_config = {"from_attributes": True}


class EcoRouteResponse(BaseModel):
    origin: str
    destination: str
    routes: list[RouteOptionResponse]
    is_demo: bool = False
    timestamp: datetime


class RouteLogCreate(BaseModel):
    uid: str = Field(..., min_length=1)
    origin: str
    destination: str
    picked_route: str
    saved_co2_kg: float
    distance_km: float = Field(..., ge=0)
    duration_min: int = Field(..., ge=0)


class RouteLogResponse(RouteLogCreate):
    id: str
    timestamp: datetime
