"""Request-scoped route domain types — coordinates, options, provider outcomes, errors."""

from dataclasses import dataclass
from enum import Enum


class TransportMode(str, Enum):
    CAR = "car"
    PUBLIC_TRANSIT = "public_transit"
    BIKE = "bike"
    WALK = "walk"


class ProfileStatus(str, Enum):
    """Outcome of a single directions profile attempt."""
    SUCCESS = "success"
    LOCAL_FAILURE = "local_failure"
    FATAL_AUTH_FAILURE = "fatal_auth_failure"


class RouteErrorKind(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"
    SERVICE_UNAUTHORIZED = "SERVICE_UNAUTHORIZED"
    NO_ROUTE_AVAILABLE = "NO_ROUTE_AVAILABLE"


@dataclass(frozen=True)
class Coordinate:
    """Longitude/latitude pair, in the order the directions provider expects."""
    lon: float
    lat: float


@dataclass(frozen=True)
class RouteOption:
    name: str
    distance_km: float
    duration_min: int
    co2_kg: float
    mode: TransportMode
    recommended: bool = False


@dataclass(frozen=True)
class DirectionsResult:
    """Success | LocalFailure | FatalFailure for one profile.

    distance_m and duration_s are only set on success.
    """
    profile: str
    status: ProfileStatus
    distance_m: float | None = None
    duration_s: float | None = None
    reason: str | None = None

    @classmethod
    def success(cls, profile: str, distance_m: float, duration_s: float) -> "DirectionsResult":
        return cls(profile, ProfileStatus.SUCCESS, distance_m=distance_m, duration_s=duration_s)

    @classmethod
    def local_failure(cls, profile: str, reason: str) -> "DirectionsResult":
        return cls(profile, ProfileStatus.LOCAL_FAILURE, reason=reason)

    @classmethod
    def fatal_auth_failure(cls, profile: str, reason: str) -> "DirectionsResult":
        return cls(profile, ProfileStatus.FATAL_AUTH_FAILURE, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status == ProfileStatus.SUCCESS

    @property
    def distance_km(self) -> float:
        return (self.distance_m or 0.0) / 1000

    @property
    def duration_min(self) -> float:
        return (self.duration_s or 0.0) / 60


class RouteError(Exception):
    """Typed failure of an eco-route request."""

    def __init__(self, kind: RouteErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
