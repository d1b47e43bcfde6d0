from ecovision.models.route import (
    Coordinate,
    DirectionsResult,
    ProfileStatus,
    RouteError,
    RouteErrorKind,
    RouteOption,
    TransportMode,
)

__all__ = [
    "Coordinate",
    "DirectionsResult",
    "ProfileStatus",
    "RouteError",
    "RouteErrorKind",
    "RouteOption",
    "TransportMode",
]
