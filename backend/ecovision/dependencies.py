from ecovision.services.route_log_store import RouteLogStore, route_log_store
from ecovision.services.route_synthesizer import RouteSynthesizer, route_synthesizer


def get_route_synthesizer() -> RouteSynthesizer:
    return route_synthesizer


def get_route_log_store() -> RouteLogStore:
    return route_log_store
