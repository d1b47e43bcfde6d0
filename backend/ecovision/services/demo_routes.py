"""Demo route set — illustrative options served without calling any provider."""

from ecovision.models.route import RouteOption, TransportMode
from ecovision.services.emission_model import co2_kg

DEMO_DISTANCE_KM = 25.0
DEMO_SUFFIX = " (Demo Data)"


def demo_routes(origin: str, destination: str) -> list[RouteOption]:
    """Fixed ~25 km comparison. Origin and destination only label the request."""
    km = DEMO_DISTANCE_KM
    return [
        RouteOption(
            name="Drive (Electric Vehicle)" + DEMO_SUFFIX,
            distance_km=km,
            duration_min=30,
            co2_kg=co2_kg(km, "car_ev"),
            mode=TransportMode.CAR,
            recommended=True,
        ),
        RouteOption(
            name="Drive (Gas Car)" + DEMO_SUFFIX,
            distance_km=km,
            duration_min=30,
            co2_kg=co2_kg(km, "car_gas"),
            mode=TransportMode.CAR,
        ),
        RouteOption(
            name="Public Transit" + DEMO_SUFFIX,
            distance_km=km,
            duration_min=45,
            co2_kg=co2_kg(km, "public_transit"),
            mode=TransportMode.PUBLIC_TRANSIT,
        ),
        RouteOption(
            name="Bicycle" + DEMO_SUFFIX,
            distance_km=km,
            duration_min=90,
            co2_kg=0.0,
            mode=TransportMode.BIKE,
        ),
    ]
