"""Emission model — CO₂ factors per transport mode and display rounding."""

import math
from types import MappingProxyType

# kg CO₂ per km
EMISSION_FACTORS = MappingProxyType({
    "car_gas": 0.192,         # average gasoline car
    "car_diesel": 0.171,      # average diesel car
    "car_ev": 0.053,          # electric vehicle, grid average
    "public_transit": 0.041,  # bus/train average
    "bike": 0.0,
    "walk": 0.0,
})


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def emission_factor(key: str) -> float:
    """Look up a factor. Raises KeyError for unknown keys."""
    return EMISSION_FACTORS[key]


def co2_kg(distance_km: float, key: str) -> float:
    """CO₂ for a trip, rounded to 1 decimal."""
    return _round_half_up(distance_km * emission_factor(key), 1)


def round_distance(distance_km: float) -> float:
    return _round_half_up(distance_km, 1)


def round_duration(duration_min: float) -> int:
    return int(_round_half_up(duration_min))
