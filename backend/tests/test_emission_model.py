import pytest

from ecovision.services.emission_model import (
    EMISSION_FACTORS,
    co2_kg,
    emission_factor,
    round_distance,
    round_duration,
)


def test_factor_table_values():
    assert EMISSION_FACTORS["car_gas"] == 0.192
    assert EMISSION_FACTORS["car_diesel"] == 0.171
    assert EMISSION_FACTORS["car_ev"] == 0.053
    assert EMISSION_FACTORS["public_transit"] == 0.041
    assert EMISSION_FACTORS["bike"] == 0.0
    assert EMISSION_FACTORS["walk"] == 0.0


def test_factor_table_is_read_only():
    with pytest.raises(TypeError):
        EMISSION_FACTORS["car_gas"] = 0.5


def test_unknown_factor_raises():
    with pytest.raises(KeyError):
        emission_factor("rocket")


@pytest.mark.parametrize(
    "distance, key, expected",
    [
        (346, "car_gas", 66.4),
        (346, "car_ev", 18.3),
        (346, "public_transit", 14.2),
        (12.5, "bike", 0.0),
        (0, "car_gas", 0.0),
    ],
)
def test_co2_kg(distance, key, expected):
    assert co2_kg(distance, key) == expected


def test_rounding_is_half_up():
    assert round_distance(2.25) == 2.3
    assert round_duration(2.5) == 3
    assert round_duration(3.5) == 4
    assert round_duration(312.0) == 312


def test_rounding_is_deterministic():
    assert [co2_kg(123.456, "car_gas") for _ in range(5)] == [23.7] * 5
