"""Unit tests for the haversine distance helpers."""
from __future__ import annotations

import pytest

from bin_locator.core.entities import Coordinate
from bin_locator.infrastructure.geo.distance import EARTH_RADIUS_KM, distance_km, format_distance

ERODE = Coordinate(11.341, 77.7172)
THINDAL = Coordinate(11.343, 77.695)
KARUR = Coordinate(10.9601, 78.0766)


@pytest.mark.parametrize(
    "point",
    [ERODE, Coordinate(0.0, 0.0), Coordinate(-89.9, 179.9), Coordinate(90.0, -180.0)],
)
def test_distance_to_itself_is_zero(point: Coordinate) -> None:
    assert distance_km(point, point) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (ERODE, THINDAL),
        (ERODE, KARUR),
        (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
        (Coordinate(0.0, 179.5), Coordinate(0.0, -179.5)),
    ],
)
def test_distance_is_symmetric(a: Coordinate, b: Coordinate) -> None:
    assert distance_km(a, b) == distance_km(b, a)


def test_distance_between_erode_and_thindal_bins() -> None:
    assert distance_km(ERODE, THINDAL) == pytest.approx(2.43, abs=0.01)


def test_distance_of_antipodal_points_is_half_circumference() -> None:
    distance = distance_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))

    assert distance == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)


def test_distance_crosses_the_antimeridian() -> None:
    assert distance_km(Coordinate(0.0, 179.5), Coordinate(0.0, -179.5)) == pytest.approx(111.19, abs=0.01)


def test_format_distance_uses_two_decimals() -> None:
    assert format_distance(2.2449) == "2.24 km"
    assert format_distance(0) == "0.00 km"
