"""Great-circle distance helpers."""
from __future__ import annotations

import math

from bin_locator.core.entities import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance in kilometres between two coordinates.

    Inputs are expected to be within the WGS-84 range; they are not validated here.
    The result is symmetric in its arguments and zero for identical points.
    """

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    # abs() keeps the result bit-identical when the arguments are swapped.
    dlat = abs(lat2 - lat1)
    dlon = abs(math.radians(b.longitude) - math.radians(a.longitude))

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def format_distance(km: float) -> str:
    return f"{km:.2f} km"


__all__ = ["EARTH_RADIUS_KM", "distance_km", "format_distance"]
