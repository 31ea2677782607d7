"""Geospatial helpers: distances, ranking, directions links and position lookup."""

from .directions import (
    DirectionsLauncher,
    LaunchResult,
    UrlOpener,
    WebBrowserOpener,
    build_directions_url,
    build_embed_map_url,
    build_fallback_url,
)
from .distance import EARTH_RADIUS_KM, distance_km, format_distance
from .position import GeocodedPositionProvider, StaticPositionProvider
from .ranking import nearest_bin, rank_bins
from .resolver import AddressPositionResolver, parse_coordinate

__all__ = [
    "AddressPositionResolver",
    "DirectionsLauncher",
    "EARTH_RADIUS_KM",
    "GeocodedPositionProvider",
    "LaunchResult",
    "StaticPositionProvider",
    "UrlOpener",
    "WebBrowserOpener",
    "build_directions_url",
    "build_embed_map_url",
    "build_fallback_url",
    "distance_km",
    "format_distance",
    "nearest_bin",
    "parse_coordinate",
    "rank_bins",
]
