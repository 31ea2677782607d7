"""Resolve the user's position from typed coordinates or a free-text address."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from geopy.exc import GeocoderServiceError
from geopy.geocoders import Nominatim
from geopy.point import Point

from bin_locator.core.entities import Coordinate, InvalidCoordinateError
from bin_locator.utils.logger import logger

_DECIMAL_PAIR_PATTERN = re.compile(
    r"(?P<lat>[+-]?\d+(?:\.\d*)?|[+-]?\.\d+)\s*[,;\s]\s*(?P<lng>[+-]?\d+(?:\.\d*)?|[+-]?\.\d+)"
)


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"lat,lng"`` (or any format geopy understands) into a coordinate.

    Plain decimal pairs are range-checked as typed; geopy would otherwise wrap
    longitudes such as 200 into [-180, 180].
    """

    cleaned = text.strip()
    if not cleaned:
        raise InvalidCoordinateError("Empty coordinate string")

    match = _DECIMAL_PAIR_PATTERN.fullmatch(cleaned)
    if match:
        return Coordinate.checked(float(match.group("lat")), float(match.group("lng")))

    try:
        point = Point.from_string(cleaned)
    except ValueError as error:
        raise InvalidCoordinateError(f"Could not parse coordinate {text!r}: {error}") from error

    return Coordinate.checked(point.latitude, point.longitude)


@dataclass
class AddressPositionResolver:
    """Geocode an address into a user position restricted to a bounding box."""

    user_agent: str = "bin-locator"
    timeout: int = 5
    country_codes: str = "in"
    language: str = "en"
    viewbox: tuple[tuple[float, float], tuple[float, float]] = (
        (13.56, 76.23),  # North-West corner of Tamil Nadu
        (8.07, 80.35),  # South-East corner of Tamil Nadu
    )
    fallback_localities: tuple[str, ...] = ("Tamil Nadu",)

    def __post_init__(self) -> None:
        self._geolocator = Nominatim(user_agent=self.user_agent, timeout=self.timeout)

    def resolve(self, address: str) -> Optional[Coordinate]:
        """Return the coordinate for ``address`` or ``None`` when it cannot be found."""

        normalized = re.sub(r"\s+", " ", address).strip(" ,.-")
        if not normalized:
            return None

        viewbox = self._format_viewbox()
        for candidate in self._build_candidate_queries(normalized):
            try:
                location = self._geolocator.geocode(
                    candidate,
                    language=self.language,
                    country_codes=self.country_codes,
                    viewbox=viewbox,
                    bounded=True,
                )
            except (GeocoderServiceError, ValueError) as error:
                logger.warning("Geocoding failed for {}: {}", candidate, error)
                continue

            if location is None:
                continue

            address_payload = getattr(location, "raw", {}).get("address", {})
            country_code = self._infer_country_code(address_payload)
            if country_code and country_code not in self._allowed_country_codes():
                logger.info("Discarded {} outside the configured countries", candidate)
                continue

            try:
                coordinate = Coordinate.checked(location.latitude, location.longitude)
            except InvalidCoordinateError as error:
                logger.warning("Geocoder returned an invalid coordinate: {}", error)
                continue

            logger.debug("Resolved {} to {}", candidate, coordinate)
            return coordinate

        logger.info("No coordinates found for {}", normalized)
        return None

    def _build_candidate_queries(self, normalized: str) -> list[str]:
        queries = [normalized]
        for locality in self.fallback_localities:
            queries.append(f"{normalized}, {locality}")
        return self._dedupe(queries)

    @staticmethod
    def _dedupe(values: Iterable[str]) -> list[str]:
        unique: list[str] = []
        seen: set[str] = set()
        for value in values:
            key = value.lower()
            if key in seen:
                continue
            seen.add(key)
            unique.append(value)
        return unique

    def _allowed_country_codes(self) -> set[str]:
        return {code.strip().lower() for code in self.country_codes.split(",") if code.strip()}

    def _format_viewbox(self) -> tuple[Point, Point]:
        """Return a geopy-compatible bounding box ordered south-west to north-east."""
        (lat1, lon1), (lat2, lon2) = self.viewbox

        south = min(lat1, lat2)
        north = max(lat1, lat2)
        west = min(lon1, lon2)
        east = max(lon1, lon2)

        return (Point(latitude=south, longitude=west), Point(latitude=north, longitude=east))

    @staticmethod
    def _infer_country_code(address: Mapping[str, object]) -> Optional[str]:
        if not isinstance(address, Mapping):
            return None

        raw_code = address.get("country_code")
        if isinstance(raw_code, str) and raw_code.strip():
            return raw_code.strip().lower()
        return None


__all__ = ["AddressPositionResolver", "parse_coordinate"]
