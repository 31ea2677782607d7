"""Core entities for the nearby waste-bin locator domain."""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InvalidCoordinateError(ValueError):
    """Raised when a latitude/longitude pair falls outside the WGS-84 range."""


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair expressed in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def checked(cls, latitude: float, longitude: float) -> "Coordinate":
        """Build a coordinate, rejecting values outside the valid range."""

        coordinate = cls(latitude=float(latitude), longitude=float(longitude))
        if not coordinate.is_valid():
            raise InvalidCoordinateError(
                f"Invalid coordinate ({latitude}, {longitude}): latitude must be within "
                "[-90, 90] and longitude within [-180, 180]."
            )
        return coordinate

    def is_valid(self) -> bool:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class BinCategory(str, Enum):
    """Kind of waste a collection point accepts."""

    RECYCLABLE = "Recyclable"
    ORGANIC = "Organic"
    HAZARDOUS = "Hazardous"
    GENERAL = "General"

    @classmethod
    def parse(cls, value: object) -> "BinCategory":
        if isinstance(value, cls):
            return value

        text = str(value).strip().casefold()
        for category in cls:
            if category.value.casefold() == text:
                return category
        raise ValueError(f"Unknown bin category: {value!r}")


@dataclass(frozen=True)
class Bin:
    """Domain entity describing a physical waste-collection point."""

    id: str
    name: str
    location: Coordinate
    category: BinCategory = BinCategory.GENERAL


@dataclass(frozen=True)
class RankedBin:
    """A bin paired with its distance to the user, when the user is located."""

    bin: Bin
    distance_km: Optional[float] = None

    @property
    def distance_label(self) -> Optional[str]:
        if self.distance_km is None:
            return None
        return f"{self.distance_km:.2f} km"


class Platform(str, Enum):
    """Host platform used to choose a navigation deep link."""

    IOS = "ios"
    ANDROID = "android"
    OTHER = "other"

    @classmethod
    def detect(cls, sys_platform: Optional[str] = None) -> "Platform":
        name = (sys_platform if sys_platform is not None else sys.platform).lower()
        if name == "ios":
            return cls.IOS
        if name == "android":
            return cls.ANDROID
        return cls.OTHER

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Return the platform named by ``value``; ``auto`` detects the host."""

        text = value.strip().lower()
        if text == "auto":
            return cls.detect()
        try:
            return cls(text)
        except ValueError as exc:
            raise ValueError(f"Unknown platform: {value!r}") from exc


UserPosition = Optional[Coordinate]


__all__ = [
    "Bin",
    "BinCategory",
    "Coordinate",
    "InvalidCoordinateError",
    "Platform",
    "RankedBin",
    "UserPosition",
]
