"""Navigation deep links and the primary/fallback opening policy."""
from __future__ import annotations

import webbrowser
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from bin_locator.core.entities import Coordinate, Platform
from bin_locator.utils.logger import logger

APPLE_MAPS_URL = "http://maps.apple.com/?daddr={lat},{lng}"
GOOGLE_MAPS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"
OSM_DIRECTIONS_URL = "https://www.openstreetmap.org/directions?to={lat},{lng}"
OSM_EMBED_URL = (
    "https://www.openstreetmap.org/export/embed.html?bbox={west},{south},{east},{north}"
    "&layer=mapnik&marker={lat},{lng}"
)
DEFAULT_EMBED_SPAN = 0.05


def format_degrees(value: float) -> str:
    """Render a degree value without rounding, exponent or locale separators.

    Whole degrees drop the trailing ``.0`` (``78.0`` renders as ``78``).
    """

    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _latlng(destination: Coordinate) -> dict[str, str]:
    return {
        "lat": format_degrees(destination.latitude),
        "lng": format_degrees(destination.longitude),
    }


def build_directions_url(platform: Platform, destination: Coordinate) -> str:
    if platform is Platform.IOS:
        return APPLE_MAPS_URL.format(**_latlng(destination))
    return GOOGLE_MAPS_URL.format(**_latlng(destination))


def build_fallback_url(destination: Coordinate) -> str:
    return OSM_DIRECTIONS_URL.format(**_latlng(destination))


def build_embed_map_url(center: Coordinate, span: float = DEFAULT_EMBED_SPAN) -> str:
    """Return an embeddable OpenStreetMap view centred on ``center`` with a marker."""

    return OSM_EMBED_URL.format(
        west=format_degrees(center.longitude - span),
        south=format_degrees(center.latitude - span),
        east=format_degrees(center.longitude + span),
        north=format_degrees(center.latitude + span),
        **_latlng(center),
    )


class UrlOpener(Protocol):
    def open(self, url: str) -> None:
        ...


class WebBrowserOpener:
    """Open URLs with the desktop browser registered in :mod:`webbrowser`."""

    def open(self, url: str) -> None:
        if not webbrowser.open(url):
            raise RuntimeError(f"No browser could open {url}")


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of trying to open directions to a destination."""

    opened_url: Optional[str]
    used_fallback: bool
    attempts: int

    @property
    def opened(self) -> bool:
        return self.opened_url is not None


class DirectionsLauncher:
    """Open the platform directions link, falling back to OpenStreetMap once."""

    def __init__(self, opener: UrlOpener, platform: Platform | None = None) -> None:
        self._opener = opener
        self._platform = platform or Platform.detect()

    @property
    def platform(self) -> Platform:
        return self._platform

    def launch(self, destination: Coordinate) -> LaunchResult:
        primary = build_directions_url(self._platform, destination)
        if self._try_open(primary):
            return LaunchResult(opened_url=primary, used_fallback=False, attempts=1)

        fallback = build_fallback_url(destination)
        if self._try_open(fallback):
            return LaunchResult(opened_url=fallback, used_fallback=True, attempts=2)

        logger.warning("Could not open directions to {}", destination)
        return LaunchResult(opened_url=None, used_fallback=True, attempts=2)

    def _try_open(self, url: str) -> bool:
        try:
            self._opener.open(url)
        except Exception as error:  # noqa: BLE001
            logger.warning("Failed to open {}: {}", url, error)
            return False

        logger.debug("Opened {}", url)
        return True


__all__ = [
    "DirectionsLauncher",
    "LaunchResult",
    "UrlOpener",
    "WebBrowserOpener",
    "build_directions_url",
    "build_embed_map_url",
    "build_fallback_url",
    "format_degrees",
]
