"""Configuration loading and wiring for the bin locator entry points."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, TypedDict, cast

import yaml

from bin_locator.core.entities import Platform
from bin_locator.infrastructure.catalog.bin_catalog import BinCatalog
from bin_locator.infrastructure.geo.directions import DirectionsLauncher, UrlOpener, WebBrowserOpener
from bin_locator.infrastructure.geo.resolver import AddressPositionResolver
from bin_locator.utils.logger import logger


class LoggingConfig(TypedDict, total=False):
    level: str


class PathsConfig(TypedDict, total=False):
    bins_csv: str


class BinEntry(TypedDict, total=False):
    id: str
    name: str
    lat: float
    lng: float
    category: str


class DirectionsConfig(TypedDict, total=False):
    platform: str


class GeocoderConfig(TypedDict, total=False):
    user_agent: str
    timeout: int
    country_codes: str
    language: str
    viewbox: list[list[float]]
    fallback_localities: list[str]


class AppConfig(TypedDict, total=False):
    logging: LoggingConfig
    paths: PathsConfig
    bins: list[BinEntry]
    directions: DirectionsConfig
    geocoder: GeocoderConfig


def load_config(path: Path) -> AppConfig:
    with path.open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")

    return cast(AppConfig, data)


def build_catalog(config: AppConfig, base_dir: Path | None = None) -> BinCatalog:
    """Build the catalog from ``paths.bins_csv``, inline ``bins`` or the seed list."""

    csv_path = config.get("paths", {}).get("bins_csv")
    if csv_path:
        path = Path(csv_path)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        return BinCatalog.from_csv(path)

    entries = config.get("bins")
    if entries:
        return BinCatalog.from_config(entries)

    logger.info("No bins configured; using the default catalog.")
    return BinCatalog.default()


def resolve_platform(config: AppConfig, override: Optional[str] = None) -> Platform:
    value = override or config.get("directions", {}).get("platform") or "auto"
    return Platform.parse(value)


def build_address_resolver(config: AppConfig) -> AddressPositionResolver:
    geocoder = config.get("geocoder", {})
    kwargs: dict[str, object] = {}
    for key in ("user_agent", "timeout", "country_codes", "language"):
        if key in geocoder:
            kwargs[key] = geocoder[key]  # type: ignore[literal-required]

    viewbox = geocoder.get("viewbox")
    if viewbox is not None:
        if len(viewbox) != 2 or any(len(corner) != 2 for corner in viewbox):
            raise ValueError("geocoder.viewbox must contain two [lat, lng] corners.")
        kwargs["viewbox"] = tuple((float(lat), float(lng)) for lat, lng in viewbox)

    localities = geocoder.get("fallback_localities")
    if localities is not None:
        kwargs["fallback_localities"] = tuple(str(locality) for locality in localities)

    return AddressPositionResolver(**kwargs)  # type: ignore[arg-type]


def build_launcher(
    config: AppConfig,
    opener: UrlOpener | None = None,
    platform: Optional[str] = None,
) -> DirectionsLauncher:
    return DirectionsLauncher(opener or WebBrowserOpener(), platform=resolve_platform(config, platform))


__all__ = [
    "AppConfig",
    "build_address_resolver",
    "build_catalog",
    "build_launcher",
    "load_config",
    "resolve_platform",
]
