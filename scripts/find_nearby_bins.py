"""Command-line entry point listing the waste bins nearest to a position."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from bin_locator.core.entities import Platform, RankedBin  # noqa: E402
from bin_locator.infrastructure.geo.directions import (  # noqa: E402
    UrlOpener,
    build_directions_url,
    build_fallback_url,
)
from bin_locator.infrastructure.geo.position import (  # noqa: E402
    GeocodedPositionProvider,
    StaticPositionProvider,
)
from bin_locator.infrastructure.geo.resolver import parse_coordinate  # noqa: E402
from bin_locator.interface.config import (  # noqa: E402
    AppConfig,
    build_address_resolver,
    build_catalog,
    build_launcher,
    load_config,
    resolve_platform,
)
from bin_locator.use_cases.find_nearby_bins import FindNearbyBinsUseCase, PositionProvider  # noqa: E402
from bin_locator.use_cases.open_directions import OpenDirectionsUseCase  # noqa: E402
from bin_locator.utils.logger import configure_logger, logger  # noqa: E402


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (_PROJECT_ROOT / path).resolve()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List the waste bins closest to a position")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    location = parser.add_mutually_exclusive_group()
    location.add_argument("--position", help="User position as 'lat,lng'")
    location.add_argument("--address", help="Address to geocode into the user position")
    parser.add_argument(
        "--category",
        action="append",
        dest="categories",
        help="Only list bins of this category (repeatable)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of bins to list")
    parser.add_argument(
        "--platform",
        choices=["auto", *(platform.value for platform in Platform)],
        default=None,
        help="Platform used to build directions links (defaults to the configured one)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the ranking to this CSV file")
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open directions to the first listed bin",
    )
    return parser.parse_args(argv)


def build_position_provider(args: argparse.Namespace, config: AppConfig) -> PositionProvider:
    if args.position:
        return StaticPositionProvider(parse_coordinate(args.position))
    if args.address:
        return GeocodedPositionProvider(build_address_resolver(config), args.address)
    return StaticPositionProvider(None)


def ranking_to_frame(ranked: Sequence[RankedBin], platform: Platform) -> pd.DataFrame:
    rows = [
        {
            "id": item.bin.id,
            "name": item.bin.name,
            "category": item.bin.category.value,
            "lat": item.bin.location.latitude,
            "lng": item.bin.location.longitude,
            "distance_km": item.distance_km,
            "distance": item.distance_label or "",
            "directions_url": build_directions_url(platform, item.bin.location),
            "fallback_url": build_fallback_url(item.bin.location),
        }
        for item in ranked
    ]
    columns = ["id", "name", "category", "lat", "lng", "distance_km", "distance", "directions_url", "fallback_url"]
    return pd.DataFrame(rows, columns=columns)


def run(argv: Optional[Sequence[str]] = None, opener: UrlOpener | None = None) -> pd.DataFrame:
    args = parse_args(argv)
    config_path = _resolve_path(args.config)
    config = load_config(config_path)
    configure_logger(config.get("logging", {}).get("level", "INFO"))

    catalog = build_catalog(config, base_dir=config_path.parent)
    platform = resolve_platform(config, args.platform)
    use_case = FindNearbyBinsUseCase(catalog, build_position_provider(args, config))
    ranked = use_case.execute(categories=args.categories, limit=args.limit)

    frame = ranking_to_frame(ranked, platform)
    if frame.empty:
        print("No bins match the requested filters.")
    else:
        print(frame[["id", "name", "category", "distance", "directions_url"]].to_string(index=False))

    if args.output is not None:
        output_path = _resolve_path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output_path, index=False)
        logger.info("Ranking saved to {}", output_path)

    if args.open and ranked and ranked[0].distance_km is None:
        logger.warning("Not opening directions: the nearest bin is unknown without a position")
    elif args.open and ranked:
        launcher = build_launcher(config, opener=opener, platform=args.platform)
        result = OpenDirectionsUseCase(launcher).execute(ranked[0].bin)
        if not result.opened:
            logger.warning("Directions to {} could not be opened", ranked[0].bin.name)

    return frame


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        run(argv)
    except ValueError as error:
        # InvalidCoordinateError and unknown categories/platforms are ValueErrors.
        logger.error("{}", error)
        raise SystemExit(2) from error


if __name__ == "__main__":
    main()
