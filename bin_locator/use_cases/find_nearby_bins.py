"""Use case for listing the waste bins closest to the user."""
from __future__ import annotations

from typing import Iterable, Optional, Protocol

from bin_locator.core.entities import BinCategory, Coordinate, RankedBin
from bin_locator.infrastructure.catalog.bin_catalog import BinCatalog
from bin_locator.infrastructure.geo.ranking import rank_bins
from bin_locator.utils.logger import logger


class PositionProvider(Protocol):
    def current_position(self) -> Optional[Coordinate]:
        ...


class FindNearbyBinsUseCase:
    """Rank the catalog bins around the user's position."""

    def __init__(self, catalog: BinCatalog, position_provider: PositionProvider | None = None) -> None:
        self._catalog = catalog
        self._position_provider = position_provider

    def execute(
        self,
        user: Optional[Coordinate] = None,
        categories: Iterable[BinCategory | str] | None = None,
        limit: int | None = None,
    ) -> list[RankedBin]:
        if limit is not None and limit < 0:
            raise ValueError("limit must be a non-negative integer")

        if user is None and self._position_provider is not None:
            user = self._position_provider.current_position()

        candidates = self._catalog.filter(categories)
        if user is None:
            logger.info("User position unavailable; listing {} bins unordered", len(candidates))
            if limit is not None:
                logger.warning("Ignoring limit={} because bins cannot be ordered without a position", limit)
            return rank_bins(None, candidates.bins)

        ranked = rank_bins(user, candidates.bins)
        logger.info("Ranked {} bins around {}", len(ranked), user)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked


__all__ = ["FindNearbyBinsUseCase", "PositionProvider"]
