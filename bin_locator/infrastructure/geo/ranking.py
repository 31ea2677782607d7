"""Order waste bins by their distance to the user."""
from __future__ import annotations

from typing import Optional, Sequence

from bin_locator.core.entities import Bin, Coordinate, RankedBin
from bin_locator.infrastructure.geo.distance import distance_km


def rank_bins(user: Optional[Coordinate], bins: Sequence[Bin]) -> list[RankedBin]:
    """Return ``bins`` wrapped with distances, nearest first.

    Without a user position the bins are returned in their original order with no
    distance attached. Bins at equal distance keep their relative input order.
    """

    if user is None:
        return [RankedBin(bin=bin_, distance_km=None) for bin_ in bins]

    ranked = [RankedBin(bin=bin_, distance_km=distance_km(user, bin_.location)) for bin_ in bins]
    # sorted() is stable, so ties preserve input order.
    return sorted(ranked, key=lambda item: item.distance_km)


def nearest_bin(user: Optional[Coordinate], bins: Sequence[Bin]) -> Optional[RankedBin]:
    if user is None:
        return None

    ranked = rank_bins(user, bins)
    return ranked[0] if ranked else None


__all__ = ["nearest_bin", "rank_bins"]
