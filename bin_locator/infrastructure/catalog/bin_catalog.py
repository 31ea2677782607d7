"""Static catalog of waste-collection points."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Sequence

import pandas as pd

from bin_locator.core.entities import Bin, BinCategory, Coordinate
from bin_locator.utils.logger import logger

_REQUIRED_COLUMNS = ("id", "name", "lat", "lng")


class BinCatalog:
    """An ordered, read-only collection of bins with unique identifiers."""

    def __init__(self, bins: Sequence[Bin]) -> None:
        seen: set[str] = set()
        for bin_ in bins:
            if bin_.id in seen:
                raise ValueError(f"Duplicate bin id: {bin_.id!r}")
            seen.add(bin_.id)

        self._bins: tuple[Bin, ...] = tuple(bins)

    @classmethod
    def default(cls) -> "BinCatalog":
        """Seed bins located around Erode and the rest of Tamil Nadu."""

        return cls.from_config(
            [
                {"id": "1", "name": "Bin - Erode (TN)", "lat": 11.341, "lng": 77.7172, "category": "Recyclable"},
                {"id": "2", "name": "Bin - Thindal (TN)", "lat": 11.343, "lng": 77.695, "category": "Organic"},
                {"id": "3", "name": "Bin - Karur (TN)", "lat": 10.9601, "lng": 78.0766, "category": "Hazardous"},
                {"id": "4", "name": "Bin - Coimbatore (TN)", "lat": 11.0168, "lng": 76.9558, "category": "General"},
                {"id": "5", "name": "Bin - Salem (TN)", "lat": 11.6643, "lng": 78.146, "category": "Recyclable"},
            ]
        )

    @classmethod
    def from_config(cls, config: Sequence[Mapping[str, object]]) -> "BinCatalog":
        bins: list[Bin] = []
        for index, entry in enumerate(config):
            missing = [key for key in _REQUIRED_COLUMNS if entry.get(key) is None]
            if missing:
                raise ValueError(f"Bin entry #{index} is missing {', '.join(missing)}.")

            name = str(entry["name"]).strip()
            if not name:
                raise ValueError(f"Bin entry #{index} must define a non-empty 'name'.")

            category = entry.get("category")
            bins.append(
                Bin(
                    id=str(entry["id"]).strip(),
                    name=name,
                    location=Coordinate.checked(float(entry["lat"]), float(entry["lng"])),
                    category=BinCategory.parse(category) if category is not None else BinCategory.GENERAL,
                )
            )

        return cls(bins)

    @classmethod
    def from_csv(cls, path: str | Path) -> "BinCatalog":
        logger.info("Loading bin catalog from {}", path)
        frame = pd.read_csv(path, dtype={"id": str})
        missing = [column for column in _REQUIRED_COLUMNS if column not in frame.columns]
        if missing:
            raise ValueError(f"Bin catalog {path} is missing columns: {', '.join(missing)}")

        records: list[dict[str, object]] = []
        for row in frame.to_dict(orient="records"):
            record = {key: (value if pd.notna(value) else None) for key, value in row.items()}
            category = record.get("category")
            if isinstance(category, str) and not category.strip():
                record["category"] = None
            records.append(record)
        return cls.from_config(records)

    def filter(self, categories: Optional[Iterable[BinCategory | str]] = None) -> "BinCatalog":
        """Return the bins of the given categories, keeping catalog order."""

        if categories is None:
            return self

        wanted = {BinCategory.parse(category) for category in categories}
        if not wanted:
            return self
        return BinCatalog([bin_ for bin_ in self._bins if bin_.category in wanted])

    def get(self, bin_id: str) -> Optional[Bin]:
        for bin_ in self._bins:
            if bin_.id == bin_id:
                return bin_
        return None

    @property
    def bins(self) -> tuple[Bin, ...]:
        return self._bins

    def __iter__(self) -> Iterator[Bin]:
        return iter(self._bins)

    def __len__(self) -> int:
        return len(self._bins)


__all__ = ["BinCatalog"]
