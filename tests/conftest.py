"""Pytest configuration for the project."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bin_locator.core.entities import Bin, BinCategory, Coordinate  # noqa: E402


@pytest.fixture
def tamil_nadu_bins() -> list[Bin]:
    return [
        Bin("1", "Bin - Erode (TN)", Coordinate(11.341, 77.7172), BinCategory.RECYCLABLE),
        Bin("2", "Bin - Thindal (TN)", Coordinate(11.343, 77.695), BinCategory.ORGANIC),
        Bin("3", "Bin - Karur (TN)", Coordinate(10.9601, 78.0766), BinCategory.HAZARDOUS),
        Bin("4", "Bin - Coimbatore (TN)", Coordinate(11.0168, 76.9558), BinCategory.GENERAL),
        Bin("5", "Bin - Salem (TN)", Coordinate(11.6643, 78.146), BinCategory.RECYCLABLE),
    ]
