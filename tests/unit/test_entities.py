"""Unit tests for the core entities."""
from __future__ import annotations

import math

import pytest

from bin_locator.core.entities import (
    Bin,
    BinCategory,
    Coordinate,
    InvalidCoordinateError,
    Platform,
    RankedBin,
)


def test_checked_coordinate_accepts_range_limits() -> None:
    assert Coordinate.checked(90, -180) == Coordinate(90.0, -180.0)
    assert Coordinate.checked(-90, 180).is_valid()


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [(90.5, 0.0), (-91.0, 10.0), (10.0, 180.01), (0.0, -200.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_checked_coordinate_rejects_out_of_range_values(latitude: float, longitude: float) -> None:
    with pytest.raises(InvalidCoordinateError):
        Coordinate.checked(latitude, longitude)


def test_plain_construction_does_not_validate() -> None:
    coordinate = Coordinate(123.0, 0.0)

    assert not coordinate.is_valid()


def test_invalid_coordinate_error_is_a_value_error() -> None:
    assert issubclass(InvalidCoordinateError, ValueError)


def test_bin_category_parse_is_case_insensitive() -> None:
    assert BinCategory.parse("organic") is BinCategory.ORGANIC
    assert BinCategory.parse(" HAZARDOUS ") is BinCategory.HAZARDOUS
    assert BinCategory.parse(BinCategory.GENERAL) is BinCategory.GENERAL

    with pytest.raises(ValueError):
        BinCategory.parse("electronic")


def test_ranked_bin_distance_label() -> None:
    bin_ = Bin("1", "Bin", Coordinate(11.0, 77.0))

    assert RankedBin(bin_, 2.2449).distance_label == "2.24 km"
    assert RankedBin(bin_).distance_label is None
    assert bin_.category is BinCategory.GENERAL


@pytest.mark.parametrize(
    ("sys_platform", "expected"),
    [("ios", Platform.IOS), ("android", Platform.ANDROID), ("linux", Platform.OTHER), ("darwin", Platform.OTHER)],
)
def test_platform_detect_maps_interpreter_platform(sys_platform: str, expected: Platform) -> None:
    assert Platform.detect(sys_platform) is expected


def test_platform_parse_handles_auto_and_rejects_unknown(monkeypatch) -> None:
    monkeypatch.setattr("bin_locator.core.entities.sys.platform", "android")

    assert Platform.parse("auto") is Platform.ANDROID
    assert Platform.parse("iOS") is Platform.IOS

    with pytest.raises(ValueError):
        Platform.parse("windows-phone")
