"""Tests for the OpenDirectionsUseCase orchestration."""
from __future__ import annotations

from bin_locator.core.entities import Bin, Coordinate, Platform
from bin_locator.infrastructure.geo.directions import DirectionsLauncher, LaunchResult
from bin_locator.use_cases.open_directions import OpenDirectionsUseCase


class RecordingOpener:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)
        if url in self.failing:
            raise RuntimeError(f"cannot open {url}")


class StubLauncher:
    def __init__(self) -> None:
        self.destinations: list[Coordinate] = []

    def launch(self, destination: Coordinate) -> LaunchResult:
        self.destinations.append(destination)
        return LaunchResult(opened_url="stub://", used_fallback=False, attempts=1)


def test_use_case_delegates_to_launcher() -> None:
    launcher = StubLauncher()
    bin_ = Bin("3", "Bin - Karur (TN)", Coordinate(10.9601, 78.0766))

    result = OpenDirectionsUseCase(launcher).execute(bin_)

    assert launcher.destinations == [bin_.location]
    assert result.opened_url == "stub://"


def test_use_case_reports_fallback() -> None:
    primary = "http://maps.apple.com/?daddr=10.96,78.08"
    opener = RecordingOpener(failing={primary})
    use_case = OpenDirectionsUseCase(DirectionsLauncher(opener, platform=Platform.IOS))

    result = use_case.execute(Bin("x", "Karur", Coordinate(10.96, 78.08)))

    assert opener.opened == [primary, "https://www.openstreetmap.org/directions?to=10.96,78.08"]
    assert result.used_fallback
    assert result.opened
