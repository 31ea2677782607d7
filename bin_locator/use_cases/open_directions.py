"""Use case for opening navigation directions to a selected bin."""
from __future__ import annotations

from typing import Protocol

from bin_locator.core.entities import Bin, Coordinate
from bin_locator.infrastructure.geo.directions import LaunchResult
from bin_locator.utils.logger import logger


class Launcher(Protocol):
    def launch(self, destination: Coordinate) -> LaunchResult:
        ...


class OpenDirectionsUseCase:
    """Hand the directions link for a bin to the host's URL opener."""

    def __init__(self, launcher: Launcher) -> None:
        self._launcher = launcher

    def execute(self, bin_: Bin) -> LaunchResult:
        logger.info("Opening directions to bin {} ({})", bin_.id, bin_.name)
        result = self._launcher.launch(bin_.location)
        if result.used_fallback and result.opened:
            logger.info("Directions opened with the OpenStreetMap fallback")
        return result


__all__ = ["Launcher", "OpenDirectionsUseCase"]
