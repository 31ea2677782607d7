"""Position providers feeding the nearby-bin ranking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from bin_locator.core.entities import Coordinate


class AddressResolver(Protocol):
    def resolve(self, address: str) -> Optional[Coordinate]:
        ...


@dataclass(frozen=True)
class StaticPositionProvider:
    """Return a position fixed by the caller, or ``None`` when unknown."""

    position: Optional[Coordinate] = None

    def current_position(self) -> Optional[Coordinate]:
        return self.position


@dataclass(frozen=True)
class GeocodedPositionProvider:
    """Resolve the user's position from an address each time it is requested."""

    resolver: AddressResolver
    address: str

    def current_position(self) -> Optional[Coordinate]:
        return self.resolver.resolve(self.address)


__all__ = ["GeocodedPositionProvider", "StaticPositionProvider"]
