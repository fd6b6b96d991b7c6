"""Location domain model."""

from dataclasses import dataclass
from enum import StrEnum


class LocationType(StrEnum):
    """Kind of place a location stands for."""

    STATION = "station"
    ADDRESS = "address"
    ANY = "any"


@dataclass(frozen=True)
class Point:
    """WGS84 coordinate."""

    lat: float
    lon: float

    def __str__(self) -> str:
        return f"{self.lat},{self.lon}"


@dataclass(frozen=True)
class Location:
    """A station, an address or an unresolved point."""

    type: LocationType
    id: str | None = None
    coord: Point | None = None
    name: str | None = None

    def same_place(self, other: "Location") -> bool:
        """Check whether two locations refer to the same place.

        Ids win when both sides carry one, then coordinates, then names.
        """
        if self.id is not None and other.id is not None:
            return self.id == other.id
        if self.coord is not None and other.coord is not None:
            return self.coord == other.coord
        return self.name is not None and self.name == other.name
