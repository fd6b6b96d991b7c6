"""Location repository port."""

from typing import Protocol

from chsearch_trips.domain.models.location import Location, Point


class LocationRepository(Protocol):
    """Port for looking up locations by text or coordinate."""

    async def suggest_locations(self, term: str, max_locations: int = 10) -> list[Location]:
        """Autocomplete a free-text location name."""
        ...

    async def nearby_locations(
        self, point: Point, max_distance: int = 1000, max_locations: int = 10
    ) -> list[Location]:
        """Find locations around a coordinate."""
        ...
