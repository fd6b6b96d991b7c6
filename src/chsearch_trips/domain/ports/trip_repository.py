"""Trip repository port."""

from typing import Protocol

from chsearch_trips.domain.models.query_trips_result import QueryTripsResult
from chsearch_trips.domain.models.trip_query import TripQuery


class TripRepository(Protocol):
    """Port for searching trips between two locations."""

    async def query_trips(self, query: TripQuery) -> QueryTripsResult:
        """Search trips for a query."""
        ...
