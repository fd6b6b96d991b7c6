"""timetable.search.ch adapters."""

from chsearch_trips.adapters.search_ch.http_client import SearchChHttpClient
from chsearch_trips.adapters.search_ch.location_repository import SearchChLocationRepository
from chsearch_trips.adapters.search_ch.trip_repository import SearchChTripRepository

__all__ = [
    "SearchChHttpClient",
    "SearchChLocationRepository",
    "SearchChTripRepository",
]
