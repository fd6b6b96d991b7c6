"""Domain layer - trip models, errors and ports."""

from chsearch_trips.domain.models import (
    Location,
    PaginationContext,
    QueryTripsResult,
    Trip,
    TripQuery,
)
from chsearch_trips.domain.ports import (
    HttpTransport,
    LocationRepository,
    TripRepository,
)

__all__ = [
    "HttpTransport",
    "Location",
    "LocationRepository",
    "PaginationContext",
    "QueryTripsResult",
    "Trip",
    "TripQuery",
    "TripRepository",
]
