"""Pagination context domain model."""

from dataclasses import dataclass
from datetime import datetime

from chsearch_trips.domain.models.trip_query import TripQuery


@dataclass(frozen=True)
class PaginationContext:
    """Caller-held cursor for extending a trip search in time."""

    query: TripQuery
    first_arrival: datetime | None = None
    last_departure: datetime | None = None

    @property
    def can_query_later(self) -> bool:
        return self.last_departure is not None

    @property
    def can_query_earlier(self) -> bool:
        return self.first_arrival is not None
