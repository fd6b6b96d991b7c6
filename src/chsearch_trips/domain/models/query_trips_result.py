"""Trip query result domain models."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from chsearch_trips.domain.models.pagination_context import PaginationContext
from chsearch_trips.domain.models.trip import Trip
from chsearch_trips.domain.models.trip_query import TripQuery


class NoResult(BaseModel):
    """Upstream answered, but with an error message or without connections."""

    model_config = ConfigDict(frozen=True)

    reason: str


class ResultStatus(StrEnum):
    """Outcome of a trip query that reached and was understood by the API."""

    OK = "ok"
    NO_TRIPS = "no_trips"


@dataclass(frozen=True)
class QueryTripsResult:
    """Trips found for a query plus the cursor to page through more."""

    status: ResultStatus
    query: TripQuery
    trips: tuple[Trip, ...] = ()
    context: PaginationContext | None = None
    reason: str | None = None
    anomalies: tuple[str, ...] = ()

    @classmethod
    def no_trips(
        cls, query: TripQuery, reason: str, anomalies: tuple[str, ...] = ()
    ) -> "QueryTripsResult":
        return cls(status=ResultStatus.NO_TRIPS, query=query, reason=reason, anomalies=anomalies)
