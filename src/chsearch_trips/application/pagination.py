"""Pagination context: stepping a trip search earlier or later in time."""

import dataclasses
from collections.abc import Sequence
from datetime import timedelta

from chsearch_trips.domain.errors import NoMoreTripsError
from chsearch_trips.domain.models.pagination_context import PaginationContext
from chsearch_trips.domain.models.trip import Trip
from chsearch_trips.domain.models.trip_query import TripQuery

PAGINATION_STEP = timedelta(minutes=1)


def derive_context(trips: Sequence[Trip], query: TripQuery) -> PaginationContext | None:
    """Derive the cursor for a page of trips, or None when the page is empty.

    The later bound is the first ride of the last trip, the earlier bound the
    last ride of the first trip.
    """
    if not trips:
        return None
    return PaginationContext(
        query=query,
        first_arrival=trips[0].last_arrival_time,
        last_departure=trips[-1].first_departure_time,
    )


def later_query(context: PaginationContext) -> TripQuery:
    """Query departing one minute after the last trip's first ride.

    Raises:
        NoMoreTripsError: The context has no later bound.
    """
    if context.last_departure is None:
        raise NoMoreTripsError("No later trips can be queried from this context")
    return dataclasses.replace(
        context.query, time=context.last_departure + PAGINATION_STEP, departure=True
    )


def earlier_query(context: PaginationContext) -> TripQuery:
    """Query arriving one minute before the first trip's last ride.

    Raises:
        NoMoreTripsError: The context has no earlier bound.
    """
    if context.first_arrival is None:
        raise NoMoreTripsError("No earlier trips can be queried from this context")
    return dataclasses.replace(
        context.query, time=context.first_arrival - PAGINATION_STEP, departure=False
    )


def next_query(context: PaginationContext, later: bool) -> TripQuery:
    """Resolve a later/earlier request into a fresh trip query."""
    return later_query(context) if later else earlier_query(context)
