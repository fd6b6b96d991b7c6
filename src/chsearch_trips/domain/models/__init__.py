"""Domain models for trip planning."""

from chsearch_trips.domain.models.disruption import Disruption, TimeRange
from chsearch_trips.domain.models.leg import Leg, LegKind, TransitLeg, WalkingLeg
from chsearch_trips.domain.models.line import Line, LineStyle, Product, Shape
from chsearch_trips.domain.models.location import Location, LocationType, Point
from chsearch_trips.domain.models.pagination_context import PaginationContext
from chsearch_trips.domain.models.query_trips_result import (
    NoResult,
    QueryTripsResult,
    ResultStatus,
)
from chsearch_trips.domain.models.stop import IntermediateStop, Stop
from chsearch_trips.domain.models.trip import Trip
from chsearch_trips.domain.models.trip_query import TripOptions, TripQuery

__all__ = [
    "Disruption",
    "IntermediateStop",
    "Leg",
    "LegKind",
    "Line",
    "LineStyle",
    "Location",
    "LocationType",
    "NoResult",
    "PaginationContext",
    "Point",
    "Product",
    "QueryTripsResult",
    "ResultStatus",
    "Shape",
    "Stop",
    "TimeRange",
    "TransitLeg",
    "Trip",
    "TripOptions",
    "TripQuery",
    "WalkingLeg",
]
