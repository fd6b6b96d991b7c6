"""Ports (interfaces) for the ports-and-adapters architecture."""

from chsearch_trips.domain.ports.http_transport import HttpTransport
from chsearch_trips.domain.ports.location_repository import LocationRepository
from chsearch_trips.domain.ports.trip_repository import TripRepository

__all__ = [
    "HttpTransport",
    "LocationRepository",
    "TripRepository",
]
